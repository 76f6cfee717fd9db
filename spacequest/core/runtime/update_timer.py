"""
update_timer.py
---------------
Frame-driven repeating timer.

Timers are advanced from the owning node's update(dt), so callbacks run on
the main loop thread between event handling and rendering. A tick missed
during a long frame is coalesced: at most one callback per advance().
"""

from typing import Callable, Optional

from spacequest.core.debug.debug_logger import DebugLogger


class UpdateTimer:
    """
    Fires a callback every `interval` seconds of accumulated frame time.

    Usage:
        timer = UpdateTimer(1 / 40.0, self.handle_update)
        timer.advance(dt)    # from update(dt)
        timer.invalidate()   # on teardown, no callbacks after this
    """

    def __init__(self, interval: float, callback: Callable[[], None], repeats: bool = True):
        """
        Args:
            interval: Seconds between callbacks (must be > 0)
            callback: Zero-argument callable
            repeats: If False, the timer invalidates itself after first fire
        """
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")

        self.interval = interval
        self.repeats = repeats
        self._callback: Optional[Callable[[], None]] = callback
        self._elapsed = 0.0

    @property
    def is_valid(self) -> bool:
        return self._callback is not None

    def advance(self, dt: float) -> bool:
        """
        Accumulate frame time and fire when an interval has passed.

        Returns:
            bool: True if the callback fired during this call
        """
        if self._callback is None:
            return False

        self._elapsed += dt
        if self._elapsed < self.interval:
            return False

        # Drop backlog; a late timer fires once, not once per missed interval
        self._elapsed %= self.interval

        callback = self._callback
        if not self.repeats:
            self.invalidate()
        callback()
        return True

    def invalidate(self):
        """Stop the timer permanently and release the callback."""
        if self._callback is not None:
            DebugLogger.trace("Timer invalidated", category="timing")
        self._callback = None
        self._elapsed = 0.0
