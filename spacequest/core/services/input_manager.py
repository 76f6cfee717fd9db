"""
input_manager.py
----------------
Translates raw pygame events into touches and global hotkeys.

Provides:
- Touch phases (began, moved, ended, cancelled) for mouse and finger input
- Per-touch tracking so every BEGAN is closed by ENDED or CANCELLED
- Game-space coordinates (accounts for display scaling)
- System hotkeys independent of the active scene
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

import pygame

from spacequest.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "system": {
        "toggle_fullscreen": [pygame.K_F11],
    },
}

MOUSE_TOUCH_ID = "mouse"


# ===========================================================
# Touch Definitions
# ===========================================================

class TouchPhase(Enum):
    """Lifecycle phase of a single touch."""
    BEGAN = "began"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Touch:
    """One finger (or the mouse) at a game-space position, y-down."""
    touch_id: object
    position: Tuple[float, float]
    phase: TouchPhase


class InputManager:
    """
    Converts pygame events into Touch records.

    The left mouse button emulates a single touch. Finger events use their
    own ids. Mouse events that SDL synthesizes from fingers are skipped so a
    finger is never reported twice.

    Usage:
        for touch in input_manager.translate_event(event):
            ...
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None, display_manager=None, game_size=None):
        """
        Args:
            key_bindings: Custom key bindings dict (uses DEFAULT_KEY_BINDINGS if None)
            display_manager: Reference for window-to-game coordinate conversion
            game_size: (width, height) used to scale normalized finger positions
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.display_manager = display_manager

        if game_size is None and display_manager is not None:
            game_size = (display_manager.game_width, display_manager.game_height)
        self.game_size = game_size or (0, 0)

        # touch_id -> last known game position
        self._active: Dict[object, Tuple[float, float]] = {}

    # ===========================================================
    # Public API: Touches
    # ===========================================================

    @property
    def active_touches(self) -> Dict[object, Tuple[float, float]]:
        return dict(self._active)

    def translate_event(self, event) -> List[Touch]:
        """
        Convert one pygame event into zero or more touches.

        Args:
            event: pygame event

        Returns:
            list[Touch]: Empty for events that are not touch input
        """
        etype = event.type

        if etype in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
            if getattr(event, "touch", False):
                return []
            return self._translate_mouse(event)

        if etype in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            return self._translate_finger(event)

        if etype == pygame.WINDOWFOCUSLOST:
            return self.cancel_all()

        return []

    def cancel_all(self) -> List[Touch]:
        """Cancel every active touch (focus loss, scene change)."""
        cancelled = [
            Touch(touch_id, pos, TouchPhase.CANCELLED)
            for touch_id, pos in self._active.items()
        ]
        self._active.clear()
        if cancelled:
            DebugLogger.state(f"Cancelled {len(cancelled)} touch(es)", category="input")
        return cancelled

    # ===========================================================
    # Event Translation
    # ===========================================================

    def _translate_mouse(self, event) -> List[Touch]:
        if event.type != pygame.MOUSEMOTION and getattr(event, "button", 1) != 1:
            return []

        pos = self._to_game_pos(*event.pos)

        if event.type == pygame.MOUSEBUTTONDOWN:
            return self._begin(MOUSE_TOUCH_ID, pos)
        if event.type == pygame.MOUSEMOTION:
            return self._move(MOUSE_TOUCH_ID, pos)
        return self._end(MOUSE_TOUCH_ID, pos)

    def _translate_finger(self, event) -> List[Touch]:
        width, height = self.game_size
        pos = (event.x * width, event.y * height)
        touch_id = ("finger", event.touch_id, event.finger_id)

        if event.type == pygame.FINGERDOWN:
            return self._begin(touch_id, pos)
        if event.type == pygame.FINGERMOTION:
            return self._move(touch_id, pos)
        return self._end(touch_id, pos)

    def _begin(self, touch_id, pos) -> List[Touch]:
        touches = []
        # A missed release leaves the id active; close it before restarting
        previous = self._active.get(touch_id)
        if previous is not None:
            DebugLogger.trace(f"Touch {touch_id} restarted", category="input")
            touches.append(Touch(touch_id, previous, TouchPhase.CANCELLED))

        self._active[touch_id] = pos
        DebugLogger.trace(f"Touch {touch_id} began at {pos}", category="input")
        touches.append(Touch(touch_id, pos, TouchPhase.BEGAN))
        return touches

    def _move(self, touch_id, pos) -> List[Touch]:
        if touch_id not in self._active:
            return []
        self._active[touch_id] = pos
        return [Touch(touch_id, pos, TouchPhase.MOVED)]

    def _end(self, touch_id, pos) -> List[Touch]:
        if self._active.pop(touch_id, None) is None:
            return []
        DebugLogger.trace(f"Touch {touch_id} ended at {pos}", category="input")
        return [Touch(touch_id, pos, TouchPhase.ENDED)]

    def _to_game_pos(self, x: float, y: float) -> Tuple[float, float]:
        if self.display_manager:
            return self.display_manager.screen_to_game_pos(x, y)
        return (float(x), float(y))

    # ===========================================================
    # System Input (Global Hotkeys)
    # ===========================================================

    def handle_system_input(self, event, display) -> bool:
        """
        Handle global hotkeys independent of the active scene.

        Args:
            event: pygame event to process
            display: DisplayManager for fullscreen toggle

        Returns:
            bool: True if the event was consumed
        """
        if event.type != pygame.KEYDOWN:
            return False

        system_bindings = self.key_bindings.get("system", {})

        if event.key in system_bindings.get("toggle_fullscreen", ()):
            display.toggle_fullscreen()
            DebugLogger.action("Toggled fullscreen")
            return True

        return False
