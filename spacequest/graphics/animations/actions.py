"""
actions.py
----------
Time-based node actions (rotate, sequence, repeat).

Responsibilities
----------------
- Change a node's visual transform over time.
- Compose into sequences and endless loops.
- Carry leftover frame time into the next step so loops do not drift.
"""

import math
from abc import ABC, abstractmethod
from typing import List


class Action(ABC):
    """Single animation step bound to a node while running."""

    def __init__(self, duration: float = 0.0):
        self.duration = max(0.0, duration)
        self.elapsed = 0.0
        self.overflow = 0.0
        self.complete = False
        self.node = None

    def start(self, node):
        """Bind to node and reset progress."""
        self.node = node
        self.elapsed = 0.0
        self.overflow = 0.0
        self.complete = False
        self.on_start()

    def on_start(self):
        """Called when action begins."""
        pass

    @abstractmethod
    def update(self, dt: float) -> bool:
        """Advance action. Returns True when complete."""
        pass

    @abstractmethod
    def reversed(self) -> "Action":
        """Return a new action performing the opposite change."""
        pass

    def _advance_time(self, dt: float) -> float:
        """Step elapsed time and return normalized progress (0.0 → 1.0)."""
        self.elapsed += dt
        if self.duration <= 0:
            self.overflow = dt
            return 1.0
        if self.elapsed >= self.duration:
            self.overflow = self.elapsed - self.duration
            return 1.0
        return self.elapsed / self.duration


class RotateBy(Action):
    """Rotate node by a relative angle (radians, counter-clockwise)."""

    def __init__(self, angle: float, duration: float):
        super().__init__(duration)
        self.angle = angle
        self._applied = 0.0

    def on_start(self):
        self._applied = 0.0

    def update(self, dt: float) -> bool:
        t = self._advance_time(dt)
        target = self.angle * t
        self.node.rotation += target - self._applied
        self._applied = target
        self.complete = t >= 1.0
        return self.complete

    def reversed(self) -> "RotateBy":
        return RotateBy(-self.angle, self.duration)


class Sequence(Action):
    """Run actions one after another."""

    def __init__(self, actions: List[Action]):
        super().__init__(sum(a.duration for a in actions))
        self.actions = list(actions)
        self._index = 0

    def on_start(self):
        self._index = 0
        if self.actions:
            self.actions[0].start(self.node)

    def update(self, dt: float) -> bool:
        while self._index < len(self.actions):
            current = self.actions[self._index]
            if not current.update(dt):
                return False
            dt = current.overflow
            self._index += 1
            if self._index < len(self.actions):
                self.actions[self._index].start(self.node)

        self.overflow = dt
        self.complete = True
        return True

    def reversed(self) -> "Sequence":
        return Sequence([a.reversed() for a in reversed(self.actions)])


class RepeatForever(Action):
    """Restart the wrapped action every time it completes. Never completes."""

    def __init__(self, action: Action):
        super().__init__(math.inf)
        self.action = action

    def on_start(self):
        self.action.start(self.node)

    def update(self, dt: float) -> bool:
        while self.action.update(dt):
            dt = self.action.overflow
            self.action.start(self.node)
            if self.action.duration <= 0 or dt <= 0:
                break
        return False

    def reversed(self) -> "RepeatForever":
        return RepeatForever(self.action.reversed())


def rotate_by_degrees(degrees: float, duration: float) -> RotateBy:
    """Convenience constructor taking degrees."""
    return RotateBy(math.radians(degrees), duration)
