"""
joystick.py
-----------
On-screen virtual joystick.

Responsibilities
----------------
- Track one touch relative to the joystick origin.
- Clamp the stick to a disc of radius `joystick_radius`.
- Report the normalized translation (each axis in [-1, 1]) to a handler on
  a fixed-rate timer while the stick is held.
- Snap back to rest on release or cancel.
"""

from typing import Callable, Optional

import pygame

from spacequest.core.debug.debug_logger import DebugLogger
from spacequest.core.runtime.game_settings import Controls
from spacequest.core.runtime.update_timer import UpdateTimer
from spacequest.ui.node import Node, SpriteNode

JoystickTranslationUpdateHandler = Callable[[pygame.Vector2], None]


# ===========================================================
# Displacement Math
# ===========================================================

def clamp_displacement(location, radius: float) -> pygame.Vector2:
    """
    Limit a displacement to the disc of the given radius.

    Inside (or on) the disc the location is returned unchanged; outside it
    is scaled back onto the boundary, keeping its direction.

    Args:
        location: (x, y) offset from the joystick origin
        radius: Maximum displacement, > 0

    Returns:
        pygame.Vector2: Clamped displacement
    """
    displacement = pygame.Vector2(location)
    if displacement.length() > radius:
        displacement.scale_to_length(radius)
    return displacement


def normalized_translation(displacement, radius: float) -> pygame.Vector2:
    """Displacement divided by radius, each axis kept in [-1, 1]."""
    x, y = displacement
    return pygame.Vector2(
        max(-1.0, min(1.0, x / radius)),
        max(-1.0, min(1.0, y / radius)),
    )


# ===========================================================
# Joystick Node
# ===========================================================

class Joystick(Node):
    """
    Virtual joystick node made of a stick sprite over an optional base.

    Usage:
        joystick = Joystick(60.0, ImageName.JOYSTICK_STICK, ImageName.JOYSTICK_BASE)
        joystick.update_handler = ship.steer
        scene.add_child(joystick)
    """

    def __init__(self, maximum_radius: float, stick_image_named, base_image_named=None,
                 update_interval: float = Controls.JOYSTICK_UPDATE_INTERVAL):
        """
        Args:
            maximum_radius: Stick travel radius in scene pixels (> 0)
            stick_image_named: Image for the movable stick
            base_image_named: Optional image drawn under the stick
            update_interval: Seconds between handler notifications
        """
        if maximum_radius <= 0:
            raise ValueError(f"Joystick radius must be positive, got {maximum_radius}")

        super().__init__(name="joystick")

        self.update_handler: Optional[JoystickTranslationUpdateHandler] = None
        self.joystick_radius = float(maximum_radius)
        self.is_touched_down = False
        self.current_displacement = pygame.Vector2(0, 0)
        self.current_joystick_translation = pygame.Vector2(0, 0)

        self.stick_node = SpriteNode(stick_image_named, name="joystick_stick")
        self.base_node = None
        if base_image_named is not None:
            self.base_node = SpriteNode(base_image_named, name="joystick_base")

        self.update_timer = UpdateTimer(update_interval, self.handle_joystick_translation_update)

        if self.base_node is not None:
            self.add_child(self.base_node)
        self.add_child(self.stick_node)

        self.user_interaction_enabled = True

    @property
    def size(self):
        """Area the stick can cover: radius plus half the stick sprite."""
        stick_w, stick_h = self.stick_node.size
        return (self.joystick_radius + stick_w / 2, self.joystick_radius + stick_h / 2)

    # ===========================================================
    # Touches
    # ===========================================================

    def touches_began(self, touches):
        if not touches:
            return
        self.is_touched_down = True
        self.update_with_touch(touches[0])

    def touches_moved(self, touches):
        if not touches:
            return
        self.is_touched_down = True
        self.update_with_touch(touches[0])

    def touches_ended(self, touches):
        self.is_touched_down = False
        self.reset()

    def touches_cancelled(self, touches):
        self.is_touched_down = False
        self.reset()

    def update_with_touch(self, touch):
        """Move the stick under the touch, clamped to the joystick disc."""
        location = touch.location_in(self)
        self.current_displacement = clamp_displacement(location, self.joystick_radius)
        self.current_joystick_translation = normalized_translation(
            self.current_displacement, self.joystick_radius
        )
        self.stick_node.position = pygame.Vector2(self.current_displacement)

        DebugLogger.trace(
            f"Translation ({self.current_joystick_translation.x:.2f}, "
            f"{self.current_joystick_translation.y:.2f})",
            category="joystick"
        )

    def handle_joystick_translation_update(self):
        """Timer callback: report translation while held."""
        if self.is_touched_down and self.update_handler is not None:
            self.update_handler(pygame.Vector2(self.current_joystick_translation))

    def reset(self):
        """Return stick to the origin."""
        self.stick_node.position = pygame.Vector2(0, 0)
        self.current_displacement = pygame.Vector2(0, 0)
        self.current_joystick_translation = pygame.Vector2(0, 0)

    # ===========================================================
    # Frame Update & Teardown
    # ===========================================================

    def update(self, dt: float):
        super().update(dt)
        self.update_timer.advance(dt)

    def _draw_self(self, draw_manager, scene_height: float):
        # Without a base image, outline the travel disc
        if self.base_node is not None:
            return
        center = self.scene_position()
        diameter = int(self.joystick_radius * 2)
        ring = pygame.Rect(0, 0, diameter, diameter)
        ring.center = (round(center.x), round(scene_height - center.y))
        draw_manager.queue_shape("circle", ring, Controls.JOYSTICK_RING_COLOR, layer=self.layer, width=2)

    def contains_point(self, scene_point) -> bool:
        reach = max(self.size)
        return self.scene_position().distance_to(pygame.Vector2(scene_point)) <= reach

    def invalidate(self):
        """Stop notifications for good."""
        self.update_timer.invalidate()
        self.is_touched_down = False

    def remove_from_parent(self):
        self.invalidate()
        super().remove_from_parent()
