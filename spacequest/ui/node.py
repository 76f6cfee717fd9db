"""
node.py
-------
Scene-graph nodes: positioned, rotatable, nestable, animatable.

Coordinates are in scene space: origin at the bottom-left corner, y grows
upward, rotation in radians counter-clockwise. The draw pass flips to
pygame's y-down surface coordinates.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from spacequest.core.runtime.game_settings import Layers
from spacequest.graphics.image_loader import load_image


@dataclass(frozen=True)
class SceneTouch:
    """Touch as seen by nodes: location in scene space (y-up)."""
    touch_id: object
    location: pygame.Vector2
    phase: object

    def location_in(self, node: "Node") -> pygame.Vector2:
        """Touch location relative to the node's origin."""
        return node.convert_point_from_scene(self.location)


class Node:
    """Base scene-graph node with children, actions and touch hooks."""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self.position = pygame.Vector2(0, 0)
        self.rotation = 0.0
        self.layer = Layers.UI
        self.visible = True
        self.user_interaction_enabled = False

        self.parent: Optional["Node"] = None
        self.children: List["Node"] = []
        self._actions = []

    # ===========================================================
    # Hierarchy
    # ===========================================================

    def add_child(self, node: "Node"):
        """Attach node as the topmost child. Re-parents if needed."""
        if node.parent is not None:
            node.parent._detach(node)
        node.parent = self
        self.children.append(node)

    def remove_from_parent(self):
        """Detach from parent. Actions stop running with the node."""
        if self.parent is not None:
            self.parent._detach(self)

    def remove_all_children(self):
        for child in list(self.children):
            child.remove_from_parent()

    def _detach(self, node: "Node"):
        if node in self.children:
            self.children.remove(node)
        node.parent = None

    def scene_position(self) -> pygame.Vector2:
        """Absolute position in scene space (parent rotation not applied)."""
        pos = pygame.Vector2(self.position)
        parent = self.parent
        while parent is not None:
            pos += parent.position
            parent = parent.parent
        return pos

    def convert_point_from_scene(self, point) -> pygame.Vector2:
        """Scene-space point expressed relative to this node's origin."""
        return pygame.Vector2(point) - self.scene_position()

    # ===========================================================
    # Actions
    # ===========================================================

    def run_action(self, action):
        action.start(self)
        self._actions.append(action)

    def remove_all_actions(self):
        self._actions.clear()

    def has_actions(self) -> bool:
        return bool(self._actions)

    # ===========================================================
    # Frame Update & Draw
    # ===========================================================

    def update(self, dt: float):
        """Advance running actions, then children."""
        if self._actions:
            self._actions = [a for a in self._actions if not a.update(dt)]

        for child in list(self.children):
            child.update(dt)

    def draw(self, draw_manager, scene_height: float):
        """Queue this node and its children for rendering."""
        if not self.visible:
            return
        self._draw_self(draw_manager, scene_height)
        for child in self.children:
            child.draw(draw_manager, scene_height)

    def _draw_self(self, draw_manager, scene_height: float):
        pass

    # ===========================================================
    # Hit Testing & Touches
    # ===========================================================

    def contains_point(self, scene_point) -> bool:
        """True if any child covers the scene-space point."""
        return any(child.contains_point(scene_point) for child in self.children)

    def touches_began(self, touches):
        pass

    def touches_moved(self, touches):
        pass

    def touches_ended(self, touches):
        pass

    def touches_cancelled(self, touches):
        pass


class SpriteNode(Node):
    """Node that renders an image centered on its position."""

    def __init__(self, image_named=None, image: Optional[pygame.Surface] = None, name=None):
        super().__init__(name)
        self.image = image if image is not None else load_image(image_named)
        self._rotated_cache = None
        self._rotated_for = None

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.get_size()

    def set_image(self, image: pygame.Surface):
        self.image = image
        self._rotated_cache = None

    def scale_to_size(self, size):
        """Resize image to (width, height)."""
        width, height = int(size[0]), int(size[1])
        self.set_image(pygame.transform.scale(self.image, (width, height)))

    def contains_point(self, scene_point) -> bool:
        width, height = self.size
        center = self.scene_position()
        px, py = scene_point
        inside = abs(px - center.x) <= width / 2 and abs(py - center.y) <= height / 2
        return inside or super().contains_point(scene_point)

    def _draw_self(self, draw_manager, scene_height: float):
        center = self.scene_position()
        screen_center = (round(center.x), round(scene_height - center.y))
        surface = self._rotated_image()
        draw_manager.queue_draw(surface, surface.get_rect(center=screen_center), layer=self.layer)

    def _rotated_image(self) -> pygame.Surface:
        if self.rotation == 0:
            return self.image
        if self._rotated_for != self.rotation or self._rotated_cache is None:
            self._rotated_cache = pygame.transform.rotate(self.image, math.degrees(self.rotation))
            self._rotated_for = self.rotation
        return self._rotated_cache
