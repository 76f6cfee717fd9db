"""
base_scene.py
-------------
Abstract base class for all scenes.
Defines the lifecycle interface, owns the node tree and routes touches.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional

import pygame

from spacequest.core.debug.debug_logger import DebugLogger
from spacequest.core.runtime.game_settings import Display
from spacequest.core.services.input_manager import TouchPhase
from spacequest.ui.node import Node, SceneTouch


class SceneState(Enum):
    """Where a scene is in its lifecycle. Only ACTIVE scenes get events and updates."""
    INACTIVE = "inactive"
    LOADING = "loading"
    ACTIVE = "active"
    PAUSED = "paused"       # minimized window
    EXITING = "exiting"


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        state: Current lifecycle state
        size: (width, height) of the scene in game pixels
        root: Node tree drawn and updated by the scene
    """

    def __init__(self, scene_manager, size=None):
        self.scene_manager = scene_manager
        self.state = SceneState.INACTIVE
        self.size = tuple(size) if size else (Display.WIDTH, Display.HEIGHT)
        self.root = Node(name=self.__class__.__name__)

        # touch_id -> node that received BEGAN
        self._touch_targets: Dict[object, Node] = {}

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_load(self, **scene_data):
        """Called once when scene is created or reloaded."""
        pass

    def on_enter(self):
        """Called when scene becomes active."""
        pass

    def on_pause(self):
        """Called when scene is paused."""
        pass

    def on_resume(self):
        """Called when scene resumes from pause."""
        pass

    def on_exit(self):
        """Called before switching to another scene."""
        self.cancel_touches()

    def on_destroy(self):
        """Called when the scene instance is dropped. Tears down the node tree."""
        self.root.remove_all_children()

    # ===========================================================
    # Standard Methods (Must implement in subclasses)
    # ===========================================================

    @abstractmethod
    def update(self, dt: float):
        """Update scene logic."""
        pass

    @abstractmethod
    def draw(self, draw_manager):
        """Render the scene."""
        pass

    @abstractmethod
    def handle_event(self, event) -> bool:
        """Handle non-touch events. Returns True if consumed."""
        pass

    # ===========================================================
    # Node Tree
    # ===========================================================

    @property
    def width(self) -> float:
        return self.size[0]

    @property
    def height(self) -> float:
        return self.size[1]

    @property
    def children(self):
        return self.root.children

    def add_child(self, node: Node):
        self.root.add_child(node)

    def update_nodes(self, dt: float):
        self.root.update(dt)

    def draw_nodes(self, draw_manager):
        self.root.draw(draw_manager, self.height)

    def convert_point_from_view(self, position) -> pygame.Vector2:
        """Game-surface position (y-down) to scene space (y-up)."""
        x, y = position
        return pygame.Vector2(x, self.height - y)

    # ===========================================================
    # Touch Routing
    # ===========================================================

    def handle_touches(self, touches):
        """
        Deliver touches to nodes.

        A BEGAN goes to the topmost interactive node under the point; later
        phases of the same touch go to that node even if the finger leaves it.
        """
        for touch in touches:
            scene_touch = SceneTouch(
                touch.touch_id,
                self.convert_point_from_view(touch.position),
                touch.phase,
            )

            if touch.phase == TouchPhase.BEGAN:
                # Same id beginning again means its old gesture never finished
                stale = self._touch_targets.pop(touch.touch_id, None)
                if stale is not None:
                    stale.touches_cancelled([
                        SceneTouch(touch.touch_id, scene_touch.location, TouchPhase.CANCELLED)
                    ])

                target = self.node_at_point(scene_touch.location)
                if target is None:
                    continue
                self._touch_targets[touch.touch_id] = target
                DebugLogger.trace(
                    f"Touch {touch.touch_id} -> {target.__class__.__name__}", category="input"
                )
                target.touches_began([scene_touch])

            elif touch.phase == TouchPhase.MOVED:
                target = self._touch_targets.get(touch.touch_id)
                if target is not None:
                    target.touches_moved([scene_touch])

            elif touch.phase == TouchPhase.ENDED:
                target = self._touch_targets.pop(touch.touch_id, None)
                if target is not None:
                    target.touches_ended([scene_touch])

            elif touch.phase == TouchPhase.CANCELLED:
                target = self._touch_targets.pop(touch.touch_id, None)
                if target is not None:
                    target.touches_cancelled([scene_touch])

    def cancel_touches(self):
        """Cancel every routed touch (scene exit, pause)."""
        targets = self._touch_targets
        self._touch_targets = {}
        for touch_id, target in targets.items():
            target.touches_cancelled([
                SceneTouch(touch_id, target.scene_position(), TouchPhase.CANCELLED)
            ])

    def node_at_point(self, scene_point) -> Optional[Node]:
        """Topmost visible interactive node containing the point."""
        best = None
        best_key = None
        for order, node in enumerate(self._walk(self.root)):
            if not node.user_interaction_enabled or not node.contains_point(scene_point):
                continue
            key = (node.layer, order)
            if best_key is None or key > best_key:
                best, best_key = node, key
        return best

    def _walk(self, node: Node):
        """Visible nodes in draw order. Interactive nodes own their subtree."""
        for child in node.children:
            if not child.visible:
                continue
            yield child
            if not child.user_interaction_enabled:
                yield from self._walk(child)
