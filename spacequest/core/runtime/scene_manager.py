"""
scene_manager.py
----------------
Handles switching and updating scenes such as MainMenuScene and GameScene.

Responsibilities
----------------
- Maintain a registry of all available scenes (pooled or fresh).
- Run lifecycle hooks when switching scenes.
- Forward touches, events, updates, and draw calls to the active scene.
"""

from spacequest.core.debug.debug_logger import DebugLogger
from spacequest.core.runtime.base_scene import SceneState


class SceneManager:
    """Coordinates scene switches and delegates update/draw logic."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, display_manager, input_manager, draw_manager, menu_delegate=None):
        """
        Args:
            display_manager: Window/surface owner
            input_manager: Touch translation source
            draw_manager: Render queue
            menu_delegate: Receiver of main menu button taps
        """
        self.display = display_manager
        self.input_manager = input_manager
        self.draw_manager = draw_manager
        self.menu_delegate = menu_delegate
        DebugLogger.init_entry("SceneManager")

        # Scene registry: stores classes OR pooled instances
        self.scenes = {}
        self.pooled_scenes = set()

        self.active_scene = None
        self._active_instance = None

    # ===========================================================
    # Scene Control
    # ===========================================================

    def register_scene(self, name, scene_class, pooled=False):
        """
        Register a scene class with pooling preference.

        Args:
            name: Scene identifier
            scene_class: Class to instantiate
            pooled: If True, reuse instance; if False, create fresh each time
        """
        self.scenes[name] = scene_class

        if pooled:
            self.pooled_scenes.add(name)
            DebugLogger.state(f"Registered scene '{name}' (POOLED)", category="scene")
        else:
            DebugLogger.state(f"Registered scene '{name}' (FRESH)", category="scene")

    @property
    def active_instance(self):
        return self._active_instance

    def set_scene(self, name: str, **scene_data):
        """
        Switch to another scene.

        Args:
            name: Scene name
            **scene_data: Data to pass to on_load() hook
        """
        if name not in self.scenes:
            DebugLogger.warn(f"Unknown scene: '{name}'", category="scene")
            return

        prev = self.active_scene

        # === STEP 1: Exit old scene ===
        if self._active_instance is not None:
            self._exit_active()

        if prev:
            DebugLogger.system(f"Switching [{prev}] → [{name}]", category="scene")
        else:
            DebugLogger.system(f"Loading Initial Scene: [{name}]", category="scene")

        # === STEP 2: Create/retrieve instance ===
        entry = self.scenes[name]
        if isinstance(entry, type):
            instance = entry(self)
            if name in self.pooled_scenes:
                self.scenes[name] = instance
                DebugLogger.state(f"Pooling {name} instance", category="scene")
            else:
                DebugLogger.state(f"Creating fresh {name} instance", category="scene")
        else:
            instance = entry
            DebugLogger.state(f"Reusing pooled {name} instance", category="scene")

        self._active_instance = instance
        self.active_scene = name

        # === STEP 3: Load and enter ===
        instance.state = SceneState.LOADING
        instance.on_load(**scene_data)

        instance.state = SceneState.ACTIVE
        instance.on_enter()
        DebugLogger.section(f"Active Scene: {name}")

    def discard_scene(self, name: str):
        """
        Drop a pooled instance so the next set_scene() builds a fresh one.

        The active scene cannot be discarded.
        """
        entry = self.scenes.get(name)
        if entry is None or isinstance(entry, type):
            return
        if entry is self._active_instance:
            DebugLogger.warn(f"Cannot discard active scene '{name}'", category="scene")
            return

        entry.on_destroy()
        entry.state = SceneState.INACTIVE
        self.scenes[name] = entry.__class__
        DebugLogger.state(f"Discarded pooled {name} instance", category="scene")

    def _exit_active(self):
        instance = self._active_instance
        DebugLogger.state(f"Exiting {instance.__class__.__name__}", category="scene")

        # Close any touches still held on the old scene
        instance.handle_touches(self.input_manager.cancel_all())

        instance.state = SceneState.EXITING
        instance.on_exit()

        if self.active_scene not in self.pooled_scenes:
            instance.on_destroy()
        instance.state = SceneState.INACTIVE

        self._active_instance = None

    def pause_active_scene(self):
        """Pause the currently active scene."""
        instance = self._active_instance
        if instance is None or instance.state != SceneState.ACTIVE:
            return

        DebugLogger.state(f"Pausing {instance.__class__.__name__}", category="scene")
        instance.state = SceneState.PAUSED
        instance.cancel_touches()
        instance.on_pause()

    def resume_active_scene(self):
        """Resume the currently paused scene."""
        instance = self._active_instance
        if instance is None or instance.state != SceneState.PAUSED:
            return

        DebugLogger.state(f"Resuming {instance.__class__.__name__}", category="scene")
        instance.state = SceneState.ACTIVE
        instance.on_resume()

    # ===========================================================
    # Event, Update, Draw Delegation
    # ===========================================================

    def handle_event(self, event) -> bool:
        """
        Forward a pygame event to the active scene.

        Touch input is translated first; everything else goes to the
        scene's handle_event().

        Returns:
            bool: True if the event was consumed
        """
        touches = self.input_manager.translate_event(event)

        instance = self._active_instance
        if instance is None or instance.state != SceneState.ACTIVE:
            return bool(touches)

        if touches:
            instance.handle_touches(touches)
            return True

        return bool(instance.handle_event(event))

    def update(self, dt: float):
        """Update the active scene (only while ACTIVE)."""
        if self._active_instance and self._active_instance.state == SceneState.ACTIVE:
            self._active_instance.update(dt)

    def draw(self, draw_manager):
        """Queue the active scene for rendering."""
        if self._active_instance:
            self._active_instance.draw(draw_manager)
