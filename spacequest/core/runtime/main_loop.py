"""
main_loop.py
------------
Core game loop orchestrating timing, events, updates, and rendering.

Responsibilities:
- Initialize pygame and core systems
- Maintain fixed timestep update loop
- Route menu button taps to scene switches
"""

import time

import pygame

from spacequest.core.debug.debug_logger import DebugLogger
from spacequest.core.runtime.game_settings import Debug, Display, Physics
from spacequest.core.runtime.scene_manager import SceneManager
from spacequest.core.services.display_manager import DisplayManager
from spacequest.core.services.input_manager import InputManager
from spacequest.graphics.draw_manager import DrawManager
from spacequest.scenes.game_scene import GameScene
from spacequest.scenes.main_menu_scene import MainMenuScene, MainMenuSceneDelegate

MENU_SCENE = "MainMenuScene"
GAME_SCENE = "GameScene"


class MainLoop(MainMenuSceneDelegate):
    """
    Core runtime controller managing the game's main loop.

    Implements a fixed timestep for logic with variable rendering. Also the
    main menu's delegate: resume returns to the pooled game, restart builds
    a new one.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        DebugLogger.section("Initializing MainLoop")

        self._init_pygame()
        self._init_core_systems()
        self._init_scene_manager()

    def _init_pygame(self):
        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")

    def _init_core_systems(self):
        """Initialize display, input and drawing."""
        self.display = DisplayManager(
            Display.WIDTH,
            Display.HEIGHT,
            Display.DEFAULT_WINDOW_SIZE
        )
        self.input_manager = InputManager(display_manager=self.display)
        self.draw_manager = DrawManager()
        self._last_perf_warn_time = 0.0

    def _init_scene_manager(self):
        self.scenes = SceneManager(
            self.display,
            self.input_manager,
            self.draw_manager,
            menu_delegate=self,
        )

        DebugLogger.init_sub("Registering scenes")
        self.scenes.register_scene(MENU_SCENE, MainMenuScene, pooled=True)
        self.scenes.register_scene(GAME_SCENE, GameScene, pooled=True)
        self.scenes.set_scene(MENU_SCENE)

        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Main Loop Runtime")

    # ===========================================================
    # Main Menu Delegate
    # ===========================================================

    def main_menu_scene_did_tap_resume_button(self, main_menu_scene):
        self.scenes.set_scene(GAME_SCENE)

    def main_menu_scene_did_tap_restart_button(self, main_menu_scene):
        self.scenes.discard_scene(GAME_SCENE)
        self.scenes.set_scene(GAME_SCENE)

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """
        Run until the window is closed.

        Scenes advance in steps of Physics.FIXED_DT so the joystick timer
        and the wobble animation see the same dt on every machine; drawing
        happens once per rendered frame.
        """
        DebugLogger.section("Game Loop")

        accumulator = 0.0
        while self.running:
            accumulator += min(self.clock.tick(Display.FPS) / 1000.0, Physics.MAX_FRAME_TIME)

            self._handle_events()
            accumulator = self._step_scenes(accumulator)
            self._draw()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _step_scenes(self, accumulator: float) -> float:
        """Consume whole fixed steps; return the leftover time."""
        while accumulator >= Physics.FIXED_DT:
            self.scenes.update(Physics.FIXED_DT)
            accumulator -= Physics.FIXED_DT
        return accumulator

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """
        Drain the pygame queue.

        Window events are handled here; F11 is global; everything else
        (mouse, fingers, keys) belongs to the active scene.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                DebugLogger.action("Window closed")
                self.running = False
                return

            if event.type in (pygame.WINDOWMINIMIZED, pygame.WINDOWRESTORED):
                self._on_window_visibility(event.type == pygame.WINDOWMINIMIZED)
            elif not self.input_manager.handle_system_input(event, self.display):
                self.scenes.handle_event(event)

    def _on_window_visibility(self, minimized: bool):
        if minimized:
            self.scenes.pause_active_scene()
        else:
            self.scenes.resume_active_scene()

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        start = time.perf_counter()

        self.draw_manager.clear()
        self.scenes.draw(self.draw_manager)
        self.draw_manager.render(self.display.get_game_surface(), debug=Debug.PROFILING_ENABLED)
        self.display.render()

        if Debug.PROFILING_ENABLED:
            self._check_slow_frame((time.perf_counter() - start) * 1000)

    def _check_slow_frame(self, frame_time_ms: float):
        """Warn about frames over budget, at most once per second."""
        if frame_time_ms <= Debug.FRAME_TIME_WARNING:
            return

        now = time.perf_counter()
        if now - self._last_perf_warn_time > 1.0:
            self._last_perf_warn_time = now
            DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f}ms", category="timing")
