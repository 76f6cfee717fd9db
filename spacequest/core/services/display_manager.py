"""
display_manager.py
------------------
Owns the OS window and the fixed-size surface every scene draws into.

The game always renders at Display.WIDTH x Display.HEIGHT. The window can
be any size: the game surface is scaled to fit and centered, leaving black
bars on the sides that do not match the aspect ratio. Pointer positions
reported by the window are mapped back through the same transform.
"""

import pygame

from spacequest.core.debug.debug_logger import DebugLogger
from spacequest.core.runtime.game_settings import Display


class DisplayManager:
    """Window, letterbox viewport and window-to-game coordinate mapping."""

    def __init__(self, game_width=Display.WIDTH, game_height=Display.HEIGHT, window_size="small"):
        """
        Args:
            game_width: Logical width scenes are laid out in
            game_height: Logical height scenes are laid out in
            window_size: Key of Display.WINDOW_SIZES; unknown keys use the game size
        """
        DebugLogger.init_entry("DisplayManager")

        self.game_width = game_width
        self.game_height = game_height
        self.game_surface = pygame.Surface((game_width, game_height))

        self.window_size_preset = window_size
        self.window = None
        self.is_fullscreen = False

        # Where the game surface lands inside the window
        self.viewport = pygame.Rect(0, 0, game_width, game_height)
        self.scale = 1.0

        self._create_window()

    # ===========================================================
    # Viewport Properties
    # ===========================================================

    @property
    def offset_x(self) -> int:
        return self.viewport.x

    @property
    def offset_y(self) -> int:
        return self.viewport.y

    @property
    def scaled_size(self):
        return self.viewport.size

    # ===========================================================
    # Window Management
    # ===========================================================

    def toggle_fullscreen(self):
        self._create_window(fullscreen=not self.is_fullscreen)
        DebugLogger.state(
            f"Fullscreen {'on' if self.is_fullscreen else 'off'}", category="display"
        )

    def _create_window(self, fullscreen: bool = False):
        if fullscreen:
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            size = Display.WINDOW_SIZES.get(self.window_size_preset, (self.game_width, self.game_height))
            self.window = pygame.display.set_mode(size)
        self.is_fullscreen = fullscreen

        self._calculate_scale(self.window.get_size())
        DebugLogger.init_sub(
            f"{'Fullscreen' if fullscreen else 'Windowed'} {self.window.get_size()}", level=1
        )

    def _calculate_scale(self, window_size):
        """Largest uniform scale that fits, centered in the window."""
        window_w, window_h = window_size
        self.scale = min(window_w / self.game_width, window_h / self.game_height)

        width = int(self.game_width * self.scale)
        height = int(self.game_height * self.scale)
        self.viewport = pygame.Rect((window_w - width) // 2, (window_h - height) // 2, width, height)

        DebugLogger.trace(f"Viewport {self.viewport} scale {self.scale:.3f}", category="display")

    # ===========================================================
    # Rendering
    # ===========================================================

    def get_game_surface(self) -> pygame.Surface:
        return self.game_surface

    def render(self):
        """Present the game surface in the window."""
        self.window.fill((0, 0, 0))
        frame = self.game_surface
        if self.viewport.size != frame.get_size():
            frame = pygame.transform.scale(frame, self.viewport.size)
        self.window.blit(frame, self.viewport.topleft)
        pygame.display.flip()

    # ===========================================================
    # Coordinate Conversion
    # ===========================================================

    def screen_to_game_pos(self, screen_x: float, screen_y: float) -> tuple:
        """Window pixel to game-surface pixel (y-down)."""
        return (
            (screen_x - self.viewport.x) / self.scale,
            (screen_y - self.viewport.y) / self.scale,
        )
