"""
test_display_manager.py
-----------------------
Tests for window scaling and coordinate conversion (headless).
"""

import pytest
import pygame

from spacequest.core.services.display_manager import DisplayManager


@pytest.fixture
def display():
    pygame.display.init()
    manager = DisplayManager(1136, 640, window_size="unknown")
    yield manager
    pygame.display.quit()


class TestDisplayManager:

    def test_window_matches_game_size_for_unknown_preset(self, display):
        assert display.window.get_size() == (1136, 640)
        assert display.scale == pytest.approx(1.0)

    def test_letterboxing_preserves_aspect(self, display):
        display._calculate_scale((1136, 1280))

        assert display.scale == pytest.approx(1.0)
        assert display.offset_x == 0
        assert display.offset_y == 320

    def test_screen_to_game_pos(self, display):
        display._calculate_scale((2272, 1280))
        assert display.screen_to_game_pos(1136, 640) == (568.0, 320.0)

    def test_game_surface_size(self, display):
        assert display.get_game_surface().get_size() == (1136, 640)
