"""
conftest.py
-----------
Shared pytest configuration and fixtures for Spacequest tests.

Contains:
- Headless pygame setup (dummy video/audio drivers)
- Common fixtures used across multiple test modules
- Pytest configuration and hooks
"""

import os

# Must be set before pygame initializes any subsystem
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
import pygame
from types import SimpleNamespace
from unittest.mock import MagicMock

from spacequest.core.debug.debug_logger import LoggerConfig
from spacequest.core.services import config_manager
from spacequest.core.services.input_manager import Touch, TouchPhase
from spacequest.graphics import image_loader


# ===========================================================
# Session Setup
# ===========================================================

@pytest.fixture(autouse=True, scope="session")
def quiet_logger():
    """Silence console logging for the whole run."""
    previous = LoggerConfig.ENABLE_LOGGING
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING = previous


@pytest.fixture(autouse=True)
def fresh_caches():
    """Isolate image and config caches between tests."""
    image_loader.clear_cache()
    config_manager._FILE_INDEX = None
    yield
    image_loader.clear_cache()
    config_manager._FILE_INDEX = None


# ===========================================================
# Common Mock Fixtures
# ===========================================================

@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with common methods."""
    draw_manager = MagicMock()
    draw_manager.queue_draw = MagicMock()
    draw_manager.queue_shape = MagicMock()
    return draw_manager


@pytest.fixture
def mock_input_manager():
    """Mock for InputManager that produces no touches by default."""
    input_manager = MagicMock()
    input_manager.translate_event.return_value = []
    input_manager.cancel_all.return_value = []
    return input_manager


@pytest.fixture
def mock_scene_manager():
    """Scene manager stand-in carrying a menu delegate."""
    scene_manager = MagicMock()
    scene_manager.menu_delegate = MagicMock()
    return scene_manager


# ===========================================================
# Test Utilities
# ===========================================================

def make_surface(width=50, height=50):
    """Real pygame surface of the given size."""
    return pygame.Surface((width, height), pygame.SRCALPHA)


def scene_touch(x, y, touch_id=1, phase=TouchPhase.BEGAN):
    """Touch as nodes receive it (scene space, y-up)."""
    from spacequest.ui.node import SceneTouch
    return SceneTouch(touch_id, pygame.Vector2(x, y), phase)


def view_touch(x, y, touch_id=1, phase=TouchPhase.BEGAN):
    """Touch as InputManager produces it (game surface, y-down)."""
    return Touch(touch_id, (x, y), phase)


def key_event(key):
    return SimpleNamespace(type=pygame.KEYDOWN, key=key)


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything that is not an integration test as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
