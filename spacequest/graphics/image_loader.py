"""
image_loader.py
---------------
Load-by-name image cache with placeholder fallback.

Missing or unreadable files never abort the game: they are logged and
replaced by a magenta placeholder surface.
"""

import os

import pygame

from spacequest.core.debug.debug_logger import DebugLogger
from spacequest.core.runtime.game_settings import Images

_IMAGE_CACHE = {}


def image_path(name) -> str:
    """Resolve an image name (str or ImageName) to its file path."""
    stem = getattr(name, "value", name)
    return os.path.join(Images.DIR, f"{stem}{Images.EXTENSION}")


def load_image(name) -> pygame.Surface:
    """
    Load and cache an image by name.

    Args:
        name: ImageName member or file stem

    Returns:
        pygame.Surface: Loaded image, or placeholder if unavailable
    """
    key = getattr(name, "value", name)
    if key in _IMAGE_CACHE:
        return _IMAGE_CACHE[key]

    path = image_path(key)
    try:
        img = pygame.image.load(path)
        # convert_alpha needs an active display mode
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            img = img.convert_alpha()
        DebugLogger.action(f"Loaded image '{key}'", category="loading")
    except (FileNotFoundError, pygame.error) as e:
        DebugLogger.warn(f"Missing image '{key}' at {path}: {e}", category="loading")
        img = make_placeholder(Images.PLACEHOLDER_SIZE)

    _IMAGE_CACHE[key] = img
    return img


def make_placeholder(size) -> pygame.Surface:
    """Magenta box with white outline."""
    img = pygame.Surface(size, pygame.SRCALPHA)
    img.fill(Images.PLACEHOLDER_COLOR)
    pygame.draw.rect(img, (255, 255, 255), img.get_rect(), 2)
    return img


def clear_cache():
    """Drop all cached images."""
    _IMAGE_CACHE.clear()
