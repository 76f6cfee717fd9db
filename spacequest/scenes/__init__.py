"""
Scene module exports.
"""

from spacequest.scenes.main_menu_scene import MainMenuScene, MainMenuSceneDelegate
from spacequest.scenes.game_scene import GameScene

__all__ = [
    'MainMenuScene',
    'MainMenuSceneDelegate',
    'GameScene',
]
