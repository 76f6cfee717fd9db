"""
image_names.py
--------------
Names of every image asset the game loads.
"""

from enum import Enum


class ImageName(str, Enum):
    """Image asset identifiers (file stem under Images.DIR)."""

    # Main menu
    MENU_BACKGROUND_PHONE = "menu_background_phone"
    MENU_BUTTON_INFO_NORMAL = "menu_button_info_normal"
    MENU_BUTTON_INFO_SELECTED = "menu_button_info_selected"
    MENU_BUTTON_RESUME_NORMAL = "menu_button_resume_normal"
    MENU_BUTTON_RESUME_SELECTED = "menu_button_resume_selected"
    MENU_BUTTON_RESTART_NORMAL = "menu_button_restart_normal"
    MENU_BUTTON_RESTART_SELECTED = "menu_button_restart_selected"

    # Gameplay
    GAME_BACKGROUND_PHONE = "game_background_phone"
    PLAYER_SPACESHIP = "player_spaceship"
    JOYSTICK_STICK = "joystick_stick"
    JOYSTICK_BASE = "joystick_base"
