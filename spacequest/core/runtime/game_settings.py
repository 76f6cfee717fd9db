"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1136
    HEIGHT: int = 640
    FPS: int = 60
    CAPTION: str = "Spacequest"

    WINDOW_SIZES = {
        "small": (1136, 640),
        "medium": (1704, 960),
        "large": (2272, 1280),
    }
    DEFAULT_WINDOW_SIZE: str = "small"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Physics and update timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Controls
# ===========================================================

class Controls:
    """Virtual joystick defaults (overridable via controls.json)."""
    JOYSTICK_RADIUS: float = 60.0
    JOYSTICK_UPDATE_INTERVAL: float = 1 / 40.0
    JOYSTICK_MARGIN: int = 40
    JOYSTICK_RING_COLOR = (200, 200, 255)


# ===========================================================
# Main Menu Layout
# ===========================================================

class Menu:
    """Main menu layout defaults (overridable via main_menu.yaml)."""
    HORIZONTAL_PADDING: float = 20.0
    INFO_BUTTON_MARGIN: float = 20.0
    BUTTON_HEIGHT_FACTOR: float = 1.1
    WOBBLE_ANGLE_DEGREES: float = 5.0
    WOBBLE_DURATION: float = 2.0


# ===========================================================
# Images
# ===========================================================

class Images:
    """Image asset lookup."""
    DIR: str = "assets/images"
    EXTENSION: str = ".png"
    PLACEHOLDER_SIZE = (64, 64)
    PLACEHOLDER_COLOR = (255, 0, 255)


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    BACKGROUND: int = 0
    PLAYER: int = 400
    UI: int = 600
    DEBUG: int = 900


# ===========================================================
# Player Defaults
# ===========================================================

class Player:
    """Player spaceship configuration."""
    SPEED: int = 300


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    FRAME_TIME_WARNING: float = 16.67
    PROFILING_ENABLED: bool = False
