"""
main_menu_scene.py
------------------
Main menu - info button, wobbling resume/restart buttons, static background.
"""

from abc import ABC, abstractmethod

from spacequest.core.debug.debug_logger import DebugLogger
from spacequest.core.runtime.base_scene import BaseScene
from spacequest.core.runtime.game_settings import Menu
from spacequest.core.services.config_manager import load_config
from spacequest.graphics.animations.actions import RepeatForever, Sequence, rotate_by_degrees
from spacequest.graphics.background_node import BackgroundNode
from spacequest.graphics.image_names import ImageName
from spacequest.ui.elements.button import Button


class MainMenuSceneDelegate(ABC):
    """Receives the menu's button taps."""

    @abstractmethod
    def main_menu_scene_did_tap_resume_button(self, main_menu_scene):
        pass

    @abstractmethod
    def main_menu_scene_did_tap_restart_button(self, main_menu_scene):
        pass


DEFAULT_LAYOUT = {
    "main_menu": {
        "horizontal_padding": Menu.HORIZONTAL_PADDING,
        "info_button_margin": Menu.INFO_BUTTON_MARGIN,
        "button_height_factor": Menu.BUTTON_HEIGHT_FACTOR,
        "wobble": {
            "angle_degrees": Menu.WOBBLE_ANGLE_DEGREES,
            "duration": Menu.WOBBLE_DURATION,
        },
    }
}


class MainMenuScene(BaseScene):
    """Menu scene shown at launch and whenever the game is left."""

    def __init__(self, scene_manager, size=None):
        super().__init__(scene_manager, size)

        self.main_menu_scene_delegate = getattr(scene_manager, "menu_delegate", None)
        self.layout = load_config("main_menu.yaml", DEFAULT_LAYOUT)["main_menu"]

        self.info_button = None
        self.resume_button = None
        self.restart_button = None
        self.buttons = []
        self.background = None

        self.configure_buttons()
        self.configure_background()

    def configure_background(self):
        self.background = BackgroundNode(self.size, ImageName.MENU_BACKGROUND_PHONE)
        self.background.configure_in_scene(self)

    # ===========================================================
    # Buttons
    # ===========================================================

    def configure_buttons(self):
        """Place the info button top-right and the action row along the bottom."""
        margin = self.layout["info_button_margin"]

        self.info_button = Button(
            ImageName.MENU_BUTTON_INFO_NORMAL,
            ImageName.MENU_BUTTON_INFO_SELECTED,
        )
        self.info_button.position.update(self.width - margin, self.height - margin)
        self.add_child(self.info_button)

        self.resume_button = Button(
            ImageName.MENU_BUTTON_RESUME_NORMAL,
            ImageName.MENU_BUTTON_RESUME_SELECTED,
        )
        self.resume_button.touch_up_inside_event_handler = self.resume_button_touch_up_inside_handler()

        self.restart_button = Button(
            ImageName.MENU_BUTTON_RESTART_NORMAL,
            ImageName.MENU_BUTTON_RESTART_SELECTED,
        )
        self.restart_button.touch_up_inside_event_handler = self.restart_button_touch_up_inside_handler()

        self.buttons = [self.resume_button, self.restart_button]
        self._layout_button_row()

    def _layout_button_row(self):
        """Center the row horizontally; first button ends up right-most."""
        horizontal_padding = self.layout["horizontal_padding"]
        height_factor = self.layout["button_height_factor"]
        wobble = self.layout["wobble"]

        total_buttons_width = sum(button.size[0] for button in self.buttons)
        total_buttons_width += horizontal_padding * max(len(self.buttons) - 1, 0)

        button_origin_x = self.width / 2.0 + total_buttons_width / 2.0

        for button in self.buttons:
            button_width, button_height = button.size
            button.position.update(
                button_origin_x - button_width / 2,
                button_height * height_factor,
            )
            self.add_child(button)

            button_origin_x -= button_width + horizontal_padding

            rotate_action = rotate_by_degrees(wobble["angle_degrees"], wobble["duration"])
            sequence = Sequence([rotate_action, rotate_action.reversed()])
            button.run_action(RepeatForever(sequence))

        DebugLogger.state(f"Laid out {len(self.buttons)} menu buttons", category="menu")

    def resume_button_touch_up_inside_handler(self):
        def handler():
            if self.main_menu_scene_delegate is not None:
                DebugLogger.action("Resume tapped", category="menu")
                self.main_menu_scene_delegate.main_menu_scene_did_tap_resume_button(self)
        return handler

    def restart_button_touch_up_inside_handler(self):
        def handler():
            if self.main_menu_scene_delegate is not None:
                DebugLogger.action("Restart tapped", category="menu")
                self.main_menu_scene_delegate.main_menu_scene_did_tap_restart_button(self)
        return handler

    # ===========================================================
    # Frame
    # ===========================================================

    def update(self, dt: float):
        self.update_nodes(dt)

    def draw(self, draw_manager):
        self.draw_nodes(draw_manager)

    def handle_event(self, event) -> bool:
        return False
