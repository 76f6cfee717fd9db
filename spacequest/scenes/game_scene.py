"""
game_scene.py
-------------
Gameplay scene - spaceship steered by the virtual joystick.
"""

import pygame

from spacequest.core.debug.debug_logger import DebugLogger
from spacequest.core.runtime.base_scene import BaseScene
from spacequest.core.runtime.game_settings import Controls, Layers, Player
from spacequest.core.services.config_manager import load_config
from spacequest.graphics.background_node import BackgroundNode
from spacequest.graphics.image_names import ImageName
from spacequest.ui.elements.joystick import Joystick
from spacequest.ui.node import SpriteNode

DEFAULT_CONTROLS = {
    "joystick": {
        "maximum_radius": Controls.JOYSTICK_RADIUS,
        "update_interval": Controls.JOYSTICK_UPDATE_INTERVAL,
        "margin": Controls.JOYSTICK_MARGIN,
        "stick_image": ImageName.JOYSTICK_STICK.value,
        "base_image": ImageName.JOYSTICK_BASE.value,
    }
}


class GameScene(BaseScene):
    """Player ship flying over a static background."""

    def __init__(self, scene_manager, size=None):
        super().__init__(scene_manager, size)

        self.controls = load_config("controls.json", DEFAULT_CONTROLS)["joystick"]
        self.velocity = pygame.Vector2(0, 0)

        self.background = BackgroundNode(self.size, ImageName.GAME_BACKGROUND_PHONE)
        self.background.configure_in_scene(self)

        self.player = SpriteNode(ImageName.PLAYER_SPACESHIP, name="player")
        self.player.layer = Layers.PLAYER
        self.player.position.update(self.width / 2, self.height / 2)
        self.add_child(self.player)

        self.joystick = self._create_joystick()
        self.add_child(self.joystick)

    def _create_joystick(self) -> Joystick:
        radius = self.controls["maximum_radius"]
        margin = self.controls["margin"]

        joystick = Joystick(
            radius,
            self.controls["stick_image"],
            self.controls.get("base_image"),
            update_interval=self.controls["update_interval"],
        )
        joystick.position.update(margin + radius, margin + radius)
        joystick.update_handler = self.handle_joystick_translation
        return joystick

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def on_exit(self):
        super().on_exit()
        self.velocity.update(0, 0)

    def on_destroy(self):
        DebugLogger.state("Tearing down game scene", category="scene")
        super().on_destroy()

    # ===========================================================
    # Joystick
    # ===========================================================

    def handle_joystick_translation(self, translation: pygame.Vector2):
        self.velocity = translation * Player.SPEED

    # ===========================================================
    # Frame
    # ===========================================================

    def update(self, dt: float):
        self.update_nodes(dt)

        # Handler only reports while held
        if not self.joystick.is_touched_down:
            self.velocity.update(0, 0)

        if self.velocity.length_squared() > 0:
            self._move_player(dt)

    def _move_player(self, dt: float):
        half_w, half_h = (s / 2 for s in self.player.size)
        pos = self.player.position + self.velocity * dt
        pos.x = max(half_w, min(self.width - half_w, pos.x))
        pos.y = max(half_h, min(self.height - half_h, pos.y))
        self.player.position = pos

    def draw(self, draw_manager):
        self.draw_nodes(draw_manager)

    def handle_event(self, event) -> bool:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.scene_manager.set_scene("MainMenuScene")
            return True
        return False
