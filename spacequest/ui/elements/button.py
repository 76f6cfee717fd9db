"""
button.py
---------
Sprite button with normal/selected images and touch-up-inside callback.
"""

from typing import Callable, Optional

from spacequest.graphics.image_loader import load_image
from spacequest.ui.node import SpriteNode

TouchUpInsideEventHandler = Callable[[], None]


class Button(SpriteNode):
    """Tappable sprite. Fires its handler when a touch lifts inside it."""

    def __init__(self, normal_image_named, selected_image_named=None):
        """
        Args:
            normal_image_named: Image shown at rest
            selected_image_named: Image shown while pressed (defaults to normal)
        """
        super().__init__(normal_image_named)

        self.normal_image = self.image
        self.selected_image = (
            load_image(selected_image_named) if selected_image_named is not None else self.image
        )

        self.touch_up_inside_event_handler: Optional[TouchUpInsideEventHandler] = None
        self._is_selected = False
        self.user_interaction_enabled = True

    @property
    def is_selected(self) -> bool:
        return self._is_selected

    @is_selected.setter
    def is_selected(self, value: bool):
        if value == self._is_selected:
            return
        self._is_selected = value
        self.set_image(self.selected_image if value else self.normal_image)

    @property
    def size(self):
        # Hit area follows the resting image
        return self.normal_image.get_size()

    # ===========================================================
    # Touches
    # ===========================================================

    def touches_began(self, touches):
        if touches:
            self.is_selected = self.contains_point(touches[0].location)

    def touches_moved(self, touches):
        if touches:
            self.is_selected = self.contains_point(touches[0].location)

    def touches_ended(self, touches):
        fire = bool(touches) and self.is_selected and self.contains_point(touches[0].location)
        self.is_selected = False
        if fire and self.touch_up_inside_event_handler is not None:
            self.touch_up_inside_event_handler()

    def touches_cancelled(self, touches):
        self.is_selected = False
