"""
background_node.py
------------------
Static full-scene background image.
"""

from spacequest.core.runtime.game_settings import Layers
from spacequest.ui.node import SpriteNode


class BackgroundNode(SpriteNode):
    """Image stretched over the whole scene, drawn under everything else."""

    def __init__(self, size, static_background_image_name):
        super().__init__(static_background_image_name, name="background")
        self.scene_size = (int(size[0]), int(size[1]))
        self.layer = Layers.BACKGROUND

        if self.size != self.scene_size:
            self.scale_to_size(self.scene_size)

    def configure_in_scene(self, scene):
        """Center in the scene and attach below existing nodes."""
        width, height = scene.size
        self.position.update(width / 2, height / 2)
        scene.add_child(self)
        # Keep first in draw order inside its layer
        scene.children.remove(self)
        scene.children.insert(0, self)
