"""
draw_manager.py
---------------
Per-frame render queue.

Nodes do not blit directly: during a scene's draw() they queue sprites and
primitive shapes with a layer number. render() then paints everything
onto the game surface from the lowest layer to the highest, so a sprite's
layer decides what ends up on top regardless of tree order.
"""

from collections import defaultdict

import pygame

from spacequest.core.debug.debug_logger import DebugLogger


class DrawManager:
    """Layered queue of surfaces and shapes, flushed once per frame."""

    def __init__(self, clear_color=(10, 10, 30)):
        self.clear_color = clear_color
        self.surface_layers = defaultdict(list)  # layer -> [(surface, rect)]
        self.shape_layers = defaultdict(list)    # layer -> [(type, rect, color, kwargs)]

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Queueing
    # ===========================================================

    def clear(self):
        """Start a new frame. Layer lists are kept and emptied."""
        for items in self.surface_layers.values():
            items.clear()
        for items in self.shape_layers.values():
            items.clear()

    def queue_draw(self, surface, rect, layer=0):
        """Blit `surface` at `rect` when `layer` is reached."""
        if surface is None or rect is None:
            DebugLogger.warn(f"Dropped empty draw call on layer {layer}", category="drawing")
            return
        self.surface_layers[layer].append((surface, rect))

    def queue_shape(self, shape_type, rect, color, layer=0, **kwargs):
        """
        Queue a primitive.

        Args:
            shape_type: "rect" or "circle" (circle fills rect's inscribed circle)
            rect: Bounding rect in surface coordinates
            color: RGB tuple
            layer: Render layer
            **kwargs: width=outline thickness, 0 fills
        """
        self.shape_layers[layer].append((shape_type, rect, color, kwargs))

    def queued_count(self) -> int:
        return (sum(map(len, self.surface_layers.values()))
                + sum(map(len, self.shape_layers.values())))

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface, debug=False):
        """Paint the queue onto target_surface, lowest layer first."""
        target_surface.fill(self.clear_color)

        for layer in sorted(set(self.surface_layers) | set(self.shape_layers)):
            sprites = self.surface_layers.get(layer)
            if sprites:
                target_surface.blits(sprites)
            for shape_type, rect, color, kwargs in self.shape_layers.get(layer, ()):
                self._draw_shape(target_surface, shape_type, rect, color, **kwargs)

        if debug:
            DebugLogger.state(f"Rendered {self.queued_count()} items", category="drawing")

    def _draw_shape(self, surface, shape_type, rect, color, width=0):
        if shape_type == "rect":
            pygame.draw.rect(surface, color, rect, width)
        elif shape_type == "circle":
            bounds = pygame.Rect(rect)
            pygame.draw.circle(surface, color, bounds.center, bounds.width // 2, width)
        else:
            DebugLogger.warn(f"Unknown shape type: {shape_type}", category="drawing")
