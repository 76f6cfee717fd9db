"""
test_node.py
------------
Tests for the scene-graph node tree and sprite nodes.
"""

import math

import pytest
import pygame
from unittest.mock import MagicMock

from spacequest.core.runtime.game_settings import Images, Layers
from spacequest.ui.node import Node, SpriteNode

from conftest import make_surface, scene_touch


class TestHierarchy:

    def test_add_child_sets_parent(self):
        parent, child = Node(), Node()
        parent.add_child(child)
        assert child.parent is parent
        assert parent.children == [child]

    def test_add_child_reparents(self):
        a, b, child = Node(), Node(), Node()
        a.add_child(child)
        b.add_child(child)
        assert a.children == []
        assert child.parent is b

    def test_remove_all_children(self):
        parent = Node()
        kids = [Node() for _ in range(3)]
        for kid in kids:
            parent.add_child(kid)

        parent.remove_all_children()

        assert parent.children == []
        assert all(kid.parent is None for kid in kids)

    def test_scene_position_sums_ancestors(self):
        root, mid, leaf = Node(), Node(), Node()
        root.position.update(10, 20)
        mid.position.update(5, 5)
        leaf.position.update(1, -1)
        root.add_child(mid)
        mid.add_child(leaf)

        assert leaf.scene_position() == pygame.Vector2(16, 24)
        assert leaf.convert_point_from_scene((20, 20)) == pygame.Vector2(4, -4)

    def test_scene_touch_location_in_node(self):
        node = Node()
        node.position.update(100, 50)
        assert scene_touch(130, 10).location_in(node) == pygame.Vector2(30, -40)


class TestActionsOnNodes:

    def test_finished_actions_are_dropped(self):
        node = Node()
        action = MagicMock()
        action.update.return_value = True
        node.run_action(action)

        action.start.assert_called_once_with(node)
        node.update(0.1)
        assert node.has_actions() is False

    def test_running_actions_are_kept_and_children_updated(self):
        node, child = Node(), MagicMock()
        action = MagicMock()
        action.update.return_value = False
        node.run_action(action)
        node.children.append(child)

        node.update(0.1)

        assert node.has_actions() is True
        child.update.assert_called_once_with(0.1)

    def test_remove_all_actions(self):
        node = Node()
        node.run_action(MagicMock())
        node.remove_all_actions()
        assert node.has_actions() is False


class TestSpriteNode:

    def test_missing_image_uses_placeholder(self):
        sprite = SpriteNode("definitely_not_an_asset")
        assert sprite.size == Images.PLACEHOLDER_SIZE

    def test_contains_point_uses_image_bounds(self):
        sprite = SpriteNode(image=make_surface(40, 20))
        sprite.position.update(100, 100)

        assert sprite.contains_point((119, 109))
        assert not sprite.contains_point((121, 100))
        assert not sprite.contains_point((100, 111))

    def test_draw_flips_y_axis(self, mock_draw_manager):
        sprite = SpriteNode(image=make_surface(10, 10))
        sprite.position.update(50, 30)

        sprite.draw(mock_draw_manager, scene_height=200)

        surface, rect = mock_draw_manager.queue_draw.call_args[0]
        assert rect.center == (50, 170)
        assert mock_draw_manager.queue_draw.call_args[1]["layer"] == Layers.UI

    def test_draw_rotates_image(self, mock_draw_manager):
        sprite = SpriteNode(image=make_surface(40, 10))
        sprite.rotation = math.pi / 2

        sprite.draw(mock_draw_manager, scene_height=100)

        surface, _ = mock_draw_manager.queue_draw.call_args[0]
        assert surface.get_width() < surface.get_height()

    def test_hidden_node_draws_nothing(self, mock_draw_manager):
        sprite = SpriteNode(image=make_surface())
        sprite.visible = False
        sprite.draw(mock_draw_manager, scene_height=100)
        mock_draw_manager.queue_draw.assert_not_called()

    def test_scale_to_size(self):
        sprite = SpriteNode(image=make_surface(10, 10))
        sprite.scale_to_size((30, 20))
        assert sprite.size == (30, 20)
