"""
test_actions.py
---------------
Tests for rotate/sequence/repeat node actions.
"""

import math

import pytest

from spacequest.graphics.animations.actions import (
    RepeatForever,
    RotateBy,
    Sequence,
    rotate_by_degrees,
)
from spacequest.ui.node import Node


@pytest.fixture
def node():
    return Node()


class TestRotateBy:

    def test_rotates_proportionally(self, node):
        action = RotateBy(1.0, 2.0)
        action.start(node)

        assert action.update(0.5) is False
        assert node.rotation == pytest.approx(0.25)

    def test_completes_exactly(self, node):
        action = RotateBy(1.0, 2.0)
        action.start(node)

        assert action.update(3.0) is True
        assert node.rotation == pytest.approx(1.0)
        assert action.overflow == pytest.approx(1.0)

    def test_relative_to_start_rotation(self, node):
        node.rotation = 2.0
        action = RotateBy(-0.5, 1.0)
        action.start(node)
        action.update(1.0)
        assert node.rotation == pytest.approx(1.5)

    def test_zero_duration_completes_immediately(self, node):
        action = RotateBy(0.3, 0.0)
        action.start(node)
        assert action.update(0.0) is True
        assert node.rotation == pytest.approx(0.3)

    def test_reversed(self):
        action = RotateBy(0.4, 1.5).reversed()
        assert action.angle == pytest.approx(-0.4)
        assert action.duration == pytest.approx(1.5)

    def test_degrees_helper(self):
        assert rotate_by_degrees(5.0, 2.0).angle == pytest.approx(math.pi / 36)


class TestSequence:

    def test_runs_in_order_and_carries_overflow(self, node):
        rotate = RotateBy(1.0, 1.0)
        seq = Sequence([rotate, rotate.reversed()])
        seq.start(node)

        assert seq.duration == pytest.approx(2.0)
        assert seq.update(1.5) is False
        assert node.rotation == pytest.approx(0.5)

        assert seq.update(0.5) is True
        assert node.rotation == pytest.approx(0.0)

    def test_reversed_reverses_order(self):
        a, b = RotateBy(1.0, 1.0), RotateBy(2.0, 3.0)
        rev = Sequence([a, b]).reversed()
        assert [x.angle for x in rev.actions] == [-2.0, -1.0]

    def test_empty_sequence_completes(self, node):
        seq = Sequence([])
        seq.start(node)
        assert seq.update(0.1) is True


class TestRepeatForever:

    def test_wobble_never_completes_and_stays_bounded(self, node):
        wobble = rotate_by_degrees(5.0, 2.0)
        action = RepeatForever(Sequence([wobble, wobble.reversed()]))
        node.run_action(action)

        limit = math.radians(5.0) + 1e-9
        for _ in range(600):
            node.update(1 / 60)
            assert 0.0 - 1e-9 <= node.rotation <= limit

        assert node.has_actions() is True

    def test_returns_to_rest_after_full_cycle(self, node):
        wobble = rotate_by_degrees(5.0, 2.0)
        action = RepeatForever(Sequence([wobble, wobble.reversed()]))
        action.start(node)

        action.update(2.0)
        assert node.rotation == pytest.approx(math.radians(5.0))
        action.update(2.0)
        assert node.rotation == pytest.approx(0.0, abs=1e-9)
        action.update(1.0)
        assert node.rotation == pytest.approx(math.radians(2.5))

    def test_large_step_spans_several_cycles(self, node):
        action = RepeatForever(RotateBy(1.0, 1.0))
        action.start(node)
        assert action.update(3.5) is False
        assert node.rotation == pytest.approx(3.5)
