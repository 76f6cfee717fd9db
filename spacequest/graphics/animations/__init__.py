"""
Node action exports.
"""

from spacequest.graphics.animations.actions import (
    Action,
    RotateBy,
    Sequence,
    RepeatForever,
    rotate_by_degrees,
)

__all__ = [
    'Action',
    'RotateBy',
    'Sequence',
    'RepeatForever',
    'rotate_by_degrees',
]
