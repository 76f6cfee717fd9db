"""
UI element exports.

Provides the tappable button and the virtual joystick.
"""

from spacequest.ui.elements.button import Button
from spacequest.ui.elements.joystick import Joystick

__all__ = [
    'Button',
    'Joystick',
]
