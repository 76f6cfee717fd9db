"""
Spacequest - virtual joystick and main menu for a small pygame space shooter.
"""

__version__ = "0.1.0"
