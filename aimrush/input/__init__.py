"""
Input abstraction layer for AimRush.

Provides unified pointer input so the session engine works the same with a
mouse, a touch screen or any other coordinate-based source.
"""

from aimrush.input.input_event import InputEvent
from aimrush.input.sources import InputSource, MouseInputSource

__all__ = ['InputEvent', 'InputSource', 'MouseInputSource']
