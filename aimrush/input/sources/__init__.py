"""
Input source implementations.
"""

from aimrush.input.sources.base import InputSource
from aimrush.input.sources.mouse import MouseInputSource

__all__ = ['InputSource', 'MouseInputSource']
