"""
Target placement on the playing surface.

A target's top-left offset is drawn from ``[diameter, extent - 2 * diameter)``
on each axis, which keeps a full diameter of margin from every edge. When a
surface is too small for that range the axis falls back to a deterministic
offset instead of calling the RNG with an empty range.
"""

from typing import Tuple

from models import Surface
from aimrush.random_source import RandomNumberSource


def fallback_offset(extent: int, diameter: int) -> int:
    """Deterministic offset for an axis too small to randomize on.

    Centers the target when it fits on the axis, otherwise pins it to 0.

    Examples:
        >>> fallback_offset(100, 40)
        30
        >>> fallback_offset(30, 40)
        0
    """
    return max(0, (extent - diameter) // 2)


def axis_offset(extent: int, diameter: int, rng: RandomNumberSource) -> int:
    """Offset along one axis of the given extent."""
    low = diameter
    high = extent - diameter * 2
    if high <= low:
        return fallback_offset(extent, diameter)
    return rng.next(low, high)


class TargetPlacer:
    """Computes non-clipping positions for circular targets."""

    def place(self, surface: Surface, diameter: int, rng: RandomNumberSource) -> Tuple[int, int]:
        """Top-left ``(x, y)`` for a target of this diameter.

        Whenever ``width > 3 * diameter`` (and likewise for height) the
        position is random and the circle lies at least one diameter away
        from the left/top edges and inside the surface. Smaller surfaces get
        the fallback offset on the affected axis.
        """
        x = axis_offset(surface.width, diameter, rng)
        y = axis_offset(surface.height, diameter, rng)
        return x, y
