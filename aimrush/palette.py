"""
Target palette for AimRush.

Targets are painted with one of six fixed colors, drawn uniformly through
the session's RandomNumberSource so a seeded session is fully reproducible.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from aimrush.random_source import RandomNumberSource

# Type alias for RGB color
Color = Tuple[int, int, int]

TARGET_COLORS: List[str] = [
    '#ff6bcb',  # Pink
    '#6b5bff',  # Indigo
    '#46e6b0',  # Mint
    '#ffd166',  # Amber
    '#ff6b6b',  # Coral
    '#4dabf7',  # Sky
]


def hex_to_rgb(value: str) -> Color:
    """Convert a ``#rrggbb`` string to an RGB tuple.

    Examples:
        >>> hex_to_rgb('#ff6bcb')
        (255, 107, 203)

    Raises:
        ValueError: If the string is not a ``#rrggbb`` color
    """
    if len(value) != 7 or not value.startswith('#'):
        raise ValueError(f'Expected a #rrggbb color, got {value!r}')
    return (int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))


class TargetPalette:
    """Fixed list of target colors with RNG-driven selection."""

    def __init__(self, colors: Optional[Sequence[str]] = None):
        """
        Initialize palette.

        Args:
            colors: Explicit ``#rrggbb`` colors, defaults to TARGET_COLORS
        """
        self.colors = list(colors) if colors else TARGET_COLORS.copy()

    def pick(self, rng: RandomNumberSource) -> str:
        """Draw one color uniformly over the palette."""
        return self.colors[rng.next(0, len(self.colors))]

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self.colors)
