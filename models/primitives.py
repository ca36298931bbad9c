"""
Shared primitive data types for AimRush.

This module provides the basic geometric types used by the session engine,
the spawn pipeline and the pygame front end.
"""

from pydantic import BaseModel, Field, computed_field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point in playing-surface pixel coordinates.

    Coordinates are relative to the top-left corner of the playing surface
    (the board), not of the window.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> click = Point2D(x=120.0, y=48.5)
        >>> click.x
        120.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Surface(BaseModel):
    """Size of the playing surface in pixels.

    The presentation layer reports this on demand every time a target is
    spawned, since the layout can change between spawns (window resize,
    orientation change). A zero dimension is legal: a collapsed window still
    has to produce an in-bounds target.

    Attributes:
        width: Width in pixels (non-negative)
        height: Height in pixels (non-negative)

    Examples:
        >>> board = Surface(width=1280, height=640)
        >>> board.aspect_ratio
        2.0
    """
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height), 0.0 for an empty surface."""
        if self.height == 0:
            return 0.0
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Surface({self.width}x{self.height})"


class Rectangle(BaseModel):
    """Immutable rectangle defined by position and dimensions.

    Position is at the top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=100.0, y=100.0, width=50.0, height=50.0)
        >>> rect.contains_point(Point2D(x=125.0, y=125.0))
        True
    """
    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    @computed_field
    @property
    def center(self) -> Point2D:
        """Center point of the rectangle."""
        return Point2D(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2
        )

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point is inside the rectangle (boundary inclusive)."""
        return (self.left <= point.x <= self.right and
                self.top <= point.y <= self.bottom)

    def is_within(self, surface: Surface) -> bool:
        """Check that the whole rectangle lies inside ``[0, width] x [0, height]``.

        Examples:
            >>> Rectangle(x=10, y=10, width=20, height=20).is_within(Surface(width=30, height=30))
            True
            >>> Rectangle(x=15, y=10, width=20, height=20).is_within(Surface(width=30, height=30))
            False
        """
        return (self.left >= 0 and self.top >= 0 and
                self.right <= surface.width and self.bottom <= surface.height)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
