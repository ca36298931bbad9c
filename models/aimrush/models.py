"""
AimRush-specific data models.

These models define the game-specific structures: the per-difficulty size
range, the circular target descriptor and the session record owned by the
SessionController.
"""

from pydantic import BaseModel, Field, field_validator, model_validator, computed_field, ConfigDict

from ..primitives import Point2D, Rectangle
from .enums import SessionState, Difficulty


class DifficultySetting(BaseModel):
    """Target-size range for one difficulty (diameters in pixels).

    The range is half-open: diameters are drawn from ``[min_size, max_size)``.

    Attributes:
        min_size: Smallest diameter (positive)
        max_size: Upper bound for the diameter (greater than min_size)

    Examples:
        >>> setting = DifficultySetting(min_size=25, max_size=65)
        >>> setting.span
        40
    """
    min_size: int = Field(..., gt=0)
    max_size: int

    @model_validator(mode='after')
    def validate_range(self) -> 'DifficultySetting':
        """Validate that the range is not empty.

        Raises:
            ValueError: If max_size is not greater than min_size
        """
        if self.max_size <= self.min_size:
            raise ValueError(
                f'max_size must be greater than min_size, got {self.min_size}..{self.max_size}'
            )
        return self

    @property
    def span(self) -> int:
        """Number of distinct diameters in the range."""
        return self.max_size - self.min_size

    def widened(self, min_bonus: int, max_bonus: int) -> 'DifficultySetting':
        """Return a new setting with the bonuses added to each bound."""
        return DifficultySetting(
            min_size=self.min_size + min_bonus,
            max_size=self.max_size + max_bonus,
        )

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"DifficultySetting({self.min_size}..{self.max_size})"


class TargetData(BaseModel):
    """Immutable descriptor of a circular target.

    ``x`` and ``y`` are the top-left offsets of the target's bounding square
    on the playing surface, so the circle spans ``x..x+diameter`` and
    ``y..y+diameter``.

    Attributes:
        id: Identity assigned by the SpawnEngine
        diameter: Diameter in pixels (positive)
        x: Left offset in pixels
        y: Top offset in pixels
        color: Fill color as a ``#rrggbb`` string

    Examples:
        >>> target = TargetData(id='target-1', diameter=40, x=100, y=60, color='#ff6bcb')
        >>> target.center
        Point2D(x=120.0, y=80.0)
        >>> target.contains_point(Point2D(x=120.0, y=80.0))
        True
        >>> target.contains_point(Point2D(x=101.0, y=61.0))  # bounding-box corner
        False
    """
    id: str
    diameter: int = Field(..., gt=0)
    x: int
    y: int
    color: str

    @field_validator('color')
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Validate the color is a ``#rrggbb`` hex string."""
        if len(v) != 7 or not v.startswith('#'):
            raise ValueError(f'Color must be a #rrggbb string, got {v!r}')
        int(v[1:], 16)
        return v.lower()

    @property
    def radius(self) -> float:
        return self.diameter / 2

    @property
    def center(self) -> Point2D:
        """Center of the circle in surface coordinates."""
        return Point2D(x=self.x + self.radius, y=self.y + self.radius)

    def get_bounds(self) -> Rectangle:
        """Bounding square of the circle."""
        return Rectangle(
            x=float(self.x),
            y=float(self.y),
            width=float(self.diameter),
            height=float(self.diameter)
        )

    def contains_point(self, point: Point2D) -> bool:
        """Geometric hit test: is the point inside the circle (boundary inclusive)?"""
        center = self.center
        dx = point.x - center.x
        dy = point.y - center.y
        return dx * dx + dy * dy <= self.radius * self.radius

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"TargetData(id={self.id}, d={self.diameter}, at=({self.x}, {self.y}), color={self.color})"


class SessionData(BaseModel):
    """Immutable snapshot of one play-through.

    The SessionController replaces its snapshot on every change rather than
    mutating it, so snapshots handed to callers never change under them.

    Attributes:
        state: Lifecycle state
        remaining_seconds: Seconds left on the countdown (non-negative)
        score: Points scored, one per hit (non-negative)
        difficulty: Difficulty used for the next spawn
        duration_seconds: Duration chosen for this session (non-negative)
        hits: Pointer-downs that landed on the live target
        misses: Pointer-downs that landed on the empty board

    Examples:
        >>> session = SessionData()
        >>> session.state
        <SessionState.IDLE: 'idle'>
        >>> session.difficulty
        <Difficulty.MEDIUM: 'medium'>
        >>> SessionData(hits=3, misses=1).accuracy
        0.75
    """
    state: SessionState = SessionState.IDLE
    remaining_seconds: int = 0
    score: int = 0
    difficulty: Difficulty = Difficulty.MEDIUM
    duration_seconds: int = 0
    hits: int = 0
    misses: int = 0

    @field_validator('remaining_seconds', 'score', 'duration_seconds', 'hits', 'misses')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate counters are non-negative.

        Raises:
            ValueError: If value is negative
        """
        if v < 0:
            raise ValueError(f'Session values must be non-negative, got {v}')
        return v

    @computed_field
    @property
    def total_clicks(self) -> int:
        """Pointer-downs registered while running."""
        return self.hits + self.misses

    @computed_field
    @property
    def accuracy(self) -> float:
        """Hit ratio (0.0 to 1.0), 0.0 if nothing was clicked."""
        if self.total_clicks == 0:
            return 0.0
        return self.hits / self.total_clicks

    @property
    def is_running(self) -> bool:
        return self.state == SessionState.RUNNING

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return (f"SessionData(state={self.state.value}, remaining={self.remaining_seconds}, "
                f"score={self.score}, difficulty={self.difficulty.value})")
