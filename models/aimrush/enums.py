"""
AimRush-specific enumerations.

These enums define the session lifecycle, the difficulty identifiers and the
viewport classes used to enlarge targets on small screens.
"""

from enum import Enum


class SessionState(str, Enum):
    """States of a game session.

    Attributes:
        IDLE: No session running; duration and difficulty can be chosen
        RUNNING: Countdown active, one live target on the board
        FINISHED: Countdown expired, final score reported
    """
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


class Difficulty(str, Enum):
    """Difficulty identifiers selecting the base target-size range."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ViewportClass(str, Enum):
    """Coarse bucket of the playing surface width.

    Attributes:
        NARROW: Phone-sized surfaces (width <= 480)
        MEDIUM: Tablet-sized surfaces (480 < width <= 768)
        WIDE: Everything larger
    """
    NARROW = "narrow"
    MEDIUM = "medium"
    WIDE = "wide"


class EventType(str, Enum):
    """Outcome of a pointer-down on the playing surface.

    Attributes:
        HIT: The pointer landed inside the live target
        MISS: The pointer landed on the empty board
    """
    HIT = "hit"
    MISS = "miss"
