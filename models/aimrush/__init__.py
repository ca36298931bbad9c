"""
AimRush-specific models package.

This package contains the data models of the timed target-clicking game:
enums for the session lifecycle and difficulty, and the target and session
records.
"""

from .enums import (
    SessionState,
    Difficulty,
    ViewportClass,
    EventType,
)

from .models import (
    DifficultySetting,
    TargetData,
    SessionData,
)

__all__ = [
    # Enums
    "SessionState",
    "Difficulty",
    "ViewportClass",
    "EventType",
    # Game models
    "DifficultySetting",
    "TargetData",
    "SessionData",
]
