"""
Unified models library for AimRush.

This package provides all Pydantic data models used across the project:
- Primitives: Basic geometric types (Point2D, Surface, Rectangle)
- AimRush: Game models (TargetData, SessionData, DifficultySetting) and enums

Usage:
    >>> from models import Point2D, Surface, TargetData
    >>> from models.aimrush import SessionState, Difficulty
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Surface,
    Rectangle,
)

# ============================================================================
# AimRush models
# ============================================================================
from .aimrush import (
    SessionState,
    Difficulty,
    ViewportClass,
    EventType,
    DifficultySetting,
    TargetData,
    SessionData,
)

__all__ = [
    # Primitives
    "Point2D",
    "Surface",
    "Rectangle",
    # AimRush
    "SessionState",
    "Difficulty",
    "ViewportClass",
    "EventType",
    "DifficultySetting",
    "TargetData",
    "SessionData",
]
