"""
AimRush

Session engine of a timed target-clicking game: lifecycle and countdown,
procedural target spawning and hit/miss scoring. Rendering, audio and
haptics live behind PresentationPort (see games/AimRush for the pygame
front end).
"""

from aimrush.difficulty import DifficultyTable, parse_difficulty
from aimrush.placement import TargetPlacer
from aimrush.presentation import PresentationPort
from aimrush.random_source import RandomNumberSource
from aimrush.scheduler import FrameScheduler, TimerHandle
from aimrush.session import SessionController, VALID_DURATIONS
from aimrush.spawn import SpawnEngine

__version__ = '1.0.0'

__all__ = [
    'DifficultyTable',
    'FrameScheduler',
    'PresentationPort',
    'RandomNumberSource',
    'SessionController',
    'SpawnEngine',
    'TargetPlacer',
    'TimerHandle',
    'VALID_DURATIONS',
    'parse_difficulty',
]
