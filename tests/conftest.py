"""Shared fixtures for the AimRush test suite."""

import os

# Headless pygame for the front-end tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from typing import Any, List, Optional, Sequence, Tuple

import pytest

from models import Surface, TargetData
from aimrush import logging as aimrush_logging
from aimrush.presentation import PresentationPort
from aimrush.random_source import RandomNumberSource
from aimrush.scheduler import FrameScheduler
from aimrush.session import SessionController
from aimrush.spawn import SpawnEngine


class RecordingPresentation(PresentationPort):
    """PresentationPort double that records every outbound call."""

    def __init__(self, width: int = 1280, height: int = 640):
        self.surface = Surface(width=width, height=height)
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.surface_queries = 0

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, args))

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def count(self, name: str) -> int:
        return self.names().count(name)

    def args_of(self, name: str) -> List[Tuple[Any, ...]]:
        return [args for call, args in self.calls if call == name]

    def spawned(self) -> List[TargetData]:
        return [args[0] for args in self.args_of('on_target_spawned')]

    def clear(self) -> None:
        self.calls.clear()

    def get_surface_size(self) -> Surface:
        self.surface_queries += 1
        return self.surface

    def on_session_started(self) -> None:
        self._record('on_session_started')

    def on_timer_update(self, remaining_seconds: int) -> None:
        self._record('on_timer_update', remaining_seconds)

    def on_target_spawned(self, target: TargetData) -> None:
        self._record('on_target_spawned', target)

    def on_target_removed(self, target_id: str) -> None:
        self._record('on_target_removed', target_id)

    def on_hit(self) -> None:
        self._record('on_hit')

    def on_miss(self) -> None:
        self._record('on_miss')

    def on_session_finished(self, final_score: int) -> None:
        self._record('on_session_finished', final_score)


class ScriptedRandomSource(RandomNumberSource):
    """RandomNumberSource double returning scripted values.

    Every call is recorded as (min_inclusive, max_exclusive). Scripted
    values are clamped into the requested range; once the script runs out
    the lower bound is returned.
    """

    def __init__(self, values: Optional[Sequence[int]] = None):
        super().__init__(seed=0)
        self.values = list(values or [])
        self.calls: List[Tuple[int, int]] = []

    def next(self, min_inclusive: int, max_exclusive: int) -> int:
        if max_exclusive <= min_inclusive:
            raise ValueError(f'Empty range {min_inclusive}..{max_exclusive}')
        self.calls.append((min_inclusive, max_exclusive))
        if not self.values:
            return min_inclusive
        value = self.values.pop(0)
        return max(min_inclusive, min(value, max_exclusive - 1))


@pytest.fixture
def make_presentation():
    """Factory for additional recording presentations."""
    return RecordingPresentation


@pytest.fixture
def presentation():
    """Recording presentation with a 1280x640 surface."""
    return RecordingPresentation()


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def rng():
    """Seeded random source for reproducible sessions."""
    return RandomNumberSource(seed=1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRandomSource()


@pytest.fixture
def controller(presentation, scheduler, rng):
    """Idle controller wired to the recording presentation."""
    return SessionController(presentation, scheduler, spawn_engine=SpawnEngine(rng=rng))


@pytest.fixture
def restore_logging():
    """Restore the global logging configuration after a test."""
    saved_default = aimrush_logging._config['default_level']
    saved_modules = dict(aimrush_logging._config['module_levels'])
    yield
    aimrush_logging._config['default_level'] = saved_default
    aimrush_logging._config['module_levels'] = saved_modules
