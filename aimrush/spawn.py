"""
Spawn engine: builds fully populated target descriptors.

Combines the DifficultyTable (size range), TargetPlacer (position) and
TargetPalette (color), drawing every random value from one
RandomNumberSource. Registering the target as live is the caller's job.
"""

import itertools
from typing import Optional

from models import SessionData, Surface, TargetData
from aimrush.difficulty import DifficultyTable
from aimrush.logging import get_logger
from aimrush.palette import TargetPalette
from aimrush.placement import TargetPlacer
from aimrush.random_source import RandomNumberSource

log = get_logger('spawn')


class SpawnEngine:
    """Creates targets for the current session and surface.

    Examples:
        >>> engine = SpawnEngine(rng=RandomNumberSource(seed=1))
        >>> target = engine.spawn_target(SessionData(), Surface(width=1280, height=640))
        >>> 25 <= target.diameter < 65
        True
        >>> target.id
        'target-1'
    """

    def __init__(
        self,
        rng: Optional[RandomNumberSource] = None,
        difficulty_table: Optional[DifficultyTable] = None,
        placer: Optional[TargetPlacer] = None,
        palette: Optional[TargetPalette] = None,
    ):
        self.rng = rng if rng is not None else RandomNumberSource()
        self.difficulty_table = difficulty_table or DifficultyTable()
        self.placer = placer or TargetPlacer()
        self.palette = palette or TargetPalette()
        self._ids = itertools.count(1)

    def spawn_target(self, session: SessionData, surface: Surface) -> TargetData:
        """Create a new target sized for the session's difficulty and the surface width."""
        size_range = self.difficulty_table.size_range_for(session.difficulty, surface.width)
        diameter = self.rng.next(size_range.min_size, size_range.max_size)
        x, y = self.placer.place(surface, diameter, self.rng)
        color = self.palette.pick(self.rng)

        target = TargetData(
            id=f"target-{next(self._ids)}",
            diameter=diameter,
            x=x,
            y=y,
            color=color,
        )
        log.trace("Spawned %s on %s", target, surface)
        return target
