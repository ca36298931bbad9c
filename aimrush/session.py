"""
AimRush Session Controller

Owns one game session: its lifecycle (idle → running → finished → idle),
the one-second countdown, the score and the single live target.

The controller is driven by two kinds of stimulus, both delivered on the
game loop thread and never concurrently:
- user intents forwarded by the front end (choose duration/difficulty,
  pointer-down on the board, reset)
- countdown ticks fired by the FrameScheduler

Every operation is total: inputs that make no sense in the current state
(a click while idle, an unknown difficulty, a duration outside the allowed
set) are ignored and logged at DEBUG level.

Usage:
    scheduler = FrameScheduler()
    controller = SessionController(presentation, scheduler)

    controller.choose_difficulty('hard')
    controller.choose_duration(20)          # idle -> running, first target

    while running:
        dt = clock.tick(FPS) / 1000.0
        for event in mouse.poll_events():
            controller.pointer_down_on_surface(event)
        scheduler.advance(dt)               # fires the countdown ticks

    controller.reset()                      # back to idle
"""

from typing import Optional, Tuple, Union

from models import (
    Difficulty,
    EventType,
    Point2D,
    SessionData,
    SessionState,
    TargetData,
)
from aimrush.difficulty import parse_difficulty
from aimrush.input.input_event import InputEvent
from aimrush.logging import get_logger
from aimrush.presentation import PresentationPort
from aimrush.random_source import RandomNumberSource
from aimrush.scheduler import FrameScheduler, TimerHandle
from aimrush.spawn import SpawnEngine

log = get_logger('session')

VALID_DURATIONS: Tuple[int, ...] = (5, 20, 30, 40)
TICK_INTERVAL_SECONDS = 1.0

PointLike = Union[Point2D, InputEvent, Tuple[float, float]]


def to_point(point: PointLike) -> Point2D:
    """Normalize the accepted pointer representations to a Point2D."""
    if isinstance(point, Point2D):
        return point
    if isinstance(point, InputEvent):
        return point.position
    x, y = point
    return Point2D(x=float(x), y=float(y))


class SessionController:
    """State machine and scoring engine of one game session.

    Attributes:
        presentation: Port receiving render/feedback calls
        scheduler: Scheduler hosting the countdown timer
        spawn_engine: Factory for new targets

    Examples:
        >>> controller = SessionController(presentation, FrameScheduler())
        >>> controller.choose_duration(20)
        >>> controller.state
        <SessionState.RUNNING: 'running'>
        >>> controller.remaining_seconds
        20
    """

    def __init__(
        self,
        presentation: PresentationPort,
        scheduler: Optional[FrameScheduler] = None,
        spawn_engine: Optional[SpawnEngine] = None,
        rng: Optional[RandomNumberSource] = None,
        difficulty: Union[str, Difficulty] = Difficulty.MEDIUM,
        tick_interval: float = TICK_INTERVAL_SECONDS,
    ):
        """Initialize an idle session.

        Args:
            presentation: Outbound port (rendering, feedback, surface size)
            scheduler: Scheduler for the countdown; a private one if None
            spawn_engine: Target factory; built around ``rng`` if None
            rng: Random source for a default spawn engine
            difficulty: Initial difficulty (unrecognized ids use medium)
            tick_interval: Seconds between countdown ticks
        """
        self.presentation = presentation
        self.scheduler = scheduler if scheduler is not None else FrameScheduler()
        self.spawn_engine = spawn_engine or SpawnEngine(rng=rng)
        self._tick_interval = tick_interval

        self._session = SessionData(difficulty=parse_difficulty(difficulty) or Difficulty.MEDIUM)
        self._live_target: Optional[TargetData] = None
        self._countdown: Optional[TimerHandle] = None

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def session(self) -> SessionData:
        """Snapshot of the current session."""
        return self._session

    @property
    def state(self) -> SessionState:
        return self._session.state

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def remaining_seconds(self) -> int:
        return self._session.remaining_seconds

    @property
    def difficulty(self) -> Difficulty:
        return self._session.difficulty

    @property
    def live_target(self) -> Optional[TargetData]:
        """The one target eligible for a hit, None unless running."""
        return self._live_target

    @property
    def is_running(self) -> bool:
        return self._session.is_running

    @property
    def countdown_active(self) -> bool:
        return self._countdown is not None and self._countdown.active

    # =========================================================================
    # Inbound operations
    # =========================================================================

    def choose_difficulty(self, difficulty: Union[str, Difficulty]) -> None:
        """Select the difficulty for the next session (idle only)."""
        if self._session.state != SessionState.IDLE:
            log.debug("Ignoring difficulty %r while %s", difficulty, self._session.state.value)
            return

        resolved = parse_difficulty(difficulty)
        if resolved is None:
            log.debug("Ignoring unrecognized difficulty %r", difficulty)
            return

        self._update(difficulty=resolved)
        log.info("Difficulty set to %s", resolved.value)

    def choose_duration(self, seconds: int) -> None:
        """Start a session lasting ``seconds`` (idle only, allowed durations only)."""
        if self._session.state != SessionState.IDLE:
            log.debug("Ignoring duration %r while %s", seconds, self._session.state.value)
            return
        if seconds not in VALID_DURATIONS:
            log.debug("Ignoring duration %r, allowed: %s", seconds, VALID_DURATIONS)
            return

        self._update(
            state=SessionState.RUNNING,
            duration_seconds=seconds,
            remaining_seconds=seconds,
            score=0,
            hits=0,
            misses=0,
        )
        log.info("Session started: %ss on %s", seconds, self._session.difficulty.value)

        self.presentation.on_session_started()
        self.presentation.on_timer_update(seconds)
        self._spawn_live_target()
        self._start_countdown()

    def pointer_down_on_surface(self, point: PointLike) -> Optional[EventType]:
        """Evaluate a pointer-down on the board.

        Returns:
            EventType.HIT or EventType.MISS while running, None when ignored
        """
        if self._session.state != SessionState.RUNNING:
            log.debug("Ignoring pointer-down while %s", self._session.state.value)
            return None

        position = to_point(point)
        target = self._live_target

        if target is not None and target.contains_point(position):
            self._update(
                score=self._session.score + 1,
                hits=self._session.hits + 1,
            )
            self._live_target = None
            self.presentation.on_target_removed(target.id)
            self._spawn_live_target()
            self.presentation.on_hit()
            log.debug("Hit %s at %s, score %d", target.id, position, self._session.score)
            return EventType.HIT

        self._update(misses=self._session.misses + 1)
        self.presentation.on_miss()
        log.trace("Miss at %s", position)
        return EventType.MISS

    def tick(self) -> None:
        """Countdown callback: one second elapsed."""
        if self._session.state != SessionState.RUNNING:
            log.trace("Ignoring tick while %s", self._session.state.value)
            return

        if self._session.remaining_seconds > 0:
            remaining = self._session.remaining_seconds - 1
            self._update(remaining_seconds=remaining)
            log.trace("Tick: %ds left", remaining)
            self.presentation.on_timer_update(remaining)
            if remaining > 0:
                return

        self._finish()

    def reset(self) -> None:
        """Return to idle from any state, keeping the chosen difficulty."""
        self._stop_countdown()
        self._discard_live_target()
        self._session = SessionData(difficulty=self._session.difficulty)
        log.info("Session reset")

    # =========================================================================
    # Internals
    # =========================================================================

    def _update(self, **changes) -> None:
        self._session = self._session.model_copy(update=changes)

    def _finish(self) -> None:
        self._stop_countdown()
        self._discard_live_target()
        self._update(state=SessionState.FINISHED, remaining_seconds=0)
        log.info("Session finished: score %d (%d hits, %d misses)",
                 self._session.score, self._session.hits, self._session.misses)
        self.presentation.on_session_finished(self._session.score)

    def _spawn_live_target(self) -> None:
        surface = self.presentation.get_surface_size()
        target = self.spawn_engine.spawn_target(self._session, surface)
        self._live_target = target
        self.presentation.on_target_spawned(target)

    def _discard_live_target(self) -> None:
        if self._live_target is None:
            return
        target_id = self._live_target.id
        self._live_target = None
        self.presentation.on_target_removed(target_id)

    def _start_countdown(self) -> None:
        self._stop_countdown()
        self._countdown = self.scheduler.call_every(self._tick_interval, self.tick)

    def _stop_countdown(self) -> None:
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None

    def __repr__(self) -> str:
        return f"SessionController({self._session})"
