"""
Frame-driven timer scheduling.

Games run a single-threaded loop that knows the elapsed time of each frame.
The FrameScheduler turns that into cancellable one-shot and repeating timers:
the loop calls ``advance(dt)`` once per frame and due callbacks run
synchronously, in due-time order, on the loop thread.

Usage:
    scheduler = FrameScheduler()
    handle = scheduler.call_every(1.0, countdown.tick)

    while running:
        dt = clock.tick(FPS) / 1000.0
        scheduler.advance(dt)

    handle.cancel()  # idempotent
"""

import itertools
from typing import Callable, List, Optional

from aimrush.logging import get_logger

log = get_logger('scheduler')


class TimerHandle:
    """Handle to a scheduled callback.

    Attributes:
        interval: Seconds between firings (repeating) or the delay (one-shot)
        repeat: Whether the timer re-arms after firing
        due: Scheduler time at which the callback next fires
    """

    def __init__(self, callback: Callable[[], None], interval: float, repeat: bool, due: float, order: int):
        self._callback = callback
        self.interval = interval
        self.repeat = repeat
        self.due = due
        self._order = order
        self._cancelled = False

    @property
    def active(self) -> bool:
        """True until cancelled or, for one-shot timers, fired."""
        return not self._cancelled

    def cancel(self) -> None:
        """Stop the timer. Safe to call repeatedly and from inside its own callback."""
        self._cancelled = True

    def _sort_key(self):
        return (self.due, self._order)

    def __repr__(self) -> str:
        kind = 'every' if self.repeat else 'once'
        state = 'active' if self.active else 'cancelled'
        return f"TimerHandle({kind} {self.interval:.3f}s, due={self.due:.3f}, {state})"


class FrameScheduler:
    """Cooperative scheduler advanced by the game loop.

    A large ``dt`` catches up: a repeating timer fires once for every
    interval that elapsed. There is no drift correction beyond that.

    Examples:
        >>> ticks = []
        >>> scheduler = FrameScheduler()
        >>> handle = scheduler.call_every(1.0, lambda: ticks.append(scheduler.now))
        >>> scheduler.advance(2.5)
        >>> ticks
        [1.0, 2.0]
        >>> handle.cancel()
        >>> scheduler.advance(5.0)
        >>> len(ticks)
        2
    """

    def __init__(self):
        self._now = 0.0
        self._timers: List[TimerHandle] = []
        self._order = itertools.count()

    @property
    def now(self) -> float:
        """Scheduler clock in seconds since creation."""
        return self._now

    @property
    def pending(self) -> int:
        """Number of active timers."""
        return sum(1 for timer in self._timers if timer.active)

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        """Fire ``callback`` every ``interval`` seconds until cancelled.

        Raises:
            ValueError: If interval is not positive
        """
        if interval <= 0:
            raise ValueError(f'Repeat interval must be positive, got {interval}')
        return self._add(callback, interval, repeat=True)

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Fire ``callback`` once, ``delay`` seconds from now (0 = next advance)."""
        return self._add(callback, max(0.0, delay), repeat=False)

    def _add(self, callback: Callable[[], None], interval: float, repeat: bool) -> TimerHandle:
        handle = TimerHandle(callback, interval, repeat, self._now + interval, next(self._order))
        self._timers.append(handle)
        log.trace("Scheduled %r", handle)
        return handle

    def advance(self, dt: float) -> None:
        """Move the clock forward by ``dt`` seconds, firing every due callback."""
        target_time = self._now + max(0.0, dt)

        while True:
            timer = self._next_due(target_time)
            if timer is None:
                break
            self._now = max(self._now, timer.due)
            if timer.repeat:
                timer.due += timer.interval
            else:
                timer.cancel()
            timer._callback()

        self._now = target_time
        self._timers = [timer for timer in self._timers if timer.active]

    def _next_due(self, target_time: float) -> Optional[TimerHandle]:
        due = [timer for timer in self._timers if timer.active and timer.due <= target_time]
        if not due:
            return None
        return min(due, key=TimerHandle._sort_key)

    def cancel_all(self) -> None:
        """Cancel every pending timer."""
        for timer in self._timers:
            timer.cancel()
        self._timers.clear()
