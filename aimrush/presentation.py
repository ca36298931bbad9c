"""
PresentationPort: the interface the session engine calls into.

The engine never draws, plays sounds or vibrates by itself. It reports what
happened through this port and pulls the playing-surface size from it each
time a target is spawned. The pygame front end implements it in
``games/AimRush/presentation.py``; tests use recording doubles.
"""

from abc import ABC, abstractmethod

from models import Surface, TargetData


class PresentationPort(ABC):
    """Abstract outbound interface of the SessionController.

    Subclasses must implement every method. Calls arrive synchronously on
    the game loop thread, in this order for a hit:
    ``on_target_removed`` → ``on_target_spawned`` → ``on_hit``.
    """

    @abstractmethod
    def get_surface_size(self) -> Surface:
        """Current size of the playing surface.

        Queried fresh at every spawn; implementations must not cache it
        across layout changes.
        """

    @abstractmethod
    def on_session_started(self) -> None:
        """A session moved from idle to running."""

    @abstractmethod
    def on_timer_update(self, remaining_seconds: int) -> None:
        """The countdown shows a new value."""

    @abstractmethod
    def on_target_spawned(self, target: TargetData) -> None:
        """Render a new live target."""

    @abstractmethod
    def on_target_removed(self, target_id: str) -> None:
        """Remove a target from the board (hit, or discarded on finish/reset)."""

    @abstractmethod
    def on_hit(self) -> None:
        """Hit feedback (sound, haptics)."""

    @abstractmethod
    def on_miss(self) -> None:
        """Miss feedback (sound, haptics)."""

    @abstractmethod
    def on_session_finished(self, final_score: int) -> None:
        """The countdown expired; show the result."""
