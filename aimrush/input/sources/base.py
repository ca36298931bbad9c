"""
Abstract base class for input sources.

This module defines the InputSource interface that all input sources must
implement, so the game works with any coordinate-based input without
changing game logic.
"""

from abc import ABC, abstractmethod
from typing import List

from aimrush.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources.

    Subclasses must implement:
        - poll_events(): Return new input events since last poll
        - update(dt): Update source state for time-based processing

    Examples:
        >>> class ScriptedSource(InputSource):
        ...     def poll_events(self) -> List[InputEvent]:
        ...         return []
        ...     def update(self, dt: float) -> None:
        ...         pass
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll.

        Returns all events that occurred since the previous call and clears
        the internal queue.

        Returns:
            List of InputEvent objects, empty list if no events
        """

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update source state (for time-based processing).

        Args:
            dt: Delta time in seconds since last update
        """

    def clear(self) -> None:
        """Drop pending events, e.g. when switching screens."""
        self.poll_events()
