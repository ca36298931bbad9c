"""
Mouse Input Source - Mouse/touch clicks on the playing surface.

Converts pygame left-button presses inside the board rectangle into
InputEvents in board-relative coordinates.
"""
import time
from typing import Iterable, List, Optional, Tuple

import pygame

from models import Point2D
from aimrush.input.input_event import InputEvent
from aimrush.input.sources.base import InputSource


class MouseInputSource(InputSource):
    """Mouse click input source.

    The game loop hands every pygame event to ``handle_event``; presses of
    the left button that land inside ``board_rect`` are queued. Touch taps
    arrive as emulated mouse presses in pygame, so they are covered too.

    Attributes:
        board_rect: Window-space rectangle of the playing surface
    """

    def __init__(self, board_rect: Optional[pygame.Rect] = None):
        """Initialize the mouse input source.

        Args:
            board_rect: Playing surface rectangle in window coordinates.
                None accepts clicks anywhere, unshifted.
        """
        self.board_rect = board_rect
        self._event_queue: List[InputEvent] = []

    def set_board_rect(self, board_rect: pygame.Rect) -> None:
        """Track a new board rectangle after a layout change."""
        self.board_rect = board_rect

    def to_board(self, pos: Tuple[int, int]) -> Optional[Point2D]:
        """Window position → board position, None if outside the board."""
        x, y = pos
        if self.board_rect is None:
            return Point2D(x=float(x), y=float(y))
        if not self.board_rect.collidepoint(x, y):
            return None
        return Point2D(x=float(x - self.board_rect.x), y=float(y - self.board_rect.y))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Queue the event if it is a left click on the board.

        Returns:
            True if the event was consumed
        """
        if event.type != pygame.MOUSEBUTTONDOWN or getattr(event, 'button', 1) != 1:
            return False
        position = self.to_board(event.pos)
        if position is None:
            return False
        self._event_queue.append(InputEvent(position=position, timestamp=time.monotonic()))
        return True

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        """Feed a batch of pygame events."""
        for event in events:
            self.handle_event(event)

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Mouse input has no time-based state."""

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
