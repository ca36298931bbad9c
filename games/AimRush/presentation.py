"""
Pygame implementation of the session's PresentationPort.

Keeps the view state the engine draws each frame (live targets, timer text,
result) and forwards hit/miss/start/end feedback to the FeedbackManager.
"""

from typing import Dict, Optional

import pygame

from models import Surface, TargetData
from aimrush.logging import get_logger
from aimrush.palette import hex_to_rgb
from aimrush.presentation import PresentationPort
from games.AimRush.feedback import FeedbackManager

log = get_logger('presentation')


def format_timer(seconds: int) -> str:
    """Countdown text, always ``00:SS``.

    Examples:
        >>> format_timer(7)
        '00:07'
        >>> format_timer(40)
        '00:40'
    """
    return f"00:{max(0, seconds):02d}"


class PygamePresentation(PresentationPort):
    """View state for the pygame front end.

    Attributes:
        board_rect: Window-space rectangle of the playing surface
        targets: Rendered targets by id
        timer_text: Current countdown text
        timer_visible: False while the result is shown
        final_score: Score of the finished session, None otherwise
        feedback: Sound/haptics sink, None to stay silent
    """

    def __init__(self, board_rect: pygame.Rect, feedback: Optional[FeedbackManager] = None):
        self.board_rect = pygame.Rect(board_rect)
        self.feedback = feedback
        self.targets: Dict[str, TargetData] = {}
        self.timer_text = format_timer(0)
        self.timer_visible = True
        self.final_score: Optional[int] = None

    def set_board_rect(self, board_rect: pygame.Rect) -> None:
        """Track a new board rectangle after the window was resized."""
        self.board_rect = pygame.Rect(board_rect)

    @property
    def showing_result(self) -> bool:
        return self.final_score is not None

    def reset_view(self) -> None:
        """Back to the pre-session look: no targets, no result, timer shown."""
        self.targets.clear()
        self.final_score = None
        self.timer_visible = True
        self.timer_text = format_timer(0)

    # =========================================================================
    # PresentationPort
    # =========================================================================

    def get_surface_size(self) -> Surface:
        return Surface(width=self.board_rect.width, height=self.board_rect.height)

    def on_session_started(self) -> None:
        self.final_score = None
        self.timer_visible = True

    def on_timer_update(self, remaining_seconds: int) -> None:
        self.timer_text = format_timer(remaining_seconds)

    def on_target_spawned(self, target: TargetData) -> None:
        self.targets[target.id] = target

    def on_target_removed(self, target_id: str) -> None:
        if self.targets.pop(target_id, None) is None:
            log.debug("Remove of unknown target %s", target_id)

    def on_hit(self) -> None:
        if self.feedback is not None:
            self.feedback.hit()

    def on_miss(self) -> None:
        if self.feedback is not None:
            self.feedback.miss()

    def on_session_finished(self, final_score: int) -> None:
        self.final_score = final_score
        self.timer_visible = False
        if self.feedback is not None:
            self.feedback.end()

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_targets(self, screen: pygame.Surface) -> None:
        """Draw every live target at its board position."""
        for target in self.targets.values():
            center = target.center
            pygame.draw.circle(
                screen,
                hex_to_rgb(target.color),
                (int(self.board_rect.x + center.x), int(self.board_rect.y + center.y)),
                int(target.radius),
            )

    def render_timer(self, screen: pygame.Surface, font: pygame.font.Font, color, center) -> None:
        if not self.timer_visible:
            return
        text_surface = font.render(self.timer_text, True, color)
        screen.blit(text_surface, text_surface.get_rect(center=center))
