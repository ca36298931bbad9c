"""
Main game engine for AimRush.

This module provides the pygame loop, the three screens (start, setup,
board) and the wiring between pygame events, the SessionController and
the PygamePresentation.
"""

from enum import Enum
from typing import Optional

import pygame

from aimrush.difficulty import parse_difficulty
from aimrush.input.sources.mouse import MouseInputSource
from aimrush.logging import get_logger
from aimrush.random_source import RandomNumberSource
from aimrush.scheduler import FrameScheduler
from aimrush.session import SessionController, VALID_DURATIONS
from aimrush.spawn import SpawnEngine
from models import Difficulty
from games.AimRush import config
from games.AimRush.feedback import FeedbackManager
from games.AimRush.menu import Button, ButtonGroup
from games.AimRush.presentation import PygamePresentation

log = get_logger('engine')


class Screen(str, Enum):
    """Screens of the front end."""
    START = "start"
    SETUP = "setup"
    BOARD = "board"


class GameEngine:
    """Main game engine managing the game loop and pygame state.

    Attributes:
        screen: Pygame display surface
        clock: Pygame clock for frame timing
        running: Whether the game loop should continue
        current_screen: Screen being shown
        theme: Active color theme name ('dark' or 'light')
        scheduler: Frame scheduler advanced once per frame
        controller: Session state machine
        presentation: View state rendered each frame

    Examples:
        >>> engine = GameEngine(difficulty='hard', seed=42)
        >>> engine.run()
    """

    def __init__(
        self,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
        difficulty: str = config.DEFAULT_DIFFICULTY,
        theme: str = config.DEFAULT_THEME,
        seed: Optional[int] = config.RNG_SEED,
        audio_enabled: bool = True,
        haptics_enabled: bool = True,
    ):
        """Initialize pygame, the session and the widgets.

        Args:
            width: Initial window width
            height: Initial window height
            difficulty: Initial difficulty id
            theme: Initial theme ('dark' or 'light')
            seed: Seed for reproducible target sequences, None for random
            audio_enabled: Whether to play sounds
            haptics_enabled: Whether to rumble a connected controller
        """
        pygame.init()

        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(config.TITLE)
        self.clock = pygame.time.Clock()

        self.running = True
        self.current_screen = Screen.START
        self.theme = theme if theme in config.THEMES else 'dark'

        self.scheduler = FrameScheduler()
        self.feedback = FeedbackManager(self.scheduler, audio_enabled, haptics_enabled)

        board_rect = self._board_rect()
        self.presentation = PygamePresentation(board_rect, self.feedback)
        self.mouse = MouseInputSource(board_rect)

        self.controller = SessionController(
            self.presentation,
            self.scheduler,
            spawn_engine=SpawnEngine(rng=RandomNumberSource(seed)),
            difficulty=parse_difficulty(difficulty) or Difficulty.MEDIUM,
        )

        self.fonts = {
            'small': pygame.font.Font(None, config.FONT_SIZE_SMALL),
            'medium': pygame.font.Font(None, config.FONT_SIZE_MEDIUM),
            'large': pygame.font.Font(None, config.FONT_SIZE_LARGE),
            'huge': pygame.font.Font(None, config.FONT_SIZE_HUGE),
        }

        self.start_button = Button('Start', 'start', pygame.Rect(0, 0, 200, 64))
        self.play_again_button = Button('Play again', 'play_again', pygame.Rect(0, 0, 220, 56))
        self.difficulty_buttons = ButtonGroup([(d.value.capitalize(), d) for d in Difficulty])
        self.duration_buttons = ButtonGroup([(f'{s} s', s) for s in VALID_DURATIONS])
        self.difficulty_buttons.set_active(self.controller.difficulty)

        self._layout()
        log.info("Engine ready: %dx%d, %s theme, seed=%s", width, height, self.theme, seed)

    @property
    def colors(self):
        return config.THEMES[self.theme]

    # =========================================================================
    # Layout
    # =========================================================================

    def _board_rect(self) -> pygame.Rect:
        """Playing surface: the window minus the HUD strip."""
        width, height = self.screen.get_size()
        hud = min(config.HUD_HEIGHT, height)
        return pygame.Rect(0, hud, width, height - hud)

    def _layout(self) -> None:
        """Position widgets and the board for the current window size."""
        width, height = self.screen.get_size()
        center_x = width // 2

        board_rect = self._board_rect()
        self.presentation.set_board_rect(board_rect)
        self.mouse.set_board_rect(board_rect)

        self.start_button.rect.center = (center_x, height // 2 + 40)
        self.difficulty_buttons.layout(center_x, height // 2 - 90)
        self.duration_buttons.layout(center_x, height // 2 + 50)
        self.play_again_button.rect.center = (center_x, height // 2 + 120)

    def toggle_theme(self) -> None:
        self.theme = config.other_theme(self.theme)
        log.debug("Theme switched to %s", self.theme)

    # =========================================================================
    # Events
    # =========================================================================

    def handle_events(self) -> None:
        """Process pygame events for the current screen."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                self._layout()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    return
                if event.key == pygame.K_t:
                    self.toggle_theme()

            elif event.type == pygame.MOUSEMOTION:
                self._update_hover(event.pos)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event)

        for input_event in self.mouse.poll_events():
            self.controller.pointer_down_on_surface(input_event)

    def _update_hover(self, pos) -> None:
        self.start_button.hovered = self.start_button.contains(pos)
        self.play_again_button.hovered = self.play_again_button.contains(pos)
        self.difficulty_buttons.update_hover(pos)
        self.duration_buttons.update_hover(pos)

    def _handle_click(self, event: pygame.event.Event) -> None:
        if self.current_screen == Screen.START:
            if self.start_button.contains(event.pos):
                self.feedback.start()
                self.current_screen = Screen.SETUP

        elif self.current_screen == Screen.SETUP:
            difficulty = self.difficulty_buttons.handle_click(event.pos)
            if difficulty is not None:
                self.controller.choose_difficulty(difficulty)
                self.difficulty_buttons.set_active(self.controller.difficulty)
                return

            duration = self.duration_buttons.handle_click(event.pos)
            if duration is not None:
                self.controller.choose_duration(duration)
                if self.controller.is_running:
                    self.current_screen = Screen.BOARD

        elif self.current_screen == Screen.BOARD:
            if self.presentation.showing_result:
                if self.play_again_button.contains(event.pos):
                    self.play_again()
            else:
                self.mouse.handle_event(event)

    def play_again(self) -> None:
        """Reset the session and go back to the start screen."""
        self.controller.reset()
        self.presentation.reset_view()
        self.mouse.clear()
        self.difficulty_buttons.set_active(self.controller.difficulty)
        self.current_screen = Screen.START

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self) -> None:
        colors = self.colors
        self.screen.fill(colors['background'])

        if self.current_screen == Screen.START:
            self._render_start(colors)
        elif self.current_screen == Screen.SETUP:
            self._render_setup(colors)
        else:
            self._render_board(colors)

        self._draw_text('T: theme   Esc: quit', 'small', colors['muted'],
                        (self.screen.get_width() // 2, self.screen.get_height() - 20))
        pygame.display.flip()

    def _draw_text(self, text: str, font: str, color, center) -> None:
        surface = self.fonts[font].render(text, True, color)
        self.screen.blit(surface, surface.get_rect(center=center))

    def _render_start(self, colors) -> None:
        center_x = self.screen.get_width() // 2
        self._draw_text(config.TITLE, 'huge', colors['text'], (center_x, self.screen.get_height() // 2 - 60))
        self.start_button.render(self.screen, self.fonts['medium'], colors)

    def _render_setup(self, colors) -> None:
        center_x = self.screen.get_width() // 2
        middle = self.screen.get_height() // 2
        self._draw_text('Choose difficulty', 'medium', colors['text'], (center_x, middle - 120))
        self.difficulty_buttons.render(self.screen, self.fonts['medium'], colors)
        self._draw_text('Choose duration', 'medium', colors['text'], (center_x, middle + 20))
        self.duration_buttons.render(self.screen, self.fonts['medium'], colors)

    def _render_board(self, colors) -> None:
        board = self.presentation.board_rect
        width = self.screen.get_width()
        hud_center_y = board.y // 2

        # HUD
        pygame.draw.rect(self.screen, colors['hud'], pygame.Rect(0, 0, width, board.y))
        self.presentation.render_timer(self.screen, self.fonts['large'], colors['text'], (width // 2, hud_center_y))
        self._draw_text(f'Score: {self.controller.score}', 'medium', colors['text'], (width - 110, hud_center_y))

        # Board
        pygame.draw.rect(self.screen, colors['board'], board)
        self.presentation.render_targets(self.screen)

        if self.presentation.showing_result:
            self._render_result(colors)

    def _render_result(self, colors) -> None:
        session = self.controller.session
        center_x = self.screen.get_width() // 2
        middle = self.screen.get_height() // 2

        self._draw_text(f'Your score: {self.presentation.final_score}', 'huge', colors['text'], (center_x, middle - 90))
        self._draw_text(
            f'Hits: {session.hits}   Misses: {session.misses}   Accuracy: {session.accuracy:.0%}',
            'medium', colors['text'], (center_x, middle - 25),
        )
        self._draw_text(config.RESULT_HINT, 'small', colors['muted'], (center_x, middle + 30))
        self.play_again_button.render(self.screen, self.fonts['medium'], colors)

    # =========================================================================
    # Loop
    # =========================================================================

    def update(self, dt: float) -> None:
        """Advance timers (countdown ticks and rumble pulses)."""
        self.scheduler.advance(dt)

    def run(self) -> None:
        """Run the main game loop until the window is closed."""
        while self.running:
            dt = self.clock.tick(config.FPS) / 1000.0
            self.handle_events()
            self.update(dt)
            self.render()

    def quit(self) -> None:
        """Stop timers and shut pygame down."""
        self.scheduler.cancel_all()
        self.feedback.shutdown()
        pygame.quit()
