"""
Menu widgets for AimRush.

This module provides clickable buttons for the start, setup and result
screens.

Classes:
    Button: A labelled rectangle that reports a value when clicked
    ButtonGroup: A row of buttons with one optional active (highlighted) item
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

import pygame


class Button:
    """A clickable, labelled rectangle.

    Attributes:
        label: Display text
        value: Value reported when the button is clicked
        rect: Screen rectangle
        active: Whether the button is highlighted as the current choice
        hovered: Whether the pointer is over the button

    Examples:
        >>> button = Button('20 s', 20, pygame.Rect(0, 0, 120, 48))
        >>> button.contains((10, 10))
        True
    """

    def __init__(self, label: str, value: Any, rect: pygame.Rect):
        self.label = label
        self.value = value
        self.rect = pygame.Rect(rect)
        self.active = False
        self.hovered = False

    def contains(self, pos: Tuple[int, int]) -> bool:
        return bool(self.rect.collidepoint(pos))

    def render(self, screen: pygame.Surface, font: pygame.font.Font, colors: Dict[str, Tuple[int, int, int]]) -> None:
        """Draw the button with the theme's colors.

        Args:
            screen: Pygame surface to draw on
            font: Font for the label
            colors: Theme color table (see config.THEMES)
        """
        if self.active:
            fill = colors['button_active']
        elif self.hovered:
            fill = colors['button_hover']
        else:
            fill = colors['button']

        pygame.draw.rect(screen, fill, self.rect, border_radius=10)
        text_surface = font.render(self.label, True, colors['button_text'])
        screen.blit(text_surface, text_surface.get_rect(center=self.rect.center))

    def __repr__(self) -> str:
        return f"Button({self.label!r}, value={self.value!r}, active={self.active})"


class ButtonGroup:
    """A horizontal row of buttons.

    Attributes:
        buttons: Buttons in display order
    """

    def __init__(
        self,
        options: Sequence[Tuple[str, Any]],
        button_size: Tuple[int, int] = (140, 52),
        spacing: int = 16,
    ):
        """Create one button per (label, value) option.

        Args:
            options: Button labels and their values
            button_size: Width and height of every button
            spacing: Horizontal gap between buttons
        """
        self.button_size = button_size
        self.spacing = spacing
        self.buttons: List[Button] = [
            Button(label, value, pygame.Rect((0, 0), button_size))
            for label, value in options
        ]

    def layout(self, center_x: int, top: int) -> None:
        """Center the row horizontally at ``center_x`` with its top at ``top``."""
        width, _ = self.button_size
        total = len(self.buttons) * width + max(0, len(self.buttons) - 1) * self.spacing
        left = center_x - total // 2
        for index, button in enumerate(self.buttons):
            button.rect.topleft = (left + index * (width + self.spacing), top)

    def set_active(self, value: Any) -> None:
        """Highlight the button with this value, clearing the others."""
        for button in self.buttons:
            button.active = button.value == value

    def update_hover(self, pos: Tuple[int, int]) -> None:
        for button in self.buttons:
            button.hovered = button.contains(pos)

    def handle_click(self, pos: Tuple[int, int]) -> Optional[Any]:
        """Value of the button under ``pos``, None if no button was hit."""
        for button in self.buttons:
            if button.contains(pos):
                return button.value
        return None

    def render(self, screen: pygame.Surface, font: pygame.font.Font, colors: Dict[str, Tuple[int, int, int]]) -> None:
        for button in self.buttons:
            button.render(screen, font, colors)

    def __len__(self) -> int:
        return len(self.buttons)
