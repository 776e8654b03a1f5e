"""The screen shown when a level is completed."""

from __future__ import annotations

import pygame

from brickquest.geometry import View
from brickquest.ui.widgets import (
    BLACK,
    BUTTON_RED,
    RED,
    WHITE,
    Button,
    FontLoader,
    StyledText,
    _draw_coin_summary,
    _draw_labelled_button,
    _draw_title,
    make_styled_text,
)

BUTTON_GREEN = (0, 180, 0)


class VictoryScreen:
    """Offers to continue to the next level, retry, or return to the menu."""

    def __init__(
        self,
        font: FontLoader,
        title_font: FontLoader,
        coin_image: pygame.Surface,
    ) -> None:
        self._font = font
        self._title_font = title_font
        self.coin_image = coin_image

        self.continue_label = make_styled_text(font(40), "CONTINUA", WHITE, BLACK, 3.0)
        self.continue_button = Button((200.0, 60.0), BUTTON_GREEN, BLACK, 4.0)
        self.retry_label = make_styled_text(font(40), "RIPROVA", WHITE, BLACK, 3.0)
        self.retry_button = Button((200.0, 60.0), BUTTON_GREEN, BLACK, 4.0)
        self.menu_label = make_styled_text(font(32), "MENU PRINCIPALE", WHITE, BLACK, 3.0)
        self.menu_button = Button((340.0, 55.0), BUTTON_GREEN, BLACK, 4.0)

        self.title: StyledText | None = None
        self.coins_text: StyledText | None = None

    @property
    def _buttons(self) -> tuple[tuple[Button, StyledText], ...]:
        return (
            (self.continue_button, self.continue_label),
            (self.retry_button, self.retry_label),
            (self.menu_button, self.menu_label),
        )

    def draw(self, renderer, view: View, coin_counter: int, mouse_pos) -> None:
        renderer.draw_black_overlay(view)

        self.title = make_styled_text(self._font(100), "VICTORY", RED, BLACK, 5.0)
        _draw_title(renderer, view, self.title)

        self.coins_text = _draw_coin_summary(
            renderer, view, self.coin_image, self._font, self._title_font, coin_counter
        )

        cx, cy = view.center
        self.continue_button.position = (cx - 90.0, cy + 60.0)
        self.retry_button.position = (cx - 90.0, cy + 140.0)
        self.menu_button.position = (cx - 170.0, cy + 220.0)
        for button, label in self._buttons:
            button.fill = BUTTON_RED
            button.outline = BLACK
            button.thickness = 4.0
            _draw_labelled_button(renderer, button, label, mouse_pos)

    def is_retry_clicked(self, mouse_pos, pressed: bool) -> bool:
        return bool(pressed) and self.retry_button.contains(mouse_pos)

    def is_menu_clicked(self, mouse_pos, pressed: bool) -> bool:
        return bool(pressed) and self.menu_button.contains(mouse_pos)

    def is_continue_clicked(self, mouse_pos, pressed: bool) -> bool:
        return bool(pressed) and self.continue_button.contains(mouse_pos)