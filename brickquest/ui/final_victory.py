"""The screen shown after the last level."""

from __future__ import annotations

from brickquest.geometry import View
from brickquest.ui.widgets import (
    BLACK,
    BUTTON_RED,
    RED,
    WHITE,
    Button,
    FontLoader,
    StyledText,
    _draw_labelled_button,
    _draw_title,
    make_styled_text,
)


class FinalVictoryScreen:
    """Announces that the game is complete and leads back to the menu."""

    def __init__(self, font: FontLoader, title_font: FontLoader) -> None:
        self._font = font
        self._title_font = title_font
        self.menu_label = make_styled_text(font(32), "MENU PRINCIPALE", WHITE, BLACK, 3.0)
        self.menu_button = Button((340.0, 55.0), BUTTON_RED, BLACK, 4.0)
        self.title: StyledText | None = None

    def draw(self, renderer, view: View, mouse_pos) -> None:
        renderer.draw_black_overlay(view)

        self.title = make_styled_text(self._font(80), "GIOCO COMPLETATO!", RED, BLACK, 5.0)
        _draw_title(renderer, view, self.title)

        cx, cy = view.center
        self.menu_button.position = (cx - 170.0, cy + 100.0)
        _draw_labelled_button(renderer, self.menu_button, self.menu_label, mouse_pos)

    def is_menu_clicked(self, mouse_pos, pressed: bool) -> bool:
        return bool(pressed) and self.menu_button.contains(mouse_pos)