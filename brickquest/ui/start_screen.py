"""The title screen with its start button."""

from __future__ import annotations

from brickquest.geometry import View
from brickquest.ui.widgets import (
    BLACK,
    WHITE,
    Button,
    FontLoader,
    StyledText,
    _draw_centred_at,
    _draw_labelled_button,
    make_styled_text,
)

START_BLUE = (0, 70, 200)


class StartScreen:
    """Draws the logo and the start button and tells when it is clicked."""

    def __init__(self, font: FontLoader, title_font: FontLoader) -> None:
        self.label = make_styled_text(font(40), "INIZIA", WHITE, BLACK, 3.0)
        self.button = Button((300.0, 60.0), START_BLUE, BLACK, 4.0)
        self._title_font = title_font
        self.logo: StyledText | None = None

    def draw(self, renderer, view: View, mouse_pos) -> None:
        cx, cy = view.center
        self.logo = make_styled_text(self._title_font(300), '"', WHITE, BLACK, 4.0)
        _draw_centred_at(renderer, self.logo, (cx, cy - 120.0))

        self.button.position = (cx - 150.0, cy + 20.0)
        _draw_labelled_button(renderer, self.button, self.label, mouse_pos)

    def is_clicked(self, mouse_pos, pressed: bool) -> bool:
        return bool(pressed) and self.button.contains(mouse_pos)