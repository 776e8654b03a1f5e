"""The coin counter shown while playing."""

from __future__ import annotations

from brickquest.geometry import View
from brickquest.ui.widgets import BLACK, WHITE, FontLoader, _draw_text, make_styled_text

MARGIN = 20.0


class HUD:
    """Shows the number of collected coins in the view's top-left corner."""

    def __init__(self, font: FontLoader) -> None:
        self.text = make_styled_text(font(20), "Monete x 0", WHITE, BLACK, 2.0)

    def draw(self, renderer, view: View, coin_counter: int) -> None:
        self.text.text = f"Monete x {coin_counter}"
        area = view.rect()
        self.text.position = (area.x + MARGIN, area.y + MARGIN)
        _draw_text(renderer, self.text)