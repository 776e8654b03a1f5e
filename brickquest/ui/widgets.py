"""Outlined text and rectangular buttons for the game's screens."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from itertools import product

import pygame

from brickquest.geometry import Rect, View

Color = tuple[int, ...]
FontLoader = Callable[[int], pygame.font.Font]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
YELLOW: Color = (255, 255, 0)
RED: Color = (255, 0, 0)
BUTTON_RED: Color = (228, 0, 15)


@dataclass(eq=False)
class StyledText:
    """A line of text with a fill colour and an outline of a given thickness."""

    font: pygame.font.Font
    text: str
    fill: Color = WHITE
    outline: Color = BLACK
    thickness: float = 0.0
    position: tuple[float, float] = (0.0, 0.0)

    @property
    def _edge(self) -> int:
        return max(0, round(self.thickness))

    def render(self) -> pygame.Surface:
        """Draw the text, outline included, onto a new transparent surface."""
        face = self.font.render(self.text, True, self.fill)
        edge = self._edge
        if edge == 0:
            return face
        rim = self.font.render(self.text, True, self.outline)
        width, height = face.get_size()
        surface = pygame.Surface((width + 2 * edge, height + 2 * edge), pygame.SRCALPHA)
        for dx, dy in product(range(-edge, edge + 1), repeat=2):
            if dx * dx + dy * dy <= edge * edge:
                surface.blit(rim, (edge + dx, edge + dy))
        surface.blit(face, (edge, edge))
        return surface

    def bounds(self) -> Rect:
        """The local bounds of the rendered text, outline included."""
        width, height = self.font.size(self.text)
        edge = self._edge
        return Rect(0.0, 0.0, float(width + 2 * edge), float(height + 2 * edge))


@dataclass(eq=False)
class Button:
    """A filled rectangle with an outline drawn outside its size."""

    size: tuple[float, float]
    fill: Color
    outline: Color = BLACK
    thickness: float = 4.0
    position: tuple[float, float] = (0.0, 0.0)

    @property
    def bounds(self) -> Rect:
        """The area covered on screen, outline included."""
        x, y = self.position
        width, height = self.size
        t = self.thickness
        return Rect(x - t, y - t, width + 2 * t, height + 2 * t)

    def contains(self, point: tuple[float, float]) -> bool:
        return self.bounds.contains(point)

    def draw(self, renderer) -> None:
        outer = self.bounds
        surface = pygame.Surface((round(outer.width), round(outer.height)), pygame.SRCALPHA)
        surface.fill(self.outline)
        edge = round(self.thickness)
        inner = pygame.Rect(edge, edge, round(self.size[0]), round(self.size[1]))
        surface.fill(self.fill, inner)
        renderer.draw(surface, outer.position)


def make_styled_text(
    font: pygame.font.Font,
    text: str,
    fill: Color,
    outline: Color,
    thickness: float,
) -> StyledText:
    return StyledText(font, text, fill, outline, thickness)


def _draw_text(renderer, text: StyledText) -> None:
    renderer.draw(text.render(), text.position)


def _draw_labelled_button(renderer, button: Button, label: StyledText, mouse_pos) -> None:
    button.draw(renderer)
    label.fill = YELLOW if button.contains(mouse_pos) else WHITE
    label.position = renderer.center_text_in_button(label.bounds(), button.size, button.position)
    _draw_text(renderer, label)


def _draw_title(renderer, view: View, text: StyledText, offset_y: float = -100.0) -> None:
    bounds = text.bounds()
    cx, cy = view.center
    text.position = (
        cx - (bounds.x + bounds.width / 2.0),
        cy + offset_y - (bounds.y + bounds.height / 2.0),
    )
    _draw_text(renderer, text)


def _draw_centred_at(renderer, text: StyledText, center: tuple[float, float]) -> None:
    bounds = text.bounds()
    text.position = (center[0] - bounds.width / 2.0, center[1] - bounds.height / 2.0)
    _draw_text(renderer, text)


def _draw_coin_summary(
    renderer,
    view: View,
    coin_image: pygame.Surface,
    font: FontLoader,
    title_font: FontLoader,
    coin_counter: int,
) -> StyledText:
    """Draw the coin count across the top and the emblem below it."""
    cx, cy = view.center
    coins_y = cy - view.size[1] / 2.0 + 30.0
    coins_text = make_styled_text(font(35), f"x {coin_counter}", YELLOW, BLACK, 2.0)
    coin_width = coin_image.get_width()
    total_width = coin_width + 10.0 + coins_text.bounds().width
    start_x = cx - total_width / 2.0
    renderer.draw(coin_image, (start_x, coins_y))
    coins_text.position = (start_x + coin_width + 10.0, coins_y - 5.0)
    _draw_text(renderer, coins_text)

    emblem_y = (coins_y + cy - 100.0) / 2.0 + 20.0
    emblem = make_styled_text(title_font(100), "m", BLACK, WHITE, 4.0)
    _draw_centred_at(renderer, emblem, (cx, emblem_y))
    return coins_text