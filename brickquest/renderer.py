"""Drawing onto a target surface through a world-space view."""

from __future__ import annotations

import pygame

from brickquest.geometry import Rect, View

OVERLAY_COLOR = (0, 0, 0, 150)


class Renderer:
    """Draws images given in world coordinates onto a pygame surface."""

    def __init__(self, target: pygame.Surface, view: View | None = None) -> None:
        self.target = target
        if view is None:
            width, height = target.get_size()
            view = View(center=(width / 2.0, height / 2.0), size=(float(width), float(height)))
        self.view = view

    def _screen_rect(self, x: float, y: float, width: float, height: float) -> pygame.Rect:
        area = self.view.rect()
        target_w, target_h = self.target.get_size()
        sx = target_w / area.width
        sy = target_h / area.height
        left = round((x - area.x) * sx)
        top = round((y - area.y) * sy)
        right = round((x + width - area.x) * sx)
        bottom = round((y + height - area.y) * sy)
        return pygame.Rect(left, top, right - left, bottom - top)

    def draw(self, image: pygame.Surface, position: tuple[float, float]) -> None:
        """Draw an image with its top-left corner at a world position."""
        width, height = image.get_size()
        dest = self._screen_rect(position[0], position[1], width, height)
        if dest.width <= 0 or dest.height <= 0:
            return
        if dest.size != (width, height):
            image = pygame.transform.scale(image, dest.size)
        self.target.blit(image, dest.topleft)

    def draw_black_overlay(self, view: View) -> None:
        """Darken the area covered by the given view."""
        area = view.rect()
        dest = self._screen_rect(area.x, area.y, area.width, area.height)
        if dest.width <= 0 or dest.height <= 0:
            return
        overlay = pygame.Surface(dest.size, pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        self.target.blit(overlay, dest.topleft)

    def center_text_in_button(
        self,
        text_bounds: Rect,
        button_size: tuple[float, float],
        button_pos: tuple[float, float],
    ) -> tuple[float, float]:
        """Return where to place text so that its bounds sit centred in the button."""
        return (
            button_pos[0] + (button_size[0] - text_bounds.width) / 2.0 - text_bounds.x,
            button_pos[1] + (button_size[1] - text_bounds.height) / 2.0 - text_bounds.y,
        )