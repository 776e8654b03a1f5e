"""Keeps the view centred on a target inside the level's bounds."""

from __future__ import annotations

from brickquest.geometry import Rect, View


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if high < value:
        return high
    return value


class Camera:
    """Sizes the view to the window's shape and follows a target."""

    SIZE = 900.0

    def update_view(
        self,
        view: View,
        window_size: tuple[float, float],
        target_rect: Rect,
        level,
    ) -> View:
        aspect_ratio = float(window_size[0]) / float(window_size[1])
        if aspect_ratio > 1.0:
            view.size = (self.SIZE * aspect_ratio, self.SIZE)
        else:
            view.size = (self.SIZE, self.SIZE / aspect_ratio)

        view_width, view_height = view.size
        target_x, target_y = target_rect.center
        target_x = _clamp(target_x, view_width / 2.0, level.pixel_width - view_width / 2.0)
        target_y = _clamp(target_y, view_height / 2.0, level.pixel_height - view_height / 2.0)
        view.center = (target_x, target_y)
        return view