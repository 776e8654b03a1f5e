"""Time-based frame animation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Frame:
    """An image shown until the animation clock reaches ``time``."""

    texture: Any
    time: float


class Animation:
    """Loops through frames over a fixed length of time."""

    def __init__(self, length: float) -> None:
        if length <= 0:
            raise ValueError("animation length must be positive")
        self.length = length
        self.current_time = 0.0
        self.frames: list[Frame] = []

    def add_frame(self, frame: Frame) -> None:
        self.frames.append(frame)

    def update(self, delta_time: float) -> Any:
        """Advance the clock and return the current frame's texture, or None."""
        self.current_time += delta_time
        while self.current_time >= self.length:
            self.current_time -= self.length
        return next(
            (frame.texture for frame in self.frames if self.current_time <= frame.time),
            None,
        )