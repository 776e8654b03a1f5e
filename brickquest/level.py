"""Tile grid of a level, built from a colour-coded map image."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from brickquest.config import CELL_SIZE
from brickquest.geometry import Rect
from brickquest.objects import (
    Block,
    Bush,
    Cloud,
    Coin,
    Flag,
    FloorBlock,
    GameObject,
    Hill,
    ObjectType,
    QuestionBlock,
    StairBlock,
)

MARIO_COLOR = (255, 0, 0)
GOOMBA_COLOR = (139, 69, 19)


class LevelError(RuntimeError):
    """Raised when a map image cannot be loaded."""


def _hidden_question_block() -> QuestionBlock:
    block = QuestionBlock()
    block.set_invisible()
    return block


TILE_COLORS: dict[tuple[int, int, int], Callable[[], GameObject]] = {
    (0, 0, 0): FloorBlock,
    (80, 40, 10): StairBlock,
    (128, 64, 0): Block,
    (255, 165, 0): QuestionBlock,
    (255, 255, 255): _hidden_question_block,
    (255, 255, 0): Coin,
    (128, 128, 128): Cloud,
    (144, 238, 144): Bush,
    (0, 100, 0): Hill,
    (255, 215, 0): Flag,
}


@dataclass
class LevelSpawn:
    """Where the player and the enemies start, in world coordinates."""

    mario_position: tuple[float, float] | None = None
    goomba_positions: list[tuple[float, float]] = field(default_factory=list)


class Level:
    """A grid of columns, each holding an object or None per cell."""

    def __init__(self) -> None:
        self.grid: list[list[GameObject | None]] = []
        self.textures = None

    @property
    def columns(self) -> int:
        return len(self.grid)

    @property
    def rows(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def pixel_width(self) -> float:
        return float(self.columns * CELL_SIZE)

    @property
    def pixel_height(self) -> float:
        return float(self.rows * CELL_SIZE)

    def __iter__(self) -> Iterator[GameObject]:
        for column in self.grid:
            yield from (obj for obj in column if obj is not None)

    def load(self, path: str | Path, textures=None) -> LevelSpawn:
        """Build the level from an image file."""
        try:
            image = pygame.image.load(str(path))
        except (OSError, pygame.error) as exc:
            raise LevelError(f"cannot load map image: {path}") from exc
        return self.build(image, textures)

    def build(self, image: pygame.Surface, textures=None) -> LevelSpawn:
        """Replace the grid with the objects encoded by the image's pixels."""
        self.textures = textures
        spawn = LevelSpawn()
        width, height = image.get_size()
        grid: list[list[GameObject | None]] = []
        for x in range(width):
            column: list[GameObject | None] = []
            for y in range(height):
                r, g, b, a = tuple(image.get_at((x, y)))
                color = (r, g, b) if a == 255 else None
                position = (float(x * CELL_SIZE), float(y * CELL_SIZE))
                obj: GameObject | None = None
                if color == MARIO_COLOR:
                    spawn.mario_position = position
                elif color == GOOMBA_COLOR:
                    spawn.goomba_positions.append(position)
                elif color in TILE_COLORS:
                    obj = TILE_COLORS[color]()
                    if textures is not None:
                        obj.load_textures(textures)
                    obj.set_position(*position)
                column.append(obj)
            grid.append(column)
        self.grid = grid
        return spawn

    def update(self, delta_time: float) -> None:
        for obj in self:
            obj.update(delta_time)

    def draw(self, renderer) -> None:
        """Draw the objects that overlap the renderer's view."""
        view_rect = renderer.view.rect()
        for obj in self:
            if obj.rect.intersects(view_rect):
                obj.draw(renderer)

    def spawn_coin_above_block(self, column: int, row: int) -> None:
        """Put a coin in the cell above the given one if that cell is empty."""
        if row - 1 < 0 or self.grid[column][row - 1] is not None:
            return
        coin = Coin()
        if self.textures is not None:
            coin.load_textures(self.textures)
        coin.set_position(float(column * CELL_SIZE), float((row - 1) * CELL_SIZE))
        self.grid[column][row - 1] = coin

    def flag_rect(self) -> Rect:
        """The flag's rectangle, or an empty rectangle when there is no flag."""
        return next((obj.rect for obj in self if obj.type is ObjectType.FLAG), Rect())