"""Collision tests of a rectangle against the level's tile grid."""

from __future__ import annotations

from dataclasses import dataclass

from brickquest.config import CELL_SIZE
from brickquest.geometry import Rect
from brickquest.objects import ObjectType, QuestionBlock

SOLID_TYPES = frozenset({ObjectType.FLOOR, ObjectType.STAIR, ObjectType.BLOCK})


@dataclass
class CollisionResult:
    collided: bool = False
    grounded: bool = False


class Collision:
    """Checks moving rectangles against a level; collects coins it touches."""

    def __init__(self, level) -> None:
        self.level = level
        self.coins = 0

    def check(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        vertical_velocity: float,
    ) -> CollisionResult:
        result = CollisionResult()
        grid = self.level.grid
        if x < 0 or x + width > len(grid) * CELL_SIZE:
            result.collided = True
            return result

        column_start = int(x / CELL_SIZE)
        column_end = int((x + width) / CELL_SIZE) + 1
        row_start = int(y / CELL_SIZE)
        row_end = int((y + height) / CELL_SIZE) + 1
        moving = Rect(x, y, width, height)

        for column in range(max(column_start, 0), min(column_end, len(grid))):
            cells = grid[column]
            for row in range(max(row_start, 0), min(row_end, len(cells))):
                obj = cells[row]
                if obj is None:
                    continue
                area = obj.rect
                overlaps = moving.intersects(area)
                if obj.type is ObjectType.COIN:
                    if overlaps:
                        cells[row] = None
                        self.coins += 1
                elif obj.type is ObjectType.QUESTION_BLOCK and isinstance(obj, QuestionBlock):
                    if vertical_velocity < 0 and overlaps and y + height > area.y:
                        if obj.hit():
                            self.level.spawn_coin_above_block(column, row)
                    if obj.visible and overlaps:
                        result.collided = True
                        if y + height <= area.y + area.height:
                            result.grounded = True
                elif obj.type in SOLID_TYPES and overlaps:
                    result.collided = True
                    if vertical_velocity >= 0 and y + height <= area.y + area.height:
                        result.grounded = True
        return result