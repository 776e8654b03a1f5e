"""Tiles and scenery that make up a level."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, ClassVar

import pygame

from brickquest.animation import Animation, Frame
from brickquest.config import CELL_SIZE
from brickquest.geometry import Rect


class ObjectType(Enum):
    MARIO = auto()
    FLOOR = auto()
    STAIR = auto()
    BLOCK = auto()
    COIN = auto()
    QUESTION_BLOCK = auto()
    CLOUD = auto()
    HILL = auto()
    BUSH = auto()
    FLAG = auto()
    GOOMBA = auto()


def _scaled(image: pygame.Surface, size: tuple[float, float]) -> pygame.Surface:
    return pygame.transform.scale(image, (int(size[0]), int(size[1])))


class GameObject:
    """Something placed in the world with a collision rectangle and an image."""

    TEXTURE: ClassVar[str | None] = None

    def __init__(
        self,
        object_type: ObjectType,
        width: float = 0.0,
        height: float = 0.0,
        x: float = 0.0,
        y: float = 0.0,
    ) -> None:
        self.type = object_type
        self.rect = Rect(x, y, width, height)
        self.image: Any = None

    @property
    def position(self) -> tuple[float, float]:
        return (self.rect.x, self.rect.y)

    def load_textures(self, textures) -> None:
        """Load this object's image, scaled to its rectangle."""
        if self.TEXTURE is not None:
            self.image = _scaled(textures.get(self.TEXTURE), self.rect.size)

    def draw(self, renderer) -> None:
        if self.image is not None:
            renderer.draw(self.image, self.position)

    def update(self, delta_time: float) -> None:
        """Static objects have nothing to advance."""

    def set_position(self, x: float, y: float) -> None:
        self.rect.x = x
        self.rect.y = y


class _Scenery(GameObject):
    TYPE: ClassVar[ObjectType]
    WIDTH_CELLS: ClassVar[int] = 1
    HEIGHT_CELLS: ClassVar[int] = 1

    def __init__(self) -> None:
        super().__init__(
            self.TYPE,
            float(self.WIDTH_CELLS * CELL_SIZE),
            float(self.HEIGHT_CELLS * CELL_SIZE),
        )


class Block(_Scenery):
    TYPE = ObjectType.BLOCK
    TEXTURE = "images/Landscape/Block.png"


class FloorBlock(_Scenery):
    TYPE = ObjectType.FLOOR
    TEXTURE = "images/Landscape/FloorBlock.png"


class StairBlock(_Scenery):
    TYPE = ObjectType.STAIR
    TEXTURE = "images/Landscape/StairBlock.png"


class Bush(_Scenery):
    TYPE = ObjectType.BUSH
    TEXTURE = "images/Landscape/Bush.png"
    WIDTH_CELLS = 2


class Cloud(_Scenery):
    TYPE = ObjectType.CLOUD
    TEXTURE = "images/Landscape/Cloud.png"
    WIDTH_CELLS = 3


class Hill(_Scenery):
    TYPE = ObjectType.HILL
    TEXTURE = "images/Landscape/Hill.png"
    WIDTH_CELLS = 12
    HEIGHT_CELLS = 6


class Flag(_Scenery):
    TYPE = ObjectType.FLAG
    TEXTURE = "images/Landscape/Flag.png"
    WIDTH_CELLS = 3
    HEIGHT_CELLS = 10


class Coin(GameObject):
    """A spinning coin that can be collected."""

    FRAMES: ClassVar[tuple[str, ...]] = tuple(
        f"images/Coin/Coin{index}.png" for index in range(1, 11)
    )
    ANIMATION_LENGTH: ClassVar[float] = 2.0
    FRAME_TIME: ClassVar[float] = 0.20

    def __init__(self) -> None:
        super().__init__(ObjectType.COIN, float(CELL_SIZE), float(CELL_SIZE))
        self.textures: list[Any] = []
        self._animation = Animation(self.ANIMATION_LENGTH)

    def load_textures(self, textures) -> None:
        self.textures = [_scaled(textures.get(path), self.rect.size) for path in self.FRAMES]
        self.image = self.textures[0]
        self._animation = Animation(self.ANIMATION_LENGTH)
        for index, texture in enumerate(self.textures, start=1):
            self._animation.add_frame(Frame(texture, index * self.FRAME_TIME))

    def update(self, delta_time: float) -> None:
        texture = self._animation.update(delta_time)
        if texture is not None:
            self.image = texture


class QuestionBlock(GameObject):
    """A block that releases coins when hit from below; may start hidden."""

    FRAMES: ClassVar[tuple[str, ...]] = tuple(
        f"images/QuestionBlock/QuestionBlock{index}.png" for index in range(1, 6)
    )
    ANIMATION_LENGTH: ClassVar[float] = 2.0
    FRAME_TIME: ClassVar[float] = 0.20
    ANIMATED_FRAMES: ClassVar[int] = 4

    def __init__(self, coins: int = 1) -> None:
        super().__init__(ObjectType.QUESTION_BLOCK, float(CELL_SIZE), float(CELL_SIZE))
        self.coins = coins
        self.is_hit = False
        self.visible = True
        self.textures: list[Any] = []
        self._animation = Animation(self.ANIMATION_LENGTH)

    def load_textures(self, textures) -> None:
        self.textures = [_scaled(textures.get(path), self.rect.size) for path in self.FRAMES]
        self.image = self.textures[0]
        self._animation = Animation(self.ANIMATION_LENGTH)
        for index, texture in enumerate(self.textures[: self.ANIMATED_FRAMES], start=1):
            self._animation.add_frame(Frame(texture, index * self.FRAME_TIME))

    def update(self, delta_time: float) -> None:
        if self.is_hit:
            return
        texture = self._animation.update(delta_time)
        if texture is not None:
            self.image = texture

    def hit(self) -> bool:
        """Reveal the block and release one coin; True when a coin came out."""
        self.visible = True
        if self.coins <= 0:
            return False
        self.coins -= 1
        if self.coins == 0:
            self.is_hit = True
            if self.textures:
                self.image = self.textures[-1]
        return True

    def set_invisible(self) -> None:
        self.visible = False

    def draw(self, renderer) -> None:
        if self.visible:
            super().draw(renderer)