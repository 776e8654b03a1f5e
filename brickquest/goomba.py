"""Walking enemy that turns around at obstacles."""

from __future__ import annotations

from typing import Any, ClassVar

import pygame

from brickquest.animation import Animation, Frame
from brickquest.config import GRAVITY
from brickquest.objects import GameObject, ObjectType

MAX_STEP = 0.1


class Goomba(GameObject):
    """An enemy that walks, falls under gravity and can be stomped."""

    TEXTURES: ClassVar[dict[str, str]] = {
        "walk1": "images/Enemy/GoombaWalk1.png",
        "walk2": "images/Enemy/GoombaWalk2.png",
        "death": "images/Enemy/GoombaDeath.png",
    }
    SIZE: ClassVar[float] = 60.0

    def __init__(self, collision, position: tuple[float, float] = (100.0, 50.0)) -> None:
        super().__init__(ObjectType.GOOMBA, self.SIZE, self.SIZE, position[0], position[1])
        self.collision = collision
        self.speed = 150.0
        self.direction = -1.0
        self.vertical_speed = 0.0
        self.is_grounded = False
        self.dead = False
        self.death_timer = 0.0
        self.textures: dict[str, Any] = {}
        self._walk = Animation(0.30)

    def load_textures(self, textures) -> None:
        size = (int(self.rect.width), int(self.rect.height))
        self.textures = {
            name: pygame.transform.scale(textures.get(path), size)
            for name, path in self.TEXTURES.items()
        }
        self.image = self.textures["walk1"]
        self._walk = Animation(0.30)
        self._walk.add_frame(Frame(self.textures["walk1"], 0.15))
        self._walk.add_frame(Frame(self.textures["walk2"], 0.30))

    def kill(self) -> None:
        self.dead = True
        self.death_timer = 0.0

    def update(self, delta_time: float) -> None:
        delta_time = min(delta_time, MAX_STEP)
        if self.dead:
            self.death_timer += delta_time
            if self.textures:
                self.image = self.textures["death"]
            return

        rect = self.rect
        velocity = self.direction * self.speed * delta_time
        self.vertical_speed += GRAVITY * delta_time

        if self.collision.check(
            rect.x + velocity, rect.y, rect.width, rect.height, self.vertical_speed
        ).collided:
            self.direction *= -1.0
            velocity = self.direction * self.speed * delta_time

        down = self.collision.check(
            rect.x,
            rect.y + self.vertical_speed * delta_time,
            rect.width,
            rect.height,
            self.vertical_speed,
        )
        if down.collided:
            self.vertical_speed = 0.0
            self.is_grounded = down.grounded
        else:
            self.is_grounded = False

        rect.x += velocity
        rect.y += self.vertical_speed * delta_time

        texture = self._walk.update(delta_time)
        if texture is not None:
            self.image = texture

    def draw(self, renderer) -> None:
        if self.image is not None:
            renderer.draw(self.image, self.position)

    def set_position(self, x: float, y: float) -> None:
        super().set_position(x, y)