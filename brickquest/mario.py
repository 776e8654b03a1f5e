"""The player character."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

import pygame

from brickquest.animation import Animation, Frame
from brickquest.config import GRAVITY
from brickquest.objects import GameObject, ObjectType

MAX_STEP = 0.1
MOVING_THRESHOLD = 0.02


@dataclass(frozen=True)
class Controls:
    """Which direction keys are held this frame."""

    left: bool = False
    right: bool = False
    up: bool = False


class Mario(GameObject):
    """Runs, jumps and falls, driven by the controls given each frame."""

    TEXTURES: ClassVar[dict[str, str]] = {
        "walk1": "images/Mario/MarioWalk1.png",
        "walk2": "images/Mario/MarioWalk2.png",
        "walk3": "images/Mario/MarioWalk3.png",
        "idle": "images/Mario/MarioIdle.png",
        "jump": "images/Mario/MarioJump.png",
        "death": "images/Mario/MarioDeath.png",
    }
    SIZE: ClassVar[float] = 45.0

    def __init__(self, collision, position: tuple[float, float] = (50.0, 50.0)) -> None:
        super().__init__(ObjectType.MARIO, self.SIZE, self.SIZE, position[0], position[1])
        self.collision = collision
        self.speed = 300.0
        self.vertical_speed = 0.0
        self.jump_speed = -600.0
        self.is_grounded = False
        self.facing_left = False
        self.dead = False
        self.win = False
        self.textures: dict[str, Any] = {}
        self._run = Animation(0.45)

    def load_textures(self, textures) -> None:
        size = (int(self.rect.width), int(self.rect.height))
        self.textures = {
            name: pygame.transform.scale(textures.get(path), size)
            for name, path in self.TEXTURES.items()
        }
        self.image = self.textures["idle"]
        self._run = Animation(0.45)
        for name, time in (("walk1", 0.15), ("walk2", 0.30), ("walk3", 0.45)):
            self._run.add_frame(Frame(self.textures[name], time))

    def update(self, delta_time: float, controls: Controls | None = None) -> None:
        if self.dead or self.win:
            return
        controls = controls or Controls()
        velocity = 0.0
        if controls.left:
            velocity = -self.speed * delta_time
            self.facing_left = True
        if controls.right:
            velocity = self.speed * delta_time
            self.facing_left = False
        if controls.up and self.is_grounded:
            self.vertical_speed = self.jump_speed
            self.is_grounded = False

        delta_time = min(delta_time, MAX_STEP)
        self.vertical_speed += GRAVITY * delta_time

        rect = self.rect
        if self.collision.check(
            rect.x + velocity, rect.y, rect.width, rect.height, self.vertical_speed
        ).collided:
            velocity = 0.0

        result = self.collision.check(
            rect.x,
            rect.y + self.vertical_speed * delta_time,
            rect.width,
            rect.height,
            self.vertical_speed,
        )
        if result.collided:
            self.vertical_speed = 0.0
        self.is_grounded = result.grounded

        rect.x += velocity
        rect.y += self.vertical_speed * delta_time

        if not self.textures:
            return
        if not self.is_grounded:
            self.image = self.textures["jump"]
        elif abs(velocity) > MOVING_THRESHOLD:
            texture = self._run.update(delta_time)
            if texture is not None:
                self.image = texture
        else:
            self.image = self.textures["idle"]

    def draw(self, renderer) -> None:
        if self.dead and self.textures:
            self.image = self.textures["death"]
        if self.image is None:
            return
        image = pygame.transform.flip(self.image, True, False) if self.facing_left else self.image
        renderer.draw(image, self.position)

    def set_position(self, x: float, y: float) -> None:
        super().set_position(x, y)

    def reset_vertical_speed(self) -> None:
        self.vertical_speed = 0.0