import pygame
import pytest

from brickquest.collision import Collision
from brickquest.config import CELL_SIZE
from brickquest.level import Level
from brickquest.mario import Controls, Mario
from brickquest.renderer import Renderer
from brickquest.textures import TextureManager

RED = (255, 0, 0)
BLUE = (0, 0, 255)
START = (2 * CELL_SIZE, 5 * CELL_SIZE - 45)


def floor_collision():
    surface = pygame.Surface((10, 8))
    surface.fill((0, 219, 255))
    for x in range(10):
        surface.set_at((x, 5), (0, 0, 0))
    level = Level()
    level.build(surface)
    return Collision(level)


def split_textures():
    def loader(path):
        surface = pygame.Surface((10, 10))
        surface.fill(RED)
        surface.fill(BLUE, pygame.Rect(5, 0, 5, 10))
        return surface

    return TextureManager(loader=loader)


def test_stands_still_on_floor():
    mario = Mario(floor_collision(), START)
    mario.update(0.016, Controls())
    assert mario.position == START
    assert mario.is_grounded
    assert mario.vertical_speed == 0.0


def test_moves_right_and_left():
    mario = Mario(floor_collision(), START)
    mario.update(0.016, Controls(right=True))
    assert mario.rect.x > START[0]
    assert not mario.facing_left
    x = mario.rect.x
    mario.update(0.016, Controls(left=True))
    assert mario.rect.x < x
    assert mario.facing_left


def test_jump_only_when_grounded():
    mario = Mario(floor_collision(), START)
    mario.update(0.016, Controls(up=True))
    assert mario.vertical_speed == 0.0
    mario.update(0.016, Controls(up=True))
    assert mario.vertical_speed < 0.0
    assert mario.rect.y < START[1]
    assert not mario.is_grounded


def test_wall_blocks_horizontal_move():
    mario = Mario(floor_collision(), (0.5, START[1]))
    mario.update(0.016, Controls(left=True))
    assert mario.rect.x == 0.5


def test_dead_or_winning_does_not_move():
    mario = Mario(floor_collision(), (60.0, 0.0))
    mario.dead = True
    mario.update(0.05, Controls(right=True))
    assert mario.position == (60.0, 0.0)
    mario.dead, mario.win = False, True
    mario.update(0.05, Controls(right=True))
    assert mario.position == (60.0, 0.0)


def test_reset_vertical_speed():
    mario = Mario(floor_collision(), (60.0, 0.0))
    mario.update(0.05)
    assert mario.vertical_speed > 0.0
    mario.reset_vertical_speed()
    assert mario.vertical_speed == 0.0


def test_images_follow_state():
    mario = Mario(floor_collision(), START)
    mario.load_textures(split_textures())
    mario.update(0.016)
    assert mario.image is mario.textures["idle"]
    mario.update(0.016, Controls(right=True))
    assert mario.image is mario.textures["walk1"]
    mario.update(0.016, Controls(up=True))
    assert mario.image is mario.textures["jump"]


def test_draw_flips_when_facing_left():
    mario = Mario(floor_collision(), (0.0, 105.0))
    mario.load_textures(split_textures())
    target = pygame.Surface((800, 600))
    renderer = Renderer(target)
    mario.draw(renderer)
    assert tuple(target.get_at((5, 120)))[:3] == RED
    mario.facing_left = True
    mario.draw(renderer)
    assert tuple(target.get_at((5, 120)))[:3] == BLUE


def test_draw_dead_uses_death_image():
    mario = Mario(floor_collision(), START)
    mario.load_textures(split_textures())
    mario.dead = True
    mario.draw(Renderer(pygame.Surface((800, 600))))
    assert mario.image is mario.textures["death"]


def test_set_position():
    mario = Mario(floor_collision())
    mario.set_position(12.0, 34.0)
    assert mario.rect.position == pytest.approx((12.0, 34.0))