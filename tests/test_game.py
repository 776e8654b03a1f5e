from functools import lru_cache

import pygame
import pytest

from brickquest.config import CELL_SIZE
from brickquest.game import Game
from brickquest.level import LevelError
from brickquest.mario import Controls
from brickquest.ui.state import GameState

SKY = (0, 219, 255)
RED = (255, 0, 0)
BLACK = (0, 0, 0)
YELLOW = (255, 255, 0)
GOLD = (255, 215, 0)
GOOMBA = (139, 69, 19)


def make_map(path, width=40, height=20, floor=True, pixels=None):
    surface = pygame.Surface((width, height))
    surface.fill(SKY)
    if floor:
        for x in range(width):
            surface.set_at((x, height - 2), BLACK)
            surface.set_at((x, height - 1), BLACK)
    for (x, y), color in (pixels or {}).items():
        surface.set_at((x, y), color)
    pygame.image.save(surface, str(path))
    return path


@pytest.fixture
def state():
    pygame.font.init()

    @lru_cache(maxsize=None)
    def font(size):
        return pygame.font.Font(None, size)

    return GameState(font, font, pygame.Surface((20, 20)))


def started(game):
    game.state.show_start_screen = False
    return game


def test_loads_first_map_and_spawns_mario(tmp_path):
    path = make_map(tmp_path / "m.bmp", pixels={(2, 16): RED})
    game = Game(map_files=[path])
    assert game.level.columns == 40
    assert game.mario.rect.position == (2 * CELL_SIZE, 16 * CELL_SIZE)
    assert game.state.show_start_screen is True


def test_missing_map_raises(tmp_path):
    with pytest.raises(LevelError):
        Game(map_files=[tmp_path / "missing.bmp"])


def test_empty_map_list_raises():
    with pytest.raises(ValueError):
        Game(map_files=[])


def test_start_button_begins_play(tmp_path, state):
    path = make_map(tmp_path / "m.bmp", pixels={(2, 16): RED})
    game = Game(map_files=[path], state=state, surface=pygame.Surface((800, 600)))
    game.step(0.016, None, (-1000.0, -1000.0), False)
    assert game.state.show_start_screen is True
    center = game.state.start_screen.button.bounds.center
    game.step(0.016, None, center, True)
    assert game.state.show_start_screen is False
    assert game.just_started is True

    before = game.mario.rect.position
    game.step(0.05, None, center, True)
    assert game.just_started is False
    assert game.mario.rect.position == before


def test_mario_lands_on_floor(tmp_path):
    path = make_map(tmp_path / "m.bmp", pixels={(2, 16): RED})
    game = started(Game(map_files=[path]))
    for _ in range(20):
        game.step(0.05, Controls(), (0.0, 0.0), False)
    assert game.mario.is_grounded is True
    assert game.mario.rect.bottom <= 18 * CELL_SIZE


def test_mario_moves_right(tmp_path):
    path = make_map(tmp_path / "m.bmp", pixels={(2, 16): RED})
    game = started(Game(map_files=[path]))
    start_x = game.mario.rect.x
    for _ in range(5):
        game.step(0.05, Controls(right=True), (0.0, 0.0), False)
    assert game.mario.rect.x > start_x
    assert game.mario.facing_left is False


def test_collecting_a_coin(tmp_path):
    path = make_map(tmp_path / "m.bmp", pixels={(3, 16): RED, (4, 16): YELLOW})
    game = started(Game(map_files=[path]))
    game.step(0.05, Controls(), (0.0, 0.0), False)
    assert game.coin_counter == 1
    assert game.level.grid[4][16] is None


def test_falling_ends_the_game_and_retry_resets(tmp_path, state):
    path = make_map(tmp_path / "m.bmp", floor=False, pixels={(2, 10): RED})
    game = started(Game(map_files=[path], state=state, surface=pygame.Surface((800, 600))))
    for _ in range(200):
        game.step(0.1, Controls(), (-1000.0, -1000.0), False)
        if game.state.game_over:
            break
    assert game.state.game_over is True
    assert game.mario.dead is True

    game.step(0.1, Controls(), (-1000.0, -1000.0), False)
    center = game.state.game_over_screen.retry_button.bounds.center
    game.step(0.1, Controls(), center, True)
    assert game.state.game_over is False
    assert game.mario.dead is False
    assert game.mario.rect.position == (2 * CELL_SIZE, 10 * CELL_SIZE)
    assert game.just_started is True


def test_retry_acts_once_per_press(tmp_path, state):
    path = make_map(tmp_path / "m.bmp", pixels={(2, 16): RED})
    game = started(Game(map_files=[path], state=state))
    game.state.game_over_screen.retry_button.position = (100.0, 100.0)
    game.state.game_over = True
    game.collision.coins = 5
    game.handle_mouse_clicks((150.0, 130.0), True)
    assert game.state.game_over is False
    assert game.coin_counter == 0

    game.state.game_over = True
    game.collision.coins = 5
    game.handle_mouse_clicks((150.0, 130.0), True)
    assert game.state.game_over is True
    assert game.coin_counter == 5

    game.handle_mouse_clicks((150.0, 130.0), False)
    assert game.mouse_was_pressed is False


def test_flag_victory_continue_and_final_menu(tmp_path, state):
    path = make_map(tmp_path / "m.bmp", pixels={(3, 16): RED, (4, 10): GOLD})
    game = started(
        Game(map_files=[path, path], state=state, surface=pygame.Surface((800, 600)))
    )
    game.step(0.05, Controls(), (-1000.0, -1000.0), False)
    assert game.state.victory is True
    assert game.mario.win is True

    center = game.state.victory_screen.continue_button.bounds.center
    game.handle_mouse_clicks(center, True)
    assert game.current_map_index == 1
    assert game.state.victory is False

    game.handle_mouse_clicks(center, False)
    game.state.victory = True
    game.handle_mouse_clicks(center, True)
    assert game.state.final_victory is True
    assert game.current_map_index == 1

    game.mouse_was_pressed = False
    game.step(0.05, Controls(), (-1000.0, -1000.0), False)
    menu_center = game.state.final_victory_screen.menu_button.bounds.center
    game.step(0.05, Controls(), menu_center, True)
    assert game.state.final_victory is False
    assert game.state.show_start_screen is True
    assert game.current_map_index == 0


def test_dead_goomba_is_removed_after_a_second(tmp_path):
    path = make_map(tmp_path / "m.bmp", pixels={(2, 16): RED, (30, 15): GOOMBA})
    game = started(Game(map_files=[path]))
    assert len(game.goombas) == 1
    game.goombas[0].kill()
    for _ in range(12):
        game.step(0.1, Controls(), (0.0, 0.0), False)
    assert game.goombas == []


def test_reset_game_restores_the_map(tmp_path):
    path = make_map(tmp_path / "m.bmp", pixels={(2, 16): RED, (30, 15): GOOMBA, (10, 5): YELLOW})
    game = Game(map_files=[path])
    game.level.grid[10][5] = None
    game.goombas.clear()
    game.collision.coins = 3
    game.mario.dead = True
    game.mario.vertical_speed = 250.0
    game.reset_game(str(path))
    assert game.level.grid[10][5] is not None
    assert len(game.goombas) == 1
    assert game.coin_counter == 0
    assert game.mario.dead is False
    assert game.mario.vertical_speed == 0.0


def test_run_requires_a_surface(tmp_path):
    path = make_map(tmp_path / "m.bmp", pixels={(2, 16): RED})
    game = Game(map_files=[path])
    with pytest.raises(RuntimeError):
        game.run()