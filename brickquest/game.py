"""The game loop: levels in sequence, screens and player input."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

import pygame

from brickquest.camera import Camera
from brickquest.collision import Collision
from brickquest.config import (
    BACKGROUND_COLOR,
    FRAMERATE,
    MAP_FILES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TITLE,
)
from brickquest.geometry import View
from brickquest.goomba import Goomba
from brickquest.level import Level
from brickquest.mario import Controls, Mario
from brickquest.renderer import Renderer
from brickquest.textures import TextureManager
from brickquest.ui.state import GameState

GOOMBA_LINGER = 1.0


class Game:
    """Owns the level, the characters and the screens, and advances them frame by frame."""

    def __init__(
        self,
        assets_dir: str | Path = ".",
        map_files: Sequence[str | Path] = MAP_FILES,
        textures: TextureManager | None = None,
        state: GameState | None = None,
        surface: pygame.Surface | None = None,
    ) -> None:
        if not map_files:
            raise ValueError("at least one map file is needed")
        self.assets_dir = Path(assets_dir)
        self.map_files = tuple(str(path) for path in map_files)
        self.textures = textures
        self.state = state if state is not None else GameState()

        self.level = Level()
        self.collision = Collision(self.level)
        self.mario = Mario(self.collision)
        self.goombas: list[Goomba] = []
        self.camera = Camera()
        self.view = View(
            center=(SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 2.0),
            size=(float(SCREEN_WIDTH), float(SCREEN_HEIGHT)),
        )
        self.window_size = surface.get_size() if surface is not None else (SCREEN_WIDTH, SCREEN_HEIGHT)
        self.renderer = Renderer(surface, self.view) if surface is not None else None

        self.current_map_index = 0
        self.just_started = False
        self.mouse_was_pressed = False
        self._restart_clock = False

        self._load_map(self.map_files[0])

    @property
    def coin_counter(self) -> int:
        return self.collision.coins

    @property
    def is_last_map(self) -> bool:
        return self.current_map_index == len(self.map_files) - 1

    def _load_map(self, map_file: str) -> None:
        spawn = self.level.load(self.assets_dir / map_file, self.textures)
        if spawn.mario_position is not None:
            if self.textures is not None:
                self.mario.load_textures(self.textures)
            self.mario.set_position(*spawn.mario_position)
        for position in spawn.goomba_positions:
            goomba = Goomba(self.collision, position)
            if self.textures is not None:
                goomba.load_textures(self.textures)
            self.goombas.append(goomba)

    def reset_game(self, map_file: str) -> None:
        """Rebuild the given map and put the player back at its start."""
        self.state.reset_flags()
        self.collision.coins = 0
        self.goombas.clear()
        self._load_map(map_file)
        self.mario.reset_vertical_speed()
        self.mario.dead = False
        self.mario.win = False

    def _restart(self) -> None:
        self.reset_game(self.map_files[self.current_map_index])
        self.just_started = True
        self._restart_clock = True

    def handle_mouse_clicks(self, mouse_pos, pressed: bool) -> None:
        """React to the retry, menu and continue buttons, once per press."""
        state = self.state
        if state.is_retry_clicked(mouse_pos, pressed):
            if not self.mouse_was_pressed:
                self._restart()
            self.mouse_was_pressed = True
        elif state.is_menu_clicked(mouse_pos, pressed):
            if not self.mouse_was_pressed:
                state.show_start_screen = True
                state.game_over = False
                self.current_map_index = 0
                self._restart()
            self.mouse_was_pressed = True
        elif state.is_continue_clicked(mouse_pos, pressed):
            if not self.mouse_was_pressed:
                if self.is_last_map:
                    state.final_victory = True
                else:
                    state.victory = False
                    self.current_map_index = (self.current_map_index + 1) % len(self.map_files)
                    self._restart()
            self.mouse_was_pressed = True
        else:
            self.mouse_was_pressed = False

    def _update_camera(self) -> None:
        self.camera.update_view(self.view, self.window_size, self.mario.rect, self.level)

    def _draw_world(self) -> None:
        if self.renderer is not None:
            self.level.draw(self.renderer)
            self.mario.draw(self.renderer)

    def _step_final_victory(self, mouse_pos, pressed: bool) -> None:
        self._update_camera()
        self._draw_world()
        screen = self.state.final_victory_screen
        if self.renderer is not None:
            screen.draw(self.renderer, self.view, mouse_pos)
        if screen.is_menu_clicked(mouse_pos, pressed):
            if not self.mouse_was_pressed:
                self.state.final_victory = False
                self.state.show_start_screen = True
                self.current_map_index = 0
                self._restart()
            self.mouse_was_pressed = True
        else:
            self.mouse_was_pressed = False

    def _step_start_screen(self, mouse_pos, pressed: bool) -> None:
        self._update_camera()
        self._draw_world()
        if self.renderer is not None:
            self.state.draw(self.renderer, self.view, self.coin_counter, mouse_pos)
        if self.state.is_start_clicked(mouse_pos, pressed):
            if not self.mouse_was_pressed:
                self.state.show_start_screen = False
                self.just_started = True
            self.mouse_was_pressed = True
        else:
            self.mouse_was_pressed = False

    def step(self, delta_time: float, controls: Controls | None, mouse_pos, pressed: bool) -> None:
        """Advance one frame and, when a surface is attached, draw it."""
        if self.renderer is not None:
            self.renderer.target.fill(BACKGROUND_COLOR)

        if self.state.final_victory:
            self._step_final_victory(mouse_pos, pressed)
            return
        if self.state.show_start_screen:
            self._step_start_screen(mouse_pos, pressed)
            return
        if self.just_started:
            self.just_started = False
            self._restart_clock = True
            return

        self.mario.update(delta_time, controls or Controls())
        for goomba in self.goombas:
            goomba.update(delta_time)
        self.goombas = [
            goomba
            for goomba in self.goombas
            if not (goomba.dead and goomba.death_timer > GOOMBA_LINGER)
        ]
        self.level.update(delta_time)

        self._update_camera()
        self.state.check_game_over(self.view, self.mario, self.goombas, self.level)

        if self.renderer is not None:
            self._draw_world()
            for goomba in self.goombas:
                if not goomba.dead or goomba.death_timer < GOOMBA_LINGER:
                    goomba.draw(self.renderer)
            self.state.draw(self.renderer, self.view, self.coin_counter, mouse_pos)

        self.handle_mouse_clicks(mouse_pos, pressed)

    def _mouse_world(self, screen_pos: tuple[int, int]) -> tuple[float, float]:
        area = self.view.rect()
        width, height = self.window_size
        return (
            area.x + screen_pos[0] * area.width / width,
            area.y + screen_pos[1] * area.height / height,
        )

    def run(self) -> None:
        """Run the interactive loop until the window is closed."""
        if self.renderer is None:
            raise RuntimeError("the game has no surface to draw on")
        clock = pygame.time.Clock()
        clock.tick()
        while True:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            delta_time = clock.tick(FRAMERATE) / 1000.0
            keys = pygame.key.get_pressed()
            controls = Controls(
                left=bool(keys[pygame.K_LEFT]),
                right=bool(keys[pygame.K_RIGHT]),
                up=bool(keys[pygame.K_UP]),
            )
            mouse_pos = self._mouse_world(pygame.mouse.get_pos())
            pressed = bool(pygame.mouse.get_pressed()[0])
            self.step(delta_time, controls, mouse_pos, pressed)
            if self._restart_clock:
                clock.tick()
                self._restart_clock = False
            pygame.display.flip()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="brickquest", description="Side-scrolling platform game.")
    parser.add_argument("--assets", default="assets", help="directory holding images and fonts")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        textures = TextureManager(args.assets)
        state = GameState()
        state.load(args.assets, textures)
        Game(args.assets, MAP_FILES, textures, state, surface).run()
    finally:
        pygame.quit()
    return 0