"""Which screen is showing, and the rules that end a level."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import pygame

from brickquest.geometry import View
from brickquest.ui.final_victory import FinalVictoryScreen
from brickquest.ui.game_over import GameOverScreen
from brickquest.ui.hud import HUD
from brickquest.ui.start_screen import StartScreen
from brickquest.ui.victory_screen import VictoryScreen
from brickquest.ui.widgets import FontLoader

FONT_FILE = "fonts/mario.ttf"
TITLE_FONT_FILE = "fonts/mario2.TTF"
COIN_IMAGE = "images/Coin/Coin2.png"
COIN_SCALE = 2.5
STOMP_BOUNCE = -400.0


class FontError(RuntimeError):
    """Raised when a font file cannot be loaded."""


def _font_loader(path: Path) -> FontLoader:
    if not pygame.font.get_init():
        pygame.font.init()
    if not path.is_file():
        raise FontError(f"cannot load font: {path.name}")

    @lru_cache(maxsize=None)
    def load(size: int) -> pygame.font.Font:
        return pygame.font.Font(str(path), size)

    try:
        load(12)
    except (OSError, pygame.error) as exc:
        raise FontError(f"cannot load font: {path.name}") from exc
    return load


class GameState:
    """Flags for the current screen plus the screens themselves."""

    def __init__(
        self,
        font: FontLoader | None = None,
        title_font: FontLoader | None = None,
        coin_image: pygame.Surface | None = None,
    ) -> None:
        self.show_start_screen = True
        self.game_over = False
        self.victory = False
        self.final_victory = False

        self.hud: HUD | None = None
        self.start_screen: StartScreen | None = None
        self.game_over_screen: GameOverScreen | None = None
        self.victory_screen: VictoryScreen | None = None
        self.final_victory_screen: FinalVictoryScreen | None = None
        self.coin_image = coin_image

        if font is not None and title_font is not None and coin_image is not None:
            self._build_screens(font, title_font, coin_image)

    def _build_screens(
        self, font: FontLoader, title_font: FontLoader, coin_image: pygame.Surface
    ) -> None:
        self.coin_image = coin_image
        self.hud = HUD(font)
        self.start_screen = StartScreen(font, title_font)
        self.game_over_screen = GameOverScreen(font, title_font, coin_image)
        self.victory_screen = VictoryScreen(font, title_font, coin_image)
        self.final_victory_screen = FinalVictoryScreen(font, title_font)

    def load(self, assets_dir, textures) -> None:
        """Load the fonts and the coin image from the assets directory."""
        root = Path(assets_dir)
        font = _font_loader(root / FONT_FILE)
        title_font = _font_loader(root / TITLE_FONT_FILE)
        coin = textures.get(COIN_IMAGE)
        width, height = coin.get_size()
        coin_image = pygame.transform.scale(
            coin, (round(width * COIN_SCALE), round(height * COIN_SCALE))
        )
        self._build_screens(font, title_font, coin_image)

    def draw(self, renderer, view: View, coin_counter: int, mouse_pos) -> None:
        if self.hud is None:
            raise RuntimeError("game state has no screens loaded")
        if self.show_start_screen:
            self.start_screen.draw(renderer, view, mouse_pos)
        elif self.final_victory:
            self.final_victory_screen.draw(renderer, view, mouse_pos)
        elif self.victory:
            self.victory_screen.draw(renderer, view, coin_counter, mouse_pos)
        elif self.game_over:
            self.game_over_screen.draw(renderer, view, coin_counter, mouse_pos)
        else:
            self.hud.draw(renderer, view, coin_counter)

    def _lose(self, mario) -> None:
        self.game_over = True
        self.victory = False
        mario.dead = True

    def check_game_over(self, view: View, mario, goombas, level) -> None:
        """Apply falling, reaching the flag and touching enemies."""
        bottom = view.center[1] + view.size[1] / 2.0
        if mario.rect.y > bottom:
            self._lose(mario)

        if mario.rect.intersects(level.flag_rect()) and not self.game_over and not self.victory:
            self.victory = True
            self.game_over = False
            mario.win = True

        for goomba in goombas:
            if goomba.dead:
                continue
            mario_rect = mario.rect
            goomba_rect = goomba.rect
            if not mario_rect.intersects(goomba_rect) or self.game_over or self.victory:
                continue
            mario_bottom = mario_rect.y + mario_rect.height
            goomba_top = goomba_rect.y
            if mario_bottom - goomba_top > 0 and mario_rect.y < goomba_top and mario_rect.height > 10:
                goomba.kill()
                mario.vertical_speed = STOMP_BOUNCE
            else:
                self._lose(mario)

    def is_start_clicked(self, mouse_pos, pressed: bool) -> bool:
        return self.show_start_screen and self.start_screen.is_clicked(mouse_pos, pressed)

    def is_retry_clicked(self, mouse_pos, pressed: bool) -> bool:
        return (self.game_over and self.game_over_screen.is_retry_clicked(mouse_pos, pressed)) or (
            self.victory and self.victory_screen.is_retry_clicked(mouse_pos, pressed)
        )

    def is_menu_clicked(self, mouse_pos, pressed: bool) -> bool:
        return (
            (self.game_over and self.game_over_screen.is_menu_clicked(mouse_pos, pressed))
            or (self.victory and self.victory_screen.is_menu_clicked(mouse_pos, pressed))
            or self.is_final_victory_menu_clicked(mouse_pos, pressed)
        )

    def is_continue_clicked(self, mouse_pos, pressed: bool) -> bool:
        return (
            self.victory and self.victory_screen.is_continue_clicked(mouse_pos, pressed)
        ) or self.is_final_victory_menu_clicked(mouse_pos, pressed)

    def is_final_victory_menu_clicked(self, mouse_pos, pressed: bool) -> bool:
        return self.final_victory and self.final_victory_screen.is_menu_clicked(mouse_pos, pressed)

    def reset_flags(self) -> None:
        """Leave the game-over and victory screens."""
        self.game_over = False
        self.victory = False