"""Paints the game state onto a pygame surface."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

import pygame

from .config import GameConfig
from .game import GameState

logger = logging.getLogger(__name__)


class Renderer:
    """Draws one frame of the game at logical (unscaled) resolution.

    Sprites come from ``assets/sprites/<name>.png`` when present; anything
    missing is drawn as a flat rectangle of the catalogue size.
    """

    def __init__(self, surface: pygame.Surface, config: GameConfig) -> None:
        self.surface = surface
        self.config = config
        self.cfg = config.render
        self.sprites = config.sprites
        self.asset_root = Path(__file__).resolve().parent.parent / "assets"
        self._sprite_cache: dict[str, Optional[pygame.Surface]] = {}
        self.font = self._load_font()
        self.status_source: Optional[Callable[[], list[str]]] = None

    def draw(self, state: GameState, fps: float = 0.0) -> None:
        self.surface.fill(self.cfg.background_color)
        self._draw_ground(state)
        for cloud in state.decorations:
            self.paint_sprite(cloud.sprite, cloud.x, cloud.y)
        self.paint_sprite(state.player.sprite, state.player.x, state.player.y)
        self._draw_score(state.score)

        if state.is_running or state.is_game_over:
            for obstacle in (*state.ground_obstacles, *state.aerial_obstacles):
                self.paint_sprite(obstacle.sprite, obstacle.x, obstacle.y)

        if state.is_game_over:
            self._draw_game_over()

        if self.cfg.show_fps:
            self.paint_text(f"fps: {round(fps)}", 0, 0, align="topleft")

        status_lines = self.status_source() if self.status_source else []
        height = self.surface.get_height()
        for idx, line in enumerate(status_lines):
            self.paint_text(line, 0, height - idx * (self.cfg.font_size + 2), align="bottomleft")

    def _draw_ground(self, state: GameState) -> None:
        if self._sprite("ground") is None:
            y = int(state.ground_y + self.sprites.ground.h / 2)
            pygame.draw.line(self.surface, self.cfg.ink_color, (0, y), (self.surface.get_width(), y), 1)
            return
        for x in state.ground_tiles:
            self.paint_sprite("ground", x, state.ground_y)

    def _draw_score(self, score: int) -> None:
        self.paint_text(str(score).zfill(5), self.surface.get_width(), 0, align="topright")

    def _draw_game_over(self) -> None:
        width, height = self.surface.get_size()
        padding = self.cfg.game_over_padding
        icon = self.sprites.replay_icon
        self.paint_text("G A M E  O V E R", width / 2, height / 2 - padding, align="midbottom")
        self.paint_sprite("replay_icon", width / 2 - icon.w / 2, height / 2 - icon.h / 2 + padding)

    def paint_sprite(self, name: str, x: float, y: float) -> None:
        image = self._sprite(name)
        if image is not None:
            self.surface.blit(image, (int(x), int(y)))
            return
        size = self.sprites.size_of(name)
        color = self.cfg.cloud_color if name == "cloud" else self.cfg.ink_color
        pygame.draw.rect(self.surface, color, pygame.Rect(int(x), int(y), size.w, size.h))

    def paint_text(self, text: str, x: float, y: float, align: str = "topleft") -> None:
        surf = self.font.render(text, True, self.cfg.ink_color)
        rect = surf.get_rect(**{align: (int(x), int(y))})
        self.surface.blit(surf, rect)

    def _sprite(self, name: str) -> Optional[pygame.Surface]:
        if name not in self._sprite_cache:
            self._sprite_cache[name] = self._load_sprite(name)
        return self._sprite_cache[name]

    def _load_sprite(self, name: str) -> Optional[pygame.Surface]:
        path = self.asset_root / "sprites" / f"{name}.png"
        if not path.exists():
            logger.debug("Sprite %s missing, drawing placeholder", path)
            return None
        image = pygame.image.load(str(path)).convert_alpha()
        size = self.sprites.size_of(name)
        if image.get_size() != (size.w, size.h):
            image = pygame.transform.scale(image, (size.w, size.h))
        return image

    def _load_font(self) -> pygame.font.Font:
        font_dir = self.asset_root / "fonts"
        if font_dir.is_dir():
            candidates = sorted(font_dir.glob("*.ttf")) + sorted(font_dir.glob("*.otf"))
            if candidates:
                try:
                    return pygame.font.Font(str(candidates[0]), self.cfg.font_size)
                except (OSError, pygame.error) as exc:
                    logger.warning("Could not load font %s: %s", candidates[0], exc)
        return pygame.font.Font(None, self.cfg.font_size + 6)
