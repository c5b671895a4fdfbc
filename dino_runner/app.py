"""Window, clock and event pump around the simulation."""

from __future__ import annotations

import logging
import random
from typing import Optional

import pygame

from .audio import CuePlayer, SoundCuePlayer
from .config import GameConfig
from .game import RunnerGame
from .input import InputProvider, KeyboardInput
from .render import Renderer

logger = logging.getLogger(__name__)


class RunnerApp:
    """Drives :class:`RunnerGame` at the target frame rate and shows it."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_provider: Optional[InputProvider] = None,
        cues: Optional[CuePlayer] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.config = config or GameConfig()
        viewport = self.config.viewport
        scale = self.config.render.scale
        self.screen = pygame.display.set_mode((viewport.width * scale, viewport.height * scale))
        pygame.display.set_caption("Dino Runner")
        self.canvas = pygame.Surface((viewport.width, viewport.height))

        self.clock = pygame.time.Clock()
        self.game = RunnerGame(self.config, cues=cues or SoundCuePlayer(), rng=rng)
        self.input_provider = input_provider or KeyboardInput()
        self.renderer = Renderer(self.canvas, self.config)
        self.renderer.status_source = self._get_input_status_lines
        self.running = True

    def run(self) -> None:
        logger.info("Press Space or Up to start")
        while self.running:
            self.clock.tick(self.config.target_fps)
            events = pygame.event.get()
            self._handle_events(events)
            if not self.running:
                break

            for logical in self.input_provider.poll(events):
                self.game.on_input(logical)

            self.game.advance_frame()
            self.renderer.draw(self.game.state, self.clock.get_fps())
            pygame.transform.scale(self.canvas, self.screen.get_size(), self.screen)
            pygame.display.flip()

        if hasattr(self.input_provider, "shutdown"):
            self.input_provider.shutdown()  # type: ignore[attr-defined]

        pygame.quit()

    def _handle_events(self, events: list[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def _get_input_status_lines(self) -> list[str]:
        status = getattr(self.input_provider, "status_text", None)
        if not status:
            return []
        if isinstance(status, (list, tuple)):
            return [str(line) for line in status]
        return [str(status)]
