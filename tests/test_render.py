from __future__ import annotations

import pygame
import pytest

from dino_runner.game import RunnerGame
from dino_runner.render import Renderer


@pytest.fixture
def surface(config):
    pygame.font.init()
    yield pygame.Surface((config.viewport.width, config.viewport.height))
    pygame.font.quit()


def test_draws_placeholder_dino_and_background(surface, config, quiet_game):
    renderer = Renderer(surface, config)
    quiet_game.advance_frame()
    renderer.draw(quiet_game.state)

    player = quiet_game.state.player
    inside = (int(player.x) + player.width // 2, int(player.y) + player.height // 2)
    assert surface.get_at(inside)[:3] == config.render.ink_color
    assert surface.get_at((300, 40))[:3] == config.render.background_color


def test_game_over_overlay_and_status_lines(surface, config, quiet_game):
    renderer = Renderer(surface, config)
    renderer.status_source = lambda: ["socket 127.0.0.1:4789 offline"]
    quiet_game.on_jump()
    quiet_game.end_game()
    renderer.draw(quiet_game.state, fps=60.0)

    width, height = surface.get_size()
    centre = (width // 2, height // 2 + config.render.game_over_padding)
    assert surface.get_at(centre)[:3] == config.render.ink_color
