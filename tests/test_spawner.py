from __future__ import annotations

import random

from dino_runner.entities import Bird, Dino
from dino_runner.game import RunnerGame
from dino_runner.spawner import SpawnScheduler


def scheduler_and_state(config, rng):
    game = RunnerGame(config, rng=rng)
    game.reset_game()
    return SpawnScheduler(config, rng), game.state, game.baseline


def test_attempts_only_on_cadence_frames(config, fixed_random):
    scheduler, state, params = scheduler_and_state(config, fixed_random(0.0))
    spawned_frames = []
    for frame in range(1, 201):
        state.frame_count = frame
        if scheduler.spawn_ground_obstacle(state, params) is not None:
            spawned_frames.append(frame)
    assert spawned_frames == [50, 100, 150, 200]


def test_cactus_starts_at_right_edge_on_the_ground(config, fixed_random):
    scheduler, state, params = scheduler_and_state(config, fixed_random(0.0))
    state.frame_count = params.cacti_spawn_rate
    cactus = scheduler.spawn_ground_obstacle(state, params)
    assert cactus is not None
    assert cactus.x == config.viewport.width
    assert cactus.y + cactus.height == config.viewport.height - 2
    assert state.ground_obstacles == [cactus]


def test_failed_coin_flip_spawns_nothing(config, fixed_random):
    scheduler, state, params = scheduler_and_state(config, fixed_random(0.99))
    state.frame_count = params.cacti_spawn_rate
    assert scheduler.spawn_ground_obstacle(state, params) is None
    assert state.ground_obstacles == []


def test_no_cactus_while_a_bird_is_on_screen(config, fixed_random):
    scheduler, state, params = scheduler_and_state(config, fixed_random(0.0))
    state.aerial_obstacles.append(Bird(config.sprites, x=300, y=50))
    state.frame_count = params.cacti_spawn_rate
    assert scheduler.spawn_ground_obstacle(state, params) is None


def test_birds_never_spawn_up_to_level_three(config, fixed_random):
    scheduler, state, params = scheduler_and_state(config, fixed_random(0.0))
    for level in range(4):
        state.level = level
        for frame in range(1, params.bird_spawn_rate * 5 + 1):
            state.frame_count = frame
            assert scheduler.spawn_aerial_obstacle(state, params) is None
    assert state.aerial_obstacles == []


def test_birds_spawn_from_level_four(config, fixed_random):
    scheduler, state, params = scheduler_and_state(config, fixed_random(0.0))
    state.level = 4
    state.frame_count = params.bird_spawn_rate
    bird = scheduler.spawn_aerial_obstacle(state, params)
    assert bird is not None
    assert bird.x == config.viewport.width
    assert bird.y == scheduler.bird_y(params)


def test_bird_clears_a_ducking_dino_but_hits_a_standing_one(config):
    params = config.difficulty
    scheduler = SpawnScheduler(config)
    base_y = config.viewport.height - params.dino_ground_offset

    ducking = Dino(config.sprites, x=100, base_y=base_y, hitbox_padding=config.hitbox_padding)
    ducking.duck(True)
    ducking.advance(params)
    standing = Dino(config.sprites, x=100, base_y=base_y, hitbox_padding=config.hitbox_padding)
    standing.advance(params)

    bird = Bird(config.sprites, x=100, y=scheduler.bird_y(params), hitbox_padding=config.hitbox_padding)
    assert standing.overlaps([bird])
    for _ in range(40):
        bird.advance(params)
        bird.x = 100
        assert ducking.hitbox().top - bird.hitbox().bottom >= config.bird_clearance
        assert not ducking.overlaps([bird])


def test_clouds_spawn_at_random_height_in_band(config):
    scheduler, state, params = scheduler_and_state(config, random.Random(11))
    low, high = config.cloud_y_range
    for frame in range(1, params.cloud_spawn_rate * 20 + 1):
        state.frame_count = frame
        scheduler.spawn_decoration(state, params)
    assert len(state.decorations) == 20
    assert all(low <= cloud.y <= high for cloud in state.decorations)
    assert all(cloud.x == config.viewport.width for cloud in state.decorations)
