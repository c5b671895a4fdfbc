"""Score keeping and level-banded difficulty escalation."""

from __future__ import annotations

import math
from dataclasses import replace

from .config import DifficultyParameters

POINTS_PER_LEVEL = 100
MIN_LEGS_RATE = 3


def level_for_score(score: int) -> int:
    return score // POINTS_PER_LEVEL


def score_due(frame_count: int, params: DifficultyParameters) -> bool:
    return frame_count % params.score_increase_rate == 0


def escalate(params: DifficultyParameters, level: int) -> DifficultyParameters:
    """Return the parameters for having just reached ``level``.

    Levels 5-7 add one px/frame of ground speed. From level 8 on, speed grows
    by 10% and the cactus cadence tightens by 2% on every level-up, with no
    ceiling. Levels up to 4 leave everything unchanged.
    """
    if 4 < level < 8:
        bg_speed = params.bg_speed + 1
        return replace(params, bg_speed=bg_speed, bird_speed=bg_speed * 0.8)

    if level > 7:
        bg_speed = math.ceil(params.bg_speed * 1.1)
        legs_rate = params.dino_legs_rate
        if level % 2 == 0 and legs_rate > MIN_LEGS_RATE:
            legs_rate -= 1
        return replace(
            params,
            bg_speed=bg_speed,
            bird_speed=bg_speed * 0.9,
            cacti_spawn_rate=max(1, math.floor(params.cacti_spawn_rate * 0.98)),
            dino_legs_rate=legs_rate,
        )

    return params
