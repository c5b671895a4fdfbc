"""Frame-cadenced spawning of clouds, cacti and birds."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Optional

from .config import DifficultyParameters, GameConfig
from .entities import Bird, Cactus, Cloud

if TYPE_CHECKING:
    from .game import GameState

logger = logging.getLogger(__name__)

# birds may appear once the level is strictly above this
BIRD_MIN_LEVEL = 3


class SpawnScheduler:
    """Decides once per frame whether each category gets a new instance.

    Every random decision goes through ``rng`` so a seeded ``random.Random``
    reproduces a run exactly.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.sprites = config.sprites
        self.rng = rng or random.Random()

    def coin_flip(self) -> bool:
        return self.rng.random() < 0.5

    def spawn_decoration(self, state: "GameState", params: DifficultyParameters) -> Optional[Cloud]:
        if state.frame_count % params.cloud_spawn_rate != 0:
            return None
        low, high = self.config.cloud_y_range
        cloud = Cloud(self.sprites, x=self.config.viewport.width, y=self.rng.randint(low, high))
        state.decorations.append(cloud)
        return cloud

    def spawn_ground_obstacle(self, state: "GameState", params: DifficultyParameters) -> Optional[Cactus]:
        if state.frame_count % params.cacti_spawn_rate != 0:
            return None
        # never start a cactus while a bird is on screen
        if state.aerial_obstacles or not self.coin_flip():
            return None

        variant = self.rng.choice(self.sprites.cactus_variants)
        height = self.sprites.size_of(variant).h
        cactus = Cactus(
            self.sprites,
            variant,
            x=self.config.viewport.width,
            y=self.config.viewport.height - height - 2,
            hitbox_padding=self.config.hitbox_padding,
        )
        state.ground_obstacles.append(cactus)
        logger.debug("Spawned %s at frame %d", variant, state.frame_count)
        return cactus

    def spawn_aerial_obstacle(self, state: "GameState", params: DifficultyParameters) -> Optional[Bird]:
        if state.level <= BIRD_MIN_LEVEL:
            return None
        if state.frame_count % params.bird_spawn_rate != 0:
            return None
        if not self.coin_flip():
            return None

        bird = Bird(
            self.sprites,
            x=self.config.viewport.width,
            y=self.bird_y(params),
            hitbox_padding=self.config.hitbox_padding,
        )
        state.aerial_obstacles.append(bird)
        logger.debug("Spawned bird at frame %d", state.frame_count)
        return bird

    def bird_y(self, params: DifficultyParameters) -> float:
        """Top edge that keeps a bird clear of a ducking dino by ``bird_clearance`` px."""
        return (
            self.config.viewport.height
            - self.sprites.bird_max_height
            - self.sprites.bird_wing_y_shift
            - self.config.bird_clearance
            - self.sprites.dino_duck_left_leg.h
            - params.dino_ground_offset
        )
