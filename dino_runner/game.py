"""Frame-by-frame simulation and the idle/running/game-over state machine."""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .audio import CuePlayer, NullCuePlayer
from .collision import detect_collision
from .config import DifficultyParameters, GameConfig
from .difficulty import escalate, level_for_score, score_due
from .entities import Bird, Cactus, Cloud, Dino, progress_instances
from .ground import GroundScroll
from .input import INPUT_EVENTS
from .spawner import BIRD_MIN_LEVEL, SpawnScheduler

logger = logging.getLogger(__name__)


class GamePhase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """Everything that changes while the game runs. Owned by ``RunnerGame``."""

    player: Dino
    ground: GroundScroll
    ground_y: float
    ground_obstacles: list[Cactus] = field(default_factory=list)
    aerial_obstacles: list[Bird] = field(default_factory=list)
    decorations: list[Cloud] = field(default_factory=list)
    ground_tiles: list[float] = field(default_factory=list)
    is_running: bool = False
    is_game_over: bool = False
    level: int = 0
    score: int = 0
    frame_count: int = 0


@dataclass
class FrameReport:
    """What happened during one ``advance_frame`` call."""

    ground_tiles: list[float] = field(default_factory=list)
    frozen: bool = False
    collided: bool = False
    leveled_up: bool = False


class RunnerGame:
    """Owns the game state and advances it once per rendered frame.

    The frame driver calls :meth:`advance_frame`; input sources call
    :meth:`on_jump` / :meth:`on_duck` (or :meth:`on_input` with a logical
    event name) between frames.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        cues: Optional[CuePlayer] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.cues = cues or NullCuePlayer()
        self.scheduler = SpawnScheduler(self.config, rng)

        # baseline is frozen; level-ups swap in new values for ``difficulty``
        self.baseline: DifficultyParameters = self.config.difficulty
        self.difficulty: DifficultyParameters = self.baseline

        viewport = self.config.viewport
        sprites = self.config.sprites
        player = Dino(
            sprites,
            x=self.config.dino_x,
            base_y=viewport.height - self.baseline.dino_ground_offset,
            hitbox_padding=self.config.hitbox_padding,
        )
        self.state = GameState(
            player=player,
            ground=GroundScroll(sprites.ground.w, viewport.width),
            ground_y=viewport.height - sprites.ground.h,
        )

    @property
    def phase(self) -> GamePhase:
        if self.state.is_running:
            return GamePhase.RUNNING
        if self.state.is_game_over:
            return GamePhase.GAME_OVER
        return GamePhase.IDLE

    def advance_frame(self) -> FrameReport:
        state = self.state
        if state.is_game_over:
            return FrameReport(ground_tiles=list(state.ground_tiles), frozen=True)

        state.frame_count += 1
        params = self.difficulty

        state.ground_tiles = state.ground.advance(params.bg_speed)
        report = FrameReport(ground_tiles=list(state.ground_tiles))

        progress_instances(state.decorations, params)
        self.scheduler.spawn_decoration(state, params)
        state.player.advance(params)

        if not state.is_running:
            return report

        progress_instances(state.ground_obstacles, params)
        self.scheduler.spawn_ground_obstacle(state, params)

        if state.level > BIRD_MIN_LEVEL:
            progress_instances(state.aerial_obstacles, params)
            self.scheduler.spawn_aerial_obstacle(state, params)

        if detect_collision(state):
            report.collided = True
            self.end_game()
        else:
            report.leveled_up = self._update_score()
        return report

    def on_input(self, event: str) -> None:
        if event == "jump":
            self.on_jump()
        elif event == "duck":
            self.on_duck(True)
        elif event == "stop-duck":
            self.on_duck(False)
        else:
            raise ValueError(f"unknown input event {event!r}; expected one of {INPUT_EVENTS}")

    def on_jump(self) -> bool:
        """Jump, or start a new run when none is in progress."""
        state = self.state
        if state.is_running:
            accepted = state.player.jump(self.difficulty.dino_lift)
            if accepted:
                self.cues.play("jump")
            return accepted

        self.reset_game()
        state.player.jump(self.difficulty.dino_lift)
        self.cues.play("jump")
        return True

    def on_duck(self, active: bool) -> None:
        if self.state.is_running:
            self.state.player.duck(active)

    def reset_game(self) -> None:
        state = self.state
        state.player.reset_to_baseline()
        state.ground_obstacles.clear()
        state.aerial_obstacles.clear()
        state.decorations.clear()
        state.is_game_over = False
        state.is_running = True
        state.level = 0
        state.score = 0
        state.frame_count = 0
        self.difficulty = self.baseline
        logger.info("Run started")

    def end_game(self) -> None:
        state = self.state
        self.cues.play("game-over")
        state.is_running = False
        state.is_game_over = True
        logger.info("Game over at score %d (level %d)", state.score, state.level)

    def _update_score(self) -> bool:
        state = self.state
        if not score_due(state.frame_count, self.difficulty):
            return False

        old_level = state.level
        state.score += 1
        state.level = level_for_score(state.score)
        if state.level == old_level:
            return False

        self.cues.play("level-up")
        self.difficulty = escalate(self.difficulty, state.level)
        logger.info("Reached level %d (speed %s)", state.level, self.difficulty.bg_speed)
        return True
