"""Configuration data structures for the dino runner."""

from __future__ import annotations

from dataclasses import dataclass, field, fields


@dataclass(frozen=True)
class ViewportConfig:
    """Size of the playfield in logical pixels."""

    width: int = 600
    height: int = 150

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"viewport must be positive, got {self.width}x{self.height}")


@dataclass(frozen=True)
class DifficultyParameters:
    """Speeds and cadences that scale as the level rises.

    Speeds are in pixels per frame, rates in frames per attempt.
    """

    bg_speed: float = 8
    bird_speed: float = 7.2
    cloud_speed: float = 2
    cacti_spawn_rate: int = 50
    bird_spawn_rate: int = 240
    cloud_spawn_rate: int = 200
    dino_legs_rate: int = 6
    bird_wings_rate: int = 15
    dino_lift: float = 10
    dino_gravity: float = 0.5
    dino_ground_offset: int = 4
    score_increase_rate: int = 6

    def __post_init__(self) -> None:
        for name in (
            "cacti_spawn_rate",
            "bird_spawn_rate",
            "cloud_spawn_rate",
            "dino_legs_rate",
            "bird_wings_rate",
            "score_increase_rate",
        ):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be a positive frame count, got {value}")
        if self.bg_speed < 0 or self.bird_speed < 0 or self.cloud_speed < 0:
            raise ValueError("speeds cannot be negative")
        if self.dino_gravity <= 0:
            raise ValueError("dino_gravity must be positive")


@dataclass(frozen=True)
class SpriteSize:
    """On-screen size of one sprite (already halved from the sheet)."""

    w: int
    h: int

    def __post_init__(self) -> None:
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"sprite size must be positive, got {self.w}x{self.h}")


@dataclass(frozen=True)
class SpriteCatalog:
    """Static geometry of every sprite, used for placement and hitboxes."""

    dino: SpriteSize = SpriteSize(44, 47)
    dino_left_leg: SpriteSize = SpriteSize(44, 47)
    dino_right_leg: SpriteSize = SpriteSize(44, 47)
    dino_duck_left_leg: SpriteSize = SpriteSize(59, 30)
    dino_duck_right_leg: SpriteSize = SpriteSize(59, 30)
    cactus: SpriteSize = SpriteSize(23, 48)
    cactus_double: SpriteSize = SpriteSize(49, 33)
    cactus_double_b: SpriteSize = SpriteSize(51, 48)
    cactus_triple: SpriteSize = SpriteSize(75, 33)
    bird_up: SpriteSize = SpriteSize(46, 34)
    bird_down: SpriteSize = SpriteSize(46, 30)
    cloud: SpriteSize = SpriteSize(46, 14)
    ground: SpriteSize = SpriteSize(1200, 12)
    replay_icon: SpriteSize = SpriteSize(36, 32)
    bird_wing_y_shift: int = 6

    def size_of(self, name: str) -> SpriteSize:
        value = getattr(self, name, None)
        if not isinstance(value, SpriteSize):
            raise KeyError(f"unknown sprite {name!r}")
        return value

    def names(self) -> list[str]:
        return [f.name for f in fields(self) if isinstance(getattr(self, f.name), SpriteSize)]

    @property
    def cactus_variants(self) -> tuple[str, ...]:
        return ("cactus", "cactus_double", "cactus_double_b", "cactus_triple")

    @property
    def bird_max_height(self) -> int:
        return max(self.bird_up.h, self.bird_down.h)


@dataclass(frozen=True)
class RenderingConfig:
    """Visual parameters for the pygame renderer."""

    scale: int = 2
    background_color: tuple[int, int, int] = (247, 247, 247)
    ink_color: tuple[int, int, int] = (83, 83, 83)
    cloud_color: tuple[int, int, int] = (218, 218, 218)
    font_size: int = 12
    game_over_padding: int = 15
    show_fps: bool = False


@dataclass(frozen=True)
class SocketInputConfig:
    """Settings for the JSON-over-TCP input interface."""

    host: str = "127.0.0.1"
    port: int = 4789
    backlog: int = 1
    read_timeout: float = 0.5


@dataclass(frozen=True)
class GameConfig:
    """High-level configuration of the game."""

    target_fps: int = 60
    dino_x: int = 25
    hitbox_padding: int = 2
    cloud_y_range: tuple[int, int] = (20, 80)
    bird_clearance: int = 5
    viewport: ViewportConfig = field(default_factory=ViewportConfig)
    difficulty: DifficultyParameters = field(default_factory=DifficultyParameters)
    sprites: SpriteCatalog = field(default_factory=SpriteCatalog)
    render: RenderingConfig = field(default_factory=RenderingConfig)
    socket_input: SocketInputConfig = field(default_factory=SocketInputConfig)

    def __post_init__(self) -> None:
        if self.target_fps <= 0:
            raise ValueError(f"target_fps must be positive, got {self.target_fps}")
        if self.hitbox_padding < 0:
            raise ValueError("hitbox_padding cannot be negative")
        low, high = self.cloud_y_range
        if low > high:
            raise ValueError(f"cloud_y_range is inverted: {self.cloud_y_range}")
