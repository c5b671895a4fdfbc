"""Moving game objects: the dino, cacti, birds and clouds."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol

import pygame

from .config import DifficultyParameters, SpriteCatalog


class Entity(Protocol):
    """Anything the engine advances once per frame."""

    x: float
    y: float
    sprite: str

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def advance(self, params: DifficultyParameters) -> None:
        """Move/animate by one frame using the current difficulty."""

    def is_visible(self) -> bool:
        """False once the entity has fully left the viewport."""

    def hitbox(self) -> pygame.Rect: ...


def make_hitbox(x: float, y: float, width: int, height: int, padding: int = 0) -> pygame.Rect:
    rect = pygame.Rect(int(round(x)), int(round(y)), width, height)
    if padding:
        rect = rect.inflate(-2 * padding, -2 * padding)
    return rect


def progress_instances(instances: list, params: DifficultyParameters) -> None:
    """Advance every instance and drop the ones that scrolled off the left edge.

    Iterates backwards so deleting does not skip the next element.
    """
    for index in range(len(instances) - 1, -1, -1):
        instance = instances[index]
        instance.advance(params)
        if not instance.is_visible():
            del instances[index]


class Dino:
    """The runner. Jumps with a lift/gravity arc and alternates legs on the ground."""

    def __init__(self, sprites: SpriteCatalog, x: float, base_y: float, hitbox_padding: int = 0) -> None:
        self.sprites = sprites
        self.x = x
        self.base_y = base_y
        self.hitbox_padding = hitbox_padding
        self.reset_to_baseline()

    def reset_to_baseline(self) -> None:
        self.is_ducking = False
        self.leg_frames = 0
        self.leg_showing = "left"
        self.sprite = "dino_left_leg"
        self.vertical_velocity: Optional[float] = None
        self.relative_y = 0.0

    @property
    def width(self) -> int:
        return self.sprites.size_of(self.sprite).w

    @property
    def height(self) -> int:
        return self.sprites.size_of(self.sprite).h

    @property
    def y(self) -> float:
        # relative_y is negative while airborne
        return self.base_y - self.height + self.relative_y

    @property
    def on_ground(self) -> bool:
        return self.vertical_velocity is None

    def jump(self, lift: float) -> bool:
        """Start a jump; refused while already airborne."""
        if not self.on_ground:
            return False
        self.vertical_velocity = -lift
        return True

    def duck(self, active: bool) -> None:
        self.is_ducking = bool(active)

    def advance(self, params: DifficultyParameters) -> None:
        if self.vertical_velocity is not None:
            self.vertical_velocity += params.dino_gravity
            self.relative_y += self.vertical_velocity

        if self.relative_y > 0:
            self.vertical_velocity = None
            self.relative_y = 0.0

        self._pick_sprite(params.dino_legs_rate)

    def _pick_sprite(self, legs_rate: int) -> None:
        if self.relative_y < 0:
            self.sprite = "dino"
            return

        if self.leg_frames >= legs_rate:
            self.leg_showing = "right" if self.leg_showing == "left" else "left"
            self.leg_frames = 0

        if self.is_ducking:
            self.sprite = f"dino_duck_{self.leg_showing}_leg"
        else:
            self.sprite = f"dino_{self.leg_showing}_leg"
        self.leg_frames += 1

    def is_visible(self) -> bool:
        return True

    def hitbox(self) -> pygame.Rect:
        return make_hitbox(self.x, self.y, self.width, self.height, self.hitbox_padding)

    def overlaps(self, candidates: Iterable[Optional[Entity]]) -> bool:
        """True if any non-empty candidate's hitbox intersects ours."""
        own = self.hitbox()
        return any(candidate is not None and own.colliderect(candidate.hitbox()) for candidate in candidates)


class Cactus:
    """Ground obstacle; scrolls with the ground."""

    def __init__(
        self,
        sprites: SpriteCatalog,
        variant: str,
        x: float = 0.0,
        y: float = 0.0,
        hitbox_padding: int = 0,
    ) -> None:
        if variant not in sprites.cactus_variants:
            raise ValueError(f"unknown cactus variant {variant!r}")
        self.sprites = sprites
        self.sprite = variant
        self.x = x
        self.y = y
        self.hitbox_padding = hitbox_padding

    @property
    def width(self) -> int:
        return self.sprites.size_of(self.sprite).w

    @property
    def height(self) -> int:
        return self.sprites.size_of(self.sprite).h

    def advance(self, params: DifficultyParameters) -> None:
        self.x -= params.bg_speed

    def is_visible(self) -> bool:
        return self.x + self.width > 0

    def hitbox(self) -> pygame.Rect:
        return make_hitbox(self.x, self.y, self.width, self.height, self.hitbox_padding)


class Bird:
    """Aerial obstacle that flaps between two sprites of different height."""

    def __init__(self, sprites: SpriteCatalog, x: float = 0.0, y: float = 0.0, hitbox_padding: int = 0) -> None:
        self.sprites = sprites
        self.x = x
        self.y = y
        self.hitbox_padding = hitbox_padding
        self.wing_frames = 0
        self.wing_direction = "up"
        self.sprite = "bird_up"

    @property
    def width(self) -> int:
        return self.sprites.size_of(self.sprite).w

    @property
    def height(self) -> int:
        return self.sprites.size_of(self.sprite).h

    def advance(self, params: DifficultyParameters) -> None:
        self.x -= params.bird_speed
        self._flap(params.bird_wings_rate)

    def _flap(self, wings_rate: int) -> None:
        old_height = self.height
        if self.wing_frames >= wings_rate:
            self.wing_direction = "down" if self.wing_direction == "up" else "up"
            self.wing_frames = 0
        self.sprite = f"bird_{self.wing_direction}"
        self.wing_frames += 1

        # keep the body in place when the sprite height changes
        if old_height != self.height:
            shift = self.sprites.bird_wing_y_shift
            self.y += -shift if self.wing_direction == "up" else shift

    def is_visible(self) -> bool:
        return self.x + self.width > 0

    def hitbox(self) -> pygame.Rect:
        return make_hitbox(self.x, self.y, self.width, self.height, self.hitbox_padding)


class Cloud:
    """Background decoration; never collides."""

    sprite = "cloud"

    def __init__(self, sprites: SpriteCatalog, x: float = 0.0, y: float = 0.0) -> None:
        self.sprites = sprites
        self.x = x
        self.y = y

    @property
    def width(self) -> int:
        return self.sprites.cloud.w

    @property
    def height(self) -> int:
        return self.sprites.cloud.h

    def advance(self, params: DifficultyParameters) -> None:
        self.x -= params.cloud_speed

    def is_visible(self) -> bool:
        return self.x + self.width > 0

    def hitbox(self) -> pygame.Rect:
        return make_hitbox(self.x, self.y, self.width, self.height)

