"""Tiling scroll of the ground texture."""

from __future__ import annotations


class GroundScroll:
    """Two copies of the ground texture leapfrogging leftwards.

    ``advance`` returns the x offsets at which a tile should be painted this
    frame; the first tile is always painted at the offset it had before moving.
    """

    def __init__(self, texture_width: int, viewport_width: int, x: float = 0.0) -> None:
        if texture_width <= 0:
            raise ValueError(f"texture_width must be positive, got {texture_width}")
        self.texture_width = texture_width
        self.viewport_width = viewport_width
        self.x = x

    def advance(self, speed: float) -> list[float]:
        tiles = [self.x]
        self.x -= speed

        # second tile fills the gap once the first no longer reaches the right edge
        if self.x <= -self.texture_width + self.viewport_width:
            tiles.append(self.x + self.texture_width)
            if self.x <= -self.texture_width:
                self.x = -speed

        return tiles
