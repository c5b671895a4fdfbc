"""Collision checks between the dino and the nearest obstacles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from .entities import Entity

if TYPE_CHECKING:
    from .game import GameState


def nearest(instances: Sequence[Entity]) -> Optional[Entity]:
    return instances[0] if instances else None


def detect_collision(state: "GameState") -> bool:
    """Test the dino against slot 0 of each obstacle sequence.

    Obstacles further back cannot be reached before the front one leaves.
    """
    candidates = [nearest(state.ground_obstacles), nearest(state.aerial_obstacles)]
    return state.player.overlaps(candidates)
