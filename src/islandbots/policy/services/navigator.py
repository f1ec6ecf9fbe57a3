"""Single-step movement: random wandering and greedy steps toward a target."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional

from islandbots.common.geometry import DIRECTIONS, Coordinate, Direction

if TYPE_CHECKING:
    from .actuator import Actuator


class Navigator:
    """Picks directions using the agent's own random source."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    @property
    def rng(self) -> random.Random:
        return self._rng

    def random_direction(self) -> Direction:
        return self._rng.choice(DIRECTIONS)

    def random_move(self, actuator: Actuator) -> bool:
        """Try to move one step in a uniformly random direction."""
        return actuator.try_move(self.random_direction())

    def step_toward(self, actuator: Actuator, origin: Coordinate, target: Coordinate) -> bool:
        """Try to move one step from ``origin`` toward ``target``.

        No pathfinding: if that single step is blocked the agent stays put.
        """
        return actuator.try_move(origin.direction_to(target))

    def coin_flip(self, chance: float = 0.5) -> bool:
        return self._rng.random() < chance
