"""Grid coordinates and the eight-way compass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Slope past which a heading snaps to the nearest cardinal direction (tan 67.5 deg)
CARDINAL_SLOPE = 2.414


class Direction(Enum):
    """Compass headings. North is +y."""

    NORTH = (0, 1)
    NORTHEAST = (1, 1)
    EAST = (1, 0)
    SOUTHEAST = (1, -1)
    SOUTH = (0, -1)
    SOUTHWEST = (-1, -1)
    WEST = (-1, 0)
    NORTHWEST = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


DIRECTIONS: list[Direction] = [
    Direction.NORTH,
    Direction.NORTHEAST,
    Direction.EAST,
    Direction.SOUTHEAST,
    Direction.SOUTH,
    Direction.SOUTHWEST,
    Direction.WEST,
    Direction.NORTHWEST,
]


@dataclass(frozen=True)
class Coordinate:
    """Immutable map location."""

    x: int
    y: int

    def add(self, direction: Direction) -> Coordinate:
        return Coordinate(self.x + direction.dx, self.y + direction.dy)

    def translate(self, dx: int, dy: int) -> Coordinate:
        return Coordinate(self.x + dx, self.y + dy)

    def direction_to(self, other: Coordinate) -> Optional[Direction]:
        """Closest compass heading toward ``other``, or None when it is this cell.

        Headings within 22.5 degrees of an axis snap to the cardinal direction,
        everything else rounds to a diagonal.
        """
        dx = other.x - self.x
        dy = other.y - self.y
        if abs(dx) >= CARDINAL_SLOPE * abs(dy):
            if dx > 0:
                return Direction.EAST
            if dx < 0:
                return Direction.WEST
            return None
        if abs(dy) >= CARDINAL_SLOPE * abs(dx):
            return Direction.NORTH if dy > 0 else Direction.SOUTH
        if dy > 0:
            return Direction.NORTHEAST if dx > 0 else Direction.NORTHWEST
        return Direction.SOUTHEAST if dx > 0 else Direction.SOUTHWEST

    def distance_squared_to(self, other: Coordinate) -> int:
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2

    def is_within_distance_squared(self, other: Coordinate, radius_squared: int) -> bool:
        return self.distance_squared_to(other) <= radius_squared

    def is_adjacent_to(self, other: Coordinate) -> bool:
        """True for the eight surrounding cells (not this cell)."""
        return self != other and max(abs(self.x - other.x), abs(self.y - other.y)) == 1

    def neighborhood(self) -> list[Coordinate]:
        """This cell and its eight neighbours, x-major from the south-west corner."""
        return [self.translate(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)]

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
