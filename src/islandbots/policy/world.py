"""
World interface consumed by the decision core.

The host simulator implements this protocol. Sensing calls are read-only;
every action comes as a ``can_*`` legality check paired with the action itself,
and the action raises ``IllegalActionError`` if it is attempted while not legal.
"""

from __future__ import annotations

from typing import Optional, Protocol

from islandbots.common.geometry import Coordinate, Direction
from islandbots.policy.types import Anchor, ResourceKind, RobotInfo, RobotType, Team, WellInfo


class WorldInterface(Protocol):
    """Per-agent view of the world for the current turn."""

    # === Self ===

    def get_location(self) -> Coordinate: ...

    def get_type(self) -> RobotType: ...

    def get_team(self) -> Team: ...

    def get_health(self) -> int: ...

    def get_resource_amount(self, kind: ResourceKind) -> int: ...

    def get_anchor(self) -> Optional[Anchor]:
        """Anchor carried by this robot, if any."""
        ...

    def get_num_anchors(self, anchor: Anchor) -> int:
        """Anchors of this kind stored at this robot (headquarters)."""
        ...

    # === Sensing ===

    def sense_nearby_robots(self, radius_squared: int = -1, team: Optional[Team] = None) -> list[RobotInfo]:
        """Robots within ``radius_squared`` (-1 = full vision), optionally filtered by team."""
        ...

    def sense_nearby_islands(self) -> list[int]: ...

    def sense_island(self, location: Coordinate) -> int:
        """Island id at ``location``, or -1."""
        ...

    def sense_anchor(self, island_id: int) -> Optional[Anchor]:
        """Anchor placed on the island, if any."""
        ...

    def sense_nearby_island_locations(self, island_id: int) -> list[Coordinate]: ...

    def sense_nearby_wells(self) -> list[WellInfo]: ...

    # === Actions ===

    def can_move(self, direction: Direction) -> bool: ...

    def move(self, direction: Direction) -> None: ...

    def can_attack(self, location: Coordinate) -> bool: ...

    def attack(self, location: Coordinate) -> None: ...

    def can_transfer_resource(self, location: Coordinate, kind: ResourceKind, amount: int) -> bool: ...

    def transfer_resource(self, location: Coordinate, kind: ResourceKind, amount: int) -> None: ...

    def can_collect_resource(self, location: Coordinate, amount: int) -> bool: ...

    def collect_resource(self, location: Coordinate, amount: int) -> None: ...

    def can_build_anchor(self, anchor: Anchor) -> bool: ...

    def build_anchor(self, anchor: Anchor) -> None: ...

    def can_take_anchor(self, location: Coordinate, anchor: Anchor) -> bool: ...

    def take_anchor(self, location: Coordinate, anchor: Anchor) -> None: ...

    def can_place_anchor(self) -> bool: ...

    def place_anchor(self) -> None: ...

    def can_build_robot(self, robot_type: RobotType, location: Coordinate) -> bool: ...

    def build_robot(self, robot_type: RobotType, location: Coordinate) -> None: ...

    # === Diagnostics / scheduling ===

    def set_indicator_string(self, text: str) -> None: ...

    def yield_turn(self) -> None:
        """End this robot's turn; returns when its next turn starts."""
        ...
