"""Shared helpers for islandbots tests: an in-memory world and a scripted RNG."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional, Sequence

from islandbots.common.geometry import Coordinate, Direction
from islandbots.common.roles import ACTION_RADIUS_SQUARED
from islandbots.policy.behaviors import Services
from islandbots.policy.config import PolicyConfig
from islandbots.policy.errors import IllegalActionError, IllegalActionKind
from islandbots.policy.services import Actuator, Navigator
from islandbots.policy.state import AgentMemory
from islandbots.policy.trace import TurnTrace
from islandbots.policy.types import (
    FULL_INVENTORY,
    NO_ISLAND,
    Anchor,
    ResourceKind,
    RobotInfo,
    RobotType,
    Role,
    Team,
    WellInfo,
)

HOME = Coordinate(5, 5)


class StubRandom(random.Random):
    """Random source that replays scripted picks.

    ``choice`` pops from ``directions`` (falling back to the first element),
    ``random`` pops from ``values`` (falling back to 0.0, so coin flips land).
    """

    def __init__(self, directions: Sequence[Direction] = (), values: Sequence[float] = ()):
        super().__init__(0)
        self.directions = list(directions)
        self.values = list(values)
        self.choice_calls = 0
        self.random_calls = 0

    def choice(self, seq):  # type: ignore[override]
        self.choice_calls += 1
        if self.directions:
            return self.directions.pop(0)
        return seq[0]

    def random(self) -> float:
        self.random_calls += 1
        if self.values:
            return self.values.pop(0)
        return 0.0


@dataclass
class FakeIsland:
    locations: list[Coordinate]
    anchor: Optional[Anchor] = None


@dataclass
class FakeWorld:
    """Single-robot world with simple, explicit legality rules.

    Movement is limited to ``moves_per_turn`` until ``yield_turn``. Executed
    actions are appended to ``log`` as ``(name, *args)`` tuples.
    """

    location: Coordinate = field(default_factory=lambda: Coordinate(0, 0))
    robot_type: RobotType = RobotType.CARRIER
    team: Team = Team.A
    health: int = 100
    inventory: dict[ResourceKind, int] = field(default_factory=dict)
    anchor: Optional[Anchor] = None
    stored_anchors: dict[Anchor, int] = field(default_factory=dict)
    robots: list[RobotInfo] = field(default_factory=list)
    islands: dict[int, FakeIsland] = field(default_factory=dict)
    wells: list[WellInfo] = field(default_factory=list)
    blocked: set[Coordinate] = field(default_factory=set)
    hq_anchors: dict[Coordinate, int] = field(default_factory=dict)
    attackable: set[Coordinate] = field(default_factory=set)
    anchor_buildable: bool = False
    robot_buildable: bool = False
    collect_yield: int = 5
    moves_per_turn: int = 1
    fail_on: dict[str, Exception] = field(default_factory=dict)

    moves_this_turn: int = 0
    turns_yielded: int = 0
    indicators: list[str] = field(default_factory=list)
    log: list[tuple] = field(default_factory=list)

    def __post_init__(self) -> None:
        for kind in ResourceKind:
            self.inventory.setdefault(kind, 0)

    # === Test conveniences ===

    def add_headquarters(self, location: Coordinate, team: Optional[Team] = None) -> None:
        self.robots.append(RobotInfo(location, RobotType.HEADQUARTERS, team or self.team))

    def add_enemy(self, location: Coordinate, robot_type: RobotType = RobotType.LAUNCHER) -> None:
        self.robots.append(RobotInfo(location, robot_type, self.team.opponent()))

    def executed(self) -> list[str]:
        return [entry[0] for entry in self.log]

    def _maybe_fail(self, name: str) -> None:
        if name in self.fail_on:
            raise self.fail_on[name]

    def _require(self, allowed: bool, kind: IllegalActionKind, what: str) -> None:
        if not allowed:
            raise IllegalActionError(kind, what)

    def _in_action_range(self, location: Coordinate) -> bool:
        return self.location.is_within_distance_squared(location, ACTION_RADIUS_SQUARED[self.robot_type])

    def _carried(self) -> int:
        return sum(self.inventory.values())

    # === Self ===

    def get_location(self) -> Coordinate:
        self._maybe_fail("get_location")
        return self.location

    def get_type(self) -> RobotType:
        self._maybe_fail("get_type")
        return self.robot_type

    def get_team(self) -> Team:
        return self.team

    def get_health(self) -> int:
        return self.health

    def get_resource_amount(self, kind: ResourceKind) -> int:
        return self.inventory.get(kind, 0)

    def get_anchor(self) -> Optional[Anchor]:
        return self.anchor

    def get_num_anchors(self, anchor: Anchor) -> int:
        return self.stored_anchors.get(anchor, 0)

    # === Sensing ===

    def sense_nearby_robots(self, radius_squared: int = -1, team: Optional[Team] = None) -> list[RobotInfo]:
        self._maybe_fail("sense_nearby_robots")
        found = []
        for robot in self.robots:
            if team is not None and robot.team != team:
                continue
            if radius_squared >= 0 and not self.location.is_within_distance_squared(robot.location, radius_squared):
                continue
            found.append(robot)
        return found

    def sense_nearby_islands(self) -> list[int]:
        return list(self.islands)

    def sense_island(self, location: Coordinate) -> int:
        for island_id, island in self.islands.items():
            if location in island.locations:
                return island_id
        return NO_ISLAND

    def sense_anchor(self, island_id: int) -> Optional[Anchor]:
        return self.islands[island_id].anchor

    def sense_nearby_island_locations(self, island_id: int) -> list[Coordinate]:
        return list(self.islands[island_id].locations)

    def sense_nearby_wells(self) -> list[WellInfo]:
        self._maybe_fail("sense_nearby_wells")
        return list(self.wells)

    # === Actions ===

    def can_move(self, direction: Direction) -> bool:
        return self.moves_this_turn < self.moves_per_turn and self.location.add(direction) not in self.blocked

    def move(self, direction: Direction) -> None:
        self._require(self.can_move(direction), IllegalActionKind.CANT_MOVE_THERE, f"move {direction.name}")
        self.location = self.location.add(direction)
        self.moves_this_turn += 1
        self.log.append(("move", direction))

    def can_attack(self, location: Coordinate) -> bool:
        return location in self.attackable and self._in_action_range(location)

    def attack(self, location: Coordinate) -> None:
        self._maybe_fail("attack")
        self._require(self.can_attack(location), IllegalActionKind.CANT_DO_THAT, f"attack {location}")
        self.log.append(("attack", location))

    def can_transfer_resource(self, location: Coordinate, kind: ResourceKind, amount: int) -> bool:
        is_hq = any(
            r.location == location and r.robot_type == RobotType.HEADQUARTERS and r.team == self.team
            for r in self.robots
        )
        return is_hq and 0 < amount <= self.inventory.get(kind, 0) and self._in_action_range(location)

    def transfer_resource(self, location: Coordinate, kind: ResourceKind, amount: int) -> None:
        allowed = self.can_transfer_resource(location, kind, amount)
        self._require(allowed, IllegalActionKind.CANT_DO_THAT, f"transfer {kind.value}")
        self.inventory[kind] -= amount
        self.log.append(("transfer_resource", location, kind, amount))

    def _well_at(self, location: Coordinate) -> Optional[WellInfo]:
        for well in self.wells:
            if well.location == location:
                return well
        return None

    def can_collect_resource(self, location: Coordinate, amount: int) -> bool:
        return (
            self._well_at(location) is not None
            and self.location.is_within_distance_squared(location, 2)
            and self._carried() < FULL_INVENTORY
        )

    def collect_resource(self, location: Coordinate, amount: int) -> None:
        self._require(self.can_collect_resource(location, amount), IllegalActionKind.CANT_DO_THAT, "collect")
        well = self._well_at(location)
        assert well is not None
        gained = min(self.collect_yield, FULL_INVENTORY - self._carried())
        self.inventory[well.resource] += gained
        self.log.append(("collect_resource", location))

    def can_build_anchor(self, anchor: Anchor) -> bool:
        return self.anchor_buildable

    def build_anchor(self, anchor: Anchor) -> None:
        self._require(self.can_build_anchor(anchor), IllegalActionKind.NOT_ENOUGH_RESOURCE, "build anchor")
        self.stored_anchors[anchor] = self.stored_anchors.get(anchor, 0) + 1
        self.log.append(("build_anchor", anchor))

    def can_take_anchor(self, location: Coordinate, anchor: Anchor) -> bool:
        return self.hq_anchors.get(location, 0) > 0 and self.anchor is None and self._in_action_range(location)

    def take_anchor(self, location: Coordinate, anchor: Anchor) -> None:
        self._require(self.can_take_anchor(location, anchor), IllegalActionKind.CANT_DO_THAT, "take anchor")
        self.hq_anchors[location] -= 1
        self.anchor = anchor
        self.log.append(("take_anchor", location, anchor))

    def can_place_anchor(self) -> bool:
        island_id = self.sense_island(self.location)
        return self.anchor is not None and island_id != NO_ISLAND and self.islands[island_id].anchor is None

    def place_anchor(self) -> None:
        self._require(self.can_place_anchor(), IllegalActionKind.CANT_DO_THAT, "place anchor")
        self.islands[self.sense_island(self.location)].anchor = self.anchor
        self.anchor = None
        self.log.append(("place_anchor", self.location))

    def can_build_robot(self, robot_type: RobotType, location: Coordinate) -> bool:
        return self.robot_buildable and location not in self.blocked and self._in_action_range(location)

    def build_robot(self, robot_type: RobotType, location: Coordinate) -> None:
        self._require(self.can_build_robot(robot_type, location), IllegalActionKind.CANT_DO_THAT, "build robot")
        self.log.append(("build_robot", robot_type, location))

    # === Diagnostics / scheduling ===

    def set_indicator_string(self, text: str) -> None:
        self.indicators.append(text)

    def yield_turn(self) -> None:
        self.turns_yielded += 1
        self.moves_this_turn = 0


def make_services(
    world: FakeWorld,
    rng: Optional[random.Random] = None,
    config: Optional[PolicyConfig] = None,
    role: Role = Role.GATHERER,
) -> Services:
    """Build the per-turn services bundle a brain would hand to a behavior."""
    trace = TurnTrace()
    return Services(
        world=world,
        actuator=Actuator(world, trace, role),
        navigator=Navigator(rng or StubRandom()),
        config=config or PolicyConfig(),
        trace=trace,
    )


def memory_at_turn(turn: int, **kwargs) -> AgentMemory:
    memory = AgentMemory(**kwargs)
    memory.turn_count = turn
    return memory
