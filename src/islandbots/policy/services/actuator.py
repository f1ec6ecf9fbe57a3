"""
Check-then-act gate between behaviors and the world.

Every action goes through its ``can_*`` legality check first; refused actions
are recorded in the turn trace but never attempted. The world call itself may
still raise ``IllegalActionError`` if its state changed underneath us.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from islandbots.common.geometry import Coordinate, Direction
from islandbots.policy.errors import UnexpectedFailureError
from islandbots.policy.state import Action
from islandbots.policy.types import COLLECT_ALL, Anchor, DebugInfo, ResourceKind, Role, RobotType

if TYPE_CHECKING:
    from islandbots.policy.trace import TurnTrace
    from islandbots.policy.world import WorldInterface


def move_action_name(direction: Direction) -> str:
    return f"move_{direction.name.lower()}"


class Actuator:
    """Legality-gated actions for one agent's turn."""

    def __init__(self, world: WorldInterface, trace: TurnTrace, role: Role):
        self._world = world
        self._trace = trace
        self._role = role

    def _gate(self, allowed: bool, action: Action) -> bool:
        if not allowed:
            self._trace.record(Action(action.name, action.target, action.detail, executed=False))
            return False
        self._trace.record(action)
        return True

    def try_move(self, direction: Optional[Direction]) -> bool:
        if direction is None:
            return False
        action = Action(move_action_name(direction))
        if not self._gate(self._world.can_move(direction), action):
            return False
        self._world.move(direction)
        return True

    def try_attack(self, location: Coordinate) -> bool:
        if not self._gate(self._world.can_attack(location), Action("attack", location)):
            return False
        self._world.attack(location)
        return True

    def try_transfer(self, location: Coordinate, kind: ResourceKind, amount: int) -> bool:
        action = Action("transfer_resource", location, f"{kind.value}:{amount}")
        if not self._gate(self._world.can_transfer_resource(location, kind, amount), action):
            return False
        self._world.transfer_resource(location, kind, amount)
        return True

    def try_collect(self, location: Coordinate, amount: int = COLLECT_ALL) -> bool:
        action = Action("collect_resource", location)
        if not self._gate(self._world.can_collect_resource(location, amount), action):
            return False
        self._world.collect_resource(location, amount)
        return True

    def try_build_anchor(self, anchor: Anchor) -> bool:
        if not self._gate(self._world.can_build_anchor(anchor), Action("build_anchor", detail=anchor.value)):
            return False
        self._world.build_anchor(anchor)
        return True

    def try_take_anchor(self, location: Coordinate, anchor: Anchor) -> bool:
        """Take an anchor from ``location``; a robot never carries two."""
        if self._world.get_anchor() is not None:
            raise UnexpectedFailureError(f"take_anchor at {location} while already carrying an anchor")
        action = Action("take_anchor", location, anchor.value)
        if not self._gate(self._world.can_take_anchor(location, anchor), action):
            return False
        self._world.take_anchor(location, anchor)
        return True

    def try_place_anchor(self) -> bool:
        if not self._gate(self._world.can_place_anchor(), Action("place_anchor")):
            return False
        self._world.place_anchor()
        return True

    def try_build_robot(self, robot_type: RobotType, location: Coordinate) -> bool:
        action = Action("build_robot", location, robot_type.value)
        if not self._gate(self._world.can_build_robot(robot_type, location), action):
            return False
        self._world.build_robot(robot_type, location)
        return True

    def indicate(self, debug_info: DebugInfo) -> None:
        """Show the agent's intent in the host's debug view."""
        self._world.set_indicator_string(debug_info.format(self._role.value))
