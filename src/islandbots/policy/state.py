"""
State classes for the islandbots policy.

AgentMemory is the per-agent record that survives between turns. Action and
TurnResult describe what happened during a single turn.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from islandbots.common.geometry import Coordinate

from .types import Role


@dataclass
class AgentMemory:
    """Private memory for one agent, owned by its brain."""

    # Friendly headquarters; set the first turn one is sensed, never overwritten
    home_base: Optional[Coordinate] = None

    # Stuck detection: turns spent at the same position
    last_position: Optional[Coordinate] = None
    stall_count: int = 0

    # Turn of the last anchor this coordinator built
    last_anchor_build_turn: int = 0

    # Turns this agent has been alive
    turn_count: int = 0

    def remember_home_base(self, location: Coordinate) -> bool:
        """Record the home base unless one is already known."""
        if self.home_base is not None:
            return False
        self.home_base = location
        return True

    def update_stall(self, position: Coordinate) -> int:
        """Track consecutive turns spent at ``position`` and return the count.

        The first call only records the position.
        """
        if self.last_position is None:
            self.last_position = position
            self.stall_count = 0
        elif position == self.last_position:
            self.stall_count += 1
        else:
            self.last_position = position
            self.stall_count = 0
        return self.stall_count

    def turns_since_anchor_build(self) -> int:
        return self.turn_count - self.last_anchor_build_turn


@dataclass(frozen=True)
class Action:
    """One action the agent asked the world to perform."""

    name: str  # e.g. "move_north", "attack", "transfer_resource"
    target: Optional[Coordinate] = None
    detail: str = ""
    executed: bool = True  # False when the legality check refused it

    def __str__(self) -> str:
        text = self.name
        if self.target is not None:
            text = f"{text}@{self.target}"
        if self.detail:
            text = f"{text}[{self.detail}]"
        return text if self.executed else f"~{text}"


class TurnStatus(Enum):
    OK = "ok"
    ILLEGAL_ACTION = "illegal_action"
    UNEXPECTED_FAILURE = "unexpected_failure"


@dataclass
class TurnResult:
    """Outcome of one call to ``AgentBrain.take_turn``."""

    turn: int
    role: Role
    status: TurnStatus = TurnStatus.OK
    actions: list[Action] = field(default_factory=list)
    modes: list[str] = field(default_factory=list)  # decision branches taken, in order
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == TurnStatus.OK

    @property
    def executed_actions(self) -> list[Action]:
        return [a for a in self.actions if a.executed]

    def action_names(self) -> list[str]:
        """Names of the actions that actually went through, in order."""
        return [a.name for a in self.executed_actions]
