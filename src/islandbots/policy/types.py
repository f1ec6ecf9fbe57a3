"""
Types and constants for the islandbots policy.

Resource kinds, anchors, teams, sensed-object records and debug info.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from islandbots.common import roles as common_roles
from islandbots.common.geometry import Coordinate

Role = common_roles.Role
RobotType = common_roles.RobotType
ROBOT_TYPE_TO_ROLE = common_roles.ROBOT_TYPE_TO_ROLE


class ResourceKind(Enum):
    """Carried materials, in deposit order."""

    ADAMANTIUM = "adamantium"
    MANA = "mana"
    ELIXIR = "elixir"


# Short labels for indicator strings
RESOURCE_LABELS: dict[ResourceKind, str] = {
    ResourceKind.ADAMANTIUM: "AD",
    ResourceKind.MANA: "MN",
    ResourceKind.ELIXIR: "EX",
}


class Anchor(Enum):
    STANDARD = "standard"
    ACCELERATING = "accelerating"


class Team(Enum):
    A = "A"
    B = "B"
    NEUTRAL = "neutral"

    def opponent(self) -> Team:
        if self == Team.A:
            return Team.B
        if self == Team.B:
            return Team.A
        return Team.NEUTRAL


@dataclass(frozen=True)
class RobotInfo:
    """A sensed robot."""

    location: Coordinate
    robot_type: RobotType
    team: Team
    health: int = 0


@dataclass(frozen=True)
class WellInfo:
    """A sensed well."""

    location: Coordinate
    resource: ResourceKind


# Game constants
FULL_INVENTORY = 40  # Carried units at which a gatherer heads home
COLLECT_ALL = -1  # Collect/sense amount meaning "as much as allowed"
UNLIMITED_RADIUS = -1  # Sense radius meaning "everything in vision"
NO_ISLAND = -1  # sense_island() result when not standing on an island


@dataclass
class DebugInfo:
    """Structured info about the agent's current intent, shown as the indicator string."""

    mode: str = "idle"  # e.g. "deposit", "carry_anchor", "gather"
    goal: str = ""
    target_pos: Optional[Coordinate] = None
    signal: str = ""

    def format(self, role: str) -> str:
        """Format as role:mode:goal:target[:signal]."""
        target = str(self.target_pos) if self.target_pos else "-"
        base = f"{role}:{self.mode}:{self.goal or '-'}:{target}"
        if self.signal:
            return f"{base}:{self.signal}"
        return base
