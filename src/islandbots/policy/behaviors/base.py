"""
Base behavior protocol and Services dataclass for the islandbots policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from islandbots.policy.types import Role

if TYPE_CHECKING:
    from islandbots.policy.config import PolicyConfig
    from islandbots.policy.services import Actuator, Navigator
    from islandbots.policy.state import AgentMemory
    from islandbots.policy.trace import TurnTrace
    from islandbots.policy.world import WorldInterface


@dataclass
class Services:
    """Bundle of per-turn services passed to behaviors."""

    world: WorldInterface
    actuator: Actuator
    navigator: Navigator
    config: PolicyConfig
    trace: TurnTrace


class RoleBehavior(Protocol):
    """Interface for role-specific decision making."""

    role: Role

    def act(self, memory: AgentMemory, services: Services) -> None:
        """Decide and perform this turn's actions through ``services.actuator``."""
        ...
