"""Robot types without a policy of their own: they just pass the turn."""

from __future__ import annotations

from typing import TYPE_CHECKING

from islandbots.policy.types import Role

if TYPE_CHECKING:
    from islandbots.policy.behaviors.base import Services
    from islandbots.policy.state import AgentMemory


class InertBehavior:
    role = Role.INERT

    def act(self, memory: AgentMemory, services: Services) -> None:
        services.trace.enter("idle")
