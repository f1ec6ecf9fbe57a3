"""
Coordinator behavior (headquarters).

Headquarters never move. Each turn they may build an anchor for a gatherer to
carry out, and may spawn a carrier on a random neighbouring cell. The two
decisions are independent and can both happen in one turn.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from islandbots.policy.inventory import read_inventory
from islandbots.policy.types import Anchor, DebugInfo, ResourceKind, Role, RobotType

if TYPE_CHECKING:
    from islandbots.common.geometry import Coordinate
    from islandbots.policy.behaviors.base import Services
    from islandbots.policy.state import AgentMemory


class CoordinatorBehavior:
    """Coordinator agent: produce anchors and workers."""

    role = Role.COORDINATOR

    def act(self, memory: AgentMemory, services: Services) -> None:
        world = services.world
        # Direction is drawn every turn, even when nothing gets built
        direction = services.navigator.random_direction()
        spawn_at = world.get_location().add(direction)

        if self._should_build_anchor(memory, services):
            services.trace.enter("build_anchor")
            services.actuator.indicate(DebugInfo(mode="produce", goal="anchor"))
            if services.actuator.try_build_anchor(Anchor.STANDARD):
                memory.last_anchor_build_turn = memory.turn_count

        if self._should_build_worker(memory, services, spawn_at):
            services.trace.enter("build_worker")
            services.actuator.indicate(DebugInfo(mode="produce", goal="carrier", target_pos=spawn_at))
            services.actuator.try_build_robot(RobotType.CARRIER, spawn_at)

    def _should_build_anchor(self, memory: AgentMemory, services: Services) -> bool:
        cfg = services.config
        world = services.world
        inventory = read_inventory(world)
        return (
            world.can_build_anchor(Anchor.STANDARD)
            and inventory[ResourceKind.ADAMANTIUM] > cfg.anchor_resource_threshold
            and inventory[ResourceKind.MANA] > cfg.anchor_resource_threshold
            and world.get_num_anchors(Anchor.STANDARD) < cfg.anchor_cap
            and memory.turn_count > cfg.anchor_min_turn
            and memory.turns_since_anchor_build() > cfg.anchor_build_interval
        )

    def _should_build_worker(self, memory: AgentMemory, services: Services, spawn_at: Coordinate) -> bool:
        cfg = services.config
        world = services.world
        # Order matters: the coin is only flipped once the cheaper checks pass
        return (
            world.can_build_robot(RobotType.CARRIER, spawn_at)
            and (
                memory.turn_count < cfg.worker_early_turn_limit
                or world.get_resource_amount(ResourceKind.ADAMANTIUM) > cfg.worker_resource_threshold
            )
            and services.navigator.coin_flip(cfg.worker_build_chance)
        )
