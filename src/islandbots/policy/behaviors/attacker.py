"""Attacker behavior (launcher): shoot, then wander."""

from __future__ import annotations

from typing import TYPE_CHECKING

from islandbots.common.geometry import Direction
from islandbots.common.roles import ACTION_RADIUS_SQUARED
from islandbots.policy.types import DebugInfo, Role

if TYPE_CHECKING:
    from islandbots.policy.behaviors.base import Services
    from islandbots.policy.state import AgentMemory


class AttackerBehavior:
    role = Role.ATTACKER

    def act(self, memory: AgentMemory, services: Services) -> None:
        world = services.world
        actuator = services.actuator
        me = world.get_location()

        radius = ACTION_RADIUS_SQUARED[world.get_type()]
        enemies = world.sense_nearby_robots(radius, world.get_team().opponent())
        services.trace.enter("attack")
        # TODO: aim at enemies[0].location; the launcher currently fires at the
        # cell east of itself whether or not anything was sensed.
        target = me.add(Direction.EAST)
        if actuator.try_attack(target):
            actuator.indicate(DebugInfo(mode="attack", goal=f"enemies_{len(enemies)}", target_pos=target))

        services.trace.enter("explore")
        services.navigator.random_move(actuator)
