"""
Gatherer behavior (carrier).

Carriers ferry resources from wells to their home base, carry anchors out to
unclaimed islands, and take opportunistic shots at enemies. Branches are
evaluated in strict priority order; anchor carrying and returning home end the
turn early.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from islandbots.policy.inventory import format_inventory, has_any, is_full, next_depositable, read_inventory
from islandbots.policy.types import (
    COLLECT_ALL,
    NO_ISLAND,
    UNLIMITED_RADIUS,
    Anchor,
    DebugInfo,
    Role,
)

if TYPE_CHECKING:
    from islandbots.common.geometry import Coordinate
    from islandbots.policy.behaviors.base import Services
    from islandbots.policy.state import AgentMemory

# Anchor pickup reaches the home base from this cell or any of the eight around it
PICKUP_RADIUS_SQUARED = 2


class GathererBehavior:
    """Gatherer agent: collect, deposit, deliver anchors, skirmish."""

    role = Role.GATHERER

    def act(self, memory: AgentMemory, services: Services) -> None:
        world = services.world
        actuator = services.actuator
        navigator = services.navigator
        cfg = services.config
        trace = services.trace
        me = world.get_location()

        # Priority 1: unload at home and grab an anchor if one is waiting
        if memory.home_base is not None:
            self._deposit_and_pickup(memory.home_base, me, services)

        # Priority 2: while carrying an anchor, delivering it is all we do
        if world.get_anchor() is not None:
            self._carry_anchor(me, services)
            return

        # Priority 3: stuck for too long - shake loose, then carry on
        if memory.update_stall(me) > cfg.stall_threshold:
            trace.enter("unstick")
            actuator.indicate(DebugInfo(mode="unstick", signal=f"stalled_{memory.stall_count}"))
            if navigator.random_move(actuator):
                me = world.get_location()

        # Priority 4: full - head home
        if is_full(read_inventory(world), cfg.full_inventory_threshold) and memory.home_base is not None:
            trace.enter("return_home")
            actuator.indicate(DebugInfo(mode="return_home", target_pos=memory.home_base))
            navigator.step_toward(actuator, me, memory.home_base)
            return

        # Priority 5: collect from wells around us; each legal cell gets a coin flip
        for location in me.neighborhood():
            if not world.can_collect_resource(location, COLLECT_ALL):
                continue
            if not navigator.coin_flip(cfg.gather_chance):
                continue
            if actuator.try_collect(location, COLLECT_ALL):
                trace.enter("gather")
                actuator.indicate(
                    DebugInfo(mode="gather", goal=format_inventory(read_inventory(world)), target_pos=location)
                )

        # Priority 6: shoot the first enemy in sight
        enemies = world.sense_nearby_robots(UNLIMITED_RADIUS, world.get_team().opponent())
        if enemies:
            trace.enter("attack")
            actuator.try_attack(enemies[0].location)

        # Priority 7: walk toward a well
        # TODO: pick the nearest well instead of always the second one sensed
        wells = world.sense_nearby_wells()
        if len(wells) > 1:
            trace.enter("seek_well")
            navigator.step_toward(actuator, me, wells[1].location)

        # Priority 8: wander
        trace.enter("explore")
        navigator.random_move(actuator)

    def _deposit_and_pickup(self, home: Coordinate, me: Coordinate, services: Services) -> None:
        world = services.world
        actuator = services.actuator

        depositable = next_depositable(read_inventory(world))
        if depositable is not None:
            kind, amount = depositable
            if world.can_transfer_resource(home, kind, amount):
                services.trace.enter("deposit")
                actuator.try_transfer(home, kind, amount)

        if (
            world.get_anchor() is None
            and not has_any(read_inventory(world))
            and me.is_within_distance_squared(home, PICKUP_RADIUS_SQUARED)
            and world.can_take_anchor(home, Anchor.STANDARD)
        ):
            services.trace.enter("pickup_anchor")
            actuator.try_take_anchor(home, Anchor.STANDARD)

    def _carry_anchor(self, me: Coordinate, services: Services) -> None:
        world = services.world
        actuator = services.actuator
        navigator = services.navigator

        services.trace.enter("carry_anchor")
        actuator.indicate(DebugInfo(mode="carry_anchor", goal="find_unclaimed_island"))

        # Standing on an unclaimed island: drop it here
        island = world.sense_island(me)
        if island != NO_ISLAND and world.sense_anchor(island) is None:
            if actuator.try_place_anchor():
                return

        # Head for the first visible island nobody has claimed
        for island in world.sense_nearby_islands():
            if world.sense_anchor(island) is not None:
                continue
            locations = world.sense_nearby_island_locations(island)
            if not locations:
                continue
            actuator.indicate(DebugInfo(mode="carry_anchor", goal=f"island_{island}", target_pos=locations[0]))
            navigator.step_toward(actuator, me, locations[0])
            return

        navigator.random_move(actuator)
