"""
islandbots policy - turn driver.

AgentBrain owns one agent's memory and random source, resolves the agent's role
every turn and runs the matching behavior. IslandBotsPolicy hands out one brain
per agent id.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Optional

from .behaviors import (
    AttackerBehavior,
    CoordinatorBehavior,
    GathererBehavior,
    InertBehavior,
    RoleBehavior,
    Services,
)
from .config import PolicyConfig
from .errors import IllegalActionError
from .services import Actuator, Navigator
from .state import AgentMemory, TurnResult, TurnStatus
from .trace import TurnTrace
from .types import ROBOT_TYPE_TO_ROLE, UNLIMITED_RADIUS, RobotType, Role
from .world import WorldInterface

logger = logging.getLogger(__name__)


class AgentBrain:
    """Per-agent turn driver that owns memory and delegates to role behaviors."""

    # Closed role set; every Role has exactly one behavior
    ROLE_BEHAVIORS: dict[Role, type[RoleBehavior]] = {
        Role.COORDINATOR: CoordinatorBehavior,
        Role.GATHERER: GathererBehavior,
        Role.ATTACKER: AttackerBehavior,
        Role.INERT: InertBehavior,
    }

    def __init__(
        self,
        agent_id: int,
        config: Optional[PolicyConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self._agent_id = agent_id
        self._config = config or PolicyConfig()
        self._navigator = Navigator(rng)
        self._memory = AgentMemory()
        self._behaviors: dict[Role, RoleBehavior] = {}
        self._announced = False

    @property
    def agent_id(self) -> int:
        return self._agent_id

    @property
    def memory(self) -> AgentMemory:
        return self._memory

    def behavior_for(self, role: Role) -> RoleBehavior:
        if role not in self._behaviors:
            self._behaviors[role] = self.ROLE_BEHAVIORS[role]()
        return self._behaviors[role]

    def take_turn(self, world: WorldInterface) -> TurnResult:
        """Run one turn. Never raises; failures are reported in the result."""
        memory = self._memory
        memory.turn_count += 1

        trace = TurnTrace()
        role = Role.INERT
        location = None
        result = TurnResult(turn=memory.turn_count, role=role, actions=trace.actions, modes=trace.modes)
        try:
            robot_type = world.get_type()
            role = ROBOT_TYPE_TO_ROLE.get(robot_type, Role.INERT)
            result.role = role
            location = world.get_location()
            if not self._announced:
                logger.info(
                    "Agent %d is a %s (%s) with health %d",
                    self._agent_id,
                    robot_type.value,
                    role.value,
                    world.get_health(),
                )
                self._announced = True

            if memory.home_base is None:
                self._find_home_base(world)

            services = Services(
                world=world,
                actuator=Actuator(world, trace, role),
                navigator=self._navigator,
                config=self._config,
                trace=trace,
            )
            self.behavior_for(role).act(memory, services)
        except IllegalActionError as e:
            result.status = TurnStatus.ILLEGAL_ACTION
            result.error = str(e)
            logger.warning(
                "Agent %d (%s) attempted an illegal action on turn %d: %s", self._agent_id, role.value, result.turn, e
            )
        except Exception as e:
            result.status = TurnStatus.UNEXPECTED_FAILURE
            result.error = f"{type(e).__name__}: {e}"
            logger.exception("Agent %d (%s) failed on turn %d", self._agent_id, role.value, result.turn)

        if self._config.trace:
            logger.debug(trace.format_line(result.turn, self._agent_id, role.value, location))
        return result

    def run(self, world: WorldInterface, max_turns: Optional[int] = None) -> list[TurnResult]:
        """Play turns until ``max_turns`` (forever if None), yielding once after each.

        Returns the results of the turns played.
        """
        results: list[TurnResult] = []
        while max_turns is None or len(results) < max_turns:
            try:
                result = self.take_turn(world)
                if max_turns is not None:
                    results.append(result)
            finally:
                world.yield_turn()
        return results

    def _find_home_base(self, world: WorldInterface) -> None:
        for robot in world.sense_nearby_robots(UNLIMITED_RADIUS, world.get_team()):
            if robot.robot_type == RobotType.HEADQUARTERS:
                self._memory.remember_home_base(robot.location)
                logger.debug("Agent %d found home base at %s", self._agent_id, robot.location)
                return


class IslandBotsPolicy:
    """Multi-agent wrapper: one independent brain per agent id.

    Brains never share memory. Each gets its own random source seeded from
    ``seed + agent_id`` so whole games replay exactly for a given seed.
    """

    short_names = ["islandbots"]

    def __init__(self, config: Optional[PolicyConfig] = None, seed: Optional[int] = None, **overrides: Any):
        if config is not None and overrides:
            config = PolicyConfig(**{**config.model_dump(), **overrides})
        self._config = config or PolicyConfig(**overrides)
        self._seed = seed
        self._brains: dict[int, AgentBrain] = {}

    @property
    def config(self) -> PolicyConfig:
        return self._config

    def agent_brain(self, agent_id: int) -> AgentBrain:
        """Get or create the brain for an agent."""
        if agent_id not in self._brains:
            rng = random.Random(self._seed + agent_id) if self._seed is not None else random.Random()
            self._brains[agent_id] = AgentBrain(agent_id, config=self._config, rng=rng)
        return self._brains[agent_id]

    def step(self, agent_id: int, world: WorldInterface) -> TurnResult:
        """Play one turn for ``agent_id``. The host yields the turn afterwards."""
        return self.agent_brain(agent_id).take_turn(world)
