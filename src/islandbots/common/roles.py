from __future__ import annotations

from enum import Enum


class Role(Enum):
    COORDINATOR = "coordinator"
    GATHERER = "gatherer"
    ATTACKER = "attacker"
    INERT = "inert"


class RobotType(Enum):
    HEADQUARTERS = "headquarters"
    CARRIER = "carrier"
    LAUNCHER = "launcher"
    BOOSTER = "booster"
    DESTABILIZER = "destabilizer"
    AMPLIFIER = "amplifier"


ROBOT_TYPE_TO_ROLE: dict[RobotType, Role] = {
    RobotType.HEADQUARTERS: Role.COORDINATOR,
    RobotType.CARRIER: Role.GATHERER,
    RobotType.LAUNCHER: Role.ATTACKER,
    RobotType.BOOSTER: Role.INERT,
    RobotType.DESTABILIZER: Role.INERT,
    RobotType.AMPLIFIER: Role.INERT,
}

ACTION_RADIUS_SQUARED: dict[RobotType, int] = {
    RobotType.HEADQUARTERS: 9,
    RobotType.CARRIER: 9,
    RobotType.LAUNCHER: 16,
    RobotType.BOOSTER: 0,
    RobotType.DESTABILIZER: 13,
    RobotType.AMPLIFIER: 0,
}


def role_for(robot_type: RobotType) -> Role:
    return ROBOT_TYPE_TO_ROLE.get(robot_type, Role.INERT)
