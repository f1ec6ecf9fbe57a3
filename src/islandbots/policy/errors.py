"""Errors raised while an agent takes its turn.

Both kinds are recovered by the turn driver; neither ever ends an agent.
"""

from __future__ import annotations

from enum import Enum


class IllegalActionKind(Enum):
    CANT_DO_THAT = "cant_do_that"
    CANT_MOVE_THERE = "cant_move_there"
    CANT_SENSE_THAT = "cant_sense_that"
    IS_NOT_READY = "is_not_ready"
    NOT_ENOUGH_RESOURCE = "not_enough_resource"
    OUT_OF_RANGE = "out_of_range"
    NO_ROBOT_THERE = "no_robot_there"
    INTERNAL_ERROR = "internal_error"


class IslandBotsError(Exception):
    """Base class for islandbots errors."""


class IllegalActionError(IslandBotsError):
    """The world rejected an action that was not legal this turn."""

    def __init__(self, kind: IllegalActionKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    def __str__(self) -> str:
        return f"{self.kind.value}: {super().__str__()}"


class UnexpectedFailureError(IslandBotsError):
    """An internal precondition of the decision core was violated."""
