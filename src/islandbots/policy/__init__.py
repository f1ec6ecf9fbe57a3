"""islandbots policy: per-role decision core for grid-world agents."""

from .config import PolicyConfig
from .errors import IllegalActionError, IllegalActionKind, IslandBotsError, UnexpectedFailureError
from .policy import AgentBrain, IslandBotsPolicy
from .state import Action, AgentMemory, TurnResult, TurnStatus
from .world import WorldInterface

__all__ = [
    "Action",
    "AgentBrain",
    "AgentMemory",
    "IllegalActionError",
    "IllegalActionKind",
    "IslandBotsError",
    "IslandBotsPolicy",
    "PolicyConfig",
    "TurnResult",
    "TurnStatus",
    "UnexpectedFailureError",
    "WorldInterface",
]
