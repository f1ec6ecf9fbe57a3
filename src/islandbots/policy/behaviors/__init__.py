"""Role behaviors for the islandbots policy."""

from .attacker import AttackerBehavior
from .base import RoleBehavior, Services
from .coordinator import CoordinatorBehavior
from .gatherer import GathererBehavior
from .inert import InertBehavior

__all__ = [
    "RoleBehavior",
    "Services",
    "CoordinatorBehavior",
    "GathererBehavior",
    "AttackerBehavior",
    "InertBehavior",
]
