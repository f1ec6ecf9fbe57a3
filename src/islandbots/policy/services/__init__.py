"""Services for the islandbots policy."""

from .actuator import Actuator
from .navigator import Navigator

__all__ = ["Actuator", "Navigator"]
