"""Per-turn decision trace for islandbots agents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from islandbots.common.geometry import Coordinate

from .state import Action


@dataclass
class TurnTrace:
    """Collects the modes entered and actions attempted during a single turn."""

    modes: list[str] = field(default_factory=list)
    actions: list[Action] = field(default_factory=list)

    def enter(self, mode: str) -> None:
        """Record a decision branch, e.g. "deposit" or "explore"."""
        self.modes.append(mode)

    def record(self, action: Action) -> None:
        self.actions.append(action)

    @property
    def last_mode(self) -> Optional[str]:
        return self.modes[-1] if self.modes else None

    def format_line(self, turn: int, agent_id: int, role: str, pos: Optional[Coordinate]) -> str:
        """Format the trace as a single line.

        ``[t=12 a=3 gatherer (5,5)] deposit>gather → transfer_resource@(5,5)[adamantium:10] ~move_north``
        Refused actions are prefixed with ``~``.
        """
        where = str(pos) if pos is not None else "(?)"
        prefix = f"[t={turn} a={agent_id} {role} {where}]"
        chain = ">".join(self.modes) or "-"
        acted = " ".join(str(a) for a in self.actions) or "noop"
        return f"{prefix} {chain} → {acted}"
