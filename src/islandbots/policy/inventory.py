"""Inventory helpers over a sensed ``ResourceKind -> amount`` mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional

from islandbots.policy.types import FULL_INVENTORY, RESOURCE_LABELS, ResourceKind

if TYPE_CHECKING:
    from islandbots.policy.world import WorldInterface

Inventory = Mapping[ResourceKind, int]


def total(inventory: Inventory) -> int:
    return sum(inventory.get(kind, 0) for kind in ResourceKind)


def is_full(inventory: Inventory, threshold: int = FULL_INVENTORY) -> bool:
    return total(inventory) >= threshold


def has_any(inventory: Inventory) -> bool:
    return total(inventory) > 0


def next_depositable(inventory: Inventory) -> Optional[tuple[ResourceKind, int]]:
    """First kind in enumeration order that we carry, with its whole amount.

    Stack size is deliberately ignored: ``{ADAMANTIUM: 1, MANA: 30}`` deposits
    the single adamantium first.
    """
    for kind in ResourceKind:
        amount = inventory.get(kind, 0)
        if amount > 0:
            return kind, amount
    return None


def read_inventory(world: WorldInterface) -> dict[ResourceKind, int]:
    """Snapshot of the robot's carried resources."""
    return {kind: world.get_resource_amount(kind) for kind in ResourceKind}


def format_inventory(inventory: Inventory) -> str:
    return " ".join(f"{RESOURCE_LABELS[kind]}:{inventory.get(kind, 0)}" for kind in ResourceKind)
