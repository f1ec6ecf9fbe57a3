"""Tunable thresholds for the islandbots policy."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PolicyConfig(BaseModel):
    """Thresholds shared by all role behaviors.

    Defaults reproduce the reference behavior; override them per policy
    instance, e.g. ``IslandBotsPolicy(seed=1, stall_threshold=3)``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Gatherer
    full_inventory_threshold: int = Field(default=40, ge=1)
    gather_chance: float = Field(default=0.5, ge=0.0, le=1.0)
    stall_threshold: int = Field(default=5, ge=0)  # forced move once stall_count exceeds this

    # Coordinator: anchors
    anchor_resource_threshold: int = Field(default=100, ge=0)
    anchor_min_turn: int = Field(default=350, ge=0)
    anchor_build_interval: int = Field(default=300, ge=0)
    anchor_cap: int = Field(default=1, ge=1)

    # Coordinator: workers
    worker_early_turn_limit: int = Field(default=250, ge=0)
    worker_resource_threshold: int = Field(default=110, ge=0)
    worker_build_chance: float = Field(default=0.5, ge=0.0, le=1.0)

    # Emit a per-turn trace line at DEBUG level
    trace: bool = False
