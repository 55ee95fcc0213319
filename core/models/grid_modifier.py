from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from core.enums.modifier_kind import ModifierKind


class GridModifier(BaseModel):
    """A signed row/col delta emitted by a charm or phone-call effect.

    - kind: permanent modifiers persist, temporary ones expire
    - row_delta / col_delta: signed change applied to the base grid size
    - duration: number of turns a temporary modifier stays active (None for permanent)
    - source: optional label of the effect that produced the modifier
    """

    kind: ModifierKind = ModifierKind.PERMANENT
    row_delta: int = 0
    col_delta: int = 0
    duration: int | None = Field(default=None, ge=1, description="Turns until a temporary modifier expires")
    source: str | None = None

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def _check_duration(self) -> GridModifier:
        if self.kind == ModifierKind.TEMPORARY and self.duration is None:
            msg = "Temporary modifiers need a duration"
            raise ValueError(msg)
        if self.kind == ModifierKind.PERMANENT and self.duration is not None:
            msg = "Permanent modifiers cannot have a duration"
            raise ValueError(msg)
        return self

    @property
    def is_temporary(self) -> bool:
        return self.kind == ModifierKind.TEMPORARY


class ActiveModifier(BaseModel):
    """Ledger entry: a modifier plus the turns it has left (None if permanent)."""

    modifier: GridModifier
    remaining: int | None = None
