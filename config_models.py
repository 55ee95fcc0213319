"""
Pydantic models for session configuration.

This module defines the data structures read from a JSON session file: the base
grid size, the grid floor, the active pattern cap and the catalog of charm and
phone-call effects that resize the grid.
"""

import json
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from core.enums.modifier_kind import EffectCategory, ModifierKind
from core.models.grid_modifier import GridModifier


class EffectDefinition(BaseModel):
    """
    A named charm or phone-call effect and the grid modifier it produces.

    Charms are permanent unless a duration is given; phone calls are always timed.
    """

    name: str
    category: EffectCategory
    row_delta: int = 0
    col_delta: int = 0
    duration: int | None = Field(default=None, ge=1, description="Turns the effect lasts (timed effects only)")
    description: str = ""

    @model_validator(mode="after")
    def _phone_calls_are_timed(self):
        if self.category == EffectCategory.PHONE_CALL and self.duration is None:
            msg = f"Phone-call effect {self.name!r} needs a duration"
            raise ValueError(msg)
        return self

    def to_modifier(self) -> GridModifier:
        """Convert the effect into the modifier it applies to the grid."""
        kind = ModifierKind.PERMANENT if self.duration is None else ModifierKind.TEMPORARY
        return GridModifier(
            kind=kind,
            row_delta=self.row_delta,
            col_delta=self.col_delta,
            duration=self.duration,
            source=self.name,
        )


class SessionConfiguration(BaseModel):
    """
    Static configuration for one game session.

    Loaded once at session start; the effect catalog is data, not logic.
    """

    base_rows: int = Field(default=3, ge=1, description="Grid rows before any modifier")
    base_cols: int = Field(default=3, ge=1, description="Grid columns before any modifier")
    min_dimension: int = Field(default=1, ge=1, description="Floor for rows and columns")
    max_active_patterns: int = Field(default=20, ge=0, description="Cap on the active pattern set")
    effects: list[EffectDefinition] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_config(self):
        if min(self.base_rows, self.base_cols) < self.min_dimension:
            msg = f"Base grid {self.base_rows}x{self.base_cols} is below min_dimension {self.min_dimension}"
            raise ValueError(msg)
        names = [effect.name for effect in self.effects]
        if len(set(names)) != len(names):
            msg = f"Duplicate effect names: {names}"
            raise ValueError(msg)
        return self

    def get_effect(self, name: str) -> EffectDefinition:
        for effect in self.effects:
            if effect.name == name:
                return effect
        msg = f"Unknown effect: {name}"
        raise KeyError(msg)


def load_session_configuration(json_file_path: str | Path) -> SessionConfiguration:
    """Read and validate a session configuration JSON file."""
    with open(json_file_path) as f:
        data = json.load(f)

    return SessionConfiguration(**data)
