from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from core.enums.shape_kind import ShapeKind


class PatternDefinition(BaseModel):
    """Static template for one shape kind.

    - name: display name of the winning shape
    - shape_kind: which offset family the shape uses
    - min_length: shortest length an active instance may have
    - max_length: longest length, None for line shapes (bounded only by the grid)
    - base_multiplier: payout multiplier at length 3
    """

    name: str
    shape_kind: ShapeKind
    min_length: int = Field(..., ge=1)
    max_length: int | None = Field(default=None, ge=1)
    base_multiplier: float = Field(..., gt=0)

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def _check_lengths(self) -> PatternDefinition:
        if self.max_length is not None and self.max_length < self.min_length:
            msg = f"{self.name}: max_length {self.max_length} < min_length {self.min_length}"
            raise ValueError(msg)
        if not self.shape_kind.is_extendable and self.max_length != self.min_length:
            msg = f"{self.name}: fixed shapes need max_length == min_length"
            raise ValueError(msg)
        return self

    @property
    def is_extendable(self) -> bool:
        return self.shape_kind.is_extendable


DEFAULT_PATTERN_DEFINITIONS: tuple[PatternDefinition, ...] = (
    PatternDefinition(name="Horizontal Line", shape_kind=ShapeKind.HORIZONTAL, min_length=3, base_multiplier=1.0),
    PatternDefinition(name="Vertical Line", shape_kind=ShapeKind.VERTICAL, min_length=3, base_multiplier=1.0),
    PatternDefinition(name="Diagonal", shape_kind=ShapeKind.DIAGONAL, min_length=3, base_multiplier=1.2),
    PatternDefinition(name="Anti-Diagonal", shape_kind=ShapeKind.ANTI_DIAGONAL, min_length=3, base_multiplier=1.2),
    PatternDefinition(name="L-Shape", shape_kind=ShapeKind.L_SHAPE, min_length=3, max_length=3, base_multiplier=1.5),
    PatternDefinition(name="T-Shape", shape_kind=ShapeKind.T_SHAPE, min_length=5, max_length=5, base_multiplier=1.5),
)
