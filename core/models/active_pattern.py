from __future__ import annotations

from pydantic import BaseModel, Field

from core.enums.shape_kind import ShapeKind


class ActivePattern(BaseModel):
    """A live, length-specific realization of a shape kind in one session.

    Instances are values: the extender swaps in a new instance whenever the
    length changes, the catalog keeps at most one per shape kind.
    """

    shape_kind: ShapeKind
    length: int = Field(..., ge=1)
    multiplier: float = Field(..., gt=0)

    model_config = {
        "frozen": True,
    }

    def __str__(self) -> str:
        return f"{self.shape_kind.value}-{self.length} (x{self.multiplier:.3f})"
