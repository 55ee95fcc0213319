from __future__ import annotations

from pydantic import BaseModel, Field

from core.enums.shape_kind import ShapeKind


class MatchResult(BaseModel):
    """One matched pattern in an evaluation; produced fresh for every grid."""

    shape_kind: ShapeKind
    length: int
    multiplier: float
    coin_value: int = Field(..., ge=0)

    model_config = {
        "frozen": True,
    }


class EvaluationResult(BaseModel):
    """Everything the coin/UI collaborators need from one evaluation."""

    matches: list[MatchResult] = Field(default_factory=list)
    total_coins: int = 0
