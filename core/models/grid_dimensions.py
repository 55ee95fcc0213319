from __future__ import annotations

from pydantic import BaseModel, Field


class GridDimensions(BaseModel):
    """Net grid size after all active modifiers are applied."""

    rows: int = Field(..., description="Number of rows")
    cols: int = Field(..., description="Number of columns")

    model_config = {
        "frozen": True,
    }

    @property
    def min_extent(self) -> int:
        return min(self.rows, self.cols)

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}"
