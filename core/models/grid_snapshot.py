from __future__ import annotations

from collections.abc import Hashable, Sequence

import numpy as np
from pydantic import BaseModel, Field, field_validator


class Symbol(BaseModel):
    """A single grid cell. Two symbols match when their type ids are equal."""

    type_id: str
    label: str | None = None

    model_config = {
        "frozen": True,
    }


class GridSnapshot(BaseModel):
    """Read-only grid handed over by the symbol generator for one evaluation.

    Rows are ordered top to bottom, cells left to right. The grid must be
    rectangular; an empty grid is allowed and never matches anything.
    """

    rows: list[list[Symbol]] = Field(default_factory=list)

    model_config = {
        "frozen": True,
    }

    @field_validator("rows")
    @classmethod
    def _rectangular(cls, value: list[list[Symbol]]) -> list[list[Symbol]]:
        widths = {len(row) for row in value}
        if len(widths) > 1:
            msg = f"Grid rows have differing widths: {sorted(widths)}"
            raise ValueError(msg)
        return value

    @classmethod
    def from_type_ids(cls, rows: Sequence[Sequence[Hashable]]) -> GridSnapshot:
        """Build a snapshot from nested type ids, e.g. [["A", "A"], ["B", "C"]]."""
        return cls(rows=[[Symbol(type_id=str(type_id)) for type_id in row] for row in rows])

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_cols(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def type_matrix(self) -> np.ndarray:
        """Type ids as a 2-D object array of shape (n_rows, n_cols)."""
        matrix = np.empty((self.n_rows, self.n_cols), dtype=object)
        for r, row in enumerate(self.rows):
            for c, symbol in enumerate(row):
                matrix[r, c] = symbol.type_id
        return matrix

    def pretty_print(self) -> str:
        return "\n".join(" ".join(symbol.type_id for symbol in row) for row in self.rows)
