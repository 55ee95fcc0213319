from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from core.models.active_pattern import ActivePattern
from core.models.grid_snapshot import GridSnapshot
from core.models.match_result import EvaluationResult, MatchResult
from engine.shape_offsets import Offsets, get_offsets
from engine.valuation import coin_value

logger = logging.getLogger(__name__)


def _matches_at(types: np.ndarray, origin_row: int, origin_col: int, offsets: Offsets) -> bool:
    """Check whether every cell of the shape anchored at the origin has the origin's type."""
    n_rows, n_cols = types.shape
    origin_type = types[origin_row, origin_col]

    for dr, dc in offsets:
        r, c = origin_row + dr, origin_col + dc
        # Negative indices are out of bounds, never wrapped.
        if not (0 <= r < n_rows and 0 <= c < n_cols):
            return False
        if types[r, c] != origin_type:
            return False

    return True


def find_origin(types: np.ndarray, pattern: ActivePattern) -> tuple[int, int] | None:
    """First (row, col) origin where the pattern occurs, scanning row-major."""
    offsets = get_offsets(pattern.shape_kind, pattern.length)
    n_rows, n_cols = types.shape

    for r in range(n_rows):
        for c in range(n_cols):
            if _matches_at(types, r, c, offsets):
                return r, c

    return None


def evaluate(grid: GridSnapshot, active_patterns: Iterable[ActivePattern]) -> list[MatchResult]:
    """Scan the grid for every active pattern.

    A pattern is reported once no matter how many origins it occurs at. The
    scan never raises: out-of-bounds cells and mismatches only mean "no match".
    """
    if grid.n_rows == 0 or grid.n_cols == 0:
        return []

    types = grid.type_matrix()
    matches = []

    for pattern in active_patterns:
        origin = find_origin(types, pattern)
        if origin is None:
            continue
        logger.debug("Matched %s at origin %s", pattern, origin)
        matches.append(
            MatchResult(
                shape_kind=pattern.shape_kind,
                length=pattern.length,
                multiplier=pattern.multiplier,
                coin_value=coin_value(pattern.multiplier),
            )
        )

    return matches


def summarize(matches: list[MatchResult]) -> EvaluationResult:
    return EvaluationResult(matches=matches, total_coins=sum(match.coin_value for match in matches))
