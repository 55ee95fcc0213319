from __future__ import annotations

import logging

from core.models.grid_dimensions import GridDimensions
from core.models.grid_modifier import ActiveModifier, GridModifier

logger = logging.getLogger(__name__)

DEFAULT_MIN_DIMENSION = 1


class InvalidResize(ValueError):
    """A modifier would push the grid below the floor or carries a non-finite delta.

    The floor is checked against the resulting size and also against the
    smallest size reachable once positive temporary modifiers expire. A modifier
    can therefore be rejected even though the size right after applying it is
    valid, e.g. a permanent shrink that only a still-active temporary growth
    keeps above the floor. The ledger is left untouched when this is raised.
    """

    def __init__(self, message: str, modifier: GridModifier | None = None, attempted: GridDimensions | None = None):
        super().__init__(message)
        self.modifier = modifier
        self.attempted = attempted


class DimensionChange:
    """Before/after grid size reported to the pattern extender."""

    def __init__(self, previous: GridDimensions, current: GridDimensions):
        self.previous = previous
        self.current = current

    @property
    def row_delta(self) -> int:
        return self.current.rows - self.previous.rows

    @property
    def col_delta(self) -> int:
        return self.current.cols - self.previous.cols

    @property
    def rows_changed(self) -> bool:
        return self.row_delta != 0

    @property
    def cols_changed(self) -> bool:
        return self.col_delta != 0

    def __repr__(self) -> str:
        return f"DimensionChange({self.previous} -> {self.current})"


class GridSizeController:
    """Tracks net grid dimensions as base size plus the sum of active modifiers.

    Modifiers are kept in a ledger in the order they were applied. Temporary
    modifiers count down once per turn in advance_event() and drop out when
    they reach zero.
    """

    def __init__(self, base_rows: int, base_cols: int, min_dimension: int = DEFAULT_MIN_DIMENSION):
        if base_rows < min_dimension or base_cols < min_dimension:
            msg = f"Base size {base_rows}x{base_cols} is below the floor {min_dimension}"
            raise ValueError(msg)

        self.base = GridDimensions(rows=base_rows, cols=base_cols)
        self.min_dimension = min_dimension
        self._ledger: list[ActiveModifier] = []
        self._dimensions = self.base

    def current_dimensions(self) -> GridDimensions:
        return self._dimensions

    def active_modifiers(self) -> tuple[ActiveModifier, ...]:
        return tuple(entry.model_copy() for entry in self._ledger)

    def apply_modifier(self, modifier: GridModifier) -> DimensionChange | None:
        """Add a modifier to the ledger.

        Returns the resulting change, or None if the net size did not move.

        Raises:
            InvalidResize: If a delta is non-finite or the grid would fall below the
                floor, now or once any temporary modifier expires.
        """
        for delta in (modifier.row_delta, modifier.col_delta):
            if isinstance(delta, bool) or not isinstance(delta, int):
                msg = f"Grid deltas must be finite integers, got {delta!r}"
                raise InvalidResize(msg, modifier=modifier)

        candidate = [*self._ledger, ActiveModifier(modifier=modifier, remaining=modifier.duration)]
        attempted = self._net_dimensions(candidate)
        worst_case = self._worst_case_dimensions(candidate)

        if min(attempted.rows, attempted.cols, worst_case.rows, worst_case.cols) < self.min_dimension:
            msg = (
                f"Modifier {modifier.row_delta:+d} rows / {modifier.col_delta:+d} cols would shrink the grid to "
                f"{attempted} (worst case {worst_case}), below the floor {self.min_dimension}"
            )
            logger.warning(msg)
            raise InvalidResize(msg, modifier=modifier, attempted=attempted)

        self._ledger = candidate
        logger.debug("Applied %s modifier from %s", modifier.kind.value, modifier.source or "<unknown>")
        return self._update_dimensions()

    def advance_event(self) -> DimensionChange | None:
        """Count down temporary modifiers and drop the expired ones."""
        kept = []
        for entry in self._ledger:
            if entry.remaining is None:
                kept.append(entry)
                continue
            remaining = entry.remaining - 1
            if remaining > 0:
                kept.append(ActiveModifier(modifier=entry.modifier, remaining=remaining))
            else:
                logger.debug("Temporary modifier from %s expired", entry.modifier.source or "<unknown>")

        self._ledger = kept
        return self._update_dimensions()

    def restore(self, ledger: list[ActiveModifier]) -> DimensionChange | None:
        """Replace the ledger wholesale, e.g. when rebuilding a saved session."""
        dimensions = self._net_dimensions(ledger)
        if min(dimensions.rows, dimensions.cols) < self.min_dimension:
            msg = f"Restored ledger yields {dimensions}, below the floor {self.min_dimension}"
            raise InvalidResize(msg, attempted=dimensions)
        self._ledger = [entry.model_copy() for entry in ledger]
        return self._update_dimensions()

    def _net_dimensions(self, ledger: list[ActiveModifier]) -> GridDimensions:
        return GridDimensions(
            rows=self.base.rows + sum(entry.modifier.row_delta for entry in ledger),
            cols=self.base.cols + sum(entry.modifier.col_delta for entry in ledger),
        )

    def _worst_case_dimensions(self, ledger: list[ActiveModifier]) -> GridDimensions:
        # Smallest size reachable by expiry: positive temporary deltas may drop out
        # while negative ones are still active.
        rows = self.base.rows
        cols = self.base.cols
        for entry in ledger:
            modifier = entry.modifier
            if modifier.is_temporary:
                rows += min(modifier.row_delta, 0)
                cols += min(modifier.col_delta, 0)
            else:
                rows += modifier.row_delta
                cols += modifier.col_delta
        return GridDimensions(rows=rows, cols=cols)

    def _update_dimensions(self) -> DimensionChange | None:
        previous = self._dimensions
        self._dimensions = self._net_dimensions(self._ledger)
        if self._dimensions == previous:
            return None
        logger.debug("Grid resized %s -> %s", previous, self._dimensions)
        return DimensionChange(previous, self._dimensions)
