"""Grows and shrinks active patterns when the grid size changes.

Axis dependencies:
- horizontal follows the column count
- vertical follows the row count
- diagonal and anti-diagonal follow both (a diagonal of length L needs L rows and L cols)

Growth adds the change to the length, clamped to what the new grid can host.
Shrink removes it again but never goes below min_length; an instance whose
grid can no longer host min_length is retired. Fixed shapes keep their length
and are retired only when their template no longer fits.
"""

from __future__ import annotations

import logging

from core.enums.shape_kind import ShapeKind
from core.models.active_pattern import ActivePattern
from core.models.grid_dimensions import GridDimensions
from core.models.pattern_definition import PatternDefinition
from engine.grid_size_controller import DimensionChange
from engine.pattern_catalog import PatternCatalog
from engine.shape_offsets import fits, length_limit
from engine.valuation import make_pattern

logger = logging.getLogger(__name__)


def axis_delta(shape_kind: ShapeKind, change: DimensionChange) -> int:
    """Signed length change a shape kind sees for a resize; 0 when its axes did not move."""
    if shape_kind == ShapeKind.HORIZONTAL:
        return change.col_delta
    if shape_kind == ShapeKind.VERTICAL:
        return change.row_delta

    deltas = [change.row_delta, change.col_delta]
    shrinks = [delta for delta in deltas if delta < 0]
    if shrinks:
        return min(shrinks)
    return max(deltas)


def max_length_for(definition: PatternDefinition, dimensions: GridDimensions) -> int:
    limit = length_limit(definition.shape_kind, dimensions)
    if definition.max_length is not None:
        limit = min(limit, definition.max_length)
    return limit


def resize_pattern(
    pattern: ActivePattern, definition: PatternDefinition, change: DimensionChange
) -> ActivePattern | None:
    """Return the pattern adapted to the new grid, or None if it has to be retired."""
    if not definition.is_extendable:
        if fits(pattern.shape_kind, pattern.length, change.current):
            return pattern
        return None

    limit = max_length_for(definition, change.current)
    if limit < definition.min_length:
        return None

    delta = axis_delta(pattern.shape_kind, change)
    if delta > 0:
        length = min(pattern.length + delta, limit)
    elif delta < 0:
        length = max(definition.min_length, min(pattern.length + delta, limit))
    else:
        length = min(pattern.length, limit)

    if length == pattern.length:
        return pattern
    return make_pattern(pattern.shape_kind, length)


def is_feasible(definition: PatternDefinition, dimensions: GridDimensions) -> bool:
    return fits(definition.shape_kind, definition.min_length, dimensions)


def feasibility_sweep(catalog: PatternCatalog, dimensions: GridDimensions) -> list[ActivePattern]:
    """Activate every missing definition the grid can now host, in declaration order."""
    activated = []
    for definition in catalog.missing_definitions():
        if not is_feasible(definition, dimensions):
            catalog.forget_skipped(definition.shape_kind)
            continue
        pattern = catalog.try_activate(definition)
        if pattern is not None:
            activated.append(pattern)
    return activated


def extend(catalog: PatternCatalog, change: DimensionChange) -> None:
    """Rewrite the catalog's active set for a grid size change."""
    for pattern in catalog.active_patterns():
        definition = catalog.definition_for(pattern.shape_kind)
        resized = resize_pattern(pattern, definition, change)

        if resized is None:
            catalog.retire(pattern.shape_kind)
        elif resized is not pattern:
            logger.debug("Resized %s -> %s", pattern, resized)
            catalog.replace(resized)

    feasibility_sweep(catalog, change.current)
