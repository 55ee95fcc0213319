"""Relative coordinate generators for every shape kind.

Each generator maps a length to the ordered (row, col) offsets of the shape,
anchored at the origin cell. The table is keyed by the closed ShapeKind set so a
missing kind fails at import time rather than at match time.
"""

from __future__ import annotations

from collections.abc import Callable

from core.enums.shape_kind import ALL_SHAPE_KINDS, ShapeKind
from core.models.grid_dimensions import GridDimensions

Offsets = tuple[tuple[int, int], ...]

L_SHAPE_TEMPLATE: Offsets = (
    (0, 0),
    (1, 0),
    (1, 1),
)

T_SHAPE_TEMPLATE: Offsets = (
    (0, 0),
    (0, 1),
    (0, 2),
    (1, 1),
    (2, 1),
)


def _horizontal(length: int) -> Offsets:
    return tuple((0, i) for i in range(length))


def _vertical(length: int) -> Offsets:
    return tuple((i, 0) for i in range(length))


def _diagonal(length: int) -> Offsets:
    return tuple((i, i) for i in range(length))


def _anti_diagonal(length: int) -> Offsets:
    # Column offsets run negative; the matcher treats c < 0 as out of bounds.
    return tuple((i, -i) for i in range(length))


def _l_shape(length: int) -> Offsets:
    return L_SHAPE_TEMPLATE


def _t_shape(length: int) -> Offsets:
    return T_SHAPE_TEMPLATE


SHAPE_OFFSETS: dict[ShapeKind, Callable[[int], Offsets]] = {
    ShapeKind.HORIZONTAL: _horizontal,
    ShapeKind.VERTICAL: _vertical,
    ShapeKind.DIAGONAL: _diagonal,
    ShapeKind.ANTI_DIAGONAL: _anti_diagonal,
    ShapeKind.L_SHAPE: _l_shape,
    ShapeKind.T_SHAPE: _t_shape,
}

if set(SHAPE_OFFSETS) != set(ALL_SHAPE_KINDS):
    msg = f"Offset table out of sync with ShapeKind: {set(ALL_SHAPE_KINDS) ^ set(SHAPE_OFFSETS)}"
    raise RuntimeError(msg)


def get_offsets(shape_kind: ShapeKind, length: int) -> Offsets:
    return SHAPE_OFFSETS[shape_kind](length)


def required_extent(shape_kind: ShapeKind, length: int) -> GridDimensions:
    """Smallest grid (rows, cols) that can host the shape at the given length."""
    offsets = get_offsets(shape_kind, length)
    row_offsets = [dr for dr, _ in offsets]
    col_offsets = [dc for _, dc in offsets]
    return GridDimensions(
        rows=max(row_offsets) - min(row_offsets) + 1,
        cols=max(col_offsets) - min(col_offsets) + 1,
    )


def fits(shape_kind: ShapeKind, length: int, dimensions: GridDimensions) -> bool:
    extent = required_extent(shape_kind, length)
    return extent.rows <= dimensions.rows and extent.cols <= dimensions.cols


def length_limit(shape_kind: ShapeKind, dimensions: GridDimensions) -> int:
    """Longest length an extendable shape can reach on a grid of this size."""
    if shape_kind == ShapeKind.HORIZONTAL:
        return dimensions.cols
    if shape_kind == ShapeKind.VERTICAL:
        return dimensions.rows
    if shape_kind in (ShapeKind.DIAGONAL, ShapeKind.ANTI_DIAGONAL):
        return dimensions.min_extent

    msg = f"Shape kind {shape_kind} has a fixed length"
    raise ValueError(msg)
