from __future__ import annotations

from enum import Enum


class ShapeKind(str, Enum):
    """The six winning shape categories a pattern can take on the grid.

    Values are stable for serialization (session state, config files).
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"
    ANTI_DIAGONAL = "anti_diagonal"
    L_SHAPE = "l_shape"
    T_SHAPE = "t_shape"

    @property
    def is_extendable(self) -> bool:
        return self in EXTENDABLE_SHAPE_KINDS


ALL_SHAPE_KINDS: tuple[ShapeKind, ...] = (
    ShapeKind.HORIZONTAL,
    ShapeKind.VERTICAL,
    ShapeKind.DIAGONAL,
    ShapeKind.ANTI_DIAGONAL,
    ShapeKind.L_SHAPE,
    ShapeKind.T_SHAPE,
)

EXTENDABLE_SHAPE_KINDS: tuple[ShapeKind, ...] = (
    ShapeKind.HORIZONTAL,
    ShapeKind.VERTICAL,
    ShapeKind.DIAGONAL,
    ShapeKind.ANTI_DIAGONAL,
)

FIXED_SHAPE_KINDS: tuple[ShapeKind, ...] = (
    ShapeKind.L_SHAPE,
    ShapeKind.T_SHAPE,
)
