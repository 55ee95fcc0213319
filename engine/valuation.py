"""Payout valuation for pattern instances.

Both functions are pure: the multiplier stored on an ActivePattern must always be
reproducible from its (length, shape_kind) pair.
"""

from __future__ import annotations

import logging
import math

from core.enums.shape_kind import ShapeKind
from core.models.active_pattern import ActivePattern

logger = logging.getLogger(__name__)

BASE_COIN_UNIT = 10
GROWTH_FACTOR = 1.2
REFERENCE_LENGTH = 3

BASE_MULTIPLIERS: dict[ShapeKind, float] = {
    ShapeKind.HORIZONTAL: 1.0,
    ShapeKind.VERTICAL: 1.0,
    ShapeKind.DIAGONAL: 1.2,
    ShapeKind.ANTI_DIAGONAL: 1.2,
    ShapeKind.L_SHAPE: 1.5,
    ShapeKind.T_SHAPE: 1.5,
}


def base_multiplier(shape_kind: ShapeKind | str) -> float:
    try:
        return BASE_MULTIPLIERS[ShapeKind(shape_kind)]
    except (KeyError, ValueError):
        logger.error("No base multiplier for shape kind %r, falling back to 1.0", shape_kind)
        return 1.0


def multiplier(length: int, shape_kind: ShapeKind | str) -> float:
    """Payout multiplier: base multiplier scaled by 1.2 per cell beyond length 3."""
    return base_multiplier(shape_kind) * GROWTH_FACTOR ** (length - REFERENCE_LENGTH)


def coin_value(pattern_multiplier: float) -> int:
    return math.floor(pattern_multiplier * BASE_COIN_UNIT)


def make_pattern(shape_kind: ShapeKind, length: int) -> ActivePattern:
    """Build an ActivePattern whose multiplier is derived from its length."""
    return ActivePattern(shape_kind=shape_kind, length=length, multiplier=multiplier(length, shape_kind))


def verify_multiplier(pattern: ActivePattern) -> bool:
    return pattern.multiplier == multiplier(pattern.length, pattern.shape_kind)
