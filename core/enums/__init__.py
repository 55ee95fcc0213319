"""Core enums for grid pattern domain objects."""

from .modifier_kind import EffectCategory, ModifierKind
from .shape_kind import ShapeKind

__all__ = [
    "ShapeKind",
    "ModifierKind",
    "EffectCategory",
]
