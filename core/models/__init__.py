"""Pydantic models for core grid pattern domain objects."""

from .active_pattern import ActivePattern
from .grid_dimensions import GridDimensions
from .grid_modifier import ActiveModifier, GridModifier
from .grid_snapshot import GridSnapshot, Symbol
from .match_result import EvaluationResult, MatchResult
from .pattern_definition import DEFAULT_PATTERN_DEFINITIONS, PatternDefinition

__all__ = [
    "ActivePattern",
    "ActiveModifier",
    "GridDimensions",
    "GridModifier",
    "GridSnapshot",
    "Symbol",
    "MatchResult",
    "EvaluationResult",
    "PatternDefinition",
    "DEFAULT_PATTERN_DEFINITIONS",
]
