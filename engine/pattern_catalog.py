from __future__ import annotations

import logging
from collections.abc import Iterable

from core.enums.shape_kind import ShapeKind
from core.models.active_pattern import ActivePattern
from core.models.grid_dimensions import GridDimensions
from core.models.pattern_definition import DEFAULT_PATTERN_DEFINITIONS, PatternDefinition
from engine.shape_offsets import fits, length_limit
from engine.valuation import make_pattern, verify_multiplier

logger = logging.getLogger(__name__)

DEFAULT_MAX_ACTIVE_PATTERNS = 20


class PatternCatalog:
    """Owns the base definitions and the active pattern set of one session.

    The active set holds at most one instance per shape kind and is kept in
    definition declaration order, which is also the order new shapes are
    admitted in when the cap is tight.
    """

    def __init__(
        self,
        definitions: Iterable[PatternDefinition] = DEFAULT_PATTERN_DEFINITIONS,
        max_active: int = DEFAULT_MAX_ACTIVE_PATTERNS,
    ):
        self.definitions: tuple[PatternDefinition, ...] = tuple(definitions)
        kinds = [definition.shape_kind for definition in self.definitions]
        if len(set(kinds)) != len(kinds):
            msg = f"Duplicate shape kinds in definitions: {kinds}"
            raise ValueError(msg)
        if max_active < 0:
            msg = f"max_active must be >= 0, got {max_active}"
            raise ValueError(msg)

        self.max_active = max_active
        self._active: dict[ShapeKind, ActivePattern] = {}
        self._skipped_for_capacity: set[ShapeKind] = set()

    def __len__(self) -> int:
        return len(self._active)

    def __contains__(self, shape_kind: ShapeKind) -> bool:
        return shape_kind in self._active

    def definition_for(self, shape_kind: ShapeKind) -> PatternDefinition:
        for definition in self.definitions:
            if definition.shape_kind == shape_kind:
                return definition
        msg = f"No definition for shape kind {shape_kind}"
        raise KeyError(msg)

    def active_patterns(self) -> tuple[ActivePattern, ...]:
        """Active instances in definition order (read-only view)."""
        return tuple(
            self._active[definition.shape_kind]
            for definition in self.definitions
            if definition.shape_kind in self._active
        )

    def get(self, shape_kind: ShapeKind) -> ActivePattern | None:
        return self._active.get(shape_kind)

    def is_full(self) -> bool:
        return len(self._active) >= self.max_active

    def missing_definitions(self) -> list[PatternDefinition]:
        return [definition for definition in self.definitions if definition.shape_kind not in self._active]

    def skipped_for_capacity(self) -> frozenset[ShapeKind]:
        """Feasible shapes that were left out because the cap was reached."""
        return frozenset(self._skipped_for_capacity)

    def forget_skipped(self, shape_kind: ShapeKind) -> None:
        self._skipped_for_capacity.discard(shape_kind)

    def try_activate(self, definition: PatternDefinition, length: int | None = None) -> ActivePattern | None:
        """Create an instance for a definition not yet represented.

        Returns None (and records the shape for diagnostics) when the cap is reached.
        """
        if definition.shape_kind in self._active:
            msg = f"{definition.shape_kind} is already active"
            raise ValueError(msg)

        if self.is_full():
            if definition.shape_kind not in self._skipped_for_capacity:
                logger.warning(
                    "Active pattern cap (%d) reached, skipping %s", self.max_active, definition.shape_kind.value
                )
            self._skipped_for_capacity.add(definition.shape_kind)
            return None

        pattern = make_pattern(definition.shape_kind, definition.min_length if length is None else length)
        self._active[definition.shape_kind] = pattern
        self._skipped_for_capacity.discard(definition.shape_kind)
        logger.info("Activated pattern %s", pattern)
        return pattern

    def replace(self, pattern: ActivePattern) -> None:
        if pattern.shape_kind not in self._active:
            msg = f"{pattern.shape_kind} is not active"
            raise KeyError(msg)
        self._active[pattern.shape_kind] = pattern

    def retire(self, shape_kind: ShapeKind) -> ActivePattern:
        pattern = self._active.pop(shape_kind)
        logger.info("Retired pattern %s", pattern)
        return pattern

    def clear(self) -> None:
        self._active.clear()
        self._skipped_for_capacity.clear()

    def check_invariants(self, dimensions: GridDimensions) -> list[str]:
        """Return a list of invariant violations for the given grid size (empty when consistent)."""
        problems = []

        if len(self._active) > self.max_active:
            problems.append(f"{len(self._active)} active patterns exceed cap {self.max_active}")

        for pattern in self._active.values():
            definition = self.definition_for(pattern.shape_kind)

            if not verify_multiplier(pattern):
                problems.append(f"{pattern}: multiplier does not match its length")

            if not fits(pattern.shape_kind, pattern.length, dimensions):
                problems.append(f"{pattern}: does not fit a {dimensions} grid")

            if definition.is_extendable:
                upper = length_limit(pattern.shape_kind, dimensions)
                if definition.max_length is not None:
                    upper = min(upper, definition.max_length)
                if not definition.min_length <= pattern.length <= upper:
                    problems.append(f"{pattern}: length outside [{definition.min_length}, {upper}]")
            elif pattern.length != definition.min_length:
                problems.append(f"{pattern}: fixed shape changed length")

        return problems
