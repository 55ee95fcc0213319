from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from config_models import SessionConfiguration
from core.models.active_pattern import ActivePattern
from core.models.grid_dimensions import GridDimensions
from core.models.grid_modifier import ActiveModifier, GridModifier
from core.models.grid_snapshot import GridSnapshot
from core.models.match_result import EvaluationResult
from core.models.pattern_definition import DEFAULT_PATTERN_DEFINITIONS, PatternDefinition
from engine import pattern_extender, pattern_matcher
from engine.grid_size_controller import DimensionChange, GridSizeController, InvalidResize
from engine.pattern_catalog import PatternCatalog

logger = logging.getLogger(__name__)


class SessionState(BaseModel):
    """Everything a host needs to persist to rebuild a session later."""

    turn: int = 0
    dimensions: GridDimensions
    ledger: list[ActiveModifier] = Field(default_factory=list)
    active_patterns: list[ActivePattern] = Field(default_factory=list)


class GameSession:
    """Per-session owner of the grid-size ledger and the pattern catalog.

    Every public call runs to completion before returning: resize, extend and
    evaluate never interleave. Sessions share no mutable state, so independent
    sessions can live side by side.
    """

    def __init__(
        self,
        config: SessionConfiguration | None = None,
        definitions: tuple[PatternDefinition, ...] = DEFAULT_PATTERN_DEFINITIONS,
    ):
        self.config = config or SessionConfiguration()
        self.controller = GridSizeController(
            base_rows=self.config.base_rows,
            base_cols=self.config.base_cols,
            min_dimension=self.config.min_dimension,
        )
        self.catalog = PatternCatalog(definitions, max_active=self.config.max_active_patterns)
        self.turn = 0

        pattern_extender.feasibility_sweep(self.catalog, self.controller.current_dimensions())

    def current_dimensions(self) -> GridDimensions:
        return self.controller.current_dimensions()

    def active_patterns(self) -> tuple[ActivePattern, ...]:
        return self.catalog.active_patterns()

    def on_grid_resize(self, modifier: GridModifier | dict[str, Any]) -> GridDimensions:
        """Apply a modifier and re-extend patterns.

        Raises:
            InvalidResize: If the modifier is malformed or would push the grid below
                the floor. The session is unchanged in that case.
        """
        if not isinstance(modifier, GridModifier):
            try:
                modifier = GridModifier.model_validate(modifier)
            except ValidationError as e:
                msg = f"Malformed grid modifier: {e}"
                raise InvalidResize(msg) from e

        change = self.controller.apply_modifier(modifier)
        self._handle_change(change)
        return self.current_dimensions()

    def trigger_effect(self, name: str) -> GridDimensions:
        """Apply the modifier of a configured charm or phone-call effect by name."""
        effect = self.config.get_effect(name)
        logger.info("Triggering %s effect %s", effect.category.value, effect.name)
        return self.on_grid_resize(effect.to_modifier())

    def advance_turn(self) -> GridDimensions:
        """Expire temporary modifiers at the turn boundary and re-extend patterns."""
        self.turn += 1
        change = self.controller.advance_event()
        self._handle_change(change)
        return self.current_dimensions()

    def evaluate(self, grid: GridSnapshot) -> EvaluationResult:
        matches = pattern_matcher.evaluate(grid, self.catalog.active_patterns())
        result = pattern_matcher.summarize(matches)
        logger.debug("Turn %d: %d matches, %d coins", self.turn, len(result.matches), result.total_coins)
        return result

    def play_turn(self, grid: GridSnapshot) -> EvaluationResult:
        """Evaluate the spin, then close the turn.

        A temporary modifier with duration N is in force for N evaluations.
        """
        result = self.evaluate(grid)
        self.advance_turn()
        return result

    def export_state(self) -> SessionState:
        return SessionState(
            turn=self.turn,
            dimensions=self.current_dimensions(),
            ledger=list(self.controller.active_modifiers()),
            active_patterns=list(self.catalog.active_patterns()),
        )

    @classmethod
    def from_state(
        cls,
        config: SessionConfiguration,
        state: SessionState,
        definitions: tuple[PatternDefinition, ...] = DEFAULT_PATTERN_DEFINITIONS,
    ) -> GameSession:
        """Rebuild a session from exported state.

        Pass the same definitions the saved session was built with; they are
        static configuration and are not part of the saved state.

        Raises:
            ValueError: If the saved patterns are inconsistent with the saved ledger.
        """
        session = cls(config, definitions)
        session.controller.restore(state.ledger)
        session.turn = state.turn

        if session.current_dimensions() != state.dimensions:
            msg = f"Saved dimensions {state.dimensions} do not match ledger ({session.current_dimensions()})"
            raise ValueError(msg)

        session.catalog.clear()
        for pattern in state.active_patterns:
            definition = session.catalog.definition_for(pattern.shape_kind)
            restored = session.catalog.try_activate(definition, pattern.length)
            if restored is None:
                msg = f"Saved state has more patterns than the cap {session.catalog.max_active}"
                raise ValueError(msg)
            if restored.multiplier != pattern.multiplier:
                msg = f"Saved multiplier {pattern.multiplier} for {pattern.shape_kind.value} does not match its length"
                raise ValueError(msg)

        problems = session.catalog.check_invariants(session.current_dimensions())
        if problems:
            msg = "Saved patterns are inconsistent: " + "; ".join(problems)
            raise ValueError(msg)

        return session

    def _handle_change(self, change: DimensionChange | None) -> None:
        if change is None:
            return
        logger.info("Grid is now %s", change.current)
        pattern_extender.extend(self.catalog, change)
