"""Tests for growing, shrinking and activating patterns on resize."""

import pytest

from core.enums.modifier_kind import ModifierKind
from core.enums.shape_kind import ShapeKind
from core.models.grid_dimensions import GridDimensions
from core.models.grid_modifier import GridModifier
from engine.grid_size_controller import DimensionChange, GridSizeController
from engine.pattern_catalog import PatternCatalog
from engine.pattern_extender import axis_delta, extend, feasibility_sweep
from engine.valuation import multiplier


def dims(rows: int, cols: int) -> GridDimensions:
    return GridDimensions(rows=rows, cols=cols)


def catalog_for(rows: int, cols: int, max_active: int = 20) -> PatternCatalog:
    catalog = PatternCatalog(max_active=max_active)
    feasibility_sweep(catalog, dims(rows, cols))
    return catalog


def lengths(catalog: PatternCatalog) -> dict[ShapeKind, int]:
    return {pattern.shape_kind: pattern.length for pattern in catalog.active_patterns()}


def test_three_by_three_activates_every_shape_at_min_length():
    catalog = catalog_for(3, 3)
    assert lengths(catalog) == {
        ShapeKind.HORIZONTAL: 3,
        ShapeKind.VERTICAL: 3,
        ShapeKind.DIAGONAL: 3,
        ShapeKind.ANTI_DIAGONAL: 3,
        ShapeKind.L_SHAPE: 3,
        ShapeKind.T_SHAPE: 5,
    }


def test_small_grids_only_host_shapes_that_fit():
    assert set(lengths(catalog_for(2, 2))) == {ShapeKind.L_SHAPE}
    assert set(lengths(catalog_for(1, 5))) == {ShapeKind.HORIZONTAL}
    assert set(lengths(catalog_for(5, 2))) == {ShapeKind.VERTICAL, ShapeKind.L_SHAPE}


def test_column_growth_extends_horizontal_only():
    catalog = catalog_for(3, 3)

    extend(catalog, DimensionChange(dims(3, 3), dims(3, 4)))

    result = lengths(catalog)
    assert result[ShapeKind.HORIZONTAL] == 4
    assert result[ShapeKind.VERTICAL] == 3
    # A diagonal of length 4 would need 4 rows.
    assert result[ShapeKind.DIAGONAL] == 3
    assert result[ShapeKind.ANTI_DIAGONAL] == 3
    assert catalog.get(ShapeKind.HORIZONTAL).multiplier == multiplier(4, ShapeKind.HORIZONTAL)


def test_growth_on_both_axes_extends_diagonals():
    catalog = catalog_for(3, 3)

    extend(catalog, DimensionChange(dims(3, 3), dims(5, 5)))

    result = lengths(catalog)
    assert result[ShapeKind.HORIZONTAL] == 5
    assert result[ShapeKind.VERTICAL] == 5
    assert result[ShapeKind.DIAGONAL] == 5
    assert result[ShapeKind.ANTI_DIAGONAL] == 5
    assert result[ShapeKind.L_SHAPE] == 3
    assert result[ShapeKind.T_SHAPE] == 5


def test_grow_then_shrink_restores_length_and_multiplier():
    catalog = catalog_for(3, 3)
    before = catalog.active_patterns()

    extend(catalog, DimensionChange(dims(3, 3), dims(3, 4)))
    extend(catalog, DimensionChange(dims(3, 4), dims(3, 3)))

    assert catalog.active_patterns() == before


def test_grow_both_then_shrink_both_restores_diagonals():
    catalog = catalog_for(4, 4)
    before = catalog.active_patterns()

    extend(catalog, DimensionChange(dims(4, 4), dims(5, 5)))
    assert lengths(catalog)[ShapeKind.DIAGONAL] == 4
    extend(catalog, DimensionChange(dims(5, 5), dims(4, 4)))

    assert catalog.active_patterns() == before


def test_shrink_never_goes_below_min_length():
    catalog = catalog_for(3, 5)

    extend(catalog, DimensionChange(dims(3, 5), dims(3, 4)))

    assert lengths(catalog)[ShapeKind.HORIZONTAL] == 3


def test_shrink_below_min_length_retires_instances():
    catalog = catalog_for(3, 3)

    extend(catalog, DimensionChange(dims(3, 3), dims(3, 2)))

    assert set(lengths(catalog)) == {ShapeKind.VERTICAL, ShapeKind.L_SHAPE}


def test_regrowth_reactivates_retired_shapes_in_declaration_order():
    catalog = catalog_for(3, 3)
    extend(catalog, DimensionChange(dims(3, 3), dims(3, 2)))

    extend(catalog, DimensionChange(dims(3, 2), dims(3, 3)))

    assert [p.shape_kind for p in catalog.active_patterns()] == [
        ShapeKind.HORIZONTAL,
        ShapeKind.VERTICAL,
        ShapeKind.DIAGONAL,
        ShapeKind.ANTI_DIAGONAL,
        ShapeKind.L_SHAPE,
        ShapeKind.T_SHAPE,
    ]
    assert lengths(catalog)[ShapeKind.HORIZONTAL] == 3


def test_shrink_clamps_extended_length_to_grid():
    catalog = catalog_for(3, 3)
    extend(catalog, DimensionChange(dims(3, 3), dims(6, 6)))

    # Rows shrink by 2 while cols grow by 1: diagonals follow the shrink.
    extend(catalog, DimensionChange(dims(6, 6), dims(4, 7)))

    result = lengths(catalog)
    assert result[ShapeKind.HORIZONTAL] == 7
    assert result[ShapeKind.VERTICAL] == 4
    assert result[ShapeKind.DIAGONAL] == 4


def test_axis_delta_for_mixed_changes():
    change = DimensionChange(dims(5, 5), dims(4, 7))
    assert axis_delta(ShapeKind.HORIZONTAL, change) == 2
    assert axis_delta(ShapeKind.VERTICAL, change) == -1
    assert axis_delta(ShapeKind.DIAGONAL, change) == -1

    grow = DimensionChange(dims(3, 3), dims(4, 6))
    assert axis_delta(ShapeKind.ANTI_DIAGONAL, grow) == 3


def test_cap_limits_activation_in_declaration_order():
    catalog = catalog_for(3, 3, max_active=2)

    assert [p.shape_kind for p in catalog.active_patterns()] == [ShapeKind.HORIZONTAL, ShapeKind.VERTICAL]
    assert catalog.skipped_for_capacity() == {
        ShapeKind.DIAGONAL,
        ShapeKind.ANTI_DIAGONAL,
        ShapeKind.L_SHAPE,
        ShapeKind.T_SHAPE,
    }


@pytest.mark.parametrize("max_active", [0, 1, 3, 20])
def test_cap_and_invariants_hold_across_resize_sequence(max_active):
    controller = GridSizeController(3, 3)
    catalog = catalog_for(3, 3, max_active=max_active)
    sequence = [
        (0, 1, None),
        (1, 0, 2),
        (-2, 0, None),
        (0, -2, 1),
        (3, 3, None),
        (0, -1, 3),
        (-1, 0, None),
    ]

    for row_delta, col_delta, duration in sequence:
        kind = ModifierKind.PERMANENT if duration is None else ModifierKind.TEMPORARY
        modifier = GridModifier(kind=kind, row_delta=row_delta, col_delta=col_delta, duration=duration)
        for step in (lambda: controller.apply_modifier(modifier), controller.advance_event):
            change = step()
            if change is not None:
                extend(catalog, change)
            assert len(catalog) <= max_active
            assert catalog.check_invariants(controller.current_dimensions()) == []


def test_capacity_skips_drop_shapes_the_grid_can_no_longer_host():
    catalog = catalog_for(3, 3, max_active=4)
    assert catalog.skipped_for_capacity() == {ShapeKind.L_SHAPE, ShapeKind.T_SHAPE}

    extend(catalog, DimensionChange(dims(3, 3), dims(3, 2)))

    # Retirements free the cap for the L-shape; a T-shape cannot fit 3x2.
    assert set(lengths(catalog)) == {ShapeKind.VERTICAL, ShapeKind.L_SHAPE}
    assert catalog.skipped_for_capacity() == frozenset()


def test_capacity_skips_keep_feasible_shapes_only():
    catalog = catalog_for(3, 3, max_active=1)

    extend(catalog, DimensionChange(dims(3, 3), dims(1, 3)))

    assert set(lengths(catalog)) == {ShapeKind.HORIZONTAL}
    assert catalog.skipped_for_capacity() == frozenset()
