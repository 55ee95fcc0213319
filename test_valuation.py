"""Tests for multiplier and coin valuation."""

import pytest

from core.enums.shape_kind import ALL_SHAPE_KINDS, ShapeKind
from core.models.active_pattern import ActivePattern
from engine.valuation import BASE_MULTIPLIERS, base_multiplier, coin_value, make_pattern, multiplier, verify_multiplier


def test_reference_length_uses_base_multiplier():
    assert multiplier(3, ShapeKind.HORIZONTAL) == 1.0
    assert multiplier(3, ShapeKind.DIAGONAL) == 1.2
    assert multiplier(3, ShapeKind.L_SHAPE) == 1.5


def test_growth_factor_per_extra_cell():
    assert multiplier(4, ShapeKind.HORIZONTAL) == pytest.approx(1.2)
    assert multiplier(5, ShapeKind.VERTICAL) == pytest.approx(1.44)
    assert multiplier(5, ShapeKind.T_SHAPE) == pytest.approx(2.16)


def test_accepts_plain_string_shape_kind():
    assert multiplier(3, "horizontal") == 1.0
    assert multiplier(4, "anti_diagonal") == pytest.approx(1.44)


@pytest.mark.parametrize("shape_kind", ALL_SHAPE_KINDS)
def test_strictly_increasing_in_length(shape_kind):
    values = [multiplier(length, shape_kind) for length in range(3, 12)]
    assert all(a < b for a, b in zip(values, values[1:]))


def test_every_shape_kind_has_a_base_multiplier():
    assert set(BASE_MULTIPLIERS) == set(ALL_SHAPE_KINDS)


def test_unknown_shape_kind_falls_back_and_logs(caplog):
    with caplog.at_level("ERROR"):
        assert base_multiplier("hexagon") == 1.0
    assert "hexagon" in caplog.text


def test_coin_value_floors_ten_times_multiplier():
    assert coin_value(1.0) == 10
    assert coin_value(1.2) == 12
    assert coin_value(1.44) == 14
    assert coin_value(2.16) == 21


def test_make_pattern_is_reproducible():
    pattern = make_pattern(ShapeKind.DIAGONAL, 6)
    assert pattern.multiplier == multiplier(6, ShapeKind.DIAGONAL)
    assert verify_multiplier(pattern)


def test_verify_multiplier_detects_drift():
    pattern = ActivePattern(shape_kind=ShapeKind.HORIZONTAL, length=4, multiplier=1.0)
    assert not verify_multiplier(pattern)
