"""Tests for the geometric-growth pricing helpers."""
from __future__ import annotations

import math

import pytest

from vectorkit import CostData, InvalidAmountError, get_cost, get_max_buy

CURVE = CostData(cost_base=10.0, multiplier=1.07)


def test_single_unit_cost_scales_with_count() -> None:
    assert get_cost(0, CURVE) == 10.0
    assert get_cost(2, CURVE) == pytest.approx(10.0 * 1.07 ** 2)


def test_batch_cost_matches_unit_sum() -> None:
    expected = sum(get_cost(3 + index, CURVE) for index in range(5))
    assert get_cost(3, CURVE, amount=5) == pytest.approx(expected)


@pytest.mark.parametrize("amount", [0, -3])
def test_amount_below_one_is_rejected(amount: int) -> None:
    with pytest.raises(InvalidAmountError, match="Amount out of range"):
        get_cost(0, CURVE, amount=amount)


def test_invalid_amount_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        get_cost(0, CURVE, amount=0)


def test_flat_multiplier_prices_linearly() -> None:
    flat = CostData(cost_base=4.0, multiplier=1.0)
    assert get_cost(10, flat, amount=3) == 12.0
    assert get_max_buy(10, flat, 13.0) == 3


def test_max_buy_is_affordable_and_maximal() -> None:
    income = 100.0
    count = get_max_buy(0, CURVE, income)
    assert count == 7
    assert get_cost(0, CURVE, amount=count) <= income
    assert get_cost(0, CURVE, amount=count + 1) > income


def test_max_buy_with_insufficient_income() -> None:
    assert get_max_buy(0, CURVE, 5.0) == 0
    assert get_max_buy(0, CURVE, -50.0) == 0


def test_overflowing_growth_prices_as_infinity() -> None:
    assert get_cost(20000, CURVE) == math.inf
    assert get_cost(20000, CURVE, amount=3) == math.inf
    assert get_cost(0, CURVE, amount=20000) == math.inf
    assert get_max_buy(20000, CURVE, 1e9) == 0
