"""Geometric-growth pricing for incremental purchases.

Each successive unit costs ``multiplier`` times the previous one, so the
price of the ``n``-th unit is ``cost_base * multiplier ** n`` and buying a
batch sums a geometric series.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

LOGGER = logging.getLogger(__name__)


class InvalidAmountError(ValueError):
    """Raised when a purchase amount below one unit is requested."""


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf


# //1.- Capture the pricing curve parameters for a purchasable item.
@dataclass(frozen=True)
class CostData:
    cost_base: float
    multiplier: float = 1.07


# //2.- Price ``amount`` units given ``current_count`` already owned.
def get_cost(current_count: float, data: CostData, amount: int = 1) -> float:
    if amount < 1:
        raise InvalidAmountError(f"Amount out of range {amount}")
    r = data.multiplier
    first = data.cost_base * _power(r, current_count)
    if amount == 1:
        return first
    if r == 1:
        # //3.- A flat curve is the limit of the series sum.
        LOGGER.debug("Flat multiplier, pricing %s units linearly", amount)
        return first * amount
    return first * (_power(r, amount) - 1) / (r - 1)


# //4.- Solve the series sum for the largest affordable batch size.
def get_max_buy(current_count: float, data: CostData, income: float) -> int:
    r = data.multiplier
    first = data.cost_base * _power(r, current_count)
    if r == 1:
        return max(0, math.floor(income / first))
    ratio = income * (r - 1) / first + 1
    if ratio <= 0:
        LOGGER.debug("Income %s cannot cover any unit", income)
        return 0
    return max(0, math.floor(math.log(ratio) / math.log(r)))


__all__ = ["CostData", "InvalidAmountError", "get_cost", "get_max_buy"]
