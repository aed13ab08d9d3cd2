"""Vector and scalar math helpers for simulation and game-style numeric code.

The package bundles two independent vector value types, the scalar
helpers they share, and a geometric-growth pricing calculator.
"""

from . import mathf
from .costs import CostData, InvalidAmountError, get_cost, get_max_buy
from .config import ConfigurationError, load_cost_config
from .vector2 import Vector2
from .vector3 import Vector3

__all__ = [
    "mathf",
    "Vector2",
    "Vector3",
    "CostData",
    "InvalidAmountError",
    "get_cost",
    "get_max_buy",
    "ConfigurationError",
    "load_cost_config",
]
