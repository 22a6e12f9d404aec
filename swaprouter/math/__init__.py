"""Integer math for pool simulation.

This package provides the fixed-point primitives the AMMs are built on:
- SafeInt: underflow and zero-division checked integer wrapper
- tick_math: tick index <-> Q64.96 sqrt price conversion
- sqrt_price_math: token amount deltas and next-price calculations
- swap_math: one swap step within a tick range
"""

from swaprouter.math.safe_int import S, SafeInt, SafeIntError
from swaprouter.math.sqrt_price_math import get_liquidity_for_amounts, sqrt_price_from_reserves
from swaprouter.math.swap_math import SwapStep, compute_swap_step
from swaprouter.math.tick_math import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio

__all__ = [
    "S",
    "SafeInt",
    "SafeIntError",
    "get_liquidity_for_amounts",
    "sqrt_price_from_reserves",
    "SwapStep",
    "compute_swap_step",
    "get_sqrt_ratio_at_tick",
    "get_tick_at_sqrt_ratio",
]
