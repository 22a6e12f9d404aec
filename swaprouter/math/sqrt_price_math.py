"""Sqrt-price and liquidity math for concentrated liquidity.

All prices are Q64.96 fixed-point sqrt prices (``sqrt(token1/token0) * 2^96``).
Rounding follows the on-chain convention: amounts owed to the pool round up,
amounts paid out by the pool round down.
"""

from __future__ import annotations

from math import isqrt

from swaprouter.constants import Q96
from swaprouter.errors import InsufficientLiquidity
from swaprouter.math.safe_int import S, SafeIntError


def _mul_div(a: int, b: int, denominator: int, round_up: bool) -> int:
    product = S(a) * S(b)
    if round_up:
        return product.ceiling_div(denominator).value
    return (product // S(denominator)).value


def get_amount0_delta(sqrt_ratio_a: int, sqrt_ratio_b: int, liquidity: int, round_up: bool) -> int:
    """Token0 needed to move between two prices at constant liquidity.

    amount0 = liquidity * 2^96 * (sqrt_b - sqrt_a) / (sqrt_b * sqrt_a)
    """
    if sqrt_ratio_a > sqrt_ratio_b:
        sqrt_ratio_a, sqrt_ratio_b = sqrt_ratio_b, sqrt_ratio_a

    numerator1 = liquidity << 96
    numerator2 = sqrt_ratio_b - sqrt_ratio_a
    if round_up:
        inner = _mul_div(numerator1, numerator2, sqrt_ratio_b, True)
        return S(inner).ceiling_div(sqrt_ratio_a).value
    return _mul_div(numerator1, numerator2, sqrt_ratio_b, False) // sqrt_ratio_a


def get_amount1_delta(sqrt_ratio_a: int, sqrt_ratio_b: int, liquidity: int, round_up: bool) -> int:
    """Token1 needed to move between two prices at constant liquidity.

    amount1 = liquidity * (sqrt_b - sqrt_a) / 2^96
    """
    if sqrt_ratio_a > sqrt_ratio_b:
        sqrt_ratio_a, sqrt_ratio_b = sqrt_ratio_b, sqrt_ratio_a
    return _mul_div(liquidity, sqrt_ratio_b - sqrt_ratio_a, Q96, round_up)


def _next_sqrt_price_from_amount0(sqrt_price: int, liquidity: int, amount: int, add: bool) -> int:
    # Rounds up: the price never moves further than the amount justifies
    if amount == 0:
        return sqrt_price
    numerator1 = liquidity << 96
    product = amount * sqrt_price
    if add:
        return _mul_div(numerator1, sqrt_price, numerator1 + product, True)
    if numerator1 <= product:
        raise InsufficientLiquidity("Output exceeds the token0 available in range")
    return _mul_div(numerator1, sqrt_price, numerator1 - product, True)


def _next_sqrt_price_from_amount1(sqrt_price: int, liquidity: int, amount: int, add: bool) -> int:
    # Rounds down: the price never moves further than the amount justifies
    if add:
        return sqrt_price + (amount << 96) // liquidity
    quotient = S(amount << 96).ceiling_div(liquidity).value
    if sqrt_price <= quotient:
        raise InsufficientLiquidity("Output exceeds the token1 available in range")
    return sqrt_price - quotient


def get_next_sqrt_price_from_input(
    sqrt_price: int, liquidity: int, amount_in: int, zero_for_one: bool
) -> int:
    """Price after adding ``amount_in`` of the input token."""
    if sqrt_price <= 0 or liquidity <= 0:
        raise InsufficientLiquidity("No liquidity in range")
    if zero_for_one:
        return _next_sqrt_price_from_amount0(sqrt_price, liquidity, amount_in, True)
    return _next_sqrt_price_from_amount1(sqrt_price, liquidity, amount_in, True)


def get_next_sqrt_price_from_output(
    sqrt_price: int, liquidity: int, amount_out: int, zero_for_one: bool
) -> int:
    """Price after removing ``amount_out`` of the output token."""
    if sqrt_price <= 0 or liquidity <= 0:
        raise InsufficientLiquidity("No liquidity in range")
    if zero_for_one:
        return _next_sqrt_price_from_amount1(sqrt_price, liquidity, amount_out, False)
    return _next_sqrt_price_from_amount0(sqrt_price, liquidity, amount_out, False)


def get_liquidity_for_amount0(sqrt_ratio_a: int, sqrt_ratio_b: int, amount0: int) -> int:
    if sqrt_ratio_a > sqrt_ratio_b:
        sqrt_ratio_a, sqrt_ratio_b = sqrt_ratio_b, sqrt_ratio_a
    intermediate = sqrt_ratio_a * sqrt_ratio_b // Q96
    return _mul_div(amount0, intermediate, sqrt_ratio_b - sqrt_ratio_a, False)


def get_liquidity_for_amount1(sqrt_ratio_a: int, sqrt_ratio_b: int, amount1: int) -> int:
    if sqrt_ratio_a > sqrt_ratio_b:
        sqrt_ratio_a, sqrt_ratio_b = sqrt_ratio_b, sqrt_ratio_a
    return _mul_div(amount1, Q96, sqrt_ratio_b - sqrt_ratio_a, False)


def get_liquidity_for_amounts(
    sqrt_price: int,
    sqrt_ratio_a: int,
    sqrt_ratio_b: int,
    amount0: int,
    amount1: int,
) -> int:
    """Maximum liquidity mintable in [a, b] from the given amounts.

    Below the range only token0 counts, above it only token1, and inside the
    range the scarcer of the two sides bounds the result.
    """
    if sqrt_ratio_a > sqrt_ratio_b:
        sqrt_ratio_a, sqrt_ratio_b = sqrt_ratio_b, sqrt_ratio_a
    if sqrt_ratio_a == sqrt_ratio_b:
        return 0

    if sqrt_price <= sqrt_ratio_a:
        return get_liquidity_for_amount0(sqrt_ratio_a, sqrt_ratio_b, amount0)
    if sqrt_price < sqrt_ratio_b:
        liquidity0 = get_liquidity_for_amount0(sqrt_price, sqrt_ratio_b, amount0)
        liquidity1 = get_liquidity_for_amount1(sqrt_ratio_a, sqrt_price, amount1)
        return min(liquidity0, liquidity1)
    return get_liquidity_for_amount1(sqrt_ratio_a, sqrt_ratio_b, amount1)


def sqrt_price_from_reserves(reserve0: int, reserve1: int) -> int:
    """Q64.96 sqrt price implied by a reserve pair, rounded down.

    Raises:
        InsufficientLiquidity: If reserve0 is zero (price undefined)
    """
    try:
        ratio_x192 = (S(reserve1) << 192) // S(reserve0)
    except SafeIntError as err:
        raise InsufficientLiquidity("Cannot price a pool with zero reserve0") from err
    return isqrt(ratio_x192.value)


__all__ = [
    "get_amount0_delta",
    "get_amount1_delta",
    "get_next_sqrt_price_from_input",
    "get_next_sqrt_price_from_output",
    "get_liquidity_for_amount0",
    "get_liquidity_for_amount1",
    "get_liquidity_for_amounts",
    "sqrt_price_from_reserves",
]
