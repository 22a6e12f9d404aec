"""Constant product swap math over a pool's reserves.

Uses the formula x * y = k with the fee tier (parts per million) deducted
from the input. This is the default AMM for ``Pool``: it prices trades from
the reserve snapshot alone and carries the tick list over untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from swaprouter.amm.base import PoolAMM, SwapResult
from swaprouter.constants import FEE_DENOMINATOR
from swaprouter.errors import InsufficientInputAmount, InsufficientLiquidity
from swaprouter.math.safe_int import S
from swaprouter.math.sqrt_price_math import sqrt_price_from_reserves

if TYPE_CHECKING:
    from swaprouter.pools.pool import Pool


class ConstantProductAMM(PoolAMM):
    """Constant product AMM math.

    Formula: amount_out = (in * (1e6 - fee) * res_out) / (res_in * 1e6 + in * (1e6 - fee))

    For the 3000 fee tier this is the familiar 997/1000 factor.
    """

    def get_amount_out(self, amount_in: int, reserve_in: int, reserve_out: int, fee: int) -> int:
        """Calculate output amount for an exact input, rounding down.

        Raises:
            InsufficientLiquidity: If either reserve is empty
            InsufficientInputAmount: If the input is not positive or the output rounds to zero
        """
        if reserve_in <= 0 or reserve_out <= 0:
            raise InsufficientLiquidity("Pool has an empty reserve")
        if amount_in <= 0:
            raise InsufficientInputAmount(f"Input amount must be positive, got {amount_in}")

        amount_in_with_fee = S(amount_in) * S(FEE_DENOMINATOR - fee)
        numerator = amount_in_with_fee * S(reserve_out)
        denominator = S(reserve_in) * S(FEE_DENOMINATOR) + amount_in_with_fee

        amount_out = (numerator // denominator).value
        if amount_out == 0:
            raise InsufficientInputAmount(f"Input {amount_in} is too small to produce output")
        return amount_out

    def get_amount_in(self, amount_out: int, reserve_in: int, reserve_out: int, fee: int) -> int:
        """Calculate required input for an exact output, rounding up.

        Formula: amount_in = (res_in * out * 1e6) / ((res_out - out) * (1e6 - fee)) + 1

        Raises:
            InsufficientLiquidity: If a reserve is empty or out >= res_out
            InsufficientInputAmount: If the requested output is not positive
        """
        if reserve_in <= 0 or reserve_out <= 0:
            raise InsufficientLiquidity("Pool has an empty reserve")
        if amount_out <= 0:
            raise InsufficientInputAmount(f"Output amount must be positive, got {amount_out}")
        if amount_out >= reserve_out:
            raise InsufficientLiquidity(f"Output {amount_out} exceeds reserve {reserve_out}")

        numerator = S(reserve_in) * S(amount_out) * S(FEE_DENOMINATOR)
        denominator = (S(reserve_out) - S(amount_out)) * S(FEE_DENOMINATOR - fee)

        return ((numerator // denominator) + S(1)).value

    def simulate_exact_input(self, pool: Pool, zero_for_one: bool, amount_in: int) -> SwapResult:
        reserve_in, reserve_out = _ordered_reserves(pool, zero_for_one)
        amount_out = self.get_amount_out(amount_in, reserve_in, reserve_out, pool.fee)
        return _result(pool, zero_for_one, amount_in, amount_out)

    def simulate_exact_output(self, pool: Pool, zero_for_one: bool, amount_out: int) -> SwapResult:
        reserve_in, reserve_out = _ordered_reserves(pool, zero_for_one)
        amount_in = self.get_amount_in(amount_out, reserve_in, reserve_out, pool.fee)
        return _result(pool, zero_for_one, amount_in, amount_out)


def _ordered_reserves(pool: Pool, zero_for_one: bool) -> tuple[int, int]:
    """Reserves ordered as (reserve_in, reserve_out)."""
    if zero_for_one:
        return pool.reserve0.raw, pool.reserve1.raw
    return pool.reserve1.raw, pool.reserve0.raw


def _result(pool: Pool, zero_for_one: bool, amount_in: int, amount_out: int) -> SwapResult:
    reserve_in, reserve_out = _ordered_reserves(pool, zero_for_one)
    new_in = reserve_in + amount_in
    new_out = (S(reserve_out) - S(amount_out)).value
    reserve0, reserve1 = (new_in, new_out) if zero_for_one else (new_out, new_in)
    return SwapResult(
        amount_in=amount_in,
        amount_out=amount_out,
        sqrt_price_x96=sqrt_price_from_reserves(reserve0, reserve1),
        liquidity=pool.liquidity,
        ticks=pool.ticks,
        fee_growth_global_0_x128=pool.fee_growth_global_0_x128,
        fee_growth_global_1_x128=pool.fee_growth_global_1_x128,
    )


# Singleton instance
constant_product_amm = ConstantProductAMM()

__all__ = ["ConstantProductAMM", "constant_product_amm"]
