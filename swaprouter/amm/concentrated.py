"""Concentrated liquidity swap math.

Walks the pool's initialized ticks the way the on-chain swap loop does:
trade at constant liquidity up to the next initialized tick, cross it,
apply its net liquidity, and continue until the requested amount is
consumed or the price hits the protocol bound.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from swaprouter.amm.base import PoolAMM, SwapResult
from swaprouter.constants import MAX_SQRT_RATIO, MIN_SQRT_RATIO, Q128, UINT256_MAX
from swaprouter.errors import InsufficientInputAmount, InsufficientLiquidity, InvalidArgument
from swaprouter.math.swap_math import compute_swap_step
from swaprouter.math.tick_math import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio

if TYPE_CHECKING:
    from swaprouter.pools.pool import Pool
    from swaprouter.pools.tick import Tick

logger = structlog.get_logger()


class ConcentratedLiquidityAMM(PoolAMM):
    """Tick-walking swap simulation over a pool's ``TickList``.

    Uses the pool's sqrt price, in-range liquidity, and fee tier. Reserves
    are only consulted as a cap: an exact-input swap may never pay out more
    than the pool holds of the output token.
    """

    def simulate_exact_input(self, pool: Pool, zero_for_one: bool, amount_in: int) -> SwapResult:
        if amount_in <= 0:
            raise InsufficientInputAmount(f"Input amount must be positive, got {amount_in}")
        return self._swap(pool, zero_for_one, amount_in)

    def simulate_exact_output(self, pool: Pool, zero_for_one: bool, amount_out: int) -> SwapResult:
        if amount_out <= 0:
            raise InsufficientInputAmount(f"Output amount must be positive, got {amount_out}")
        return self._swap(pool, zero_for_one, -amount_out)

    def _swap(self, pool: Pool, zero_for_one: bool, amount_specified: int) -> SwapResult:
        """Run the swap loop.

        Args:
            pool: Pool snapshot
            zero_for_one: True when token0 is the input
            amount_specified: Positive for exact input, negative for exact output
        """
        exact_in = amount_specified > 0
        sqrt_price = pool.sqrt_price_x96
        try:
            tick = get_tick_at_sqrt_ratio(sqrt_price)
        except InvalidArgument as err:
            raise InsufficientLiquidity(f"Pool price {sqrt_price} is outside the tick range") from err

        limit = MIN_SQRT_RATIO + 1 if zero_for_one else MAX_SQRT_RATIO - 1
        liquidity = pool.liquidity
        remaining = amount_specified
        calculated = 0
        fee_growth_0 = pool.fee_growth_global_0_x128
        fee_growth_1 = pool.fee_growth_global_1_x128
        crossed: dict[int, Tick] = {}

        while remaining != 0 and sqrt_price != limit:
            if zero_for_one:
                next_tick = pool.ticks.next_initialized_below(tick + 1)
            else:
                next_tick = pool.ticks.next_initialized_at_or_above(tick + 1)

            if next_tick is None:
                tick_price = None
                target = limit
            else:
                tick_price = get_sqrt_ratio_at_tick(next_tick.index)
                target = max(tick_price, limit) if zero_for_one else min(tick_price, limit)

            step = compute_swap_step(sqrt_price, target, liquidity, remaining, pool.fee)

            if exact_in:
                remaining -= step.amount_in + step.fee_amount
                calculated += step.amount_out
            else:
                remaining += step.amount_out
                calculated += step.amount_in + step.fee_amount

            if liquidity > 0 and step.fee_amount > 0:
                growth = step.fee_amount * Q128 // liquidity
                if zero_for_one:
                    fee_growth_0 = (fee_growth_0 + growth) & UINT256_MAX
                else:
                    fee_growth_1 = (fee_growth_1 + growth) & UINT256_MAX

            sqrt_price = step.sqrt_price_next_x96

            if next_tick is not None and sqrt_price == tick_price:
                current = crossed.get(next_tick.index, next_tick)
                crossed[next_tick.index] = current.cross(fee_growth_0, fee_growth_1)
                liquidity_net = -next_tick.liquidity_net if zero_for_one else next_tick.liquidity_net
                liquidity += liquidity_net
                if liquidity < 0:
                    raise InsufficientLiquidity(f"Crossing tick {next_tick.index} leaves negative liquidity")
                tick = next_tick.index - 1 if zero_for_one else next_tick.index
            else:
                tick = get_tick_at_sqrt_ratio(sqrt_price)

        if remaining != 0:
            logger.debug(
                "concentrated_swap_exhausted",
                zero_for_one=zero_for_one,
                amount_specified=amount_specified,
                remaining=remaining,
            )
            raise InsufficientLiquidity("Swap ran out of liquidity before filling the amount")

        if exact_in:
            amount_in, amount_out = amount_specified, calculated
        else:
            amount_in, amount_out = calculated, -amount_specified

        reserve_out = pool.reserve1.raw if zero_for_one else pool.reserve0.raw
        if amount_out > reserve_out:
            raise InsufficientLiquidity(f"Output {amount_out} exceeds reserve {reserve_out}")
        if amount_out == 0:
            raise InsufficientInputAmount(f"Input {amount_in} is too small to produce output")

        ticks = pool.ticks.replace(*crossed.values()) if crossed else pool.ticks
        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            sqrt_price_x96=sqrt_price,
            liquidity=liquidity,
            ticks=ticks,
            fee_growth_global_0_x128=fee_growth_0,
            fee_growth_global_1_x128=fee_growth_1,
        )


# Singleton instance
concentrated_liquidity_amm = ConcentratedLiquidityAMM()

__all__ = ["ConcentratedLiquidityAMM", "concentrated_liquidity_amm"]
