"""Single swap step within one initialized tick range."""

from __future__ import annotations

from dataclasses import dataclass

from swaprouter.constants import FEE_DENOMINATOR
from swaprouter.math.safe_int import S
from swaprouter.math.sqrt_price_math import (
    get_amount0_delta,
    get_amount1_delta,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)


@dataclass(frozen=True)
class SwapStep:
    """Outcome of swapping toward a target price at constant liquidity."""

    sqrt_price_next_x96: int
    amount_in: int
    amount_out: int
    fee_amount: int


def compute_swap_step(
    sqrt_price_current_x96: int,
    sqrt_price_target_x96: int,
    liquidity: int,
    amount_remaining: int,
    fee_pips: int,
) -> SwapStep:
    """Swap as far toward ``sqrt_price_target_x96`` as ``amount_remaining`` allows.

    A non-negative ``amount_remaining`` is an exact input (fee included); a
    negative one is an exact output. The direction follows from the two
    prices: moving down is token0 in, token1 out.
    """
    zero_for_one = sqrt_price_current_x96 >= sqrt_price_target_x96
    exact_in = amount_remaining >= 0
    fee_complement = FEE_DENOMINATOR - fee_pips

    amount_in = 0
    amount_out = 0
    if exact_in:
        amount_remaining_less_fee = (S(amount_remaining) * fee_complement // FEE_DENOMINATOR).value
        if zero_for_one:
            amount_in = get_amount0_delta(sqrt_price_target_x96, sqrt_price_current_x96, liquidity, True)
        else:
            amount_in = get_amount1_delta(sqrt_price_current_x96, sqrt_price_target_x96, liquidity, True)
        if amount_remaining_less_fee >= amount_in:
            sqrt_price_next = sqrt_price_target_x96
        else:
            sqrt_price_next = get_next_sqrt_price_from_input(
                sqrt_price_current_x96, liquidity, amount_remaining_less_fee, zero_for_one
            )
    else:
        if zero_for_one:
            amount_out = get_amount1_delta(sqrt_price_target_x96, sqrt_price_current_x96, liquidity, False)
        else:
            amount_out = get_amount0_delta(sqrt_price_current_x96, sqrt_price_target_x96, liquidity, False)
        if -amount_remaining >= amount_out:
            sqrt_price_next = sqrt_price_target_x96
        else:
            sqrt_price_next = get_next_sqrt_price_from_output(
                sqrt_price_current_x96, liquidity, -amount_remaining, zero_for_one
            )

    reached_target = sqrt_price_next == sqrt_price_target_x96

    if zero_for_one:
        if not (reached_target and exact_in):
            amount_in = get_amount0_delta(sqrt_price_next, sqrt_price_current_x96, liquidity, True)
        if not (reached_target and not exact_in):
            amount_out = get_amount1_delta(sqrt_price_next, sqrt_price_current_x96, liquidity, False)
    else:
        if not (reached_target and exact_in):
            amount_in = get_amount1_delta(sqrt_price_current_x96, sqrt_price_next, liquidity, True)
        if not (reached_target and not exact_in):
            amount_out = get_amount0_delta(sqrt_price_current_x96, sqrt_price_next, liquidity, False)

    # Never pay out more than an exact-output request asked for
    if not exact_in and amount_out > -amount_remaining:
        amount_out = -amount_remaining

    if exact_in and not reached_target:
        # The whole remainder was consumed; what did not move the price is fee
        fee_amount = amount_remaining - amount_in
    else:
        fee_amount = S(amount_in * fee_pips).ceiling_div(fee_complement).value

    return SwapStep(
        sqrt_price_next_x96=sqrt_price_next,
        amount_in=amount_in,
        amount_out=amount_out,
        fee_amount=fee_amount,
    )


__all__ = ["SwapStep", "compute_swap_step"]
