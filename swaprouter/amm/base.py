"""Base classes for pool swap math.

A ``PoolAMM`` turns a pool snapshot plus a requested amount into a
``SwapResult`` describing both sides of the trade and the pool state after
it. The pool then builds a fresh snapshot from that result, so AMMs never
mutate the pool they are given.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swaprouter.pools.pool import Pool
    from swaprouter.pools.tick_list import TickList


@dataclass(frozen=True)
class SwapResult:
    """Result of simulating a swap against a pool snapshot."""

    amount_in: int
    amount_out: int
    # Post-trade pool state
    sqrt_price_x96: int
    liquidity: int
    ticks: TickList
    fee_growth_global_0_x128: int = 0
    fee_growth_global_1_x128: int = 0


class PoolAMM(ABC):
    """Abstract swap math for a two-token pool.

    Implementations raise ``InsufficientLiquidity`` when the pool cannot
    fill the request and ``InsufficientInputAmount`` when the request is too
    small to move any tokens. Both are ``SimulationError``s.
    """

    @abstractmethod
    def simulate_exact_input(self, pool: Pool, zero_for_one: bool, amount_in: int) -> SwapResult:
        """Swap exactly ``amount_in`` of the input token.

        Args:
            pool: Pool snapshot to trade against
            zero_for_one: True when token0 is the input
            amount_in: Input amount, fee included

        Returns:
            SwapResult with the output amount and post-trade state
        """
        ...

    @abstractmethod
    def simulate_exact_output(self, pool: Pool, zero_for_one: bool, amount_out: int) -> SwapResult:
        """Swap for exactly ``amount_out`` of the output token.

        Args:
            pool: Pool snapshot to trade against
            zero_for_one: True when token0 is the input
            amount_out: Desired output amount

        Returns:
            SwapResult with the required input and post-trade state
        """
        ...


__all__ = ["SwapResult", "PoolAMM"]
