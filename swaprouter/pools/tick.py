"""Tick record: one initialized price boundary of a pool."""

from __future__ import annotations

from dataclasses import dataclass

from swaprouter.constants import MAX_TICK, MIN_TICK, UINT256_MAX
from swaprouter.errors import InvalidTick


@dataclass(frozen=True)
class Tick:
    """An initialized tick.

    Attributes:
        index: Position in tick space; the boundary price is 1.0001^index
        liquidity_net: Liquidity added when the price crosses this tick upward
            (subtracted when crossing downward)
        liquidity_gross: Total liquidity referencing this tick
        fee_growth_outside_0_x128: Token0 fee growth on the far side of the tick
        fee_growth_outside_1_x128: Token1 fee growth on the far side of the tick
    """

    index: int
    liquidity_net: int
    liquidity_gross: int
    fee_growth_outside_0_x128: int = 0
    fee_growth_outside_1_x128: int = 0

    def __post_init__(self) -> None:
        for name in (
            "index",
            "liquidity_net",
            "liquidity_gross",
            "fee_growth_outside_0_x128",
            "fee_growth_outside_1_x128",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidTick(f"Tick {name} must be an int, got {type(value).__name__}")
        if not MIN_TICK <= self.index <= MAX_TICK:
            raise InvalidTick(f"Tick index {self.index} outside [{MIN_TICK}, {MAX_TICK}]")
        if self.liquidity_gross < 0:
            raise InvalidTick(f"Tick {self.index} has negative liquidity_gross")
        if abs(self.liquidity_net) > self.liquidity_gross:
            raise InvalidTick(f"Tick {self.index} has |liquidity_net| > liquidity_gross")

    def cross(self, fee_growth_global_0_x128: int, fee_growth_global_1_x128: int) -> Tick:
        """The tick after the price crosses it: fee growth outside flips sides."""
        return Tick(
            index=self.index,
            liquidity_net=self.liquidity_net,
            liquidity_gross=self.liquidity_gross,
            fee_growth_outside_0_x128=(fee_growth_global_0_x128 - self.fee_growth_outside_0_x128)
            & UINT256_MAX,
            fee_growth_outside_1_x128=(fee_growth_global_1_x128 - self.fee_growth_outside_1_x128)
            & UINT256_MAX,
        )


__all__ = ["Tick"]
