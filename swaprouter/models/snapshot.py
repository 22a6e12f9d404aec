"""Pydantic models for an in-memory pool universe document.

The document is what a caller hands the router after fetching pool state
elsewhere: a chain id and a list of pools with their reserves, price,
liquidity and initialized ticks. Large integers may be given as ints,
decimal strings, or 0x-prefixed hex strings.
"""

from typing import Literal

from pydantic import BaseModel, Field

from swaprouter.models.types import Address, Int256, Uint256


class TokenSnapshot(BaseModel):
    """Token metadata for one side of a pool."""

    address: Address
    decimals: int = Field(default=18, ge=0, le=77)
    symbol: str | None = None
    name: str | None = None


class TickSnapshot(BaseModel):
    """An initialized tick."""

    model_config = {"populate_by_name": True}

    index: int
    liquidity_net: Int256 = Field(alias="liquidityNet")
    liquidity_gross: Uint256 = Field(alias="liquidityGross")
    fee_growth_outside_0_x128: Uint256 = Field(default=0, alias="feeGrowthOutside0X128")
    fee_growth_outside_1_x128: Uint256 = Field(default=0, alias="feeGrowthOutside1X128")


class PoolSnapshot(BaseModel):
    """State of a single pool.

    ``kind`` selects the swap math: ``constantProduct`` prices trades from
    the reserves, ``concentratedLiquidity`` walks the ticks.
    """

    model_config = {"populate_by_name": True}

    id: str | None = None
    kind: Literal["constantProduct", "concentratedLiquidity"] = "constantProduct"
    token0: TokenSnapshot
    token1: TokenSnapshot
    reserve0: Uint256
    reserve1: Uint256
    fee: int = Field(description="Fee tier in parts per million")
    sqrt_price_x96: Uint256 = Field(alias="sqrtPriceX96")
    liquidity: Uint256
    ticks: list[TickSnapshot]
    fee_growth_global_0_x128: Uint256 = Field(default=0, alias="feeGrowthGlobal0X128")
    fee_growth_global_1_x128: Uint256 = Field(default=0, alias="feeGrowthGlobal1X128")


class PoolUniverse(BaseModel):
    """All pools available for routing on one chain."""

    model_config = {"populate_by_name": True}

    chain_id: int = Field(alias="chainId", ge=1)
    pools: list[PoolSnapshot] = Field(default_factory=list)


__all__ = ["TokenSnapshot", "TickSnapshot", "PoolSnapshot", "PoolUniverse"]
