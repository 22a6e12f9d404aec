"""AMM (Automated Market Maker) swap math."""

from swaprouter.amm.base import PoolAMM, SwapResult
from swaprouter.amm.concentrated import ConcentratedLiquidityAMM, concentrated_liquidity_amm
from swaprouter.amm.constant_product import ConstantProductAMM, constant_product_amm

__all__ = [
    # Base classes
    "PoolAMM",
    "SwapResult",
    # Constant product
    "ConstantProductAMM",
    "constant_product_amm",
    # Concentrated liquidity
    "ConcentratedLiquidityAMM",
    "concentrated_liquidity_amm",
]
