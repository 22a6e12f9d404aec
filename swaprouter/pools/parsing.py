"""Build pools from a validated pool universe document."""

from __future__ import annotations

from typing import Any

import structlog

from swaprouter.amm.concentrated import concentrated_liquidity_amm
from swaprouter.amm.constant_product import constant_product_amm
from swaprouter.errors import InvalidArgument
from swaprouter.models.amounts import CurrencyAmount
from swaprouter.models.currency import Token
from swaprouter.models.snapshot import PoolSnapshot, PoolUniverse, TokenSnapshot
from swaprouter.pools.pool import Pool
from swaprouter.pools.registry import PoolRegistry
from swaprouter.pools.tick import Tick

logger = structlog.get_logger()


def _to_token(chain_id: int, snapshot: TokenSnapshot) -> Token:
    return Token(chain_id, snapshot.address, snapshot.decimals, snapshot.symbol, snapshot.name)


def parse_pool_snapshot(snapshot: PoolSnapshot, chain_id: int) -> Pool | None:
    """Convert one pool snapshot into a Pool.

    Args:
        snapshot: Validated pool state
        chain_id: Chain the pool lives on

    Returns:
        Pool, or None if the snapshot describes an unusable pool (identical
        tokens, empty tick list, out-of-range fee or tick)
    """
    amm = concentrated_liquidity_amm if snapshot.kind == "concentratedLiquidity" else constant_product_amm
    try:
        ticks = [
            Tick(
                index=tick.index,
                liquidity_net=tick.liquidity_net,
                liquidity_gross=tick.liquidity_gross,
                fee_growth_outside_0_x128=tick.fee_growth_outside_0_x128,
                fee_growth_outside_1_x128=tick.fee_growth_outside_1_x128,
            )
            for tick in snapshot.ticks
        ]
        return Pool(
            CurrencyAmount(_to_token(chain_id, snapshot.token0), snapshot.reserve0),
            CurrencyAmount(_to_token(chain_id, snapshot.token1), snapshot.reserve1),
            snapshot.fee,
            snapshot.sqrt_price_x96,
            snapshot.liquidity,
            ticks,
            amm=amm,
            fee_growth_global_0_x128=snapshot.fee_growth_global_0_x128,
            fee_growth_global_1_x128=snapshot.fee_growth_global_1_x128,
        )
    except InvalidArgument as err:
        logger.debug(
            "pool_snapshot_skipped",
            pool_id=snapshot.id,
            token0=snapshot.token0.address[-8:],
            token1=snapshot.token1.address[-8:],
            reason=str(err),
        )
        return None


def build_registry_from_snapshot(universe: PoolUniverse | dict[str, Any]) -> PoolRegistry:
    """Build a PoolRegistry from a pool universe document.

    Args:
        universe: A PoolUniverse, or the raw document to validate into one

    Raises:
        pydantic.ValidationError: If a raw document is malformed
    """
    if not isinstance(universe, PoolUniverse):
        universe = PoolUniverse.model_validate(universe)

    registry = PoolRegistry()
    skipped = 0
    for snapshot in universe.pools:
        pool = parse_pool_snapshot(snapshot, universe.chain_id)
        if pool is None:
            skipped += 1
            continue
        registry.add_pool(pool)

    if skipped:
        logger.info("pool_snapshots_skipped", count=skipped, loaded=len(registry))
    return registry


__all__ = ["parse_pool_snapshot", "build_registry_from_snapshot"]
