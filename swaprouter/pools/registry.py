"""Pool registry keyed by deterministic pool address.

Two snapshots of the same (token0, token1, fee) pool share an address; adding
the newer one replaces the older. Route search runs over the registry's
current pools through a lazily built ``PoolGraph``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

import structlog

from swaprouter.models.currency import Token
from swaprouter.pools.pool import Pool

if TYPE_CHECKING:
    from swaprouter.config import BestTradeOptions
    from swaprouter.models.amounts import CurrencyAmount
    from swaprouter.models.currency import Currency
    from swaprouter.routing.pathfinding import PoolGraph
    from swaprouter.routing.trade import Trade

logger = structlog.get_logger()


class PoolRegistry:
    """Registry of pool snapshots for routing."""

    def __init__(self, pools: Iterable[Pool] | None = None) -> None:
        """Initialize the registry with optional pools.

        Args:
            pools: Initial pools. Later entries replace earlier ones with the
                   same address. If None, starts empty.
        """
        self._pools: dict[str, Pool] = {}
        # Lazy-initialized graph, dropped whenever the pool set changes
        self._graph: PoolGraph | None = None

        if pools:
            for pool in pools:
                self.add_pool(pool)

    def add_pool(self, pool: Pool) -> None:
        """Add a pool, replacing any snapshot with the same address."""
        if pool.address in self._pools:
            logger.debug(
                "pool_replaced",
                pool=pool.address[-8:],
                token0=pool.token0.address[-8:],
                token1=pool.token1.address[-8:],
                fee=pool.fee,
            )
        self._pools[pool.address] = pool
        self._graph = None

    def get_pool(self, token_a: Token, token_b: Token, fee: int) -> Pool | None:
        """Get the pool for a token pair and fee tier (order independent)."""
        return self._pools.get(Pool.get_address(token_a, token_b, fee))

    def get_pools_for_pair(self, token_a: Token, token_b: Token) -> list[Pool]:
        """All fee tiers available for a token pair."""
        pair = {token_a, token_b}
        return [pool for pool in self._pools.values() if {pool.token0, pool.token1} == pair]

    def pools_for_token(self, token: Token) -> list[Pool]:
        return list(self.graph.pools_for_token(token))

    @property
    def graph(self) -> PoolGraph:
        if self._graph is None:
            from swaprouter.routing.pathfinding import PoolGraph

            self._graph = PoolGraph(self._pools.values())
        return self._graph

    @property
    def pool_count(self) -> int:
        return len(self._pools)

    def __len__(self) -> int:
        return len(self._pools)

    def __iter__(self) -> Iterator[Pool]:
        return iter(self._pools.values())

    def __contains__(self, pool: object) -> bool:
        return isinstance(pool, Pool) and self._pools.get(pool.address) is pool

    def best_trade_exact_in(
        self,
        amount_in: CurrencyAmount,
        currency_out: Currency,
        options: BestTradeOptions | None = None,
    ) -> list[Trade]:
        """``Trade.best_trade_exact_in`` over the registered pools."""
        from swaprouter.routing.trade import Trade

        return Trade.best_trade_exact_in(self.graph.pools, amount_in, currency_out, options)

    def best_trade_exact_out(
        self,
        currency_in: Currency,
        amount_out: CurrencyAmount,
        options: BestTradeOptions | None = None,
    ) -> list[Trade]:
        """``Trade.best_trade_exact_out`` over the registered pools."""
        from swaprouter.routing.trade import Trade

        return Trade.best_trade_exact_out(self.graph.pools, currency_in, amount_out, options)


__all__ = ["PoolRegistry"]
