"""Pool adjacency graph for route search.

Edges are pools; nodes are tokens. Unlike a token-to-token graph, the
search needs to know *which* pools connect two tokens, since several fee
tiers can serve the same pair and each is its own candidate hop.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from swaprouter.models.currency import Token
from swaprouter.pools.pool import Pool


class PoolGraph:
    """Adjacency list token -> incident pools, in input order.

    A pure data structure over a fixed pool sequence; build a new graph
    when the pool set changes.
    """

    def __init__(self, pools: Iterable[Pool]) -> None:
        self._pools: tuple[Pool, ...] = tuple(pools)
        self._adjacency: dict[Token, list[Pool]] = {}
        for pool in self._pools:
            self._adjacency.setdefault(pool.token0, []).append(pool)
            self._adjacency.setdefault(pool.token1, []).append(pool)

    @property
    def pools(self) -> tuple[Pool, ...]:
        return self._pools

    def pools_for_token(self, token: Token) -> Sequence[Pool]:
        """Pools that hold ``token``, in the order they were given."""
        return self._adjacency.get(token, ())

    def get_neighbors(self, token: Token) -> set[Token]:
        """Tokens directly tradeable with ``token`` through a single pool."""
        neighbors: set[Token] = set()
        for pool in self.pools_for_token(token):
            neighbors.add(pool.token1 if pool.token0 == token else pool.token0)
        return neighbors

    def has_token(self, token: Token) -> bool:
        return token in self._adjacency

    def __len__(self) -> int:
        return len(self._pools)


__all__ = ["PoolGraph"]
