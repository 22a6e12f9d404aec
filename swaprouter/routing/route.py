"""Route: a validated path of pools from an input asset to an output asset."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property

from swaprouter.errors import DisjointRoute, InvalidPools, UnrelatedAsset
from swaprouter.models.amounts import Price
from swaprouter.models.currency import Currency, Token, matches_currency
from swaprouter.pools.pool import Pool


def _pair(pool: Pool) -> frozenset[Token]:
    return frozenset((pool.token0, pool.token1))


def _infer_input(pools: Sequence[Pool]) -> Token:
    """Start token of a path when the caller did not name one.

    With several pools it is the token of the first pool that the second
    one does not hold; a lone pool starts from token0.
    """
    first = pools[0]
    if len(pools) == 1:
        return first.token0
    shared = _pair(first) & _pair(pools[1])
    if len(shared) != 1:
        raise DisjointRoute("First two pools must share exactly one token")
    return first.token1 if first.token0 in shared else first.token0


class Route:
    """An ordered, non-empty path of pools.

    ``input`` and ``output`` are the caller-facing currencies; either may be
    the chain's native currency when the adjacent pool holds its wrapped
    token. ``token_path`` always lists the tokens the pools actually trade.

    Raises:
        InvalidPools: If ``pools`` is empty or spans more than one chain
        DisjointRoute: If consecutive pools do not share exactly one token
        UnrelatedAsset: If ``input``/``output`` cannot be reconciled with
            the path's endpoints
    """

    def __init__(
        self,
        pools: Sequence[Pool],
        input: Currency | None = None,
        output: Currency | None = None,
    ) -> None:
        pools = tuple(pools)
        if not pools:
            raise InvalidPools("Route requires at least one pool")
        chain_id = pools[0].chain_id
        if any(pool.chain_id != chain_id for pool in pools):
            raise InvalidPools("All route pools must be on the same chain")

        for previous, current in zip(pools, pools[1:]):
            if len(_pair(previous) & _pair(current)) != 1:
                raise DisjointRoute(f"{previous!r} and {current!r} must share exactly one token")

        if input is None:
            input = _infer_input(pools)
        start = input.wrapped
        if not pools[0].involves_token(start):
            raise UnrelatedAsset(f"Route input {input!r} is not in the first pool")

        path: list[Token] = [start]
        for index, pool in enumerate(pools):
            frontier = path[-1]
            if not pool.involves_token(frontier):
                raise DisjointRoute(f"Pool {index} does not hold {frontier!r}")
            path.append(pool.token1 if frontier == pool.token0 else pool.token0)

        if output is None:
            output = path[-1]
        elif not matches_currency(output, path[-1]):
            raise UnrelatedAsset(f"Route output {output!r} does not match path end {path[-1]!r}")

        self._pools = pools
        self._path = tuple(path)
        self._chain_id = chain_id
        self.input: Currency = input
        self.output: Currency = output

    @property
    def pools(self) -> tuple[Pool, ...]:
        return self._pools

    @property
    def token_path(self) -> tuple[Token, ...]:
        """Tokens visited, input first; one longer than ``pools``."""
        return self._path

    @property
    def chain_id(self) -> int:
        return self._chain_id

    @cached_property
    def mid_price(self) -> Price:
        """Marginal price of ``input`` in ``output`` across every hop."""
        price = self._pools[0].price_of(self._path[0])
        for pool, token in zip(self._pools[1:], self._path[1:]):
            price = price * pool.price_of(token)
        return Price(self.input, self.output, price.raw.denominator, price.raw.numerator)

    def __len__(self) -> int:
        return len(self._pools)

    def __repr__(self) -> str:
        hops = " -> ".join(token.symbol or token.address for token in self._path)
        return f"Route({hops})"


__all__ = ["Route"]
