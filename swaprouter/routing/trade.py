"""Trades over a route and the best-trade search.

A Trade fixes one side of a route (input for EXACT_INPUT, output for
EXACT_OUTPUT) and derives the other side by simulating every hop. The
static ``best_trade_exact_in`` / ``best_trade_exact_out`` methods enumerate
simple pool paths depth-first and rank the feasible ones.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from functools import cached_property

import structlog

from swaprouter.config import DEFAULT_BEST_TRADE_OPTIONS, BestTradeOptions
from swaprouter.errors import (
    EmptyPoolSet,
    InvalidMaxHops,
    InvalidMaxNumResults,
    InvalidSlippage,
    SimulationError,
    UnrelatedAsset,
)
from swaprouter.models.amounts import CurrencyAmount, Percent, Price, scale_down, scale_up
from swaprouter.models.currency import Currency
from swaprouter.pools.pool import Pool
from swaprouter.routing.pathfinding import PoolGraph
from swaprouter.routing.route import Route

logger = structlog.get_logger()


class TradeType(Enum):
    """Which side of the trade the caller fixed."""

    EXACT_INPUT = "exact_input"
    EXACT_OUTPUT = "exact_output"


class Trade:
    """A route bound to a concrete amount and a direction.

    Args:
        route: Path to trade along
        amount: Input amount for EXACT_INPUT, output amount for EXACT_OUTPUT.
            May be given in the native currency or its wrapped token.
        trade_type: Direction of the trade

    Raises:
        UnrelatedAsset: If ``amount`` is not in the route's fixed-side currency
        InsufficientLiquidity: If any hop cannot fill the trade
        InsufficientInputAmount: If any hop rounds to zero
    """

    def __init__(self, route: Route, amount: CurrencyAmount, trade_type: TradeType) -> None:
        self.route = route
        self.trade_type = trade_type

        next_pools: list[Pool] = []
        if trade_type is TradeType.EXACT_INPUT:
            if amount.currency.wrapped != route.token_path[0]:
                raise UnrelatedAsset(f"Input {amount!r} does not match route input {route.input!r}")
            current = amount.wrapped
            for pool in route.pools:
                current, next_pool = pool.get_output_amount(current)
                next_pools.append(next_pool)
            self.input_amount = amount.with_currency(route.input)
            self.output_amount = current.with_currency(route.output)
        else:
            if amount.currency.wrapped != route.token_path[-1]:
                raise UnrelatedAsset(f"Output {amount!r} does not match route output {route.output!r}")
            current = amount.wrapped
            for pool in reversed(route.pools):
                current, next_pool = pool.get_input_amount(current)
                next_pools.append(next_pool)
            next_pools.reverse()
            self.input_amount = current.with_currency(route.input)
            self.output_amount = amount.with_currency(route.output)

        # Pool snapshots after this trade, one per hop in route order
        self.next_pools: tuple[Pool, ...] = tuple(next_pools)

    @classmethod
    def exact_in(cls, route: Route, amount_in: CurrencyAmount) -> Trade:
        return cls(route, amount_in, TradeType.EXACT_INPUT)

    @classmethod
    def exact_out(cls, route: Route, amount_out: CurrencyAmount) -> Trade:
        return cls(route, amount_out, TradeType.EXACT_OUTPUT)

    @cached_property
    def execution_price(self) -> Price:
        """Average price actually paid: output per unit of input."""
        return Price(
            self.input_amount.currency,
            self.output_amount.currency,
            self.input_amount.raw,
            self.output_amount.raw,
        )

    @cached_property
    def price_impact(self) -> Percent:
        """Shortfall of the output against a zero-impact quote at the route's mid price."""
        quoted = self.input_amount.raw * self.route.mid_price.raw
        return Percent.from_fraction((quoted - self.output_amount.raw) / quoted)

    def minimum_amount_out(self, slippage_tolerance: Percent) -> CurrencyAmount:
        """Least output acceptable under ``slippage_tolerance``, rounded down.

        EXACT_OUTPUT trades return the fixed output unchanged.

        Raises:
            InvalidSlippage: If the tolerance is negative
        """
        if slippage_tolerance.is_negative():
            raise InvalidSlippage(f"Slippage tolerance must not be negative: {slippage_tolerance!r}")
        if self.trade_type is TradeType.EXACT_OUTPUT:
            return self.output_amount
        return scale_down(self.output_amount, 1 + slippage_tolerance.value)

    def maximum_amount_in(self, slippage_tolerance: Percent) -> CurrencyAmount:
        """Most input to provide under ``slippage_tolerance``, rounded up.

        EXACT_INPUT trades return the fixed input unchanged.

        Raises:
            InvalidSlippage: If the tolerance is negative
        """
        if slippage_tolerance.is_negative():
            raise InvalidSlippage(f"Slippage tolerance must not be negative: {slippage_tolerance!r}")
        if self.trade_type is TradeType.EXACT_INPUT:
            return self.input_amount
        return scale_up(self.input_amount, 1 + slippage_tolerance.value)

    def __repr__(self) -> str:
        return (
            f"Trade({self.trade_type.value}, {self.route!r}, "
            f"in={self.input_amount.raw}, out={self.output_amount.raw})"
        )

    @staticmethod
    def best_trade_exact_in(
        pools: Iterable[Pool],
        amount_in: CurrencyAmount,
        currency_out: Currency,
        options: BestTradeOptions | None = None,
    ) -> list[Trade]:
        """Best trades for a fixed input, most output first.

        Args:
            pools: Candidate pools
            amount_in: Exact input amount
            currency_out: Currency to receive
            options: Search bounds (default: ``DEFAULT_BEST_TRADE_OPTIONS``)

        Returns:
            Up to ``options.max_num_results`` trades; empty if no route is feasible

        Raises:
            EmptyPoolSet: If ``pools`` is empty
            InvalidMaxHops: If ``options.max_hops < 1``
            InvalidMaxNumResults: If ``options.max_num_results < 1``
        """
        graph, options = _prepare_search(pools, options)
        token_out = currency_out.wrapped
        trades: list[Trade] = []

        def extend(path: list[Pool], visited: frozenset[str], current: CurrencyAmount) -> None:
            for pool in graph.pools_for_token(current.currency):
                if pool.address in visited or (path and _same_pair(pool, path[-1])):
                    continue
                try:
                    amount_out, _ = pool.get_output_amount(current)
                except SimulationError as err:
                    logger.debug(
                        "best_trade_hop_infeasible",
                        pool=repr(pool),
                        amount=current.raw,
                        error=str(err),
                    )
                    continue
                next_path = [*path, pool]
                if amount_out.currency == token_out:
                    trades.append(
                        Trade(Route(next_path, amount_in.currency, currency_out), amount_in, TradeType.EXACT_INPUT)
                    )
                elif len(next_path) < options.max_hops:
                    extend(next_path, visited | {pool.address}, amount_out)

        extend([], frozenset(), amount_in.wrapped)
        trades.sort(key=lambda trade: (-trade.output_amount.raw, *_tie_break(trade)))
        logger.debug("best_trade_exact_in", candidates=len(trades), max_hops=options.max_hops)
        return trades[: options.max_num_results]

    @staticmethod
    def best_trade_exact_out(
        pools: Iterable[Pool],
        currency_in: Currency,
        amount_out: CurrencyAmount,
        options: BestTradeOptions | None = None,
    ) -> list[Trade]:
        """Best trades for a fixed output, least input first.

        The search walks backward from the output currency, so each hop is
        simulated against the amount the next hop needs.

        Raises:
            EmptyPoolSet: If ``pools`` is empty
            InvalidMaxHops: If ``options.max_hops < 1``
            InvalidMaxNumResults: If ``options.max_num_results < 1``
        """
        graph, options = _prepare_search(pools, options)
        token_in = currency_in.wrapped
        trades: list[Trade] = []

        def extend(path: list[Pool], visited: frozenset[str], current: CurrencyAmount) -> None:
            for pool in graph.pools_for_token(current.currency):
                if pool.address in visited or (path and _same_pair(pool, path[0])):
                    continue
                try:
                    amount_in, _ = pool.get_input_amount(current)
                except SimulationError as err:
                    logger.debug(
                        "best_trade_hop_infeasible",
                        pool=repr(pool),
                        amount=current.raw,
                        error=str(err),
                    )
                    continue
                next_path = [pool, *path]
                if amount_in.currency == token_in:
                    trades.append(
                        Trade(Route(next_path, currency_in, amount_out.currency), amount_out, TradeType.EXACT_OUTPUT)
                    )
                elif len(next_path) < options.max_hops:
                    extend(next_path, visited | {pool.address}, amount_in)

        extend([], frozenset(), amount_out.wrapped)
        trades.sort(key=lambda trade: (trade.input_amount.raw, *_tie_break(trade)))
        logger.debug("best_trade_exact_out", candidates=len(trades), max_hops=options.max_hops)
        return trades[: options.max_num_results]


def _prepare_search(
    pools: Iterable[Pool], options: BestTradeOptions | None
) -> tuple[PoolGraph, BestTradeOptions]:
    if options is None:
        options = DEFAULT_BEST_TRADE_OPTIONS
    # One entry per economic pool; a later snapshot replaces an earlier one
    by_address: dict[str, Pool] = {}
    for pool in pools:
        by_address[pool.address] = pool
    graph = PoolGraph(by_address.values())
    if len(graph) == 0:
        raise EmptyPoolSet("Best-trade search needs at least one pool")
    if options.max_hops < 1:
        raise InvalidMaxHops(f"max_hops must be >= 1, got {options.max_hops}")
    if options.max_num_results < 1:
        raise InvalidMaxNumResults(f"max_num_results must be >= 1, got {options.max_num_results}")
    return graph, options


def _same_pair(a: Pool, b: Pool) -> bool:
    return {a.token0, a.token1} == {b.token0, b.token1}


def _tie_break(trade: Trade) -> tuple[int, tuple[int, ...]]:
    """Fewer hops first, then token path by address."""
    return len(trade.route), tuple(int(token.address, 16) for token in trade.route.token_path)


__all__ = ["TradeType", "Trade"]
