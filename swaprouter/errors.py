"""Router error classes.

Two families live here:

- ``InvalidArgument`` subclasses are caller errors. They are raised at the
  point of construction or invocation and are never swallowed.
- ``SimulationError`` subclasses mean a trade is infeasible against the
  current pool snapshot. The best-trade search treats them as a pruned
  branch, not a failure.
"""


class RouterError(Exception):
    """Base error for all swaprouter operations."""

    pass


class InvalidArgument(RouterError, ValueError):
    """A malformed argument was passed by the caller."""

    pass


class InvalidTick(InvalidArgument):
    """Tick index out of bounds or liquidity values malformed."""

    pass


class InvalidTickList(InvalidArgument):
    """Tick list is empty or contains duplicate indices."""

    pass


class InvalidFee(InvalidArgument):
    """Fee tier must be an integer in [0, 1_000_000)."""

    pass


class UnrelatedAsset(InvalidArgument):
    """Asset is not part of the pool, route, or trade it was used with."""

    pass


class ChainMismatch(InvalidArgument):
    """Assets from different chains were compared or combined."""

    pass


class CurrencyMismatch(InvalidArgument):
    """Arithmetic between amounts or prices of different currencies."""

    pass


class InvalidPools(InvalidArgument):
    """Route pool sequence is empty or spans multiple chains."""

    pass


class DisjointRoute(InvalidArgument):
    """Consecutive route pools do not share exactly one asset."""

    pass


class InvalidSlippage(InvalidArgument):
    """Slippage tolerance must not be negative."""

    pass


class EmptyPoolSet(InvalidArgument):
    """Best-trade search was called without any pools."""

    pass


class InvalidMaxHops(InvalidArgument):
    """max_hops must be a positive integer."""

    pass


class InvalidMaxNumResults(InvalidArgument):
    """max_num_results must be a positive integer."""

    pass


class SimulationError(RouterError):
    """Base error for trades the pool snapshot cannot satisfy."""

    pass


class InsufficientLiquidity(SimulationError):
    """Pool reserves or tick liquidity cannot cover the requested trade."""

    pass


class InsufficientInputAmount(SimulationError):
    """Requested amount is too small to produce a non-zero result."""

    pass


__all__ = [
    "RouterError",
    "InvalidArgument",
    "InvalidTick",
    "InvalidTickList",
    "InvalidFee",
    "UnrelatedAsset",
    "ChainMismatch",
    "CurrencyMismatch",
    "InvalidPools",
    "DisjointRoute",
    "InvalidSlippage",
    "EmptyPoolSet",
    "InvalidMaxHops",
    "InvalidMaxNumResults",
    "SimulationError",
    "InsufficientLiquidity",
    "InsufficientInputAmount",
]
