"""Search configuration for the best-trade router."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class BestTradeOptions:
    """Bounds for the best-trade search.

    Values are validated by the search entry points rather than here, so an
    out-of-range option fails loudly at the call that would use it.

    Attributes:
        max_num_results: Number of trades to return (default: 3)
        max_hops: Maximum pools per route (default: 3)
    """

    max_num_results: int = 3
    max_hops: int = 3

    @classmethod
    def from_env(cls) -> BestTradeOptions:
        """Build options from environment variables.

        Reads SWAPROUTER_MAX_HOPS and SWAPROUTER_MAX_NUM_RESULTS, falling back
        to the dataclass defaults when unset.
        """
        return cls(
            max_num_results=int(
                os.environ.get("SWAPROUTER_MAX_NUM_RESULTS", str(cls.max_num_results))
            ),
            max_hops=int(os.environ.get("SWAPROUTER_MAX_HOPS", str(cls.max_hops))),
        )


# Default configuration instance
DEFAULT_BEST_TRADE_OPTIONS = BestTradeOptions()

__all__ = ["BestTradeOptions", "DEFAULT_BEST_TRADE_OPTIONS"]
