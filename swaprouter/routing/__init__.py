"""Routing package for best-trade search.

Module structure:
- pathfinding.py: PoolGraph adjacency used by the search
- route.py: Route, a validated path of pools
- trade.py: Trade, slippage bounds, and best_trade_exact_in/out
"""

from swaprouter.routing.pathfinding import PoolGraph
from swaprouter.routing.route import Route
from swaprouter.routing.trade import Trade, TradeType

__all__ = ["PoolGraph", "Route", "Trade", "TradeType"]
