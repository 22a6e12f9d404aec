"""swaprouter - best-route search and valuation over DEX pool snapshots."""

from swaprouter.config import DEFAULT_BEST_TRADE_OPTIONS, BestTradeOptions
from swaprouter.models import ETHER, CurrencyAmount, NativeCurrency, Percent, Price, Token
from swaprouter.pools import Pool, PoolRegistry, Tick, TickList, build_registry_from_snapshot
from swaprouter.routing import Route, Trade, TradeType

__version__ = "0.1.0"
__all__ = [
    "BestTradeOptions",
    "DEFAULT_BEST_TRADE_OPTIONS",
    "Token",
    "NativeCurrency",
    "ETHER",
    "CurrencyAmount",
    "Percent",
    "Price",
    "Tick",
    "TickList",
    "Pool",
    "PoolRegistry",
    "build_registry_from_snapshot",
    "Route",
    "Trade",
    "TradeType",
    "__version__",
]
