"""Currency identity, amounts, and pool snapshot schemas."""

from swaprouter.models.amounts import CurrencyAmount, Percent, Price
from swaprouter.models.currency import ETHER, WETH9, Currency, NativeCurrency, Token
from swaprouter.models.snapshot import PoolSnapshot, PoolUniverse, TickSnapshot, TokenSnapshot

__all__ = [
    "Token",
    "NativeCurrency",
    "Currency",
    "WETH9",
    "ETHER",
    "CurrencyAmount",
    "Percent",
    "Price",
    "TokenSnapshot",
    "TickSnapshot",
    "PoolSnapshot",
    "PoolUniverse",
]
