"""Currency identity: ERC20 tokens and the chain-native asset.

Pools only ever hold ``Token``s. ``NativeCurrency`` exists so trades can be
phrased in the native asset; it is reconciled with its wrapped token at the
route and trade boundaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from swaprouter.errors import ChainMismatch, InvalidArgument
from swaprouter.models.types import normalize_address


@dataclass(frozen=True)
class Token:
    """An ERC20 token on a specific chain.

    Equality and hashing use only (chain_id, address); decimals and labels
    are carried along for display and price scaling.
    """

    chain_id: int
    address: str
    decimals: int = field(default=18, compare=False)
    symbol: str | None = field(default=None, compare=False)
    name: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        try:
            address = normalize_address(self.address, validate=True)
        except ValueError as err:
            raise InvalidArgument(str(err)) from err
        if not 0 <= self.decimals < 255:
            raise InvalidArgument(f"Token decimals out of range: {self.decimals}")
        object.__setattr__(self, "address", address)

    @property
    def is_native(self) -> bool:
        return False

    @property
    def is_token(self) -> bool:
        return True

    @property
    def wrapped(self) -> Token:
        """A token is its own wrapped form."""
        return self

    def sorts_before(self, other: Token) -> bool:
        """Whether this token sorts before ``other`` by address.

        Raises:
            InvalidArgument: If both are the same token
            ChainMismatch: If the tokens live on different chains
        """
        if self.chain_id != other.chain_id:
            raise ChainMismatch(f"Cannot order tokens on chains {self.chain_id} and {other.chain_id}")
        if self.address == other.address:
            raise InvalidArgument(f"Cannot order token {self.address} against itself")
        return int(self.address, 16) < int(other.address, 16)

    def __repr__(self) -> str:
        label = self.symbol or self.address
        return f"Token({self.chain_id}, {label})"


@dataclass(frozen=True)
class NativeCurrency:
    """The chain's intrinsic currency (e.g. Ether on mainnet)."""

    chain_id: int
    decimals: int = field(default=18, compare=False)
    symbol: str = field(default="ETH", compare=False)
    name: str = field(default="Ether", compare=False)

    @property
    def is_native(self) -> bool:
        return True

    @property
    def is_token(self) -> bool:
        return False

    @property
    def wrapped(self) -> Token:
        """The canonical wrapped token pools use in place of this currency.

        Raises:
            InvalidArgument: If no wrapped token is known for this chain
        """
        try:
            return WETH9[self.chain_id]
        except KeyError:
            raise InvalidArgument(f"No wrapped native token for chain {self.chain_id}") from None

    def __repr__(self) -> str:
        return f"NativeCurrency({self.chain_id}, {self.symbol})"


Currency: TypeAlias = Token | NativeCurrency


WETH9: dict[int, Token] = {
    1: Token(1, "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2", 18, "WETH", "Wrapped Ether"),
    10: Token(10, "0x4200000000000000000000000000000000000006", 18, "WETH", "Wrapped Ether"),
    8453: Token(8453, "0x4200000000000000000000000000000000000006", 18, "WETH", "Wrapped Ether"),
    42161: Token(42161, "0x82af49447d8a07e3bd95bd0d56f35241523fbab1", 18, "WETH", "Wrapped Ether"),
}

ETHER = NativeCurrency(1)


def matches_currency(currency: Currency, token: Token) -> bool:
    """Whether ``currency`` is ``token`` or the native counterpart it wraps into."""
    if currency == token:
        return True
    return currency.is_native and currency.chain_id == token.chain_id and currency.wrapped == token


__all__ = ["Token", "NativeCurrency", "Currency", "WETH9", "ETHER", "matches_currency"]
