"""Currency amounts, percentages, and prices.

Amounts are raw integers in the currency's smallest unit. Percentages and
prices are exact rationals (``fractions.Fraction``); rounding happens only
where a result is turned back into an integer amount, and each such place
states its direction.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from functools import total_ordering

from swaprouter.errors import CurrencyMismatch, InvalidArgument
from swaprouter.models.currency import Currency


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


@total_ordering
@dataclass(frozen=True)
class CurrencyAmount:
    """An integer amount of a currency, in its smallest unit."""

    currency: Currency
    raw: int

    def __post_init__(self) -> None:
        if isinstance(self.raw, bool) or not isinstance(self.raw, int):
            raise InvalidArgument(f"Amount must be an int, got {type(self.raw).__name__}")

    def _check_currency(self, other: CurrencyAmount) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatch(f"Cannot combine {self.currency!r} with {other.currency!r}")

    def __add__(self, other: CurrencyAmount) -> CurrencyAmount:
        self._check_currency(other)
        return CurrencyAmount(self.currency, self.raw + other.raw)

    def __sub__(self, other: CurrencyAmount) -> CurrencyAmount:
        self._check_currency(other)
        return CurrencyAmount(self.currency, self.raw - other.raw)

    def __lt__(self, other: CurrencyAmount) -> bool:
        self._check_currency(other)
        return self.raw < other.raw

    @property
    def wrapped(self) -> CurrencyAmount:
        """The same amount expressed in the wrapped token."""
        if self.currency.is_token:
            return self
        return CurrencyAmount(self.currency.wrapped, self.raw)

    def with_currency(self, currency: Currency) -> CurrencyAmount:
        """The same raw amount relabelled (used for native/wrapped reconciliation)."""
        return CurrencyAmount(currency, self.raw)

    def to_exact(self) -> str:
        """Human-readable decimal string, scaled by the currency's decimals."""
        return format(Decimal(self.raw).scaleb(-self.currency.decimals).normalize(), "f")

    def __repr__(self) -> str:
        return f"CurrencyAmount({self.currency!r}, {self.raw})"


@total_ordering
class Percent:
    """A fraction used for slippage tolerances and price impact.

    ``Percent(5, 100)`` is five percent. The denominator defaults to 100.
    """

    __slots__ = ("_value",)

    def __init__(self, numerator: int, denominator: int = 100) -> None:
        if denominator == 0:
            raise InvalidArgument("Percent denominator must be non-zero")
        self._value = Fraction(numerator, denominator)

    @classmethod
    def from_fraction(cls, value: Fraction) -> Percent:
        return cls(value.numerator, value.denominator)

    @property
    def value(self) -> Fraction:
        return self._value

    def is_negative(self) -> bool:
        return self._value < 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Percent):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: Percent) -> bool:
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def to_decimal(self, places: int = 2) -> Decimal:
        """Value in percent units, quantized to ``places`` decimals."""
        scaled = Decimal(self._value.numerator * 100) / Decimal(self._value.denominator)
        return scaled.quantize(Decimal(1).scaleb(-places))

    def __repr__(self) -> str:
        return f"Percent({self._value.numerator}, {self._value.denominator})"


class Price:
    """Exchange rate of ``base`` in terms of ``quote``, in raw units.

    ``Price(base, quote, denominator, numerator)`` means ``denominator`` units
    of base trade for ``numerator`` units of quote.
    """

    __slots__ = ("base", "quote_currency", "_value")

    def __init__(self, base: Currency, quote: Currency, denominator: int, numerator: int) -> None:
        if denominator == 0:
            raise InvalidArgument("Price denominator must be non-zero")
        self.base = base
        self.quote_currency = quote
        self._value = Fraction(numerator, denominator)

    @property
    def raw(self) -> Fraction:
        """Quote units per base unit, ignoring decimals."""
        return self._value

    @property
    def adjusted(self) -> Fraction:
        """Quote per base in whole-token terms, scaled by the currencies' decimals."""
        return self._value * Fraction(10**self.base.decimals, 10**self.quote_currency.decimals)

    def invert(self) -> Price:
        return Price(
            self.quote_currency, self.base, self._value.numerator, self._value.denominator
        )

    def __mul__(self, other: Price) -> Price:
        if not isinstance(other, Price):
            return NotImplemented
        if self.quote_currency != other.base:
            raise CurrencyMismatch(
                f"Cannot chain price quoted in {self.quote_currency!r} with base {other.base!r}"
            )
        value = self._value * other._value
        return Price(self.base, other.quote_currency, value.denominator, value.numerator)

    def quote(self, amount: CurrencyAmount) -> CurrencyAmount:
        """Convert an amount of base into quote, rounding down."""
        if amount.currency != self.base:
            raise CurrencyMismatch(f"Price base is {self.base!r}, got {amount.currency!r}")
        return CurrencyAmount(
            self.quote_currency, amount.raw * self._value.numerator // self._value.denominator
        )

    def to_decimal(self, places: int = 6) -> Decimal:
        """Adjusted price as a Decimal quantized to ``places`` decimals."""
        adjusted = self.adjusted
        value = Decimal(adjusted.numerator) / Decimal(adjusted.denominator)
        return value.quantize(Decimal(1).scaleb(-places))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return (
            self.base == other.base
            and self.quote_currency == other.quote_currency
            and self._value == other._value
        )

    def __hash__(self) -> int:
        return hash((self.base, self.quote_currency, self._value))

    def __repr__(self) -> str:
        return f"Price({self.base!r} -> {self.quote_currency!r}, {self._value})"


def scale_up(amount: CurrencyAmount, factor: Fraction) -> CurrencyAmount:
    """Multiply an amount by ``factor``, rounding up."""
    return CurrencyAmount(amount.currency, _ceil_div(amount.raw * factor.numerator, factor.denominator))


def scale_down(amount: CurrencyAmount, factor: Fraction) -> CurrencyAmount:
    """Divide an amount by ``factor``, rounding down."""
    return CurrencyAmount(amount.currency, amount.raw * factor.denominator // factor.numerator)


__all__ = ["CurrencyAmount", "Percent", "Price", "scale_up", "scale_down"]
