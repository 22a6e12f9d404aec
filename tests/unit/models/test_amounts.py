"""Tests for CurrencyAmount, Percent and Price."""

from decimal import Decimal
from fractions import Fraction

import pytest

from swaprouter.errors import CurrencyMismatch, InvalidArgument
from swaprouter.models.amounts import CurrencyAmount, Percent, Price, scale_down, scale_up
from swaprouter.models.currency import ETHER
from tests.helpers import TOKEN0, TOKEN1, TOKEN2, USDC, WETH


class TestCurrencyAmount:
    """Tests for CurrencyAmount arithmetic."""

    def test_add_and_subtract(self):
        a = CurrencyAmount(TOKEN0, 100)
        b = CurrencyAmount(TOKEN0, 40)
        assert (a + b).raw == 140
        assert (a - b).raw == 60

    def test_mismatched_currency_raises(self):
        with pytest.raises(CurrencyMismatch):
            CurrencyAmount(TOKEN0, 1) + CurrencyAmount(TOKEN1, 1)
        with pytest.raises(CurrencyMismatch):
            CurrencyAmount(TOKEN0, 1) < CurrencyAmount(TOKEN1, 1)

    def test_ordering(self):
        assert CurrencyAmount(TOKEN0, 1) < CurrencyAmount(TOKEN0, 2)
        assert CurrencyAmount(TOKEN0, 2) >= CurrencyAmount(TOKEN0, 2)

    def test_non_int_raw_raises(self):
        with pytest.raises(InvalidArgument):
            CurrencyAmount(TOKEN0, 1.5)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgument):
            CurrencyAmount(TOKEN0, True)

    def test_wrapped(self):
        assert CurrencyAmount(ETHER, 5).wrapped == CurrencyAmount(WETH, 5)
        amount = CurrencyAmount(TOKEN0, 5)
        assert amount.wrapped is amount

    def test_to_exact(self):
        assert CurrencyAmount(USDC, 1_500_000).to_exact() == "1.5"
        assert CurrencyAmount(WETH, 10**18).to_exact() == "1"


class TestPercent:
    """Tests for Percent."""

    def test_default_denominator(self):
        assert Percent(5).value == Fraction(1, 20)
        assert Percent(5) == Percent(1, 20)

    def test_negative(self):
        assert Percent(-1).is_negative()
        assert not Percent(0).is_negative()

    def test_to_decimal(self):
        assert Percent(1, 3).to_decimal(2) == Decimal("33.33")

    def test_zero_denominator_raises(self):
        with pytest.raises(InvalidArgument):
            Percent(1, 0)


class TestPrice:
    """Tests for Price."""

    def test_quote_rounds_down(self):
        price = Price(TOKEN0, TOKEN1, 3, 2)
        assert price.quote(CurrencyAmount(TOKEN0, 10)) == CurrencyAmount(TOKEN1, 6)

    def test_quote_wrong_currency_raises(self):
        with pytest.raises(CurrencyMismatch):
            Price(TOKEN0, TOKEN1, 1, 1).quote(CurrencyAmount(TOKEN1, 10))

    def test_invert(self):
        inverted = Price(TOKEN0, TOKEN1, 3, 2).invert()
        assert inverted.base == TOKEN1
        assert inverted.quote_currency == TOKEN0
        assert inverted.raw == Fraction(3, 2)

    def test_multiply_chains_prices(self):
        price = Price(TOKEN0, TOKEN1, 1, 2) * Price(TOKEN1, TOKEN2, 1, 3)
        assert price.base == TOKEN0
        assert price.quote_currency == TOKEN2
        assert price.raw == 6

    def test_multiply_mismatch_raises(self):
        with pytest.raises(CurrencyMismatch):
            Price(TOKEN0, TOKEN1, 1, 2) * Price(TOKEN0, TOKEN2, 1, 3)

    def test_adjusted_uses_decimals(self):
        """1 WETH (1e18) for 2000 USDC (2e9) is 2000 in whole tokens."""
        price = Price(WETH, USDC, 10**18, 2000 * 10**6)
        assert price.adjusted == 2000
        assert price.to_decimal(2) == Decimal("2000.00")


class TestScaling:
    """Tests for scale_up and scale_down rounding."""

    def test_scale_up_rounds_up(self):
        assert scale_up(CurrencyAmount(TOKEN0, 156), Fraction(21, 20)).raw == 164

    def test_scale_down_rounds_down(self):
        assert scale_down(CurrencyAmount(TOKEN0, 69), Fraction(21, 20)).raw == 65

    def test_identity_factor_is_exact(self):
        amount = CurrencyAmount(TOKEN0, 69)
        assert scale_up(amount, Fraction(1)) == amount
        assert scale_down(amount, Fraction(1)) == amount
