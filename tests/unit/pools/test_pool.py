"""Tests for the Pool entity."""

from fractions import Fraction

import pytest

from swaprouter.constants import FeeAmount, Q96
from swaprouter.errors import (
    ChainMismatch,
    InsufficientInputAmount,
    InsufficientLiquidity,
    InvalidArgument,
    InvalidFee,
    InvalidTickList,
    UnrelatedAsset,
)
from swaprouter.math.sqrt_price_math import sqrt_price_from_reserves
from swaprouter.models.amounts import CurrencyAmount
from swaprouter.models.currency import ETHER, Token
from tests.helpers import TOKEN0, TOKEN0_ARBITRUM, TOKEN1, TOKEN2, WETH, make_amount, make_pool


class TestPoolConstruction:
    """Tests for Pool construction and canonical ordering."""

    def test_tokens_sorted(self):
        pool = make_pool(TOKEN1, 100, TOKEN0, 200)
        assert pool.token0 == TOKEN0
        assert pool.token1 == TOKEN1
        assert pool.reserve0 == make_amount(TOKEN0, 200)
        assert pool.reserve1 == make_amount(TOKEN1, 100)

    def test_native_reserve_is_wrapped(self):
        pool = make_pool(ETHER, 1000, TOKEN0, 1000)
        assert pool.involves_token(WETH)
        assert not pool.involves_token(ETHER)

    def test_same_token_raises(self):
        with pytest.raises(InvalidArgument):
            make_pool(TOKEN0, 100, TOKEN0, 100)

    def test_chain_mismatch_raises(self):
        with pytest.raises(ChainMismatch):
            make_pool(TOKEN0_ARBITRUM, 100, TOKEN1, 100)

    @pytest.mark.parametrize("fee", [-1, 1_000_000, 3000.5, "3000", True])
    def test_invalid_fee_raises(self, fee):
        with pytest.raises(InvalidFee):
            make_pool(fee=fee)

    def test_fee_tiers_accepted(self):
        assert make_pool(fee=FeeAmount.LOWEST).fee == 100
        assert make_pool(fee=0).fee == 0

    def test_empty_ticks_raise(self):
        with pytest.raises(InvalidTickList):
            make_pool(ticks=[])

    def test_negative_reserve_raises(self):
        with pytest.raises(InvalidArgument):
            make_pool(TOKEN0, -1, TOKEN1, 100)

    def test_negative_liquidity_raises(self):
        with pytest.raises(InvalidArgument):
            make_pool(liquidity=-1)

    def test_zero_reserves_allowed(self, empty_pool_0_1):
        assert empty_pool_0_1.reserve0.raw == 0
        assert empty_pool_0_1.reserve1.raw == 0

    def test_chain_id(self, pool_0_1):
        assert pool_0_1.chain_id == 1

    def test_address_is_cached(self, pool_0_1):
        assert pool_0_1.address is pool_0_1.address


class TestPoolQueries:
    """Tests for price and reserve accessors."""

    def test_involves_token(self, pool_0_1):
        assert pool_0_1.involves_token(TOKEN0)
        assert pool_0_1.involves_token(TOKEN1)
        assert not pool_0_1.involves_token(TOKEN2)

    def test_token_prices(self, pool_0_2):
        assert pool_0_2.token0_price.raw == Fraction(1100, 1000)
        assert pool_0_2.token1_price.raw == Fraction(1000, 1100)
        assert pool_0_2.token0_price.base == TOKEN0
        assert pool_0_2.token0_price.quote_currency == TOKEN2

    def test_price_of(self, pool_0_2):
        assert pool_0_2.price_of(TOKEN0) == pool_0_2.token0_price
        assert pool_0_2.price_of(TOKEN2) == pool_0_2.token1_price

    def test_price_of_unrelated_raises(self, pool_0_1):
        with pytest.raises(UnrelatedAsset):
            pool_0_1.price_of(TOKEN2)

    def test_reserve_of(self, pool_0_2):
        assert pool_0_2.reserve_of(TOKEN2).raw == 1100
        with pytest.raises(UnrelatedAsset):
            pool_0_2.reserve_of(TOKEN1)

    def test_empty_pool_price_raises(self, empty_pool_0_1):
        with pytest.raises(InsufficientLiquidity):
            empty_pool_0_1.token0_price


class TestGetOutputAmount:
    """Tests for exact-input simulation against a pool."""

    def test_output_and_new_pool(self, pool_0_1):
        output, next_pool = pool_0_1.get_output_amount(make_amount(TOKEN0, 100))
        assert output == make_amount(TOKEN1, 90)
        assert next_pool.reserve0.raw == 1100
        assert next_pool.reserve1.raw == 910
        assert next_pool.sqrt_price_x96 == sqrt_price_from_reserves(1100, 910)

    def test_does_not_mutate(self, pool_0_1):
        pool_0_1.get_output_amount(make_amount(TOKEN0, 100))
        assert pool_0_1.reserve0.raw == 1000
        assert pool_0_1.reserve1.raw == 1000
        assert pool_0_1.sqrt_price_x96 == Q96

    def test_new_pool_keeps_identity(self, pool_0_1):
        _, next_pool = pool_0_1.get_output_amount(make_amount(TOKEN1, 100))
        assert next_pool.address == pool_0_1.address
        assert next_pool.fee == pool_0_1.fee
        assert next_pool.ticks == pool_0_1.ticks

    def test_unrelated_token_raises(self, pool_0_1):
        with pytest.raises(UnrelatedAsset):
            pool_0_1.get_output_amount(make_amount(TOKEN2, 100))

    def test_negative_amount_raises(self, pool_0_1):
        with pytest.raises(InvalidArgument):
            pool_0_1.get_output_amount(CurrencyAmount(TOKEN0, -1))

    def test_too_small_raises(self, pool_0_1):
        with pytest.raises(InsufficientInputAmount):
            pool_0_1.get_output_amount(make_amount(TOKEN0, 1))

    def test_empty_pool_raises(self, empty_pool_0_1):
        with pytest.raises(InsufficientLiquidity):
            empty_pool_0_1.get_output_amount(make_amount(TOKEN0, 100))


class TestGetInputAmount:
    """Tests for exact-output simulation against a pool."""

    def test_input_and_new_pool(self, pool_0_2):
        required, next_pool = pool_0_2.get_input_amount(make_amount(TOKEN2, 100))
        assert required == make_amount(TOKEN0, 101)
        assert next_pool.reserve0.raw == 1101
        assert next_pool.reserve1.raw == 1000

    def test_output_at_reserve_raises(self, pool_0_1):
        with pytest.raises(InsufficientLiquidity):
            pool_0_1.get_input_amount(make_amount(TOKEN1, 1000))

    def test_empty_pool_raises(self, empty_pool_0_1):
        with pytest.raises(InsufficientLiquidity):
            empty_pool_0_1.get_input_amount(make_amount(TOKEN1, 100))

    def test_unrelated_token_raises(self, pool_0_1):
        with pytest.raises(UnrelatedAsset):
            pool_0_1.get_input_amount(make_amount(TOKEN2, 100))


class TestRoundTrip:
    """Exact-in and exact-out agree up to rounding in the trader's disfavor."""

    def test_output_of_required_input_covers_request(self, pool_0_2):
        required, _ = pool_0_2.get_input_amount(make_amount(TOKEN2, 100))
        output, _ = pool_0_2.get_output_amount(required)
        assert output.raw >= 100

    def test_required_input_of_output_within_input(self, pool_0_1):
        output, _ = pool_0_1.get_output_amount(make_amount(TOKEN0, 100))
        required, _ = pool_0_1.get_input_amount(output)
        assert required.raw <= 100


class TestLiquidityForAmounts:
    """Tests for Pool.get_liquidity_for_amounts."""

    def test_range_below_price_uses_token1(self, pool_0_1):
        liquidity = pool_0_1.get_liquidity_for_amounts(
            Q96 // 4, Q96 // 2, make_amount(TOKEN0, 100), make_amount(TOKEN1, 100)
        )
        assert liquidity == 400

    def test_wrong_currencies_raise(self, pool_0_1):
        with pytest.raises(UnrelatedAsset):
            pool_0_1.get_liquidity_for_amounts(
                Q96 // 4, Q96 // 2, make_amount(TOKEN1, 100), make_amount(TOKEN0, 100)
            )


def test_pool_on_other_chain():
    other = Token(42161, "0x0000000000000000000000000000000000000002")
    pool = make_pool(TOKEN0_ARBITRUM, 100, other, 100)
    assert pool.chain_id == 42161
