"""Tests for Trade amounts and slippage bounds."""

from fractions import Fraction

import pytest

from swaprouter.errors import InsufficientLiquidity, InvalidSlippage, UnrelatedAsset
from swaprouter.models.amounts import CurrencyAmount, Percent
from swaprouter.models.currency import ETHER
from swaprouter.routing.route import Route
from swaprouter.routing.trade import Trade, TradeType
from tests.helpers import TOKEN0, TOKEN1, TOKEN2, WETH, make_amount


@pytest.fixture
def route_0_1_2(pool_0_1, pool_1_2) -> Route:
    return Route([pool_0_1, pool_1_2], TOKEN0, TOKEN2)


@pytest.fixture
def exact_in(route_0_1_2) -> Trade:
    return Trade(route_0_1_2, make_amount(TOKEN0, 100), TradeType.EXACT_INPUT)


@pytest.fixture
def exact_out(route_0_1_2) -> Trade:
    return Trade(route_0_1_2, make_amount(TOKEN2, 100), TradeType.EXACT_OUTPUT)


class TestTradeConstruction:
    """Tests for forward and backward simulation."""

    def test_exact_input_amounts(self, exact_in):
        assert exact_in.input_amount == make_amount(TOKEN0, 100)
        assert exact_in.output_amount == make_amount(TOKEN2, 69)

    def test_exact_output_amounts(self, exact_out):
        assert exact_out.output_amount == make_amount(TOKEN2, 100)
        assert exact_out.input_amount == make_amount(TOKEN0, 156)

    def test_next_pools_in_route_order(self, exact_in, pool_0_1, pool_1_2):
        first, second = exact_in.next_pools
        assert first.reserve_of(TOKEN0).raw == 1100
        assert first.reserve_of(TOKEN1).raw == 910
        assert second.reserve_of(TOKEN1).raw == 1290
        assert second.reserve_of(TOKEN2).raw == 931
        assert pool_0_1.reserve0.raw == 1000
        assert pool_1_2.reserve0.raw == 1200

    def test_exact_output_next_pools(self, exact_out):
        first, second = exact_out.next_pools
        assert first.reserve_of(TOKEN0).raw == 1156
        assert second.reserve_of(TOKEN2).raw == 900

    def test_amount_in_wrong_currency_raises(self, route_0_1_2):
        with pytest.raises(UnrelatedAsset):
            Trade(route_0_1_2, make_amount(TOKEN2, 100), TradeType.EXACT_INPUT)
        with pytest.raises(UnrelatedAsset):
            Trade(route_0_1_2, make_amount(TOKEN0, 100), TradeType.EXACT_OUTPUT)

    def test_infeasible_route_raises(self, route_0_1_2):
        with pytest.raises(InsufficientLiquidity):
            Trade(route_0_1_2, make_amount(TOKEN2, 1000), TradeType.EXACT_OUTPUT)

    def test_classmethod_shortcuts(self, route_0_1_2):
        trade = Trade.exact_in(route_0_1_2, make_amount(TOKEN0, 100))
        assert trade.trade_type is TradeType.EXACT_INPUT
        assert Trade.exact_out(route_0_1_2, make_amount(TOKEN2, 100)).input_amount.raw == 156


class TestNativeTrades:
    """Trades phrased in the native currency."""

    def test_native_input(self, pool_weth_0):
        route = Route([pool_weth_0], ETHER, TOKEN0)
        trade = Trade(route, CurrencyAmount(ETHER, 100), TradeType.EXACT_INPUT)
        assert trade.input_amount.currency == ETHER
        assert trade.output_amount == make_amount(TOKEN0, 90)

    def test_wrapped_amount_on_native_route(self, pool_weth_0):
        route = Route([pool_weth_0], ETHER, TOKEN0)
        trade = Trade(route, CurrencyAmount(WETH, 100), TradeType.EXACT_INPUT)
        assert trade.input_amount == CurrencyAmount(ETHER, 100)

    def test_native_output(self, pool_weth_0):
        route = Route([pool_weth_0], TOKEN0, ETHER)
        trade = Trade(route, CurrencyAmount(ETHER, 100), TradeType.EXACT_OUTPUT)
        assert trade.output_amount.currency == ETHER
        assert trade.input_amount == make_amount(TOKEN0, 112)


class TestSlippageBounds:
    """Tests for minimum_amount_out and maximum_amount_in."""

    @pytest.mark.parametrize(
        ("tolerance", "expected"),
        [(Percent(0), 69), (Percent(5), 65), (Percent(200), 23)],
    )
    def test_exact_input_minimum_out(self, exact_in, tolerance, expected):
        assert exact_in.minimum_amount_out(tolerance) == make_amount(TOKEN2, expected)

    @pytest.mark.parametrize("tolerance", [Percent(0), Percent(5), Percent(200)])
    def test_exact_input_maximum_in_is_fixed(self, exact_in, tolerance):
        assert exact_in.maximum_amount_in(tolerance) == exact_in.input_amount

    @pytest.mark.parametrize(
        ("tolerance", "expected"),
        [(Percent(0), 156), (Percent(5), 164), (Percent(200), 468)],
    )
    def test_exact_output_maximum_in(self, exact_out, tolerance, expected):
        assert exact_out.maximum_amount_in(tolerance) == make_amount(TOKEN0, expected)

    @pytest.mark.parametrize("tolerance", [Percent(0), Percent(5), Percent(200)])
    def test_exact_output_minimum_out_is_fixed(self, exact_out, tolerance):
        assert exact_out.minimum_amount_out(tolerance) == exact_out.output_amount

    def test_negative_tolerance_raises(self, exact_in, exact_out):
        for trade in (exact_in, exact_out):
            with pytest.raises(InvalidSlippage):
                trade.minimum_amount_out(Percent(-1))
            with pytest.raises(InvalidSlippage):
                trade.maximum_amount_in(Percent(-1))


class TestPrices:
    """Tests for execution price and price impact."""

    def test_execution_price(self, exact_in):
        price = exact_in.execution_price
        assert price.base == TOKEN0
        assert price.quote_currency == TOKEN2
        assert price.raw == Fraction(69, 100)

    def test_price_impact_single_hop(self, pool_0_1):
        trade = Trade(Route([pool_0_1], TOKEN0, TOKEN1), make_amount(TOKEN0, 100), TradeType.EXACT_INPUT)
        # Mid price 1: 100 quoted, 90 received
        assert trade.price_impact == Percent(10)

    def test_price_impact_positive_for_multi_hop(self, exact_in):
        assert exact_in.price_impact > Percent(0)

    def test_repr_mentions_amounts(self, exact_in):
        assert "in=100" in repr(exact_in)
        assert "out=69" in repr(exact_in)


def test_route_not_mutated_by_trades(route_0_1_2, pool_0_1):
    Trade(route_0_1_2, make_amount(TOKEN0, 100), TradeType.EXACT_INPUT)
    Trade(route_0_1_2, make_amount(TOKEN2, 100), TradeType.EXACT_OUTPUT)
    assert route_0_1_2.pools[0] is pool_0_1
    assert pool_0_1.reserve_of(TOKEN1).raw == 1000
