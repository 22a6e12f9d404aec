"""Pool: an immutable snapshot of a two-token liquidity venue.

Holds the canonically ordered reserves, fee tier, sqrt price, in-range
liquidity and initialized ticks. Trading against a pool returns the amount
together with a new Pool; the starting snapshot is never modified, so one
pool set can be explored along many candidate paths at once.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cached_property

from swaprouter.amm.base import PoolAMM, SwapResult
from swaprouter.amm.constant_product import constant_product_amm
from swaprouter.constants import FEE_DENOMINATOR
from swaprouter.errors import (
    InsufficientLiquidity,
    InvalidArgument,
    InvalidFee,
    UnrelatedAsset,
)
from swaprouter.math.sqrt_price_math import get_liquidity_for_amounts
from swaprouter.models.amounts import CurrencyAmount, Price
from swaprouter.models.currency import Currency, Token
from swaprouter.pools.address import compute_pool_address
from swaprouter.pools.tick import Tick
from swaprouter.pools.tick_list import TickList


def _check_int(name: str, value: object, *, minimum: int = 0) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an int, got {type(value).__name__}")
    if value < minimum:
        raise InvalidArgument(f"{name} must be >= {minimum}, got {value}")


class Pool:
    """A two-token pool snapshot.

    Args:
        amount_a: Reserve of one token
        amount_b: Reserve of the other token; the pair is reordered so that
            ``token0.sorts_before(token1)``
        fee: Fee tier in parts per million, in [0, 1_000_000)
        sqrt_price_x96: Current sqrt price as a Q64.96 integer
        liquidity: In-range liquidity
        ticks: Initialized ticks (a TickList or any iterable of Tick)
        amm: Swap math used by ``get_output_amount``/``get_input_amount``
            (default: constant product over the reserves)

    Raises:
        InvalidFee: If ``fee`` is not an int in [0, 1_000_000)
        InvalidTickList: If ``ticks`` is empty or has duplicate indices
        InvalidArgument: If both reserves are the same token, or a numeric
            field is malformed
        ChainMismatch: If the reserves live on different chains
    """

    def __init__(
        self,
        amount_a: CurrencyAmount,
        amount_b: CurrencyAmount,
        fee: int,
        sqrt_price_x96: int,
        liquidity: int,
        ticks: TickList | Iterable[Tick],
        *,
        amm: PoolAMM | None = None,
        fee_growth_global_0_x128: int = 0,
        fee_growth_global_1_x128: int = 0,
    ) -> None:
        if isinstance(fee, bool) or not isinstance(fee, int) or not 0 <= fee < FEE_DENOMINATOR:
            raise InvalidFee(f"Fee must be an int in [0, {FEE_DENOMINATOR}), got {fee!r}")
        _check_int("sqrt_price_x96", sqrt_price_x96)
        _check_int("liquidity", liquidity)
        _check_int("fee_growth_global_0_x128", fee_growth_global_0_x128)
        _check_int("fee_growth_global_1_x128", fee_growth_global_1_x128)

        # Pools always hold wrapped tokens
        amount_a = amount_a.wrapped
        amount_b = amount_b.wrapped
        for amount in (amount_a, amount_b):
            if amount.raw < 0:
                raise InvalidArgument(f"Reserve must be non-negative, got {amount!r}")
        if amount_a.currency.sorts_before(amount_b.currency):
            self._reserves = (amount_a, amount_b)
        else:
            self._reserves = (amount_b, amount_a)

        self._fee = fee
        self._sqrt_price_x96 = sqrt_price_x96
        self._liquidity = liquidity
        self._ticks = ticks if isinstance(ticks, TickList) else TickList(ticks)
        self._amm = amm if amm is not None else constant_product_amm
        self._fee_growth_global_0_x128 = fee_growth_global_0_x128
        self._fee_growth_global_1_x128 = fee_growth_global_1_x128

    @staticmethod
    def get_address(token_a: Token, token_b: Token, fee: int) -> str:
        """Deterministic address of the (token_a, token_b, fee) pool."""
        return compute_pool_address(token_a, token_b, fee)

    @cached_property
    def address(self) -> str:
        return Pool.get_address(self.token0, self.token1, self._fee)

    @property
    def token0(self) -> Token:
        return self._reserves[0].currency

    @property
    def token1(self) -> Token:
        return self._reserves[1].currency

    @property
    def reserve0(self) -> CurrencyAmount:
        return self._reserves[0]

    @property
    def reserve1(self) -> CurrencyAmount:
        return self._reserves[1]

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def fee(self) -> int:
        return self._fee

    @property
    def sqrt_price_x96(self) -> int:
        return self._sqrt_price_x96

    @property
    def liquidity(self) -> int:
        return self._liquidity

    @property
    def ticks(self) -> TickList:
        return self._ticks

    @property
    def amm(self) -> PoolAMM:
        return self._amm

    @property
    def fee_growth_global_0_x128(self) -> int:
        return self._fee_growth_global_0_x128

    @property
    def fee_growth_global_1_x128(self) -> int:
        return self._fee_growth_global_1_x128

    def involves_token(self, token: Currency) -> bool:
        """True if ``token`` is token0 or token1."""
        return token == self.token0 or token == self.token1

    def _require_token(self, token: Currency) -> None:
        if not self.involves_token(token):
            raise UnrelatedAsset(f"{token!r} is not in pool {self.token0!r}/{self.token1!r}")

    @property
    def token0_price(self) -> Price:
        """Mid price of token0 in token1, i.e. reserve1 / reserve0."""
        if self.reserve0.raw == 0:
            raise InsufficientLiquidity("Cannot price token0 against an empty reserve0")
        return Price(self.token0, self.token1, self.reserve0.raw, self.reserve1.raw)

    @property
    def token1_price(self) -> Price:
        """Mid price of token1 in token0, i.e. reserve0 / reserve1."""
        if self.reserve1.raw == 0:
            raise InsufficientLiquidity("Cannot price token1 against an empty reserve1")
        return Price(self.token1, self.token0, self.reserve1.raw, self.reserve0.raw)

    def price_of(self, token: Currency) -> Price:
        """Price of ``token`` in terms of the other pool token.

        Raises:
            UnrelatedAsset: If the pool does not hold ``token``
        """
        self._require_token(token)
        return self.token0_price if token == self.token0 else self.token1_price

    def reserve_of(self, token: Currency) -> CurrencyAmount:
        """Reserve held of ``token``.

        Raises:
            UnrelatedAsset: If the pool does not hold ``token``
        """
        self._require_token(token)
        return self.reserve0 if token == self.token0 else self.reserve1

    def get_output_amount(self, input_amount: CurrencyAmount) -> tuple[CurrencyAmount, Pool]:
        """Output received for ``input_amount`` and the pool after the trade.

        Raises:
            UnrelatedAsset: If the input token is not in the pool
            InvalidArgument: If the amount is negative
            InsufficientLiquidity: If the pool cannot fill the trade
            InsufficientInputAmount: If the input is too small to produce output
        """
        self._require_token(input_amount.currency)
        if input_amount.raw < 0:
            raise InvalidArgument(f"Input amount must be non-negative, got {input_amount!r}")
        zero_for_one = input_amount.currency == self.token0
        result = self._amm.simulate_exact_input(self, zero_for_one, input_amount.raw)
        output_token = self.token1 if zero_for_one else self.token0
        return CurrencyAmount(output_token, result.amount_out), self._after_swap(result, zero_for_one)

    def get_input_amount(self, output_amount: CurrencyAmount) -> tuple[CurrencyAmount, Pool]:
        """Input required for ``output_amount`` and the pool after the trade.

        Raises:
            UnrelatedAsset: If the output token is not in the pool
            InvalidArgument: If the amount is negative
            InsufficientLiquidity: If the pool cannot deliver the output
            InsufficientInputAmount: If the requested output is zero
        """
        self._require_token(output_amount.currency)
        if output_amount.raw < 0:
            raise InvalidArgument(f"Output amount must be non-negative, got {output_amount!r}")
        zero_for_one = output_amount.currency == self.token1
        result = self._amm.simulate_exact_output(self, zero_for_one, output_amount.raw)
        input_token = self.token0 if zero_for_one else self.token1
        return CurrencyAmount(input_token, result.amount_in), self._after_swap(result, zero_for_one)

    def _after_swap(self, result: SwapResult, zero_for_one: bool) -> Pool:
        if zero_for_one:
            reserve0 = self.reserve0.raw + result.amount_in
            reserve1 = self.reserve1.raw - result.amount_out
        else:
            reserve0 = self.reserve0.raw - result.amount_out
            reserve1 = self.reserve1.raw + result.amount_in
        return Pool(
            CurrencyAmount(self.token0, reserve0),
            CurrencyAmount(self.token1, reserve1),
            self._fee,
            result.sqrt_price_x96,
            result.liquidity,
            result.ticks,
            amm=self._amm,
            fee_growth_global_0_x128=result.fee_growth_global_0_x128,
            fee_growth_global_1_x128=result.fee_growth_global_1_x128,
        )

    def get_liquidity_for_amounts(
        self,
        sqrt_ratio_a_x96: int,
        sqrt_ratio_b_x96: int,
        amount0: CurrencyAmount,
        amount1: CurrencyAmount,
    ) -> int:
        """Maximum liquidity mintable in [a, b] at the pool's current price.

        Raises:
            UnrelatedAsset: If the amounts are not in token0 and token1
        """
        if amount0.currency != self.token0 or amount1.currency != self.token1:
            raise UnrelatedAsset("Amounts must be given as (token0, token1) of this pool")
        return get_liquidity_for_amounts(
            self._sqrt_price_x96, sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount0.raw, amount1.raw
        )

    def __repr__(self) -> str:
        return (
            f"Pool({self.token0!r}/{self.token1!r}, fee={self._fee}, "
            f"reserves=({self.reserve0.raw}, {self.reserve1.raw}))"
        )


__all__ = ["Pool"]
