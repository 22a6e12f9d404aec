"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Tokens and fixed-point values
- factories: Pool and tick factory functions
"""

from tests.helpers.constants import (
    DAI,
    SQRT_PRICE_1_1,
    TOKEN0,
    TOKEN0_ARBITRUM,
    TOKEN1,
    TOKEN2,
    TOKEN3,
    USDC,
    WETH,
)
from tests.helpers.factories import make_amount, make_concentrated_pool, make_pool, make_ticks

__all__ = [
    # Constants
    "TOKEN0",
    "TOKEN1",
    "TOKEN2",
    "TOKEN3",
    "TOKEN0_ARBITRUM",
    "WETH",
    "USDC",
    "DAI",
    "SQRT_PRICE_1_1",
    # Factories
    "make_pool",
    "make_concentrated_pool",
    "make_ticks",
    "make_amount",
]
