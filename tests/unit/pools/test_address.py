"""Tests for deterministic pool address derivation."""

import pytest

from swaprouter.constants import FeeAmount
from swaprouter.errors import ChainMismatch, InvalidArgument
from swaprouter.pools.address import compute_pool_address
from swaprouter.pools.pool import Pool
from tests.helpers import DAI, TOKEN0, TOKEN0_ARBITRUM, USDC, WETH


class TestComputePoolAddress:
    """Tests for compute_pool_address."""

    def test_known_mainnet_pool(self):
        """USDC/WETH 0.05% is a well-known mainnet pool."""
        assert compute_pool_address(USDC, WETH, FeeAmount.LOW) == "0x88e6A0c2dDD26FEEb64F039a2c41296FcB3f5640"

    def test_token_order_irrelevant(self):
        assert compute_pool_address(WETH, USDC, FeeAmount.LOW) == compute_pool_address(
            USDC, WETH, FeeAmount.LOW
        )

    def test_fee_changes_address(self):
        assert compute_pool_address(DAI, USDC, FeeAmount.LOW) != compute_pool_address(
            DAI, USDC, FeeAmount.MEDIUM
        )

    def test_checksummed(self):
        address = compute_pool_address(DAI, USDC, FeeAmount.LOW)
        assert address.startswith("0x")
        assert len(address) == 42
        assert address != address.lower()

    def test_same_token_raises(self):
        with pytest.raises(InvalidArgument):
            compute_pool_address(USDC, USDC, FeeAmount.LOW)

    def test_chain_mismatch_raises(self):
        with pytest.raises(ChainMismatch):
            compute_pool_address(TOKEN0, TOKEN0_ARBITRUM, FeeAmount.LOW)

    def test_pool_get_address(self):
        assert Pool.get_address(USDC, WETH, FeeAmount.LOW) == compute_pool_address(
            USDC, WETH, FeeAmount.LOW
        )
