"""Deterministic pool address derivation (CREATE2)."""

from __future__ import annotations

from eth_abi import encode  # type: ignore[attr-defined]
from web3 import Web3

from swaprouter.constants import FACTORY_ADDRESS, POOL_INIT_CODE_HASH
from swaprouter.models.currency import Token


def compute_pool_address(
    token_a: Token,
    token_b: Token,
    fee: int,
    factory_address: str = FACTORY_ADDRESS,
    init_code_hash: str = POOL_INIT_CODE_HASH,
) -> str:
    """Address the factory deploys the (token_a, token_b, fee) pool to.

    The tokens are sorted first, so argument order does not matter. The
    salt is keccak(abi.encode(token0, token1, fee)).

    Returns:
        Checksummed pool address

    Raises:
        InvalidArgument: If the tokens are identical
        ChainMismatch: If the tokens live on different chains
    """
    token0, token1 = (token_a, token_b) if token_a.sorts_before(token_b) else (token_b, token_a)
    salt = Web3.keccak(
        encode(
            ["address", "address", "uint24"],
            [bytes.fromhex(token0.address[2:]), bytes.fromhex(token1.address[2:]), fee],
        )
    )
    digest = Web3.keccak(
        b"\xff"
        + bytes.fromhex(factory_address[2:])
        + salt
        + bytes.fromhex(init_code_hash[2:])
    )
    return Web3.to_checksum_address(digest[12:])


__all__ = ["compute_pool_address"]
