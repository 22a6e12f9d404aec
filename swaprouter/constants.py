"""Protocol constants for the swap router.

Centralizes well-known addresses, fee tiers, and fixed-point parameters.
"""

from enum import IntEnum

from swaprouter.models.types import UINT256_MAX, is_valid_address

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def _validate_address(name: str, address: str) -> str:
    """Validate and return an address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# UniswapV3 factory (mainnet) and the pool contract init code hash used for CREATE2
FACTORY_ADDRESS = _validate_address("factory", "0x1f98431c8ad98523631ae4a59f267346ea31f984")
POOL_INIT_CODE_HASH = "0xe34f199b19b2b4f47f68442619d555527d244f78a3297ea89325f843f87b8b54"


class FeeAmount(IntEnum):
    """Fee tiers in hundredths of a basis point (fee / 1_000_000)."""

    LOWEST = 100  # 0.01%
    LOW = 500  # 0.05%
    MEDIUM = 3000  # 0.30%
    HIGH = 10000  # 1.00%


# Fee tiers are expressed as parts per million of the input amount
FEE_DENOMINATOR = 1_000_000

TICK_SPACINGS = {
    FeeAmount.LOWEST: 1,
    FeeAmount.LOW: 10,
    FeeAmount.MEDIUM: 60,
    FeeAmount.HIGH: 200,
}

# Fixed-point scaling for sqrt prices and fee growth
Q96 = 2**96
Q128 = 2**128
Q192 = 2**192

# Tick bounds from TickMath: ticks outside [MIN_TICK, MAX_TICK] have no price
MIN_TICK = -887272
MAX_TICK = -MIN_TICK

# getSqrtRatioAtTick(MIN_TICK) and getSqrtRatioAtTick(MAX_TICK)
MIN_SQRT_RATIO = 4295128739
MAX_SQRT_RATIO = 1461446703485210103287273052203988822378723970342

__all__ = [
    "ZERO_ADDRESS",
    "FACTORY_ADDRESS",
    "POOL_INIT_CODE_HASH",
    "FeeAmount",
    "FEE_DENOMINATOR",
    "TICK_SPACINGS",
    "Q96",
    "Q128",
    "Q192",
    "UINT256_MAX",
    "MIN_TICK",
    "MAX_TICK",
    "MIN_SQRT_RATIO",
    "MAX_SQRT_RATIO",
]
