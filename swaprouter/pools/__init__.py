"""Pool snapshots and pool management.

Provides the Pool entity, its tick data, and PoolRegistry for holding a
pool universe.
"""

from .tick import Tick
from .tick_list import TickList
from .address import compute_pool_address
from .pool import Pool
from .registry import PoolRegistry
from .parsing import build_registry_from_snapshot, parse_pool_snapshot

__all__ = [
    "Tick",
    "TickList",
    "compute_pool_address",
    "Pool",
    "PoolRegistry",
    "parse_pool_snapshot",
    "build_registry_from_snapshot",
]
