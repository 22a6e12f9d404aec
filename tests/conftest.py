"""Pytest configuration and fixtures."""

import pytest

from swaprouter.pools.pool import Pool
from tests.helpers import TOKEN0, TOKEN1, TOKEN2, TOKEN3, WETH, make_pool


@pytest.fixture
def pool_0_1() -> Pool:
    """TOKEN0/TOKEN1 with 1000 of each."""
    return make_pool(TOKEN0, 1000, TOKEN1, 1000)


@pytest.fixture
def pool_0_2() -> Pool:
    """TOKEN0/TOKEN2 with 1000 TOKEN0 and 1100 TOKEN2."""
    return make_pool(TOKEN0, 1000, TOKEN2, 1100)


@pytest.fixture
def pool_0_3() -> Pool:
    """TOKEN0/TOKEN3 with 1000 TOKEN0 and 900 TOKEN3."""
    return make_pool(TOKEN0, 1000, TOKEN3, 900)


@pytest.fixture
def pool_1_2() -> Pool:
    """TOKEN1/TOKEN2 with 1200 TOKEN1 and 1000 TOKEN2."""
    return make_pool(TOKEN1, 1200, TOKEN2, 1000)


@pytest.fixture
def pool_1_3() -> Pool:
    """TOKEN1/TOKEN3 with 1200 TOKEN1 and 1300 TOKEN3."""
    return make_pool(TOKEN1, 1200, TOKEN3, 1300)


@pytest.fixture
def pool_weth_0() -> Pool:
    """WETH/TOKEN0 with 1000 of each."""
    return make_pool(WETH, 1000, TOKEN0, 1000)


@pytest.fixture
def empty_pool_0_1() -> Pool:
    """TOKEN0/TOKEN1 with both reserves empty."""
    return make_pool(TOKEN0, 0, TOKEN1, 0)


@pytest.fixture
def simple_pools(pool_0_1: Pool, pool_0_2: Pool, pool_1_2: Pool) -> list[Pool]:
    """Three pools forming a triangle between TOKEN0, TOKEN1 and TOKEN2."""
    return [pool_0_1, pool_0_2, pool_1_2]


@pytest.fixture
def native_pools(pool_weth_0: Pool, pool_0_1: Pool, pool_0_3: Pool, pool_1_3: Pool) -> list[Pool]:
    """Pools reachable from WETH, used for native currency routing."""
    return [pool_weth_0, pool_0_1, pool_0_3, pool_1_3]
