"""Test configuration and fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.asyncio import Redis

from cache_bridge_redis.config import CacheConfig


@pytest.fixture(autouse=True)
def reset_cache_config():
    """Keep the global cache configuration isolated between tests."""
    CacheConfig.reset()
    yield
    CacheConfig.reset()


@pytest.fixture
def mock_pipeline():
    """Create mock transactional pipeline."""
    pipe = MagicMock()
    pipe.__aenter__.return_value = pipe
    pipe.__aexit__.return_value = False
    pipe.execute = AsyncMock(return_value=[])
    return pipe


@pytest.fixture
def mock_redis(mock_pipeline):
    """Create mock redis.asyncio client."""
    handle = MagicMock(spec=Redis)
    handle.get = AsyncMock(return_value=None)
    handle.mget = AsyncMock(return_value=[])
    handle.delete = AsyncMock(return_value=0)
    handle.set = AsyncMock(return_value=True)
    handle.pipeline = MagicMock(return_value=mock_pipeline)
    return handle
