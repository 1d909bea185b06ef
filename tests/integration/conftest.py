"""Integration test fixtures: a real Redis server."""

from __future__ import annotations

import os
import socket
from collections.abc import AsyncGenerator
from urllib.parse import urlparse

import pytest
from redis.asyncio import Redis

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/15")


def _tcp_reachable(url: str, timeout: float = 1.0) -> bool:
    """Check if the Redis server in ``url`` accepts TCP connections."""
    parsed = urlparse(url)
    try:
        with socket.create_connection((parsed.hostname or "localhost", parsed.port or 6379), timeout=timeout):
            return True
    except OSError:
        return False


_redis_up = _tcp_reachable(REDIS_URL)


@pytest.fixture
async def redis_client() -> AsyncGenerator[Redis]:
    """Connected client on a flushed database."""
    if not _redis_up:
        pytest.skip(f"Redis not reachable at {REDIS_URL}")

    client = Redis.from_url(REDIS_URL, decode_responses=True)
    await client.flushdb()
    yield client
    await client.flushdb()
    await client.aclose()
