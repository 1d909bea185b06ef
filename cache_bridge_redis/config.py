# cache_bridge_redis/config.py

import logging
from typing import Any, Optional

import redis.asyncio as redis

from cache_bridge_redis.backend.base import BaseCacheClient
from cache_bridge_redis.backend.redis import RedisCacheClient
from cache_bridge_redis.exceptions import CacheConfigError, CacheNotInitializedError

logger = logging.getLogger(__name__)


class CacheConfig:
    """
    Global cache configuration holder.

    This class manages the active cache client shared by the application.
    """

    _client: Optional[BaseCacheClient] = None
    _initialized: bool = False

    @classmethod
    def init(cls, client: BaseCacheClient) -> None:
        """
        Initialize the cache configuration.

        This MUST be called once at application startup.

        Args:
            client: Cache client implementation (e.g. RedisCacheClient)

        Raises:
            CacheConfigError: If client is invalid or config already initialized
        """
        if cls._initialized:
            raise CacheConfigError("CacheConfig is already initialized.")

        if not isinstance(client, BaseCacheClient):
            raise CacheConfigError(
                "Provided client does not implement BaseCacheClient."
            )

        cls._client = client
        cls._initialized = True
        logger.info("Cache client registered: %s", type(client).__name__)

    @classmethod
    def from_url(
        cls,
        url: str,
        *,
        cache_missing_return: Any = None,
        **redis_kwargs: Any,
    ) -> RedisCacheClient:
        """
        Build a RedisCacheClient for ``url`` and register it.

        The connection is opened lazily by redis-py on the first command.

        Args:
            url: Redis URL, e.g. ``redis://localhost:6379/0``
            cache_missing_return: Raw value the client returns for absent keys
            **redis_kwargs: Extra options for ``redis.asyncio.Redis.from_url``

        Returns:
            The registered client
        """
        redis_kwargs.setdefault("decode_responses", True)
        handle = redis.Redis.from_url(url, **redis_kwargs)
        client = RedisCacheClient(handle, cache_missing_return=cache_missing_return)
        cls.init(client)
        return client

    @classmethod
    def is_initialized(cls) -> bool:
        """Check whether the cache configuration is initialized."""
        return cls._initialized

    @classmethod
    def get_client(cls) -> BaseCacheClient:
        """
        Get the configured cache client.

        Raises:
            CacheNotInitializedError: If config is not initialized

        Returns:
            Configured cache client
        """
        if not cls._initialized or cls._client is None:
            raise CacheNotInitializedError(
                "CacheConfig is not initialized. Call CacheConfig.init() first."
            )
        return cls._client

    @classmethod
    def reset(cls) -> None:
        """
        Reset cache configuration.

        Intended for testing ONLY. The underlying connection is not closed.
        """
        cls._client = None
        cls._initialized = False
        logger.info("Cache configuration reset")
