# cache_bridge_redis/backend/redis.py

import logging
from typing import Any, Mapping, Optional, Sequence

import redis.asyncio as redis

from .base import BaseCacheClient
from cache_bridge_redis.exceptions import InvalidTTLError

logger = logging.getLogger(__name__)


def _check_ttl(ttl: Any) -> int:
    # bool is an int subclass
    if isinstance(ttl, bool) or not isinstance(ttl, int):
        raise InvalidTTLError(
            f"ttl must be an integer number of milliseconds; got {ttl!r}."
        )
    if ttl < 0:
        raise InvalidTTLError(f"ttl must be non-negative; got {ttl}.")
    return ttl


class RedisCacheClient(BaseCacheClient):
    """
    Redis cache client.
    Uses redis-py for asynchronous Redis operations.

    The client should be created with ``decode_responses=True`` so reads
    return ``str``. ``cache_missing_return`` is the raw value the client
    returns for an absent key; results identical to it are reported as
    ``None``.
    """

    def __init__(
        self,
        client: redis.Redis,
        cache_missing_return: Any = None,
    ) -> None:
        self._client = client
        self._cache_missing_return = cache_missing_return

    @property
    def client(self) -> redis.Redis:
        return self._client

    @property
    def cache_missing_return(self) -> Any:
        return self._cache_missing_return

    def _resolve(self, raw: Any) -> Optional[str]:
        return None if raw is self._cache_missing_return else raw

    async def get(self, key: str) -> Optional[str]:
        logger.debug("GET %s", key)
        raw = await self._client.get(key)
        return self._resolve(raw)

    async def get_many(
        self,
        keys: Sequence[str],
    ) -> list[tuple[str, Optional[str]]]:
        keys = list(keys)
        if not keys:
            return []

        logger.debug("MGET %d keys", len(keys))
        values = await self._client.mget(keys)
        return [(key, self._resolve(value)) for key, value in zip(keys, values)]

    async def delete(self, key: str) -> None:
        logger.debug("DEL %s", key)
        await self._client.delete(key)

    async def delete_many(self, keys: Sequence[str]) -> None:
        keys = list(keys)
        if not keys:
            return

        logger.debug("DEL %d keys", len(keys))
        await self._client.delete(*keys)

    async def set(self, key: str, text: str, ttl: int) -> None:
        ttl = _check_ttl(ttl)
        logger.debug("SET %s PX %d", key, ttl)
        await self._client.set(name=key, value=text, px=ttl)

    async def set_many(self, mapping: Mapping[str, str], ttl: int) -> None:
        """
        Queue one SET per entry inside MULTI/EXEC and execute them together.
        Any failure of the transaction is raised for the batch as a whole.
        """
        ttl = _check_ttl(ttl)
        if not mapping:
            return

        logger.debug("MULTI SET %d keys PX %d", len(mapping), ttl)
        async with self._client.pipeline(transaction=True) as pipe:
            for key, text in mapping.items():
                pipe.set(name=key, value=text, px=ttl)
            await pipe.execute()

    async def set_not_exist(self, key: str, text: str, ttl: int) -> bool:
        """
        SET with both PX and NX so the existence check and the write
        happen in a single command.

        redis-py returns None when NX refuses the write; a configured
        ``cache_missing_return`` is treated the same way.
        """
        ttl = _check_ttl(ttl)
        logger.debug("SET %s PX %d NX", key, ttl)
        result = await self._client.set(name=key, value=text, px=ttl, nx=True)
        return result is not None and result is not self._cache_missing_return
