from cache_bridge_redis.backend.base import BaseCacheClient
from cache_bridge_redis.backend.redis import RedisCacheClient

__all__ = ["BaseCacheClient", "RedisCacheClient"]
