from cache_bridge_redis.backend.base import BaseCacheClient
from cache_bridge_redis.backend.redis import RedisCacheClient
from cache_bridge_redis.config import CacheConfig
from cache_bridge_redis.exceptions import (
	CacheConfigError,
	CacheError,
	CacheNotInitializedError,
	InvalidTTLError,
)

__all__ = [
	"BaseCacheClient",
	"RedisCacheClient",
	"CacheConfig",
	"CacheConfigError",
	"CacheError",
	"CacheNotInitializedError",
	"InvalidTTLError",
]
