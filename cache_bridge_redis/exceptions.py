

class CacheError(RuntimeError):
	"""Base exception for cache-related errors."""


class CacheConfigError(CacheError):
	"""Raised when there is a configuration error in the cache setup."""


class CacheNotInitializedError(CacheConfigError):
	"""Raised when the cache client is requested before CacheConfig.init()."""


class InvalidTTLError(CacheError, ValueError):
	"""Raised when a TTL is not a non-negative integer number of milliseconds."""


__all__ = [
	"CacheError",
	"CacheConfigError",
	"CacheNotInitializedError",
	"InvalidTTLError",
]
