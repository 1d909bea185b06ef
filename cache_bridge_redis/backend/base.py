# cache_bridge_redis/backend/base.py

"""
Abstract base class for cache clients.
Defines the operation set that every backing store adapter must implement.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence


class BaseCacheClient(ABC):
    """
    Abstract base class for cache clients.

    Values are pre-serialized text. A cache miss is reported as ``None``,
    never as an exception. TTLs are expressed in milliseconds.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Retrieve the text stored under a key.

        :param key: The key to look up.
        :return: The stored text, or None on a cache miss.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_many(
        self,
        keys: Sequence[str],
    ) -> list[tuple[str, Optional[str]]]:
        """
        Retrieve several keys in one request.

        :param keys: Keys to look up, in the order results should come back.
        :return: ``(key, text_or_None)`` pairs in the same order as ``keys``.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, key: str) -> None:
        """
        Delete a key. Deleting an absent key is not an error.
        :param key: The key to delete.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete_many(self, keys: Sequence[str]) -> None:
        """
        Delete several keys in one request. An empty sequence is a no-op.
        :param keys: The keys to delete.
        """
        raise NotImplementedError

    @abstractmethod
    async def set(self, key: str, text: str, ttl: int) -> None:
        """
        Store text under a key, overwriting any entry and resetting its TTL.
        :param key: The key under which to store the text.
        :param text: Serialized data.
        :param ttl: Expire time, in milliseconds.
        """
        raise NotImplementedError

    @abstractmethod
    async def set_many(self, mapping: Mapping[str, str], ttl: int) -> None:
        """
        Store several entries as one atomic batch sharing a single TTL.
        :param mapping: ``{key: serialized data}``.
        :param ttl: Expire time, in milliseconds, applied to every entry.
        """
        raise NotImplementedError

    @abstractmethod
    async def set_not_exist(self, key: str, text: str, ttl: int) -> bool:
        """
        Store text under a key only if the key does not exist yet.
        :param key: The key under which to store the text.
        :param text: Serialized data.
        :param ttl: Expire time, in milliseconds.
        :return: True if the key was written, False if it already existed.
        """
        raise NotImplementedError
