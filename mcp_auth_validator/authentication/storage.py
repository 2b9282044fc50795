from typing import Any

import cachetools

from mcp_auth_validator.authentication.protocols.storage import Storage


class NonPersistentStorage(Storage):
    """Keeps the identity for the lifetime of the storage object."""

    def __init__(self):
        self._data: Any = None

    def is_empty(self) -> bool:
        return self._data is None

    def read(self) -> Any:
        return self._data

    def write(self, contents: Any) -> None:
        self._data = contents

    def clear(self) -> None:
        self._data = None


class CacheStorage(Storage):
    """Keeps the identity in a TTL cache, so it expires after ``ttl`` seconds."""

    DEFAULT_NAMESPACE = "mcp_auth_validator"
    DEFAULT_MEMBER = "storage"

    def __init__(
        self,
        namespace: str = DEFAULT_NAMESPACE,
        member: str = DEFAULT_MEMBER,
        maxsize: int = 100,
        ttl: float = 600,
        cache: cachetools.Cache | None = None,
    ):
        self._key = (namespace, member)
        self._cache = cache if cache is not None else cachetools.TTLCache(
            maxsize=maxsize, ttl=ttl
        )

    def get_namespace(self) -> str:
        return self._key[0]

    def get_member(self) -> str:
        return self._key[1]

    def is_empty(self) -> bool:
        return self._cache.get(self._key) is None

    def read(self) -> Any:
        return self._cache.get(self._key)

    def write(self, contents: Any) -> None:
        self._cache[self._key] = contents

    def clear(self) -> None:
        self._cache.pop(self._key, None)
