"""In-process cache store."""

from typing import TypeVar

from smog.domain.shared.port.cache_store import CacheStore

K = TypeVar("K")
V = TypeVar("V")


class InMemoryCacheStore(CacheStore[K, V]):
    """Dict-backed store living for the process lifetime. No eviction."""

    def __init__(self, initial: dict[K, V] | None = None) -> None:
        self._data: dict[K, V] = dict(initial or {})

    def get(self, key: K) -> V | None:
        return self._data.get(key)

    def set(self, key: K, value: V) -> None:
        self._data[key] = value

    def contains(self, key: K) -> bool:
        return key in self._data

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)
