"""Port for process-local key/value caches."""

from abc import abstractmethod
from typing import Protocol, TypeVar

from smog.domain.shared.port import Port

K = TypeVar("K")
V = TypeVar("V")


class CacheStore(Port, Protocol[K, V]):
    """Key/value store backing an in-process cache.

    ``contains`` is separate from ``get`` so that falsy or ``None`` values can be
    cached and still count as hits.
    """

    @abstractmethod
    def get(self, key: K) -> V | None: ...

    @abstractmethod
    def set(self, key: K, value: V) -> None: ...

    @abstractmethod
    def contains(self, key: K) -> bool: ...

    @abstractmethod
    def clear(self) -> None: ...
