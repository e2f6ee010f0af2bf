"""Port for outbound call scheduling gates."""

from abc import abstractmethod
from typing import Protocol

from smog.domain.shared.port import Port


class RateLimiter(Port, Protocol):
    """A gate every outbound call must pass before it is issued.

    Usable either as ``await limiter.acquire()`` or ``async with limiter: ...``.
    """

    @abstractmethod
    async def acquire(self) -> None: ...

    async def __aenter__(self) -> None:
        await self.acquire()

    async def __aexit__(self, *exc_info: object) -> None:
        return None
