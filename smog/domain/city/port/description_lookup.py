"""Port for city description lookups."""

from abc import abstractmethod
from typing import Protocol

from smog.domain.city.model.city import NormalizedKey
from smog.domain.shared.port import Port


class DescriptionLookup(Port, Protocol):
    """Looks up a short encyclopedia description for a city. Never raises."""

    @abstractmethod
    async def get_description(self, name: NormalizedKey) -> str | None: ...
