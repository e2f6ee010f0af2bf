"""Port for the upstream pollution listing API."""

from abc import abstractmethod
from typing import Protocol

from smog.domain.city.model.city import RawCityRecord
from smog.domain.shared.port import Port


class PollutionSource(Port, Protocol):
    """Fetches every raw city record the upstream holds for a country."""

    @abstractmethod
    async def fetch_all_cities(self, country: str) -> list[RawCityRecord]:
        """Return all records for ``country``.

        Upstream failures truncate the result instead of raising.
        """
        ...
