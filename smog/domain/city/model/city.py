from typing import Any

from pydantic import BaseModel, ConfigDict

from smog.domain.shared.model.value import ValueObject

# Normalized city name: lowercase, accent-stripped, whitespace-collapsed.
NormalizedKey = str


class RawCityRecord(BaseModel):
    """A city row as returned by the pollution API.

    Untrusted: ``name`` may be empty or not a city at all, ``pollution`` may be
    missing or non-numeric. Unknown upstream fields are kept but ignored.
    """

    model_config = ConfigDict(extra="allow")

    name: Any = None
    pollution: Any = None


class CleanCityRecord(ValueObject):
    """A validated, de-duplicated and enriched city."""

    name: NormalizedKey
    pollution: float | int
    description: str | None = None


# Ranked result set for one country, most polluted first.
CountryResultSet = tuple[CleanCityRecord, ...]


class CityPage(BaseModel):
    """One page of a country's ranked cities."""

    total: int
    limit: int
    page: int
    cities: list[CleanCityRecord]
