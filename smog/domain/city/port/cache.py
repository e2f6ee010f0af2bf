"""Cache store types owned by the city domain."""

from typing import NewType

from smog.domain.city.model.city import CountryResultSet, NormalizedKey
from smog.domain.shared.port.cache_store import CacheStore

# Ranked result sets keyed by the country string as requested.
# Written only by CityAggregator.
CountryResultStore = NewType("CountryResultStore", CacheStore[str, CountryResultSet])

# Encyclopedia descriptions keyed by normalized city name, shared by all countries.
# Written only by the DescriptionLookup adapter.
DescriptionStore = NewType("DescriptionStore", CacheStore[NormalizedKey, str | None])
