import asyncio
import logging
from collections.abc import Iterable
from dataclasses import field
from typing import Any

from smog.domain.city.model.city import (
    CityPage,
    CleanCityRecord,
    CountryResultSet,
    NormalizedKey,
    RawCityRecord,
)
from smog.domain.city.port.description_lookup import DescriptionLookup
from smog.domain.city.port.pollution_source import PollutionSource
from smog.domain.city.util.normalize import normalize_key
from smog.domain.city.util.pagination import PAGE_SIZE, paginate
from smog.domain.city.util.rules import coerce_pollution, is_city_name
from smog.domain.shared.port.cache_store import CacheStore
from smog.domain.shared.service import Service

logger = logging.getLogger(__name__)


class CityAggregator(Service):
    """Builds and serves the ranked list of polluted cities per country.

    The first request for a country drives a full upstream fetch, cleans and
    enriches the records, and stores the ranked result for the rest of the
    process lifetime. Later requests are served from ``results`` only.

    With ``single_flight`` enabled, concurrent first requests for the same
    country share one build instead of each fetching upstream.
    """

    source: PollutionSource
    descriptions: DescriptionLookup
    results: CacheStore[str, CountryResultSet]
    page_size: int = PAGE_SIZE
    single_flight: bool = False
    _in_flight: dict[str, asyncio.Future[CountryResultSet]] = field(
        default_factory=dict, init=False, repr=False
    )

    async def get_cities(self, country: str, page: Any = None) -> CityPage:
        """Return one page of the ranked cities for ``country``."""
        ranked = self.results.get(country)
        if ranked is None:
            ranked = await self._build(country)
        return paginate(ranked, page, limit=self.page_size)

    async def clean_cities(self, raw: Iterable[RawCityRecord]) -> CountryResultSet:
        """Validate, de-duplicate, enrich and rank raw records.

        Per normalized name only the strictly most polluted record survives
        (the first one seen wins ties). Each surviving city is enriched once,
        in first-seen order.
        """
        best: dict[NormalizedKey, float | int] = {}
        for record in raw:
            if not isinstance(record.name, str) or not record.name.strip():
                continue
            pollution = coerce_pollution(record.pollution)
            if pollution is None:
                continue

            key = normalize_key(record.name)
            if not is_city_name(key):
                continue

            existing = best.get(key)
            if existing is None or pollution > existing:
                best[key] = pollution

        cities = []
        for key, pollution in best.items():
            description = await self.descriptions.get_description(key)
            cities.append(
                CleanCityRecord(name=key, pollution=pollution, description=description)
            )

        cities.sort(key=lambda city: city.pollution, reverse=True)
        return tuple(cities)

    async def _build(self, country: str) -> CountryResultSet:
        if not self.single_flight:
            return await self._fetch_and_store(country)

        pending = self._in_flight.get(country)
        if pending is not None:
            logger.debug("Awaiting in-flight build for country=%s", country)
            return await asyncio.shield(pending)

        future: asyncio.Future[CountryResultSet] = asyncio.get_running_loop().create_future()
        self._in_flight[country] = future
        try:
            ranked = await self._fetch_and_store(country)
        except asyncio.CancelledError:
            future.cancel()
            raise
        except Exception as e:
            future.set_exception(e)
            # Mark retrieved so an unawaited failure does not warn at GC.
            future.exception()
            raise
        else:
            future.set_result(ranked)
            return ranked
        finally:
            del self._in_flight[country]

    async def _fetch_and_store(self, country: str) -> CountryResultSet:
        logger.info("Building city ranking for country=%s", country)
        raw = await self.source.fetch_all_cities(country)
        ranked = await self.clean_cities(raw)
        self.results.set(country, ranked)
        logger.info(
            "Cached %d cities for country=%s (%d raw records)",
            len(ranked),
            country,
            len(raw),
        )
        return ranked
