"""DI provider for HTTP infrastructure."""

from collections.abc import AsyncIterable
from typing import NewType

import httpx
from dishka import provide

from smog.config import Config
from smog.domain.city.port.cache import DescriptionStore
from smog.domain.city.port.description_lookup import DescriptionLookup
from smog.domain.city.port.pollution_source import PollutionSource
from smog.infrastructure.http.pollution_source import HttpPollutionSource
from smog.infrastructure.http.wikipedia import WikipediaDescriptionLookup
from smog.infrastructure.throttle.di import EncyclopediaRateLimiter, PollutionRateLimiter
from smog.util.di.base import Provider
from smog.util.di.scope import Scope

# Disambiguate the two upstream clients
PollutionHttpClient = NewType("PollutionHttpClient", httpx.AsyncClient)
EncyclopediaHttpClient = NewType("EncyclopediaHttpClient", httpx.AsyncClient)


class HttpProvider(Provider):
    """DI provider for upstream HTTP adapters."""

    @provide(scope=Scope.APP)
    async def get_pollution_http_client(
        self, config: Config
    ) -> AsyncIterable[PollutionHttpClient]:
        """Dedicated client for the pollution API (connection pooling)."""
        async with httpx.AsyncClient(timeout=config.pollution.timeout) as client:
            yield PollutionHttpClient(client)

    @provide(scope=Scope.APP)
    async def get_encyclopedia_http_client(
        self, config: Config
    ) -> AsyncIterable[EncyclopediaHttpClient]:
        """Dedicated client for summary lookups. Wikipedia redirects renamed pages."""
        async with httpx.AsyncClient(
            timeout=config.encyclopedia.timeout,
            follow_redirects=True,
            headers={"User-Agent": config.encyclopedia.user_agent},
        ) as client:
            yield EncyclopediaHttpClient(client)

    @provide(scope=Scope.APP, provides=PollutionSource)
    def get_pollution_source(
        self,
        config: Config,
        client: PollutionHttpClient,
        limiter: PollutionRateLimiter,
    ) -> HttpPollutionSource:
        return HttpPollutionSource(config=config.pollution, client=client, limiter=limiter)

    @provide(scope=Scope.APP, provides=DescriptionLookup)
    def get_description_lookup(
        self,
        config: Config,
        client: EncyclopediaHttpClient,
        limiter: EncyclopediaRateLimiter,
        store: DescriptionStore,
    ) -> WikipediaDescriptionLookup:
        return WikipediaDescriptionLookup(
            config=config.encyclopedia, client=client, limiter=limiter, store=store
        )
