"""Wikipedia adapter for the DescriptionLookup port."""

import logging
from urllib.parse import quote

import httpx

from smog.config import EncyclopediaConfig
from smog.domain.city.model.city import NormalizedKey
from smog.domain.city.port.cache import DescriptionStore
from smog.domain.city.port.description_lookup import DescriptionLookup
from smog.domain.shared.port.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides the quote() defaults.
_SAFE_PATH_CHARS = "!~*'()"


class WikipediaDescriptionLookup(DescriptionLookup):
    """Fetches the page summary ``extract`` for a city from the Wikipedia REST API.

    Hits in ``store`` are answered without a request. Misses go through
    ``limiter``, which is shared by every lookup regardless of city.
    Only real summaries are cached; the fallback text for pages without one is
    cached only when ``cache_fallback`` is set. Failed requests yield None and
    are retried on the next lookup.
    """

    def __init__(
        self,
        config: EncyclopediaConfig,
        client: httpx.AsyncClient,
        limiter: RateLimiter,
        store: DescriptionStore,
    ) -> None:
        self._config = config
        self._client = client
        self._limiter = limiter
        self._store = store

    async def get_description(self, name: NormalizedKey) -> str | None:
        if self._store.contains(name):
            return self._store.get(name)

        url = f"{self._config.base_url}/{quote(name, safe=_SAFE_PATH_CHARS)}"
        try:
            async with self._limiter:
                response = await self._client.get(url)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Wiki lookup failed for %s: %s", name, e)
            return None

        extract = data.get("extract") if isinstance(data, dict) else None
        if isinstance(extract, str) and extract:
            self._store.set(name, extract)
            return extract

        logger.debug("No summary available for %s", name)
        fallback = self._config.fallback_description
        if self._config.cache_fallback:
            self._store.set(name, fallback)
        return fallback
