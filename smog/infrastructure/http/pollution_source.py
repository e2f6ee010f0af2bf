"""HTTP adapter for the PollutionSource port."""

import logging
from typing import Any

import httpx

from smog.config import PollutionSourceConfig
from smog.domain.city.model.city import RawCityRecord
from smog.domain.city.port.pollution_source import PollutionSource
from smog.domain.shared.error import ExternalServiceError
from smog.domain.shared.port.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class HttpPollutionSource(PollutionSource):
    """Pages through the pollution API for one country at a time.

    Each full fetch logs in once and reuses that bearer token for its own
    pages only. Every call, login included, passes through ``limiter``.
    A failed call ends the fetch early: what was collected so far is returned
    and the failure is only logged. Failed pages are not retried.
    """

    def __init__(
        self,
        config: PollutionSourceConfig,
        client: httpx.AsyncClient,
        limiter: RateLimiter,
    ) -> None:
        self._config = config
        self._client = client
        self._limiter = limiter

    async def fetch_all_cities(self, country: str) -> list[RawCityRecord]:
        records: list[RawCityRecord] = []

        try:
            token = await self._login()
        except (httpx.HTTPError, ExternalServiceError, ValueError) as e:
            logger.error("Pollution API login failed for country=%s: %s", country, e)
            return records

        page = 1
        while self._config.max_pages is None or page <= self._config.max_pages:
            try:
                results = await self._fetch_page(token, country, page)
            except (httpx.HTTPError, ExternalServiceError, ValueError) as e:
                logger.error(
                    "Pagination fetch failed for country=%s page=%d: %s", country, page, e
                )
                break

            if not results:
                break

            records.extend(
                RawCityRecord.model_validate(item) for item in results if isinstance(item, dict)
            )
            page += 1

        logger.info(
            "Fetched %d raw records for country=%s over %d page(s)",
            len(records),
            country,
            page - 1,
        )
        return records

    async def _login(self) -> str:
        """Obtain a fresh bearer token with the service credentials."""
        async with self._limiter:
            response = await self._client.post(
                f"{self._config.base_url}{self._config.login_path}",
                json={
                    "username": self._config.username,
                    "password": self._config.password,
                },
            )
        response.raise_for_status()

        data = response.json()
        token = data.get("token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise ExternalServiceError(
                "Pollution API login response missing token",
                code="upstream_auth_failed",
            )
        return token

    async def _fetch_page(self, token: str, country: str, page: int) -> list[Any]:
        """Fetch one listing page and return its raw ``results`` list."""
        async with self._limiter:
            response = await self._client.get(
                f"{self._config.base_url}{self._config.listing_path}",
                params={"page": page, "limit": self._config.page_size, "country": country},
                headers={"Authorization": f"Bearer {token}"},
            )
        response.raise_for_status()

        data = response.json()
        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise ExternalServiceError(
                f"Pollution API page {page} has no results list",
                code="upstream_bad_response",
            )
        return results
