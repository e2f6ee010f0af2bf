"""Tests for the /api/v1/cities and /api/v1/health routes."""

from unittest.mock import AsyncMock

import pytest
from dishka import AsyncContainer, make_async_container, provide
from fastapi.testclient import TestClient

from smog.application.api.rest.app import create_app
from smog.application.di import ContextProvider
from smog.config import Config
from smog.domain.city.model.city import RawCityRecord
from smog.domain.city.query.list_polluted_cities import ListPollutedCitiesHandler
from smog.domain.city.service.aggregator import CityAggregator
from smog.domain.shared.error import ExternalServiceError
from smog.infrastructure.cache.memory import InMemoryCacheStore
from smog.util.di.base import Provider
from smog.util.di.scope import Scope


class StubCityProvider(Provider):
    """Wires the real aggregator and handler over stubbed upstream ports."""

    def __init__(self, source: AsyncMock, descriptions: AsyncMock) -> None:
        super().__init__()
        self._source = source
        self._descriptions = descriptions

    @provide
    def get_city_aggregator(self) -> CityAggregator:
        return CityAggregator(
            source=self._source,
            descriptions=self._descriptions,
            results=InMemoryCacheStore(),
        )

    list_polluted_cities_handler = provide(ListPollutedCitiesHandler, scope=Scope.UOW)


def _container(config: Config, source: AsyncMock, descriptions: AsyncMock) -> AsyncContainer:
    return make_async_container(
        ContextProvider(),
        StubCityProvider(source, descriptions),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]
    )


@pytest.fixture
def source() -> AsyncMock:
    source = AsyncMock()
    source.fetch_all_cities.return_value = [
        RawCityRecord(name=f"City{chr(97 + i)}", pollution=i) for i in range(12)
    ]
    return source


@pytest.fixture
def descriptions() -> AsyncMock:
    descriptions = AsyncMock()
    descriptions.get_description.return_value = "A city."
    return descriptions


@pytest.fixture
def client(source, descriptions):
    config = Config()  # type: ignore[call-arg]
    app = create_app(config, container=_container(config, source, descriptions))
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


class TestCitiesRoute:
    def test_first_page(self, client, source):
        response = client.get("/api/v1/cities", params={"country": "PL"})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 12
        assert body["limit"] == 10
        assert body["page"] == 1
        assert len(body["cities"]) == 10
        assert body["cities"][0] == {"name": "cityl", "pollution": 11, "description": "A city."}
        source.fetch_all_cities.assert_awaited_once_with("PL")

    def test_second_page_is_served_from_cache(self, client, source):
        client.get("/api/v1/cities", params={"country": "PL"})
        response = client.get("/api/v1/cities", params={"country": "PL", "page": "2"})

        body = response.json()
        assert body["page"] == 2
        assert [c["pollution"] for c in body["cities"]] == [1, 0]
        source.fetch_all_cities.assert_awaited_once()

    def test_unparseable_page_means_first_page(self, client):
        response = client.get("/api/v1/cities", params={"country": "PL", "page": "abc"})

        assert response.status_code == 200
        assert response.json()["page"] == 1

    def test_page_past_the_end_is_clamped(self, client):
        response = client.get("/api/v1/cities", params={"country": "PL", "page": "7"})

        body = response.json()
        assert body["page"] == 7
        assert len(body["cities"]) == 10

    def test_oversized_page_number_does_not_fail(self, client):
        response = client.get("/api/v1/cities", params={"country": "PL", "page": "9" * 5000})

        assert response.status_code == 200
        assert len(response.json()["cities"]) == 10

    def test_missing_country_is_rejected(self, client, source):
        response = client.get("/api/v1/cities")

        assert response.status_code == 422
        assert response.json() == {
            "code": "VALIDATION_ERROR",
            "message": "country is required",
            "field": "country",
        }
        source.fetch_all_cities.assert_not_called()

    def test_blank_country_is_rejected(self, client):
        response = client.get("/api/v1/cities", params={"country": "  "})

        assert response.status_code == 422

    def test_upstream_error_maps_to_503(self, client, source):
        source.fetch_all_cities.side_effect = ExternalServiceError(
            "upstream down", code="upstream_bad_response"
        )

        response = client.get("/api/v1/cities", params={"country": "PL"})

        assert response.status_code == 503
        assert response.json()["code"] == "upstream_bad_response"

    def test_unexpected_error_maps_to_500(self, client, source):
        source.fetch_all_cities.side_effect = RuntimeError("boom")

        response = client.get("/api/v1/cities", params={"country": "PL"})

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestHealthRoute:
    def test_reports_status_and_version(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["version"] == "0.1.0"
