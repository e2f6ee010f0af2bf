"""Unit tests for ListPollutedCitiesHandler."""

from unittest.mock import AsyncMock

import pytest

from smog.domain.city.model.city import CityPage, CleanCityRecord
from smog.domain.city.query.list_polluted_cities import (
    ListPollutedCities,
    ListPollutedCitiesHandler,
    PollutedCityList,
)
from smog.domain.shared.error import ValidationError


class TestListPollutedCitiesHandler:
    @pytest.mark.asyncio
    async def test_returns_page_from_aggregator(self):
        aggregator = AsyncMock()
        aggregator.get_cities.return_value = CityPage(
            total=1,
            limit=10,
            page=1,
            cities=[CleanCityRecord(name="krakow", pollution=80, description="Old capital")],
        )
        handler = ListPollutedCitiesHandler(aggregator=aggregator)

        result = await handler.run(ListPollutedCities(country="PL", page="1"))

        aggregator.get_cities.assert_awaited_once_with("PL", "1")
        assert isinstance(result, PollutedCityList)
        assert result.total == 1
        assert result.cities[0].name == "krakow"

    @pytest.mark.asyncio
    async def test_page_is_optional(self):
        aggregator = AsyncMock()
        aggregator.get_cities.return_value = CityPage(total=0, limit=10, page=1, cities=[])
        handler = ListPollutedCitiesHandler(aggregator=aggregator)

        await handler.run(ListPollutedCities(country="DE"))

        aggregator.get_cities.assert_awaited_once_with("DE", None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("country", [None, "", "   "])
    async def test_requires_country(self, country):
        aggregator = AsyncMock()
        handler = ListPollutedCitiesHandler(aggregator=aggregator)

        with pytest.raises(ValidationError) as exc_info:
            await handler.run(ListPollutedCities(country=country))

        assert exc_info.value.field == "country"
        aggregator.get_cities.assert_not_called()
