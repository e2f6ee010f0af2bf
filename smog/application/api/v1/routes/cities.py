"""Polluted cities REST routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from smog.domain.city.query.list_polluted_cities import (
    ListPollutedCities,
    ListPollutedCitiesHandler,
    PollutedCityList,
)

router = APIRouter(prefix="/cities", tags=["Cities"], route_class=DishkaRoute)


@router.get("", response_model=PollutedCityList)
async def list_polluted_cities(
    handler: FromDishka[ListPollutedCitiesHandler],
    country: str | None = None,
    page: str | None = None,
) -> PollutedCityList:
    """Most polluted cities of ``country``, ten per page, most polluted first."""
    return await handler.run(ListPollutedCities(country=country, page=page))
