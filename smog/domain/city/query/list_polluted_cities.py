from smog.domain.city.model.city import CityPage
from smog.domain.city.service.aggregator import CityAggregator
from smog.domain.shared.error import ValidationError
from smog.domain.shared.query import Query, QueryHandler, Result


class ListPollutedCities(Query):
    country: str | None = None
    page: int | str | None = None


class PollutedCityList(CityPage, Result):
    pass


class ListPollutedCitiesHandler(QueryHandler[ListPollutedCities, PollutedCityList]):
    aggregator: CityAggregator

    async def run(self, cmd: ListPollutedCities) -> PollutedCityList:
        if cmd.country is None or not cmd.country.strip():
            raise ValidationError("country is required", field="country")

        page = await self.aggregator.get_cities(cmd.country, cmd.page)
        return PollutedCityList.model_validate(page.model_dump())
