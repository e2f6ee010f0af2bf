from dishka import provide

from smog.config import Config
from smog.domain.city.port.cache import CountryResultStore
from smog.domain.city.port.description_lookup import DescriptionLookup
from smog.domain.city.port.pollution_source import PollutionSource
from smog.domain.city.query.list_polluted_cities import ListPollutedCitiesHandler
from smog.domain.city.service.aggregator import CityAggregator
from smog.util.di.base import Provider
from smog.util.di.scope import Scope


class CityProvider(Provider):
    # Services
    @provide(scope=Scope.APP)
    def get_city_aggregator(
        self,
        source: PollutionSource,
        descriptions: DescriptionLookup,
        results: CountryResultStore,
        config: Config,
    ) -> CityAggregator:
        # APP scope: the aggregator owns the in-flight registry for its country cache.
        return CityAggregator(
            source=source,
            descriptions=descriptions,
            results=results,
            page_size=config.aggregator.page_size,
            single_flight=config.aggregator.single_flight,
        )

    # Query Handlers
    list_polluted_cities_handler = provide(ListPollutedCitiesHandler, scope=Scope.UOW)
