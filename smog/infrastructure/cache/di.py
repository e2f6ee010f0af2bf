"""DI provider for in-process caches."""

from dishka import provide

from smog.domain.city.port.cache import CountryResultStore, DescriptionStore
from smog.infrastructure.cache.memory import InMemoryCacheStore
from smog.util.di.base import Provider
from smog.util.di.scope import Scope


class CacheProvider(Provider):
    """Process-wide cache stores. APP scope keeps them alive until shutdown."""

    @provide(scope=Scope.APP)
    def get_country_result_store(self) -> CountryResultStore:
        return CountryResultStore(InMemoryCacheStore())

    @provide(scope=Scope.APP)
    def get_description_store(self) -> DescriptionStore:
        return DescriptionStore(InMemoryCacheStore())
