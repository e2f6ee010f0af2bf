from dishka import AsyncContainer, from_context, make_async_container
from starlette.requests import Request

from smog.config import Config
from smog.domain.city.util.di.provider import CityProvider
from smog.infrastructure.cache.di import CacheProvider
from smog.infrastructure.http.di import HttpProvider
from smog.infrastructure.throttle.di import ThrottleProvider
from smog.util.di.base import Provider
from smog.util.di.scope import Scope


class ContextProvider(Provider):
    """Values handed to the container from outside rather than built by it."""

    config = from_context(provides=Config, scope=Scope.APP)
    request = from_context(provides=Request, scope=Scope.UOW)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        ContextProvider(),
        ThrottleProvider(),
        CacheProvider(),
        HttpProvider(),
        CityProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
