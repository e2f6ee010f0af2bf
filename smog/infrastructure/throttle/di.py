"""DI provider for outbound rate limiters."""

from typing import NewType

from dishka import provide

from smog.config import Config
from smog.domain.shared.port.rate_limiter import RateLimiter
from smog.infrastructure.throttle.interval import IntervalRateLimiter
from smog.util.di.base import Provider
from smog.util.di.scope import Scope

# One gate per upstream; each is shared by every request in the process.
PollutionRateLimiter = NewType("PollutionRateLimiter", RateLimiter)
EncyclopediaRateLimiter = NewType("EncyclopediaRateLimiter", RateLimiter)


class ThrottleProvider(Provider):
    """DI provider for the per-upstream rate limiters."""

    @provide(scope=Scope.APP)
    def get_pollution_rate_limiter(self, config: Config) -> PollutionRateLimiter:
        return PollutionRateLimiter(
            IntervalRateLimiter(config.pollution.min_interval, name="pollution")
        )

    @provide(scope=Scope.APP)
    def get_encyclopedia_rate_limiter(self, config: Config) -> EncyclopediaRateLimiter:
        return EncyclopediaRateLimiter(
            IntervalRateLimiter(config.encyclopedia.min_interval, name="encyclopedia")
        )
