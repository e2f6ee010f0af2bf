"""Global test fixtures."""

import pytest

from smog.domain.shared.port.rate_limiter import RateLimiter


class RecordingRateLimiter(RateLimiter):
    """Admits every call immediately and counts admissions."""

    def __init__(self) -> None:
        self.acquired = 0

    async def acquire(self) -> None:
        self.acquired += 1


@pytest.fixture
def rate_limiter() -> RecordingRateLimiter:
    return RecordingRateLimiter()
