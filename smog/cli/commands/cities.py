"""Polluted cities lookup command."""

import asyncio
import sys

import cyclopts

from smog.application.di import create_container
from smog.cli.console import get_console
from smog.config import Config, configure_logging
from smog.domain.city.query.list_polluted_cities import (
    ListPollutedCities,
    ListPollutedCitiesHandler,
    PollutedCityList,
)
from smog.domain.shared.error import SmogError
from smog.util.di.scope import Scope

app = cyclopts.App(name="cities", help="Look up polluted cities without the HTTP server")


async def _run(query: ListPollutedCities, config: Config) -> PollutedCityList:
    container = create_container(config)
    try:
        async with container(scope=Scope.UOW) as uow:
            handler = await uow.get(ListPollutedCitiesHandler)
            return await handler.run(query)
    finally:
        await container.close()


@app.default
def cities(country: str, *, page: int = 1, json: bool = False) -> None:
    """Fetch, clean and rank the cities of COUNTRY, then print one page.

    Talks to the upstream APIs directly, so the first page of a large country
    can take a while under the rate limits.

    Args:
        country: Country code or name, passed to the pollution API as-is.
        page: Page number (10 cities per page).
        json: Print the raw JSON response instead of a table.
    """
    console = get_console()

    try:
        config = Config()  # type: ignore[call-arg]
        configure_logging(config.logging)
        result = asyncio.run(_run(ListPollutedCities(country=country, page=page), config))
    except SmogError as e:
        console.error(e.message)
        sys.exit(1)

    if json:
        print(result.model_dump_json(indent=2))
    else:
        console.city_page(country, result)
