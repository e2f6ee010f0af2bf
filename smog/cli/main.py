"""Main CLI application using Cyclopts."""

import cyclopts

from smog.cli.commands import cities, serve

app = cyclopts.App(
    name="smog",
    help="Polluted Cities - most polluted cities per country",
)

app.command(serve.app, name="serve")
app.command(cities.app, name="cities")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
