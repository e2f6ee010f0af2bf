"""Console output for the CLI.

Wraps rich so all CLI output is formatted the same way.
"""

from rich.console import Console as RichConsole
from rich.table import Table

from smog.domain.city.model.city import CityPage

_DESCRIPTION_WIDTH = 60


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self, *, force_terminal: bool | None = None) -> None:
        self._out = RichConsole(force_terminal=force_terminal)
        self._err = RichConsole(stderr=True, force_terminal=force_terminal)

    def error(self, message: str, hint: str | None = None) -> None:
        self._err.print(f"[red]✗[/red] {message}")
        if hint:
            self._err.print(f"  [dim]{hint}[/dim]")

    def city_page(self, country: str, page: CityPage) -> None:
        """Render one page of ranked cities as a table."""
        table = Table(title=f"Most polluted cities: {country}")
        table.add_column("#", justify="right", style="dim")
        table.add_column("City")
        table.add_column("Pollution", justify="right")
        table.add_column("Description", overflow="ellipsis", max_width=_DESCRIPTION_WIDTH)

        offset = (page.page - 1) * page.limit
        if offset > page.total:
            offset = 0
        for rank, city in enumerate(page.cities, start=offset + 1):
            table.add_row(str(rank), city.name, f"{city.pollution:g}", city.description or "-")

        self._out.print(table)
        self._out.print(f"[dim]Page {page.page} · {len(page.cities)} of {page.total} cities[/dim]")


def get_console() -> Console:
    return Console()
