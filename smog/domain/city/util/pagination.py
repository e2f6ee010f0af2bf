"""Page slicing over a ranked city list."""

import math
import re
import sys
from collections.abc import Sequence
from typing import Any

from smog.domain.city.model.city import CityPage, CleanCityRecord

PAGE_SIZE = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# Larger requests are capped here; any such page starts past the end of the list.
MAX_PAGE = sys.maxsize


def resolve_page(value: Any) -> int:
    """Parse a client-supplied page number.

    Accepts ints and strings with a leading integer (``"3"``, ``"3abc"``).
    Anything absent, unparsable or below 1 resolves to page 1; pages above
    ``MAX_PAGE`` resolve to ``MAX_PAGE``.
    """
    if isinstance(value, bool):
        return 1
    if isinstance(value, int):
        page = value
    elif isinstance(value, float) and math.isfinite(value):
        page = int(value)
    elif isinstance(value, str) and (match := _LEADING_INT.match(value)):
        digits = match.group(1)
        try:
            page = int(digits)
        except ValueError:
            # Too many digits to convert
            page = 1 if digits.startswith("-") else MAX_PAGE
    else:
        return 1
    return min(max(page, 1), MAX_PAGE)


def paginate(
    items: Sequence[CleanCityRecord], page: Any = None, limit: int = PAGE_SIZE
) -> CityPage:
    """Return one page of ``items``.

    A page that starts beyond the end of the list serves the first page's
    items instead of an empty page; ``page`` in the result still echoes the
    requested page number.
    """
    resolved = resolve_page(page)
    total = len(items)
    start = (resolved - 1) * limit
    end = resolved * limit
    if start > total:
        start, end = 0, limit
    return CityPage(total=total, limit=limit, page=resolved, cities=list(items[start:end]))
