"""Unit tests for ranked list pagination."""

import pytest

from smog.domain.city.model.city import CleanCityRecord
from smog.domain.city.util.pagination import MAX_PAGE, paginate, resolve_page


def _cities(count: int) -> list[CleanCityRecord]:
    return [
        CleanCityRecord(name=f"city{chr(97 + i % 26)}", pollution=count - i)
        for i in range(count)
    ]


class TestResolvePage:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, 1),
            ("", 1),
            ("abc", 1),
            ("0", 1),
            (0, 1),
            ("-3", 1),
            ("2", 2),
            ("3abc", 3),
            (" 4", 4),
            (5, 5),
            (2.9, 2),
            (True, 1),
        ],
    )
    def test_resolves_like_leading_integer_or_first_page(self, value, expected):
        assert resolve_page(value) == expected

    def test_oversized_page_number_is_capped(self):
        assert resolve_page("9" * 5000) == MAX_PAGE
        assert resolve_page("9" * 5000 + "abc") == MAX_PAGE
        assert resolve_page(10**30) == MAX_PAGE

    def test_oversized_negative_page_number_is_first_page(self):
        assert resolve_page("-" + "9" * 5000) == 1


class TestPaginate:
    def test_first_page(self):
        items = _cities(25)
        result = paginate(items, 1)

        assert result.total == 25
        assert result.limit == 10
        assert result.page == 1
        assert result.cities == items[0:10]

    def test_last_partial_page(self):
        items = _cities(25)
        result = paginate(items, 3)

        assert result.page == 3
        assert result.cities == items[20:25]
        assert len(result.cities) == 5

    def test_page_past_the_end_serves_first_page(self):
        items = _cities(25)
        result = paginate(items, 99)

        assert result.page == 99
        assert result.total == 25
        assert result.cities == items[0:10]

    def test_oversized_page_serves_first_page(self):
        items = _cities(25)
        result = paginate(items, "9" * 5000)

        assert result.page == MAX_PAGE
        assert result.cities == items[0:10]

    def test_page_starting_exactly_at_end_is_empty(self):
        items = _cities(20)
        result = paginate(items, 3)

        assert result.cities == []

    def test_missing_page_defaults_to_first(self):
        items = _cities(12)
        result = paginate(items, None)

        assert result.page == 1
        assert result.cities == items[0:10]

    def test_empty_list(self):
        result = paginate([], 1)

        assert result.total == 0
        assert result.cities == []
