"""Unit tests for InMemoryCacheStore."""

from smog.infrastructure.cache.memory import InMemoryCacheStore


class TestInMemoryCacheStore:
    def test_set_and_get(self):
        store: InMemoryCacheStore[str, str] = InMemoryCacheStore()

        store.set("krakow", "Old capital")

        assert store.get("krakow") == "Old capital"
        assert store.contains("krakow")
        assert len(store) == 1

    def test_missing_key(self):
        store: InMemoryCacheStore[str, str] = InMemoryCacheStore()

        assert store.get("lodz") is None
        assert not store.contains("lodz")

    def test_none_value_counts_as_present(self):
        store: InMemoryCacheStore[str, str | None] = InMemoryCacheStore()

        store.set("lodz", None)

        assert store.contains("lodz")
        assert store.get("lodz") is None

    def test_overwrite_and_clear(self):
        store = InMemoryCacheStore({"PL": ()})

        store.set("PL", ("x",))
        assert store.get("PL") == ("x",)

        store.clear()
        assert len(store) == 0
