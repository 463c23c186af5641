"""Tests for key/value backends and the persistence adapter."""

import json


class TestDictKVStore:
    def test_set_get_remove(self, kv_store):
        assert kv_store.get("links") is None

        kv_store.set("links", "[]")
        assert kv_store.get("links") == "[]"

        assert kv_store.remove("links") is True
        assert kv_store.remove("links") is False
        assert kv_store.get("links") is None


class TestSQLiteKVStore:
    def test_set_get(self, temp_dir):
        from linkvault.storage import SQLiteKVStore

        with SQLiteKVStore(temp_dir / "vault.sqlite") as store:
            store.set("theme", "oled")
            store.set("theme", "cute")
            assert store.get("theme") == "cute"
            assert store.get("missing") is None

    def test_persistence(self, temp_dir):
        """Data survives reopening the database."""
        from linkvault.storage import SQLiteKVStore

        db_path = temp_dir / "nested" / "vault.sqlite"

        store1 = SQLiteKVStore(db_path)
        store1.initialize()
        store1.set("links", '[{"id": "a"}]')
        store1.close()

        store2 = SQLiteKVStore(db_path)
        store2.initialize()
        value = store2.get("links")
        store2.close()

        assert value == '[{"id": "a"}]'

    def test_remove(self, temp_dir):
        from linkvault.storage import SQLiteKVStore

        with SQLiteKVStore(temp_dir / "vault.sqlite") as store:
            store.set("links", "[]")
            assert store.remove("links") is True
            assert store.remove("links") is False


class TestPersistenceAdapter:
    def test_empty_store_loads_nothing(self, persistence):
        assert persistence.load_links() == []

    def test_round_trip(self, persistence, sample_links):
        persistence.save_links(sample_links)
        loaded = persistence.load_links()

        assert loaded == sample_links
        assert [link.id for link in loaded] == ["py-tut", "rust-book", "pasta"]

    def test_round_trip_through_sqlite(self, temp_dir, sample_links):
        from linkvault.storage import PersistenceAdapter, SQLiteKVStore

        with SQLiteKVStore(temp_dir / "vault.sqlite") as store:
            PersistenceAdapter(store).save_links(sample_links)

        with SQLiteKVStore(temp_dir / "vault.sqlite") as store:
            assert PersistenceAdapter(store).load_links() == sample_links

    def test_stored_layout(self, persistence, kv_store, sample_links):
        persistence.save_links(sample_links[:1])
        stored = json.loads(kv_store.get("links"))

        assert stored == [
            {
                "id": "py-tut",
                "url": "https://docs.python.org/3/tutorial/",
                "title": "The Python Tutorial",
                "description": "Official introduction to Python.",
                "tags": ["Python", "Tutorial"],
                "createdAt": 1_700_000_300_000,
            }
        ]

    def test_malformed_json_falls_back_to_empty(self, persistence, kv_store):
        kv_store.set("links", "{not json")
        assert persistence.load_links() == []

    def test_wrong_shape_falls_back_to_empty(self, persistence, kv_store):
        kv_store.set("links", '[{"id": "a"}]')
        assert persistence.load_links() == []

    def test_parse_links_raises(self):
        import pytest

        from linkvault.errors import PersistenceParseFailure
        from linkvault.storage import parse_links

        with pytest.raises(PersistenceParseFailure):
            parse_links('"just a string"')

    def test_theme_default_and_save(self, persistence, kv_store):
        from linkvault.schema import Theme

        assert persistence.load_theme() is Theme.DARK

        persistence.save_theme(Theme.CUTE)
        assert kv_store.get("theme") == "cute"
        assert persistence.load_theme() is Theme.CUTE

    def test_unknown_theme_falls_back(self, persistence, kv_store):
        from linkvault.schema import Theme

        kv_store.set("theme", "neon")
        assert persistence.load_theme() is Theme.DARK
