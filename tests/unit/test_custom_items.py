# tests/unit/test_custom_items.py
# Unit tests for the custom item registry and its storage loading

import json

from tierlist.constants import CUSTOM_ITEMS_KEY
from tierlist.models.item import Item
from tierlist.repositories.local_store import JsonFileStore, MemoryStore
from tierlist.services.custom_items import CustomItemRegistry, Empty, Loaded, load_entries


class CountingStore(MemoryStore):
    """MemoryStore that records how often it is read and written."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.reads = 0
        self.writes = 0

    def get_item(self, key):
        self.reads += 1
        return super().get_item(key)

    def set_item(self, key, value):
        self.writes += 1
        super().set_item(key, value)


class FailingWriteStore(MemoryStore):
    def set_item(self, key, value):
        raise OSError("disk full")


class TestLoadEntries:

    def test_no_store_is_empty(self):
        result = load_entries(None)
        assert isinstance(result, Empty)
        assert result.reason == "storage unavailable"

    def test_missing_key_is_empty(self):
        assert isinstance(load_entries(MemoryStore()), Empty)

    def test_corrupt_json_is_empty(self):
        store = MemoryStore({CUSTOM_ITEMS_KEY: "[{oops"})
        result = load_entries(store)
        assert isinstance(result, Empty)
        assert result.reason.startswith("corrupt value")

    def test_non_list_is_empty(self):
        store = MemoryStore({CUSTOM_ITEMS_KEY: '{"i": "a"}'})
        assert isinstance(load_entries(store), Empty)

    def test_unreadable_file_is_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("garbage", encoding="utf-8")
        assert isinstance(load_entries(JsonFileStore(path)), Empty)

    def test_valid_entries_are_loaded(self):
        store = MemoryStore({CUSTOM_ITEMS_KEY: '[{"i":"a","c":"Apple","u":"a.png"},{"i":"b"}]'})
        result = load_entries(store)
        assert isinstance(result, Loaded)
        assert [e.id for e in result.entries] == ["a", "b"]
        assert result.entries[0].content == "Apple"
        assert result.entries[0].image_url == "a.png"
        assert result.entries[1].content is None

    def test_malformed_entries_are_skipped(self):
        store = MemoryStore({CUSTOM_ITEMS_KEY: '[{"i":"a"}, "junk", {"c":"no id"}, {"i": 7}]'})
        result = load_entries(store)
        assert isinstance(result, Loaded)
        assert [e.id for e in result.entries] == ["a"]


class TestCustomItemRegistry:

    def test_put_has_get(self, registry, custom_items):
        registry.put(custom_items)

        assert registry.has("custom-1")
        assert not registry.has("catalog-1")
        entry = registry.get("custom-1")
        assert entry.id == "custom-1"
        assert entry.content == "Grandma's Pie"
        assert entry.image_url == "/uploads/pie.webp"
        assert registry.get("catalog-1") is None

    def test_put_upserts_by_id(self, registry):
        registry.put([Item(id="x", content="Old")])
        registry.put([Item(id="x", content="New", image_url="new.png")])

        assert len(registry) == 1
        assert registry.get("x").content == "New"

    def test_put_writes_whole_set_once_per_batch(self, custom_items):
        store = CountingStore()
        registry = CustomItemRegistry(store)

        registry.put(custom_items)

        assert store.writes == 1
        stored = json.loads(store.get_item(CUSTOM_ITEMS_KEY))
        assert stored == [
            {"i": "custom-1", "c": "Grandma's Pie", "u": "/uploads/pie.webp"},
            {"i": "custom-2", "c": "Mystery Dip", "u": ""},
        ]

    def test_loads_lazily_and_only_once(self):
        store = CountingStore({CUSTOM_ITEMS_KEY: '[{"i":"a","c":"Apple"}]'})
        registry = CustomItemRegistry(store)
        assert store.reads == 0

        assert registry.has("a")
        assert registry.get("a").content == "Apple"
        assert not registry.has("b")
        assert store.reads == 1

    def test_put_keeps_previously_stored_entries(self):
        store = MemoryStore({CUSTOM_ITEMS_KEY: '[{"i":"a","c":"Apple"}]'})
        registry = CustomItemRegistry(store)

        registry.put([Item(id="b", content="Banana")])

        stored = json.loads(store.get_item(CUSTOM_ITEMS_KEY))
        assert [e["i"] for e in stored] == ["a", "b"]

    def test_survives_reload_from_file(self, tmp_path, custom_items):
        path = tmp_path / "store.json"
        CustomItemRegistry(JsonFileStore(path)).put(custom_items)

        reloaded = CustomItemRegistry(JsonFileStore(path))
        assert reloaded.has("custom-2")
        assert reloaded.get("custom-2").content == "Mystery Dip"

    def test_corrupt_storage_starts_empty(self):
        registry = CustomItemRegistry(MemoryStore({CUSTOM_ITEMS_KEY: "not json"}))
        assert len(registry) == 0
        assert not registry.has("anything")

    def test_headless_registry_is_in_memory(self, custom_items):
        registry = CustomItemRegistry(None)

        registry.put(custom_items)

        assert not registry.persistent
        assert registry.has("custom-1")
        assert not CustomItemRegistry(None).has("custom-1")

    def test_write_failure_keeps_memory_state(self):
        registry = CustomItemRegistry(FailingWriteStore())

        registry.put([Item(id="a", content="Apple")])

        assert registry.has("a")

    def test_get_returns_a_copy(self, registry):
        registry.put([Item(id="a", content="Apple")])

        entry = registry.get("a")
        entry.content = "Changed"

        assert registry.get("a").content == "Apple"

    def test_entries_in_insertion_order(self, registry, custom_items):
        registry.put(custom_items)
        assert [e.id for e in registry.entries()] == ["custom-1", "custom-2"]
