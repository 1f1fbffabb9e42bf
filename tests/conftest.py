# tests/conftest.py
# Shared fixtures: every test gets its own store/registry/codec, never the process-wide ones.

import pytest

from tierlist.models.item import Item
from tierlist.repositories.local_store import JsonFileStore, MemoryStore
from tierlist.services.asset_urls import AssetUrlNormalizer
from tierlist.services.custom_items import CustomItemRegistry
from tierlist.services.item_resolver import ItemResolver
from tierlist.services.state_codec import StateCodec

BASE_URL = "https://x.test"


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path):
    return JsonFileStore(tmp_path / "local_store.json")


@pytest.fixture
def registry(memory_store):
    return CustomItemRegistry(memory_store)


@pytest.fixture
def resolver(registry):
    return ItemResolver(registry)


@pytest.fixture
def normalizer(resolver):
    return AssetUrlNormalizer(BASE_URL, resolver=resolver)


@pytest.fixture
def codec(resolver, normalizer):
    return StateCodec(resolver, normalizer=normalizer)


@pytest.fixture
def custom_items():
    """ Items a user authored locally. """
    return [
        Item(id="custom-1", content="Grandma's Pie", image_url="/uploads/pie.webp"),
        Item(id="custom-2", content="Mystery Dip", image_url=""),
    ]
