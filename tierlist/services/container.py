# tierlist/services/container.py
# One registry/resolver/codec per process, built from settings on first use

from __future__ import annotations

from functools import lru_cache

from tierlist import config
from tierlist.repositories.local_store import JsonFileStore
from tierlist.services.asset_urls import AssetUrlNormalizer
from tierlist.services.custom_items import CustomItemRegistry
from tierlist.services.item_resolver import ItemResolver
from tierlist.services.state_codec import StateCodec


@lru_cache
def get_registry() -> CustomItemRegistry:
    # no LOCAL_STORE_PATH = headless: empty, non-persistent registry
    store = JsonFileStore(config.LOCAL_STORE_PATH) if config.LOCAL_STORE_PATH else None
    return CustomItemRegistry(store)


@lru_cache
def get_resolver() -> ItemResolver:
    return ItemResolver(get_registry())


@lru_cache
def get_normalizer() -> AssetUrlNormalizer:
    return AssetUrlNormalizer(config.BASE_URL, resolver=get_resolver())


@lru_cache
def get_codec() -> StateCodec:
    return StateCodec(get_resolver(), normalizer=get_normalizer())


def reset() -> None:
    """Drop the cached instances (tests, config reloads)."""
    for factory in (get_codec, get_normalizer, get_resolver, get_registry):
        factory.cache_clear()
