# tierlist/services/custom_items.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Iterable, Union

from pydantic import ValidationError

from tierlist.constants import CUSTOM_ITEMS_KEY
from tierlist.models.item import Item, SimplifiedItem
from tierlist.repositories.local_store import LocalStore
from tierlist.utils.logger import log_exception, log_info

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Loaded:
    entries: list[SimplifiedItem] = field(default_factory=list)


@dataclass(frozen=True)
class Empty:
    reason: str


LoadResult = Union[Loaded, Empty]


def load_entries(store: LocalStore | None) -> LoadResult:
    """
    Read the custom item set from the store.

    Never raises: a missing store, a missing key or corrupt contents all come
    back as Empty(reason). Malformed entries inside a valid array are skipped.
    """
    if store is None:
        return Empty("storage unavailable")

    try:
        raw = store.get_item(CUSTOM_ITEMS_KEY)
    except (OSError, ValueError) as e:
        logger.warning("Custom items store unreadable: %s", e)
        return Empty(f"store unreadable: {e}")

    if not raw:
        return Empty("no custom items stored")

    try:
        data = json.loads(raw)
    except ValueError as e:
        logger.warning("Custom items value is not valid JSON: %s", e)
        return Empty(f"corrupt value: {e}")

    if not isinstance(data, list):
        logger.warning("Custom items value is %s, expected a list", type(data).__name__)
        return Empty("corrupt value: not a list")

    entries: list[SimplifiedItem] = []
    for raw_entry in data:
        try:
            entries.append(SimplifiedItem.model_validate(raw_entry))
        except ValidationError:
            logger.warning("Skipping malformed custom item entry: %r", raw_entry)
    return Loaded(entries)


class CustomItemRegistry:
    """
    In-memory map of id -> custom item, loaded lazily once and written
    through to the store after every mutation.

    With store=None the registry is a plain non-persistent map.
    """

    def __init__(self, store: LocalStore | None = None):
        self._store = store
        self._items: dict[str, SimplifiedItem] = {}
        self._loaded = False

    @property
    def persistent(self) -> bool:
        return self._store is not None

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        self._loaded = True
        result = load_entries(self._store)
        if isinstance(result, Loaded):
            for entry in result.entries:
                self._items[entry.id] = entry
            log_info(f"CustomItemRegistry: loaded {len(self._items)} custom items")
        else:
            logger.debug("Custom item registry starts empty: %s", result.reason)

    def _persist(self) -> None:
        if self._store is None:
            return
        payload = [
            entry.model_dump(by_alias=True, exclude_none=True)
            for entry in self._items.values()
        ]
        try:
            self._store.set_item(CUSTOM_ITEMS_KEY, json.dumps(payload, ensure_ascii=False))
        except OSError as e:
            # in-memory state stays authoritative for this session
            log_exception(e, "CustomItemRegistry: saving custom items")

    def put(self, items: Iterable[Item]) -> None:
        """Upsert items by id, then save the whole set once."""
        self._ensure_loaded()
        for item in items:
            self._items[item.id] = SimplifiedItem(
                id=item.id,
                content=item.content,
                image_url=item.image_url,
            )
        self._persist()

    def has(self, item_id: str) -> bool:
        self._ensure_loaded()
        return item_id in self._items

    def get(self, item_id: str) -> SimplifiedItem | None:
        self._ensure_loaded()
        entry = self._items.get(item_id)
        return entry.model_copy() if entry is not None else None

    def entries(self) -> list[SimplifiedItem]:
        self._ensure_loaded()
        return [entry.model_copy() for entry in self._items.values()]

    def __len__(self) -> int:
        self._ensure_loaded()
        return len(self._items)
