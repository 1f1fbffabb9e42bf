# tierlist/services/item_resolver.py
from __future__ import annotations

from typing import Iterable, Optional

from tierlist.constants import UNKNOWN_ITEM_CONTENT
from tierlist.models.item import Item, ItemRef, SimplifiedItem
from tierlist.models.tier import Tier, TierWithSimplifiedItems
from tierlist.services.custom_items import CustomItemRegistry


class ItemResolver:
    """
    Single policy point for turning an item id into a displayable Item.

    Read-only against the registry: resolving never adds or changes entries.
    """

    def __init__(self, registry: CustomItemRegistry):
        self.registry = registry

    # --- Public API ---

    def resolve(
        self,
        item_id: str,
        fallback_content: Optional[str] = None,
        fallback_image_url: Optional[str] = None,
    ) -> Item:
        """
        Registry entry first, then the fallbacks carried by the caller
        (usually the token's `c`/`u`), then the placeholder.
        Empty strings count as missing.
        """
        entry = self.registry.get(item_id)
        if entry is not None:
            return Item(
                id=entry.id,
                content=entry.content or fallback_content or UNKNOWN_ITEM_CONTENT,
                image_url=entry.image_url or fallback_image_url or "",
            )
        return Item(
            id=item_id,
            content=fallback_content or UNKNOWN_ITEM_CONTENT,
            image_url=fallback_image_url or "",
        )

    def is_custom(self, item_id: str) -> bool:
        return self.registry.has(item_id)

    def to_item(self, ref: ItemRef) -> Item:
        """Match a FullItem / ReferenceItem and return a fresh Item."""
        if isinstance(ref, Item):
            return ref.model_copy()
        if isinstance(ref, SimplifiedItem):
            return self.resolve(ref.id, ref.content, ref.image_url)
        raise TypeError(f"expected Item or SimplifiedItem, got {type(ref).__name__}")

    def simplify(self, item: Item, include_content: Optional[bool] = None) -> SimplifiedItem:
        """
        Inverse of resolve, used before encoding. Custom items keep their
        content/image so recipients without the registry entry still see them;
        catalog items travel as a bare id. `include_content` overrides the check.
        """
        if include_content is None:
            include_content = self.is_custom(item.id)
        if not include_content:
            return SimplifiedItem(id=item.id)
        return SimplifiedItem(
            id=item.id,
            content=item.content or None,
            image_url=item.image_url or None,
        )

    def simplify_tiers(self, tiers: Iterable[Tier]) -> list[TierWithSimplifiedItems]:
        return [
            TierWithSimplifiedItems(
                id=tier.id,
                name=tier.name,
                items=[self.simplify(item) for item in tier.items],
                label_position=tier.label_position,
            )
            for tier in tiers
        ]
