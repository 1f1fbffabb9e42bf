# tests/unit/test_item_resolver.py
# Unit tests for item resolution: the single "what do we show" policy

import pytest

from tierlist.constants import UNKNOWN_ITEM_CONTENT
from tierlist.models.item import Item, SimplifiedItem
from tierlist.models.tier import LabelPosition, Tier


class TestResolve:

    def test_registry_hit(self, registry, resolver, custom_items):
        registry.put(custom_items)

        item = resolver.resolve("custom-1")

        assert item == Item(id="custom-1", content="Grandma's Pie", image_url="/uploads/pie.webp")

    def test_registry_wins_over_fallbacks(self, registry, resolver, custom_items):
        registry.put(custom_items)

        item = resolver.resolve("custom-1", "Old Pie", "old.png")

        assert item.content == "Grandma's Pie"
        assert item.image_url == "/uploads/pie.webp"

    def test_registry_entry_without_image_uses_fallback_image(self, registry, resolver, custom_items):
        registry.put(custom_items)

        item = resolver.resolve("custom-2", None, "dip.png")

        assert item.content == "Mystery Dip"
        assert item.image_url == "dip.png"

    def test_registry_entry_without_content_uses_fallback(self, registry, resolver):
        registry.put([Item(id="blank", content="", image_url="b.png")])

        assert resolver.resolve("blank", "Token Label").content == "Token Label"
        assert resolver.resolve("blank").content == UNKNOWN_ITEM_CONTENT

    def test_miss_uses_fallbacks(self, resolver):
        item = resolver.resolve("abc", "Chips", "chips.png")
        assert item == Item(id="abc", content="Chips", image_url="chips.png")

    def test_miss_without_fallbacks_is_placeholder(self, resolver):
        item = resolver.resolve("abc")
        assert item == Item(id="abc", content="Unknown Item", image_url="")

    @pytest.mark.parametrize("item_id", ["", "abc", "custom-1", "🍕", "a" * 500, "with space"])
    def test_resolve_is_total(self, resolver, item_id):
        item = resolver.resolve(item_id)
        assert item.id == item_id
        assert item.content

    def test_resolve_is_read_only(self, registry, resolver):
        resolver.resolve("abc", "Chips", "chips.png")
        assert len(registry) == 0
        assert not resolver.is_custom("abc")

    def test_resolve_is_idempotent(self, registry, resolver, custom_items):
        registry.put(custom_items)
        assert resolver.resolve("custom-1", "x") == resolver.resolve("custom-1", "x")


class TestIsCustom:

    def test_forwards_to_registry(self, registry, resolver, custom_items):
        assert not resolver.is_custom("custom-1")
        registry.put(custom_items)
        assert resolver.is_custom("custom-1")


class TestToItem:

    def test_full_item_is_copied(self, resolver):
        original = Item(id="a", content="Apple", image_url="a.png")

        item = resolver.to_item(original)

        assert item == original
        assert item is not original

    def test_reference_item_is_resolved(self, resolver):
        item = resolver.to_item(SimplifiedItem(id="a", content="Apple"))
        assert item == Item(id="a", content="Apple", image_url="")

    def test_unknown_type_is_rejected(self, resolver):
        with pytest.raises(TypeError):
            resolver.to_item({"id": "a"})


class TestSimplify:

    def test_catalog_item_travels_as_bare_id(self, resolver):
        simplified = resolver.simplify(Item(id="catalog-1", content="Pizza", image_url="p.png"))
        assert simplified == SimplifiedItem(id="catalog-1")

    def test_custom_item_carries_content_and_image(self, registry, resolver, custom_items):
        registry.put(custom_items)

        simplified = resolver.simplify(custom_items[0])

        assert simplified == SimplifiedItem(id="custom-1", content="Grandma's Pie", image_url="/uploads/pie.webp")

    def test_empty_fields_are_omitted(self, registry, resolver, custom_items):
        registry.put(custom_items)

        simplified = resolver.simplify(custom_items[1])

        assert simplified.image_url is None
        assert simplified.model_dump(by_alias=True, exclude_none=True) == {"i": "custom-2", "c": "Mystery Dip"}

    def test_include_content_override(self, resolver):
        item = Item(id="catalog-1", content="Pizza")
        assert resolver.simplify(item, include_content=True).content == "Pizza"

    def test_simplify_tiers_keeps_order_and_label_position(self, registry, resolver, custom_items):
        registry.put(custom_items)
        tiers = [
            Tier(id="S", name="S", items=[custom_items[1], Item(id="catalog-1", content="Pizza")],
                 label_position=LabelPosition.TOP),
            Tier(id="A", name="A"),
        ]

        simplified = resolver.simplify_tiers(tiers)

        assert [t.id for t in simplified] == ["S", "A"]
        assert [i.id for i in simplified[0].items] == ["custom-2", "catalog-1"]
        assert simplified[0].items[1].content is None
        assert simplified[0].label_position == LabelPosition.TOP
        assert simplified[1].items == []
