# tierlist/services/asset_urls.py
from __future__ import annotations

from typing import Optional
from urllib.parse import quote, urljoin

from tierlist import config
from tierlist.constants import OG_SUFFIX_REWRITES
from tierlist.models.item import Item, ItemRef
from tierlist.services.custom_items import CustomItemRegistry
from tierlist.services.item_resolver import ItemResolver

# reserved and already-escaped characters pass through; spaces and non-ASCII get percent-encoded
_URL_SAFE = ":/?#[]@!$&'()*+,;=%~"


class AssetUrlNormalizer:
    """
    Makes image references usable outside the editor: link-preview crawlers
    need absolute URLs and can't render every format the editor accepts.
    """

    def __init__(self, base_url: Optional[str] = None, resolver: Optional[ItemResolver] = None):
        self.base_url = base_url or config.BASE_URL
        # without a resolver, references resolve against an empty registry
        self.resolver = resolver or ItemResolver(CustomItemRegistry())

    # --- Public API ---

    def to_absolute(self, path: str, base: Optional[str] = None) -> str:
        """Resolve `path` against the base origin; input unchanged if that fails."""
        if not path:
            return ""
        try:
            return quote(urljoin(base or self.base_url, path), safe=_URL_SAFE)
        except ValueError:
            return path

    def asset_url(self, path: str) -> str:
        return self.to_absolute(path)

    def to_og_safe(self, url: str) -> str:
        """
        Rewrite unsupported image suffixes (e.g. .webp -> .png, served by a
        conversion route at the rewritten path), then make the URL absolute.
        """
        lowered = url.lower()
        for suffix, replacement in OG_SUFFIX_REWRITES.items():
            if lowered.endswith(suffix):
                url = url[: -len(suffix)] + replacement
                break
        return self.to_absolute(url)

    def resolve_item_for_preview(self, ref: ItemRef) -> Item:
        """Copy of the item with an OG-safe image URL; the input is left untouched."""
        item = self.resolver.to_item(ref)
        return item.model_copy(update={"image_url": self.to_og_safe(item.image_url)})

    @staticmethod
    def og_tier_gradient(index: int, total_tiers: int) -> str:
        """Background for tier `index` of `total_tiers` in preview images."""
        hue = (index * 360) / max(total_tiers, 1)
        return (
            f"linear-gradient(135deg, hsl({_css_number(hue)}, 70%, 50%), "
            f"hsl({_css_number(hue + 30)}, 70%, 40%))"
        )


# --- Helpers (private) ---

def _css_number(v: float) -> str:
    if float(v).is_integer():
        return str(int(v))
    return f"{v:.4f}".rstrip("0").rstrip(".")
