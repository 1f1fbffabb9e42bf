# tierlist/services/state_codec.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from lzstring import LZString
from pydantic import ValidationError

from tierlist import config
from tierlist.constants import STATE_QUERY_PARAM
from tierlist.models.tier import (
    DEFAULT_TIER_TEMPLATE,
    EncodedState,
    LabelPosition,
    SimplifiedTier,
    Tier,
    TierWithSimplifiedItems,
)
from tierlist.services.asset_urls import AssetUrlNormalizer
from tierlist.services.item_resolver import ItemResolver

logger = logging.getLogger(__name__)

_lz = LZString()


@dataclass
class LoadedState:
    """Result of opening a share link: what to render and whether the link was usable."""
    tiers: list[Tier]
    title: Optional[str] = None
    valid: bool = True
    notices: list[str] = field(default_factory=list)


def default_tiers() -> list[Tier]:
    """Fresh, independently mutable copy of the default template."""
    return [tier.model_copy(deep=True) for tier in DEFAULT_TIER_TEMPLATE]


class StateCodec:
    """
    Tier list <-> share token.

    Token = lz-string `compressToEncodedURIComponent` of the compact JSON
    `{"title":..,"tiers":[{"i":..,"n":..,"t":[{"i":..,"c":..,"u":..}]}]}`.
    Key names and order are the wire contract of every link shared so far.
    """

    def __init__(self, resolver: ItemResolver, normalizer: Optional[AssetUrlNormalizer] = None):
        self.resolver = resolver
        self.normalizer = normalizer or AssetUrlNormalizer(resolver=resolver)

    # --- Encode ---

    def encode(self, title: Optional[str], tiers: Iterable[TierWithSimplifiedItems]) -> str:
        """
        Encode pre-simplified tiers. The caller decides which items carry
        content/image (see ItemResolver.simplify); the codec emits what it gets.
        """
        state = EncodedState(
            title=title,
            tiers=[
                SimplifiedTier(id=tier.id, name=tier.name, items=list(tier.items))
                for tier in tiers
            ],
        )
        text = json.dumps(
            state.model_dump(by_alias=True, exclude_none=True),
            separators=(",", ":"),
            ensure_ascii=False,
        )
        return _lz.compressToEncodedURIComponent(_to_utf16_units(text))

    def encode_tiers(self, title: Optional[str], tiers: Iterable[Tier]) -> str:
        """Simplify full tiers through the resolver, then encode."""
        return self.encode(title, self.resolver.simplify_tiers(tiers))

    # --- Decode ---

    def decode(self, token: Optional[str]) -> Optional[EncodedState]:
        """Token -> EncodedState, or None for anything that isn't a valid share token."""
        if not token:
            return None

        try:
            # form decoding turns the "+" of the token alphabet into spaces
            text = _lz.decompressFromEncodedURIComponent(token.replace(" ", "+"))
            if text:
                text = _from_utf16_units(text)
        except Exception as e:
            # the decompressor reports garbage input through assorted lookup/type errors
            logger.info("Share token failed to decompress: %s: %s", type(e).__name__, e)
            return None

        if not text:
            logger.info("Share token decompressed to nothing")
            return None

        try:
            return EncodedState.model_validate_json(text)
        except ValidationError as e:
            logger.info("Share token payload is not a tier list state: %d errors", e.error_count())
            return None

    def restore(self, tiers: Iterable[SimplifiedTier]) -> list[Tier]:
        """Resolve every item through the resolver; tier and item order are kept as-is."""
        return [
            Tier(
                id=tier.id,
                name=tier.name,
                items=[
                    self.resolver.resolve(item.id, item.content, item.image_url)
                    for item in tier.items
                ],
                # not part of the wire format
                label_position=LabelPosition.LEFT,
            )
            for tier in tiers
        ]

    def get_initial_tiers(self, token: Optional[str] = None) -> list[Tier]:
        if token:
            decoded = self.decode(token)
            if decoded is not None:
                return self.restore(decoded.tiers)
        return default_tiers()

    def load(self, token: Optional[str] = None) -> LoadedState:
        """Like get_initial_tiers, but keeps the title and reports unusable links."""
        if not token:
            return LoadedState(tiers=default_tiers())

        decoded = self.decode(token)
        if decoded is None:
            return LoadedState(
                tiers=default_tiers(),
                valid=False,
                notices=["Invalid share link; starting from the default tier list."],
            )
        return LoadedState(tiers=self.restore(decoded.tiers), title=decoded.title)

    # --- Links ---

    def share_url(self, token: str, share_path: Optional[str] = None) -> str:
        path = share_path or config.SHARE_PATH
        return self.normalizer.to_absolute(f"{path}?{STATE_QUERY_PARAM}={token}")


# --- Helpers (private) ---

def _to_utf16_units(text: str) -> str:
    # lz-string works on UTF-16 code units; split astral chars into surrogate pairs
    if all(ord(ch) <= 0xFFFF for ch in text):
        return text
    raw = text.encode("utf-16-le")
    return "".join(
        chr(int.from_bytes(raw[i:i + 2], "little")) for i in range(0, len(raw), 2)
    )


def _from_utf16_units(text: str) -> str:
    if not any(0xD800 <= ord(ch) <= 0xDFFF for ch in text):
        return text
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
