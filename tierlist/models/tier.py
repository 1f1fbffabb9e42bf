# tierlist/models/tier.py

# Pydantic V2 models for tiers and the encoded share state
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tierlist.constants import DEFAULT_TIER_NAMES
from tierlist.models.item import Item, SimplifiedItem


class LabelPosition(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"


class Tier(BaseModel):
    """One ranking bucket. Item order is the rank and must be preserved."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    items: list[Item] = Field(default_factory=list)
    label_position: LabelPosition = Field(default=LabelPosition.LEFT, alias="labelPosition")


class TierWithSimplifiedItems(BaseModel):
    """Encoder input: a tier whose items were already simplified by the caller."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    items: list[SimplifiedItem] = Field(default_factory=list)
    label_position: LabelPosition = Field(default=LabelPosition.LEFT, alias="labelPosition")


class SimplifiedTier(BaseModel):
    """Wire form of a tier: `{i, n, t}`."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="i")
    name: str = Field(alias="n")
    items: list[SimplifiedItem] = Field(default_factory=list, alias="t")


class EncodedState(BaseModel):
    """Payload behind a share token: `{title?, tiers}`."""
    title: Optional[str] = None
    tiers: list[SimplifiedTier]


# Template for a fresh tier list; never hand this list out directly
DEFAULT_TIER_TEMPLATE: list[Tier] = [
    Tier(id=tier_id, name=name, items=[], label_position=LabelPosition.LEFT)
    for tier_id, name in DEFAULT_TIER_NAMES
]
