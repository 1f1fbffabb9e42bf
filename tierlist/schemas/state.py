from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tierlist.models.item import Item
from tierlist.models.tier import Tier, TierWithSimplifiedItems


class EncodeRequest(BaseModel):
    title: Optional[str] = None
    tiers: list[TierWithSimplifiedItems]


class EncodeResponse(BaseModel):
    token: str
    url: str


class StateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    tiers: list[Tier]
    valid: bool = True
    notices: list[str] = Field(default_factory=list)


class PreviewTier(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    gradient: str
    items: list[Item]


class PreviewResponse(BaseModel):
    title: Optional[str] = None
    tiers: list[PreviewTier]
    valid: bool = True
