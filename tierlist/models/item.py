# tierlist/models/item.py

# Pydantic V2 models for rankable items (full and wire/reference forms)
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """
    A fully-resolved rankable entry as the editor renders it.
    `content` doubles as the label when there is no image.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    content: str = ""
    image_url: str = Field(default="", alias="imageUrl")


class SimplifiedItem(BaseModel):
    """
    Compact item reference: `{i, c?, u?}` on the wire and in local storage.
    Content and image are only carried for custom items.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="i")
    content: Optional[str] = Field(default=None, alias="c")
    image_url: Optional[str] = Field(default=None, alias="u")


# FullItem | ReferenceItem, matched by the resolver
ItemRef = Union[Item, SimplifiedItem]
