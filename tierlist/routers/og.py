# tierlist/routers/og.py
# Link-preview data for a shared tier list: absolute, crawler-renderable image URLs

from __future__ import annotations

from fastapi import APIRouter, Depends

from tierlist.schemas.state import PreviewResponse, PreviewTier
from tierlist.services.container import get_codec
from tierlist.services.state_codec import StateCodec


router = APIRouter(tags=["Preview"])


@router.get("/og/{token}", response_model=PreviewResponse, response_model_by_alias=True)
async def preview_state(token: str, codec: StateCodec = Depends(get_codec)) -> PreviewResponse:
    loaded = codec.load(token)
    normalizer = codec.normalizer
    total = len(loaded.tiers)

    tiers = [
        PreviewTier(
            id=tier.id,
            name=tier.name,
            gradient=normalizer.og_tier_gradient(index, total),
            items=[normalizer.resolve_item_for_preview(item) for item in tier.items],
        )
        for index, tier in enumerate(loaded.tiers)
    ]
    return PreviewResponse(title=loaded.title, tiers=tiers, valid=loaded.valid)
