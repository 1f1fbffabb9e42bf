# tierlist/routers/state.py
# FastAPI router for share links (stateless: the token is the state)

from __future__ import annotations

from fastapi import APIRouter, Depends

from tierlist import config
from tierlist.middleware.error_handler import ShareLinkTooLongError, ValidationError
from tierlist.schemas.state import EncodeRequest, EncodeResponse, StateResponse
from tierlist.services.container import get_codec
from tierlist.services.state_codec import StateCodec
from tierlist.utils.logger import log_info


router = APIRouter(tags=["State"])


@router.post("/state/encode", response_model=EncodeResponse)
async def encode_state(payload: EncodeRequest, codec: StateCodec = Depends(get_codec)) -> EncodeResponse:
    """Encode a tier list (items already simplified) into a share token and URL."""
    tier_ids = [tier.id for tier in payload.tiers]
    duplicates = sorted({tid for tid in tier_ids if tier_ids.count(tid) > 1})
    if duplicates:
        raise ValidationError("Tier ids must be unique", details={"duplicates": duplicates})

    token = codec.encode(payload.title, payload.tiers)
    url = codec.share_url(token)
    if len(url) > config.MAX_SHARE_URL_LENGTH:
        raise ShareLinkTooLongError(len(url), config.MAX_SHARE_URL_LENGTH)

    log_info(f"encode_state: {len(payload.tiers)} tiers -> token of {len(token)} chars")
    return EncodeResponse(token=token, url=url)


@router.get("/state/{token}", response_model=StateResponse, response_model_by_alias=True)
async def load_state(token: str, codec: StateCodec = Depends(get_codec)) -> StateResponse:
    """Decode a share token. Invalid tokens give the default tiers with valid=false."""
    loaded = codec.load(token)
    if not loaded.valid:
        log_info("load_state: invalid share token, serving default tiers")
    return StateResponse(
        title=loaded.title,
        tiers=loaded.tiers,
        valid=loaded.valid,
        notices=loaded.notices,
    )
