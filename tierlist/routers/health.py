# tierlist/routers/health.py
# Health check endpoints for monitoring and load balancers

import logging
import time
from typing import Any, Dict

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from tierlist.models.item import SimplifiedItem
from tierlist.models.tier import TierWithSimplifiedItems
from tierlist.services.container import get_codec
from tierlist.services.state_codec import StateCodec

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_PROBE_TIERS = [
    TierWithSimplifiedItems(id="S", name="S", items=[SimplifiedItem(id="probe", content="Probe")]),
]


class HealthStatus(BaseModel):
    """Health check response model."""
    status: str  # "healthy", "unhealthy"
    timestamp: float
    version: str = "1.0.0"
    checks: Dict[str, Dict[str, Any]] = {}


class ComponentHealth(BaseModel):
    """Individual component health."""
    status: str
    latency_ms: float = 0.0
    message: str = ""


def check_codec_health(codec: StateCodec) -> ComponentHealth:
    """Encode and decode a tiny state; any mismatch means links are broken."""
    start = time.time()
    try:
        token = codec.encode("health", _PROBE_TIERS)
        decoded = codec.decode(token)
        latency_ms = (time.time() - start) * 1000
        if decoded is None or decoded.tiers[0].items[0].id != "probe":
            return ComponentHealth(
                status="unhealthy",
                latency_ms=latency_ms,
                message="Probe token did not round-trip"
            )
        return ComponentHealth(
            status="healthy",
            latency_ms=latency_ms,
            message=f"Probe token is {len(token)} chars"
        )
    except Exception as e:
        logger.error(f"Codec health check failed: {e}")
        return ComponentHealth(
            status="unhealthy",
            latency_ms=(time.time() - start) * 1000,
            message=f"Codec error: {type(e).__name__}"
        )


@router.get("/health", response_model=HealthStatus)
async def health_check(response: Response, codec: StateCodec = Depends(get_codec)):
    """Full health check: codec round-trip plus registry mode."""
    codec_health = check_codec_health(codec)
    registry = codec.resolver.registry
    checks = {
        "codec": {
            "status": codec_health.status,
            "latency_ms": round(codec_health.latency_ms, 2),
            "message": codec_health.message,
        },
        "registry": {
            "status": "healthy",
            "message": f"{len(registry)} custom items ({'persistent' if registry.persistent else 'in-memory'})",
        },
    }

    overall_status = "healthy"
    if any(c["status"] == "unhealthy" for c in checks.values()):
        overall_status = "unhealthy"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthStatus(status=overall_status, timestamp=time.time(), checks=checks)


@router.get("/health/live")
async def liveness_probe():
    """Returns 200 if the application is running. No dependency checks."""
    return {"status": "alive"}
