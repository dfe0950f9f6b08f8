"""Probes for the Todos API.

`/health/` answers as long as the process serves requests. `/health/ready`
PINGs Redis through the injected ServiceContext and reports 503
`store_unavailable` when the ping fails, so traffic is held back until the
backing store is reachable.
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from todos.context import ServiceContext, get_context

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {
        "status": "healthy",
        "service": "todos-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(context: ServiceContext = Depends(get_context)):
    if not await context.redis.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_unavailable",
            },
        )
    return {"status": "ready", "checks": {"redis": "healthy"}}
