"""
Doubler API - Health Check Route
=================================

What:  Liveness endpoint for container health checks and load balancer probes.
How:   The service has no external dependencies, so a running process that
       can answer the request is healthy. The reported version is the one the
       OpenAPI document publishes (settings.api_version).
"""

import time

from fastapi import APIRouter, Request

from doubler.schemas.doubler import HealthResponse

router = APIRouter(tags=["Health"])

# Process start time for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=request.app.state.settings.api_version,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
