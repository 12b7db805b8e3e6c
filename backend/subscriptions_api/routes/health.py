"""
Subscriptions API — Health Check Route
========================================

What:  GET /health-check, a liveness probe for orchestration.
How:   Returns 200 with an empty body, always.

Liveness only: the database is NOT consulted, so a storage outage never
turns this probe red. Readiness is established once, at startup, by the
connection check in the lifespan.
"""

from fastapi import APIRouter, Response

router = APIRouter(tags=["Health"])


@router.get(
    "/health-check",
    responses={200: {"description": "Process is alive (empty body)"}},
    summary="Liveness probe",
)
async def health_check() -> Response:
    return Response(status_code=200)
