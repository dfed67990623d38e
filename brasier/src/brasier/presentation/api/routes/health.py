"""
Health check API routes.

Kubernetes-compatible liveness and readiness probes.
"""

from fastapi import APIRouter, Depends, Response, status

from brasier.di.container import get_container
from brasier.di.dependencies import get_database
from brasier.infrastructure.monitoring.health_check import (
    HEALTHY,
    BrasierHealthCheck,
)
from brasier.infrastructure.persistence.database import Database

router = APIRouter(prefix="/health", tags=["health"])


def get_health_check(
    database: Database = Depends(get_database),
) -> BrasierHealthCheck:
    """Build the health check against the current container."""
    return BrasierHealthCheck(
        database=database,
        verification_configured=get_container().verification_configured,
    )


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe(
    health_check: BrasierHealthCheck = Depends(get_health_check),
):
    """
    Liveness probe endpoint.

    Returns 200 whenever the process can serve requests.
    """
    return await health_check.check_liveness()


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(
    response: Response,
    health_check: BrasierHealthCheck = Depends(get_health_check),
):
    """
    Readiness probe endpoint.

    Returns 503 while the claim ledger database is unreachable.
    """
    result = await health_check.check_readiness()

    if result["status"] != HEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return result
