"""
Brasier Health Check implementation.

Kubernetes-compatible health checks for liveness and readiness probes.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from brasier import __version__
from brasier.infrastructure.persistence.database import Database

HEALTHY = "healthy"
UNHEALTHY = "unhealthy"


class BrasierHealthCheck:
    """
    Health check for the burn verification service.

    Checks:
    - Database connectivity (claim ledger)
    - Whether verification is configured (reported, not fatal)
    """

    def __init__(self, database: Database, verification_configured: bool):
        self.database = database
        self.verification_configured = verification_configured

    async def check_liveness(self) -> Dict[str, Any]:
        """
        Liveness probe - is the service alive?

        Returns basic service info without checking dependencies.
        """
        return {
            "status": HEALTHY,
            "component": "brasier",
            "version": __version__,
            "timestamp": self._get_timestamp(),
        }

    async def check_readiness(self) -> Dict[str, Any]:
        """
        Readiness probe - is the service ready to handle requests?

        The claim ledger is the only hard dependency: without it no claim
        can be checked or recorded.
        """
        db_healthy = await self.database.health_check()

        return {
            "status": HEALTHY if db_healthy else UNHEALTHY,
            "component": "brasier",
            "timestamp": self._get_timestamp(),
            "checks": {
                "database": {"status": HEALTHY if db_healthy else UNHEALTHY},
                "verification": {
                    "configured": self.verification_configured,
                },
            },
        }

    @staticmethod
    def _get_timestamp() -> str:
        return datetime.now(timezone.utc).isoformat()
