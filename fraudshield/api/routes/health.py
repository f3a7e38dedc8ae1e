"""
FraudShield Health API Routes

Health check and status endpoints.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from fraudshield.api.dependencies import get_monitor, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    monitor = Depends(get_monitor),
):
    """
    Basic health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "fraudshield-api",
        "protection_enabled": monitor.is_enabled,
        "rules_loaded": monitor.engine.get_rule_summary()['total_rules'],
    }


@router.get("/live")
async def liveness_check():
    """Liveness check - basic ping."""
    return {"status": "alive"}


@router.get("/version")
async def version_info(
    settings = Depends(get_settings),
):
    """Get version information."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "api_version": "v1",
    }
