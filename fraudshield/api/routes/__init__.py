"""
FraudShield API Routes

All API route modules.
"""

from fastapi import APIRouter

from .classify import router as classify_router
from .alerts import router as alerts_router
from .protection import router as protection_router
from .rules import router as rules_router
from .health import router as health_router


def get_api_router() -> APIRouter:
    """Create and return the main API router."""
    api_router = APIRouter(prefix="/api/v1")

    api_router.include_router(classify_router)
    api_router.include_router(alerts_router)
    api_router.include_router(protection_router)
    api_router.include_router(rules_router)
    api_router.include_router(health_router)

    return api_router


__all__ = [
    'get_api_router',
    'classify_router',
    'alerts_router',
    'protection_router',
    'rules_router',
    'health_router',
]
