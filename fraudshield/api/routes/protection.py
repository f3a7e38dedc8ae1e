"""
FraudShield Protection API Routes

Read and toggle the fraud protection switch.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from fraudshield.api.dependencies import get_monitor
from fraudshield.services.detection import FraudMonitor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/protection", tags=["protection"])


class ProtectionState(BaseModel):
    """Fraud protection switch."""
    enabled: bool = Field(..., description="Whether content is being classified")


@router.get("", response_model=ProtectionState)
async def get_protection(
    monitor: FraudMonitor = Depends(get_monitor),
):
    """Get the protection switch."""
    return ProtectionState(enabled=monitor.is_enabled)


@router.put("", response_model=ProtectionState)
async def set_protection(
    state: ProtectionState,
    monitor: FraudMonitor = Depends(get_monitor),
):
    """Turn protection on or off."""
    monitor.set_enabled(state.enabled)
    return ProtectionState(enabled=monitor.is_enabled)
