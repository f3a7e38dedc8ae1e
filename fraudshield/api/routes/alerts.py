"""
FraudShield Alerts API Routes

Read access to the alert history and its counters.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from fraudshield.api.dependencies import get_alert_history
from fraudshield.models.detection import AlertStats, AnalysisResult
from fraudshield.services.detection import AlertHistory

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/alerts", tags=["alerts"])


@router.get("", response_model=List[AnalysisResult])
async def list_alerts(
    history: AlertHistory = Depends(get_alert_history),
):
    """
    Get recent alerts, newest first.
    """
    return list(history.results())


@router.get("/stats", response_model=AlertStats)
async def get_alert_stats(
    history: AlertHistory = Depends(get_alert_history),
):
    """
    Get alert counters for dashboards.

    Returns:
        Totals evaluated and blocked plus threat level distribution
    """
    return history.stats()


@router.delete("")
async def clear_alerts(
    history: AlertHistory = Depends(get_alert_history),
):
    """Clear alert history and reset counters."""
    history.clear()
    return {"status": "cleared"}
