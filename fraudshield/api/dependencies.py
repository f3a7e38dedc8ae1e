"""
FraudShield API Dependencies

FastAPI dependency injection for settings, engine and monitor.
"""

import logging

from fraudshield.config import Settings, get_settings as _get_settings
from fraudshield.services.detection import (
    AlertHistory,
    DetectionEngine,
    FraudMonitor,
    get_fraud_monitor,
)

logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    """Current application settings."""
    return _get_settings()


def get_monitor() -> FraudMonitor:
    """Shared fraud monitor."""
    return get_fraud_monitor()


def get_engine() -> DetectionEngine:
    """Detection engine behind the shared monitor."""
    return get_fraud_monitor().engine


def get_alert_history() -> AlertHistory:
    """Alert history of the shared engine."""
    return get_fraud_monitor().engine.history
