"""
FraudShield Test Configuration

Pytest fixtures and configuration.
"""

import pytest

from fraudshield.config import Settings
from fraudshield.services.detection import AlertHistory, DetectionEngine, FraudMonitor


@pytest.fixture
def settings():
    """Default settings, independent of the cached instance."""
    return Settings()


@pytest.fixture
def history():
    """Empty alert history with default capacity."""
    return AlertHistory()


@pytest.fixture
def engine(settings, history):
    """Fresh detection engine with its own history."""
    return DetectionEngine(history=history, settings=settings)


@pytest.fixture
def monitor(engine):
    """Enabled fraud monitor around a fresh engine."""
    return FraudMonitor(engine, enabled=True)


@pytest.fixture
def client():
    """API test client with protection on and an empty shared history."""
    from fastapi.testclient import TestClient
    from fraudshield.main import app
    from fraudshield.services.detection import get_fraud_monitor

    monitor = get_fraud_monitor()
    monitor.enable()
    monitor.engine.history.clear()

    yield TestClient(app)

    monitor.enable()
    monitor.engine.history.clear()
