"""
FraudShield Data Models
"""

from .detection import (
    ContentCategory,
    ThreatLevel,
    Prediction,
    AnalysisResult,
    FraudResult,
    AlertStats,
)

__all__ = [
    'ContentCategory',
    'ThreatLevel',
    'Prediction',
    'AnalysisResult',
    'FraudResult',
    'AlertStats',
]
