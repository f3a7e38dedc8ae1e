"""
FraudShield Risk Scorer

Maps an aggregate weight to a threat level, a confidence value and a
block decision.
"""

import logging
from typing import Optional

from fraudshield.models.detection import Prediction, ThreatLevel
from fraudshield.utils.constants import (
    CONFIDENCE_WEIGHT_DIVISOR,
    MAX_BASE_CONFIDENCE,
    MAX_CONFIDENCE,
    MAX_REASON_BONUS,
    MEDIUM_BLOCK_CONFIDENCE,
    REASON_CONFIDENCE_BONUS,
    THREAT_THRESHOLDS,
)

logger = logging.getLogger(__name__)


PREDICTION_BY_LEVEL = {
    ThreatLevel.HIGH: Prediction.MALICIOUS,
    ThreatLevel.MEDIUM: Prediction.SUSPICIOUS,
    ThreatLevel.LOW: Prediction.SAFE,
}


class RiskScorer:
    """
    Threshold classifier over aggregate weights.
    """

    def __init__(self):
        self.thresholds = [(ThreatLevel(name), minimum) for name, minimum in THREAT_THRESHOLDS]

    def get_threat_level(self, total_weight: float) -> Optional[ThreatLevel]:
        """
        Get threat level from aggregate weight.

        Thresholds are checked highest first; the first one reached wins.

        Args:
            total_weight: Aggregate weight after safe-content scaling

        Returns:
            ThreatLevel, or None when the weight is below the noise floor
        """
        # Plain >= on the float sum: a total that rounds just under a
        # threshold stays in the lower level.
        for level, minimum in self.thresholds:
            if total_weight >= minimum:
                return level
        return None

    def calculate_confidence(self, total_weight: float, reason_count: int) -> float:
        """
        Calculate detection confidence.

        min(min(w / 3, 0.98) + min(n * 0.05, 0.15), 0.99)
        """
        base = min(total_weight / CONFIDENCE_WEIGHT_DIVISOR, MAX_BASE_CONFIDENCE)
        bonus = min(reason_count * REASON_CONFIDENCE_BONUS, MAX_REASON_BONUS)
        return min(base + bonus, MAX_CONFIDENCE)

    def should_block(self, level: ThreatLevel, confidence: float) -> bool:
        """High always blocks; Medium blocks only above 0.75 confidence."""
        if level == ThreatLevel.HIGH:
            return True
        return level == ThreatLevel.MEDIUM and confidence > MEDIUM_BLOCK_CONFIDENCE

    def get_prediction(self, level: ThreatLevel) -> Prediction:
        """Get the listener-facing verdict for a threat level."""
        return PREDICTION_BY_LEVEL[level]
