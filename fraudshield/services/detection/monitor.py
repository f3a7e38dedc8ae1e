"""
FraudShield Fraud Monitor

Boundary between event sources (link clicks, rendered content, manual
tests) and the detection engine. Owns the protection on/off switch and
fans results out to listeners.
"""

import logging
import re
import threading
from typing import Callable, List, Optional, Union

from fraudshield.config import get_settings
from fraudshield.models.detection import AnalysisResult, ContentCategory, FraudResult
from fraudshield.services.detection.engine import DetectionEngine, get_detection_engine
from fraudshield.utils.constants import MIN_OBSERVED_EMAIL_LENGTH

logger = logging.getLogger(__name__)


EMAIL_LIKE_CONTENT = re.compile(r"@.*\.(com|org|net)")

ResultListener = Callable[[FraudResult], None]


class FraudMonitor:
    """
    Routes observed content through ``DetectionEngine.classify``.

    While disabled, nothing is classified and every entry point returns
    None.
    """

    def __init__(self, engine: DetectionEngine, enabled: bool = True):
        self.engine = engine
        self._enabled = enabled
        self._listeners: List[ResultListener] = []
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Enable flag
    # ------------------------------------------------------------------

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = bool(enabled)
        logger.info(f"Fraud protection {'enabled' if self._enabled else 'disabled'}")

    def enable(self) -> None:
        self.set_enabled(True)

    def disable(self) -> None:
        self.set_enabled(False)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: ResultListener) -> None:
        """Register a callback receiving a FraudResult per non-null result."""
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: ResultListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def to_fraud_result(self, result: AnalysisResult) -> FraudResult:
        """Convert an AnalysisResult to the listener format."""
        return FraudResult(
            id=result.id,
            type=result.category,
            content=result.content_preview,
            prediction=self.engine.scorer.get_prediction(result.threat_level),
            confidence=result.confidence,
            reasons=list(result.reasons),
            timestamp=result.timestamp,
        )

    def _notify(self, result: AnalysisResult) -> None:
        with self._lock:
            listeners = list(self._listeners)
        if not listeners:
            return

        fraud_result = self.to_fraud_result(result)
        for listener in listeners:
            try:
                listener(fraud_result)
            except Exception as e:
                logger.error(f"Result listener {listener!r} failed: {e}")

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def classify(
        self,
        category: Union[ContentCategory, str],
        content: str,
    ) -> Optional[AnalysisResult]:
        """Classify content if protection is enabled and notify listeners."""
        if not self._enabled:
            return None

        result = self.engine.classify(category, content)
        if result is not None:
            self._notify(result)
        return result

    def on_link_click(self, href: str) -> Optional[AnalysisResult]:
        """A link is about to be followed."""
        return self.classify(ContentCategory.URL, href)

    def on_content_rendered(self, text: str) -> Optional[AnalysisResult]:
        """
        New content was displayed.

        Only text that looks like an email (long enough and containing an
        address) is classified.
        """
        if not text or len(text) <= MIN_OBSERVED_EMAIL_LENGTH:
            return None
        if not EMAIL_LIKE_CONTENT.search(text):
            return None
        return self.classify(ContentCategory.EMAIL, text)

    def manual_test(
        self,
        category: Union[ContentCategory, str],
        content: str,
        generate: bool = False,
    ) -> Optional[AnalysisResult]:
        """
        Manual test entry point.

        ``generate`` is accepted for caller compatibility; sample
        generation is not provided here.
        """
        if generate:
            logger.debug("Sample generation requested; classifying supplied content")
        return self.classify(category, content)


# Singleton instance
_fraud_monitor: Optional[FraudMonitor] = None


def get_fraud_monitor() -> FraudMonitor:
    """Get the fraud monitor singleton."""
    global _fraud_monitor
    if _fraud_monitor is None:
        _fraud_monitor = FraudMonitor(
            get_detection_engine(),
            enabled=get_settings().fraud_protection_enabled,
        )
    return _fraud_monitor
