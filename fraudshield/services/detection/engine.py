"""
FraudShield Detection Engine

Aggregates rule matches, URL structure signals and category heuristics
into one weighted score, classifies it and records the result.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from fraudshield.config import Settings, get_settings
from fraudshield.models.detection import AnalysisResult, ContentCategory
from fraudshield.services.detection.heuristics import run_heuristics
from fraudshield.services.detection.history import AlertHistory
from fraudshield.services.detection.rules import RuleEvaluation, rule_registry
from fraudshield.services.detection.scorer import RiskScorer
from fraudshield.services.detection.structure import URLStructureAnalyzer
from fraudshield.utils.constants import SAFE_CONTENT_MULTIPLIER
from fraudshield.utils.exceptions import InvalidCategoryError
from fraudshield.utils.helpers import generate_alert_id, is_blank, make_preview, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Intermediate scoring values for one piece of content."""
    category: ContentCategory
    rule_weight: float
    extra_weight: float
    safe_multiplier: float
    reasons: Tuple[str, ...]

    @property
    def total_weight(self) -> float:
        return (self.rule_weight + self.extra_weight) * self.safe_multiplier

    @property
    def is_safe_content(self) -> bool:
        return self.safe_multiplier < 1.0


@dataclass(frozen=True)
class AnalysisRequest:
    """One evaluation input, created per call and never stored."""
    category: ContentCategory
    raw_content: str

    @property
    def content_length(self) -> int:
        return len(self.raw_content)


def coerce_category(category: Union[ContentCategory, str]) -> ContentCategory:
    """
    Convert a category name into ContentCategory.

    Raises:
        InvalidCategoryError: if the name is not url, email or sms
    """
    if isinstance(category, ContentCategory):
        return category
    try:
        return ContentCategory(str(category).strip().lower())
    except ValueError:
        raise InvalidCategoryError(
            f"Unknown content category: {category!r} (expected url, email or sms)"
        ) from None


class DetectionEngine:
    """
    Main detection engine.

    Scoring is a pure function of the content and the static rule tables.
    The only state is the alert history, which serializes its own updates.
    """

    def __init__(
        self,
        history: Optional[AlertHistory] = None,
        enabled: bool = True,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.history = history or AlertHistory(self.settings.alert_history_size)
        self.enabled = enabled
        self.registry = rule_registry
        self.scorer = RiskScorer()
        self.url_analyzer = URLStructureAnalyzer()

    def score(self, category: Union[ContentCategory, str], content: str) -> ScoreBreakdown:
        """
        Collect all weighted signals for the content without classifying.

        Order of discovery: rule table, URL structure (URLs only), then
        category heuristics. A reason already collected is not repeated
        but its weight still counts.

        Only the first ``max_content_length`` characters are scored.

        Args:
            category: Content category
            content: Text to score

        Returns:
            ScoreBreakdown
        """
        category = coerce_category(category)
        content = content[:self.settings.max_content_length]

        rules = self.registry.evaluate(category, content)
        safe_multiplier = (
            SAFE_CONTENT_MULTIPLIER if self.registry.is_safe_content(category, content) else 1.0
        )

        reasons = list(rules.reasons)
        extra_weight = 0.0

        if category == ContentCategory.URL:
            extra_weight += self._merge(self.url_analyzer.analyze(content), reasons)

        heuristics = run_heuristics(category, content, prior_reasons=tuple(reasons))
        extra_weight += self._merge(heuristics, reasons)

        return ScoreBreakdown(
            category=category,
            rule_weight=rules.total_weight,
            extra_weight=extra_weight,
            safe_multiplier=safe_multiplier,
            reasons=tuple(reasons),
        )

    @staticmethod
    def _merge(evaluation: RuleEvaluation, reasons: list) -> float:
        for reason in evaluation.reasons:
            if reason not in reasons:
                reasons.append(reason)
        return evaluation.total_weight

    def evaluate(self, category: Union[ContentCategory, str], content: str) -> Optional[AnalysisResult]:
        """
        Score, classify and record one piece of content.

        Args:
            category: Content category
            content: Text to analyze

        Returns:
            AnalysisResult, or None when disabled, when the content is
            blank, when nothing matched, or when the weight is below the
            lowest threshold
        """
        category = coerce_category(category)

        if not self.enabled or content is None or is_blank(content):
            return None

        request = AnalysisRequest(category=category, raw_content=content)
        if request.content_length > self.settings.max_content_length:
            logger.debug(
                f"Analyzing first {self.settings.max_content_length} of "
                f"{request.content_length} characters"
            )

        breakdown = self.score(request.category, request.raw_content)
        if not breakdown.reasons:
            return None

        total_weight = breakdown.total_weight
        threat_level = self.scorer.get_threat_level(total_weight)
        if threat_level is None:
            logger.debug(f"{category.value} content below threshold (weight={total_weight:.2f})")
            return None

        confidence = self.scorer.calculate_confidence(total_weight, len(breakdown.reasons))
        blocked = self.scorer.should_block(threat_level, confidence)

        result = AnalysisResult(
            id=generate_alert_id(category.value),
            category=category,
            content_preview=make_preview(request.raw_content, self.settings.content_preview_length),
            threat_level=threat_level,
            confidence=confidence,
            reasons=list(breakdown.reasons[:self.settings.max_reasons]),
            timestamp=utc_now(),
            blocked=blocked,
        )

        self.history.record(result)

        logger.debug(
            f"Classified {category.value}: weight={total_weight:.2f}, "
            f"level={threat_level.value}, confidence={confidence:.2f}"
        )
        if blocked:
            logger.info(f"Blocked {category.value} content ({threat_level.value}, id={result.id})")

        return result

    def classify(self, category: Union[ContentCategory, str], content: str) -> Optional[AnalysisResult]:
        """Public classification entry point."""
        return self.evaluate(category, content)

    def get_rule_summary(self) -> Dict[str, Any]:
        """
        Get summary of all registered rules.

        Returns:
            Dictionary with rule and safe indicator counts by category
        """
        summary = {
            'total_rules': 0,
            'by_category': {},
        }

        for category in ContentCategory:
            rule_count = len(self.registry.get_rules(category))
            summary['total_rules'] += rule_count
            summary['by_category'][category.value] = {
                'rules': rule_count,
                'safe_indicators': len(self.registry.get_safe_indicators(category)),
            }

        return summary


# Singleton instance
_detection_engine: Optional[DetectionEngine] = None


def get_detection_engine() -> DetectionEngine:
    """Get the detection engine singleton."""
    global _detection_engine
    if _detection_engine is None:
        _detection_engine = DetectionEngine(settings=get_settings())
    return _detection_engine


def classify(category: Union[ContentCategory, str], content: str) -> Optional[AnalysisResult]:
    """
    Convenience function to classify content with the shared engine.

    Args:
        category: url, email or sms
        content: Text to analyze

    Returns:
        AnalysisResult or None
    """
    return get_detection_engine().classify(category, content)
