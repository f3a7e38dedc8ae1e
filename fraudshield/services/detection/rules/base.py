"""
FraudShield Rule Registry

Immutable per-category tables of weighted fraud patterns and of
"looks legitimate" safe indicators.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Pattern, Tuple

from fraudshield.models.detection import ContentCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """A weighted pattern. Matching is case-insensitive and unanchored."""
    pattern: Pattern[str]
    reason: str
    weight: float

    def __post_init__(self):
        if self.weight <= 0:
            raise ValueError(f"Rule weight must be positive: {self.reason!r} has {self.weight}")

    def matches(self, content: str) -> bool:
        return self.pattern.search(content) is not None


@dataclass(frozen=True)
class SafeIndicator:
    """A low-false-positive pattern for legitimate content."""
    pattern: Pattern[str]

    def matches(self, content: str) -> bool:
        return self.pattern.search(content) is not None


@dataclass(frozen=True)
class RuleEvaluation:
    """Result of running one category's rule table over a piece of content."""
    total_weight: float = 0.0
    reasons: Tuple[str, ...] = field(default_factory=tuple)


def in_sequence(*parts: str) -> str:
    """
    Regex source for ``parts`` appearing in order on one line.

    Matches the same text as ``parts[0].*parts[1].*...`` but commits to the
    earliest occurrence of each later part, so a failed search costs one
    scan per starting hit instead of one per combination of hits.
    """
    head, *rest = parts
    return head + "".join(f"(?>.*?(?:{part}))" for part in rest)


def rule(pattern: str, reason: str, weight: float, flags: int = re.IGNORECASE) -> Rule:
    """Build a Rule from a regex source string."""
    return Rule(pattern=re.compile(pattern, flags), reason=reason, weight=weight)


def safe(pattern: str, flags: int = re.IGNORECASE) -> SafeIndicator:
    """Build a SafeIndicator from a regex source string."""
    return SafeIndicator(pattern=re.compile(pattern, flags))


class RuleRegistry:
    """
    Registry of rule tables, one per content category.

    Each category is registered exactly once, at import time of its table
    module. Tables are stored as tuples and never mutated afterwards, so
    lookups need no locking.
    """

    def __init__(self):
        self._rules: Dict[ContentCategory, Tuple[Rule, ...]] = {}
        self._safe_indicators: Dict[ContentCategory, Tuple[SafeIndicator, ...]] = {}

    def register(
        self,
        category: ContentCategory,
        rules: Iterable[Rule],
        safe_indicators: Iterable[SafeIndicator] = (),
    ) -> None:
        """Register the rule table and safe indicators for a category."""
        if category in self._rules:
            raise ValueError(f"Rules already registered for category: {category.value}")
        self._rules[category] = tuple(rules)
        self._safe_indicators[category] = tuple(safe_indicators)
        logger.debug(
            f"Registered {len(self._rules[category])} rules and "
            f"{len(self._safe_indicators[category])} safe indicators for {category.value}"
        )

    def get_rules(self, category: ContentCategory) -> Tuple[Rule, ...]:
        """Get the rule table for a category."""
        return self._rules.get(category, ())

    def get_safe_indicators(self, category: ContentCategory) -> Tuple[SafeIndicator, ...]:
        """Get the safe indicators for a category."""
        return self._safe_indicators.get(category, ())

    def get_categories(self) -> List[ContentCategory]:
        return list(self._rules.keys())

    def evaluate(self, category: ContentCategory, content: str) -> RuleEvaluation:
        """
        Run every rule of the category against the content.

        Each matching rule adds its weight once. Reasons keep discovery
        order; a reason shared by two rules is listed once.

        Args:
            category: Content category
            content: Text to match

        Returns:
            RuleEvaluation with unscaled total weight and reasons
        """
        total = 0.0
        reasons: List[str] = []

        for r in self.get_rules(category):
            if r.matches(content):
                total += r.weight
                if r.reason not in reasons:
                    reasons.append(r.reason)

        return RuleEvaluation(total_weight=total, reasons=tuple(reasons))

    def is_safe_content(self, category: ContentCategory, content: str) -> bool:
        """True when any safe indicator of the category matches."""
        return any(indicator.matches(content) for indicator in self.get_safe_indicators(category))


# Global registry
rule_registry = RuleRegistry()


def register_rules(
    category: ContentCategory,
    rules: Iterable[Rule],
    safe_indicators: Iterable[SafeIndicator] = (),
) -> None:
    """Register a category table on the global registry."""
    rule_registry.register(category, rules, safe_indicators)
