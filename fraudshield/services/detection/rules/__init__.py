"""
FraudShield Detection Rules

Category tables are registered on import of their modules.
"""

from .base import (
    Rule,
    SafeIndicator,
    RuleEvaluation,
    RuleRegistry,
    rule_registry,
    register_rules,
    in_sequence,
)

# Import all rule modules to trigger registration
from . import url
from . import email
from . import sms


def get_rules(category):
    """Get the rule table for a category."""
    return rule_registry.get_rules(category)


def get_safe_indicators(category):
    """Get the safe indicators for a category."""
    return rule_registry.get_safe_indicators(category)


def evaluate_rules(category, content: str) -> RuleEvaluation:
    """Run the category's rule table over the content."""
    return rule_registry.evaluate(category, content)


__all__ = [
    'Rule',
    'SafeIndicator',
    'RuleEvaluation',
    'RuleRegistry',
    'rule_registry',
    'register_rules',
    'in_sequence',
    'get_rules',
    'get_safe_indicators',
    'evaluate_rules',
]
