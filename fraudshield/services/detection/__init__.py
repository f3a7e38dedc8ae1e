"""
FraudShield Detection Module

Rule-based risk scoring for URLs, emails and SMS messages.
"""

from .engine import (
    DetectionEngine,
    AnalysisRequest,
    ScoreBreakdown,
    get_detection_engine,
    classify,
    coerce_category,
)

from .scorer import RiskScorer

from .history import AlertHistory

from .structure import URLStructureAnalyzer, analyze_url, parse_url

from .heuristics import email_heuristics, sms_heuristics, run_heuristics

from .monitor import FraudMonitor, get_fraud_monitor

from .rules import (
    Rule,
    SafeIndicator,
    RuleEvaluation,
    rule_registry,
    evaluate_rules,
    get_rules,
    get_safe_indicators,
)

__all__ = [
    # Engine
    'DetectionEngine',
    'AnalysisRequest',
    'ScoreBreakdown',
    'get_detection_engine',
    'classify',
    'coerce_category',

    # Scoring
    'RiskScorer',
    'AlertHistory',

    # Signals
    'URLStructureAnalyzer',
    'analyze_url',
    'parse_url',
    'email_heuristics',
    'sms_heuristics',
    'run_heuristics',

    # Monitoring
    'FraudMonitor',
    'get_fraud_monitor',

    # Rules
    'Rule',
    'SafeIndicator',
    'RuleEvaluation',
    'rule_registry',
    'evaluate_rules',
    'get_rules',
    'get_safe_indicators',
]
