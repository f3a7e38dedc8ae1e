"""
FraudShield Constants - Central location for ALL constant values.
"""

from typing import Dict, List, Tuple

# APPLICATION INFO
APP_NAME: str = "FraudShield"
APP_VERSION: str = "1.0.0"
APP_DESCRIPTION: str = "Real-time fraud and phishing risk scoring for URLs, emails and SMS"

# RESULT LIMITS
DEFAULT_HISTORY_SIZE: int = 10
MAX_CONTENT_PREVIEW_LENGTH: int = 300
MAX_REASONS: int = 10
MAX_CONTENT_LENGTH: int = 10000

# THREAT THRESHOLDS (minimum aggregate weight, checked highest first)
THREAT_THRESHOLDS: List[Tuple[str, float]] = [
    ("high", 2.0),
    ("medium", 1.2),
    ("low", 0.6),
]

# CONFIDENCE
CONFIDENCE_WEIGHT_DIVISOR: float = 3.0
MAX_BASE_CONFIDENCE: float = 0.98
REASON_CONFIDENCE_BONUS: float = 0.05
MAX_REASON_BONUS: float = 0.15
MAX_CONFIDENCE: float = 0.99

# BLOCKING
MEDIUM_BLOCK_CONFIDENCE: float = 0.75

# SAFE CONTENT DAMPENING
SAFE_CONTENT_MULTIPLIER: float = 0.6

# DOMAIN LISTS
HIGH_RISK_TLDS: List[str] = [".tk", ".ml", ".ga", ".cf"]

SUSPICIOUS_TLDS: List[str] = [
    ".tk", ".ml", ".ga", ".cf", ".pw", ".top",
    ".work", ".click", ".download", ".review",
]

DEFAULT_PORTS: Tuple[int, ...] = (80, 443)

# URL STRUCTURE WEIGHTS
URL_STRUCTURE_WEIGHTS: Dict[str, float] = {
    "malformed": 0.8,
    "high_risk_tld": 0.9,
    "suspicious_tld": 0.7,
    "excessive_subdomains": 0.7,
    "multiple_subdomains": 0.4,
    "homograph": 0.95,
    "non_standard_port": 0.6,
    "insecure_sensitive": 0.8,
    "long_url": 0.5,
    "suspicious_path": 0.7,
}

MAX_URL_LENGTH: int = 200
EXCESSIVE_SUBDOMAIN_LABELS: int = 4
MULTIPLE_SUBDOMAIN_LABELS: int = 3

# HEURISTIC WEIGHTS
EMAIL_HEURISTIC_WEIGHTS: Dict[str, float] = {
    "capitals": 0.4,
    "punctuation": 0.3,
    "suspicious_address": 0.7,
    "money": 0.6,
}

SMS_HEURISTIC_WEIGHTS: Dict[str, float] = {
    "short_message": 0.3,
    "sender_spoof": 0.6,
}

SHORT_SMS_LENGTH: int = 50

# CONTENT OBSERVER
MIN_OBSERVED_EMAIL_LENGTH: int = 50
