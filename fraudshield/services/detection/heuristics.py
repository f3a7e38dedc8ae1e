"""
FraudShield Category Heuristics

Signals that do not fit the pattern-table model: formatting abuse and
money mentions in emails, short messages and spoofed senders in SMS.
"""

import re
from typing import List, Sequence, Tuple

from fraudshield.models.detection import ContentCategory
from fraudshield.services.detection.rules import RuleEvaluation
from fraudshield.utils.constants import (
    EMAIL_HEURISTIC_WEIGHTS,
    SHORT_SMS_LENGTH,
    SMS_HEURISTIC_WEIGHTS,
)


CAPITALS_RUN = re.compile(r"[A-Z]{10,}")
EXCLAMATION_BURST = re.compile(r"!{3,}")
SUSPICIOUS_ADDRESS = re.compile(r"@[a-z0-9-]+\.(tk|ml|ga|cf|ru|cn)", re.IGNORECASE)
MONEY_AMOUNT = re.compile(
    r"\$[\d,]+|£[\d,]+|€[\d,]+|\d+\s*(million|billion|thousand)",
    re.IGNORECASE,
)

SENDER_SHORT_CODE = re.compile(r"from:\s*\d{5,6}[^0-9]", re.IGNORECASE)
REPLY_SHORT_CODE = re.compile(r"reply.*\d{5}")


def _evaluation(findings: List[Tuple[str, float]]) -> RuleEvaluation:
    return RuleEvaluation(
        total_weight=sum(weight for _, weight in findings),
        reasons=tuple(reason for reason, _ in findings),
    )


def email_heuristics(content: str) -> RuleEvaluation:
    """Formatting and money-mention checks for email text."""
    findings = []

    # Case-sensitive on purpose: a run of capitals
    if CAPITALS_RUN.search(content):
        findings.append(('Excessive use of capital letters', EMAIL_HEURISTIC_WEIGHTS['capitals']))

    if EXCLAMATION_BURST.search(content):
        findings.append(('Excessive punctuation usage', EMAIL_HEURISTIC_WEIGHTS['punctuation']))

    if SUSPICIOUS_ADDRESS.search(content):
        findings.append(('Suspicious email domain in content', EMAIL_HEURISTIC_WEIGHTS['suspicious_address']))

    if MONEY_AMOUNT.search(content):
        findings.append(('Large monetary amounts mentioned', EMAIL_HEURISTIC_WEIGHTS['money']))

    return _evaluation(findings)


def sms_heuristics(content: str, prior_reasons: Sequence[str] = ()) -> RuleEvaluation:
    """
    Length and sender checks for SMS text.

    A short message only counts when other signals were already found.
    """
    findings = []

    if len(content) < SHORT_SMS_LENGTH and prior_reasons:
        findings.append(('Short message with suspicious content', SMS_HEURISTIC_WEIGHTS['short_message']))

    if SENDER_SHORT_CODE.search(content) or REPLY_SHORT_CODE.search(content):
        findings.append(('Suspicious sender number pattern', SMS_HEURISTIC_WEIGHTS['sender_spoof']))

    return _evaluation(findings)


def run_heuristics(
    category: ContentCategory,
    content: str,
    prior_reasons: Sequence[str] = (),
) -> RuleEvaluation:
    """Run the heuristics for a category. URLs have none beyond structure."""
    if category == ContentCategory.EMAIL:
        return email_heuristics(content)
    if category == ContentCategory.SMS:
        return sms_heuristics(content, prior_reasons)
    return RuleEvaluation()
