"""
FraudShield URL Structure Analyzer

Parses a URL into components and derives weighted signals that do not
depend on the rule tables: TLD risk, subdomain depth, homograph
characters, port, protocol/keyword mismatch, length and path shape.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urlsplit

from fraudshield.services.detection.rules import RuleEvaluation
from fraudshield.utils.constants import (
    DEFAULT_PORTS,
    EXCESSIVE_SUBDOMAIN_LABELS,
    HIGH_RISK_TLDS,
    MAX_URL_LENGTH,
    MULTIPLE_SUBDOMAIN_LABELS,
    SUSPICIOUS_TLDS,
    URL_STRUCTURE_WEIGHTS,
)
from fraudshield.utils.exceptions import MalformedURLError

logger = logging.getLogger(__name__)


SCHEME_PATTERN = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.IGNORECASE)

# Characters a browser would reject in a hostname
INVALID_HOST_CHARS = re.compile(r"[\s<>\"{}|\\^`%]")

# Cyrillic, Greek and accented Latin letters that mimic ASCII
HOMOGRAPH_CHARS = re.compile(
    r"[а-я]|[αβγδεζηθικλμνξοπρστυφχψω]|[аеорсукх]|[àáâãäåæçèéêëìíîïðñòóôõö]",
    re.IGNORECASE,
)

SENSITIVE_KEYWORDS = re.compile(r"login|bank|secure|account|payment", re.IGNORECASE)

SUSPICIOUS_PATH = re.compile(
    r"/(admin|wp-admin|login|signin|secure|verify|update|confirm)\.php",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ParsedURL:
    """Components of a parsed URL."""
    href: str
    scheme: str
    hostname: str
    port: Optional[int]
    path: str

    @property
    def labels(self) -> List[str]:
        return self.hostname.split('.')


def parse_url(content: str) -> ParsedURL:
    """
    Parse text as a URL, assuming https when no scheme is present.

    Args:
        content: Raw URL text

    Returns:
        ParsedURL

    Raises:
        MalformedURLError: if the text has no usable host or an invalid port
    """
    candidate = content.strip()
    if not SCHEME_PATTERN.match(candidate):
        candidate = f"https://{candidate}"

    try:
        parts = urlsplit(candidate)
        port = parts.port
    except ValueError as e:
        raise MalformedURLError(f"Cannot parse URL: {e}") from e

    hostname = parts.hostname
    if not hostname:
        raise MalformedURLError("URL has no host")
    if INVALID_HOST_CHARS.search(hostname):
        raise MalformedURLError(f"Invalid characters in host: {hostname!r}")

    return ParsedURL(
        href=candidate,
        scheme=parts.scheme.lower(),
        hostname=hostname,
        port=port,
        path=parts.path,
    )


class URLStructureAnalyzer:
    """
    Structural checks for URLs.

    All checks run independently and their weights add up. A URL that
    cannot be parsed yields only the malformed signal.
    """

    def __init__(self, weights: Optional[dict] = None):
        self.weights = dict(URL_STRUCTURE_WEIGHTS)
        if weights:
            self.weights.update(weights)

    def analyze(self, content: str) -> RuleEvaluation:
        """
        Analyze URL structure.

        Args:
            content: Raw URL text

        Returns:
            RuleEvaluation with extra weight and reasons in check order
        """
        findings: List[tuple] = []

        try:
            url = parse_url(content)
        except MalformedURLError as e:
            logger.debug(f"Malformed URL: {e.message}")
            return RuleEvaluation(
                total_weight=self.weights['malformed'],
                reasons=("Malformed URL structure",),
            )

        hostname = url.hostname

        if any(hostname.endswith(tld) for tld in HIGH_RISK_TLDS):
            findings.append(('high_risk_tld', 'High-risk top-level domain'))
        elif any(hostname.endswith(tld) for tld in SUSPICIOUS_TLDS):
            findings.append(('suspicious_tld', 'Suspicious top-level domain'))

        label_count = len(url.labels)
        if label_count > EXCESSIVE_SUBDOMAIN_LABELS:
            findings.append(('excessive_subdomains', 'Excessive subdomain nesting'))
        elif label_count > MULTIPLE_SUBDOMAIN_LABELS:
            findings.append(('multiple_subdomains', 'Multiple subdomains detected'))

        if HOMOGRAPH_CHARS.search(hostname):
            findings.append(('homograph', 'Possible homograph/character substitution attack'))

        if url.port is not None and url.port not in DEFAULT_PORTS:
            findings.append(('non_standard_port', 'Non-standard port number detected'))

        if url.scheme != 'https' and SENSITIVE_KEYWORDS.search(url.href):
            findings.append(('insecure_sensitive', 'Insecure HTTP protocol for sensitive content'))

        if len(url.href) > MAX_URL_LENGTH:
            findings.append(('long_url', 'Unusually long URL'))

        if SUSPICIOUS_PATH.search(url.path):
            findings.append(('suspicious_path', 'Suspicious file path detected'))

        return RuleEvaluation(
            total_weight=sum(self.weights[key] for key, _ in findings),
            reasons=tuple(reason for _, reason in findings),
        )


def analyze_url(content: str) -> RuleEvaluation:
    """Convenience wrapper around URLStructureAnalyzer."""
    return URLStructureAnalyzer().analyze(content)
