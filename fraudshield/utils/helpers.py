"""
FraudShield Helper Functions

Utility functions used throughout the application.
"""

import time
import uuid
from datetime import datetime, timezone


# ============================================================================
# ID and Timestamp Generation
# ============================================================================

def generate_alert_id(prefix: str) -> str:
    """Generate a unique, time-ordered alert ID such as ``url_1700000000000_3f2a9c1b``."""
    return f"{prefix}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


def utc_now() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


# ============================================================================
# Text Helpers
# ============================================================================

def truncate_text(text: str, max_length: int) -> str:
    """Truncate text to at most ``max_length`` characters."""
    if len(text) <= max_length:
        return text
    return text[:max_length]


def is_blank(text: str) -> bool:
    """True for None, empty or whitespace-only text."""
    return not text or not text.strip()


def make_preview(text: str, max_length: int) -> str:
    """Truncated copy of text that is always valid UTF-8."""
    return truncate_text(text, max_length).encode("utf-8", "replace").decode("utf-8")
