"""
FraudShield

Content risk scoring for URLs, emails and SMS messages.
"""

__version__ = "1.0.0"
