"""
FraudShield Utilities
"""
