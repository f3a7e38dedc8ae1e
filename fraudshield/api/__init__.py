"""
FraudShield API
"""
