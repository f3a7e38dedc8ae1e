"""
FraudShield Services
"""
