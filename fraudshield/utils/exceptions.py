"""
FraudShield Custom Exceptions

Centralized exception classes for error handling.
"""


class FraudShieldBaseException(Exception):
    """Base exception for all FraudShield errors."""
    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


# ============================================================================
# Validation Exceptions
# ============================================================================

class ValidationError(FraudShieldBaseException):
    """Input validation failed."""
    pass


class InvalidCategoryError(ValidationError):
    """Content category is not one of url, email or sms."""
    pass


# ============================================================================
# Parsing Exceptions
# ============================================================================

class ParsingError(FraudShieldBaseException):
    """Error parsing content."""
    pass


class MalformedURLError(ParsingError):
    """URL could not be parsed into its components."""
    pass
