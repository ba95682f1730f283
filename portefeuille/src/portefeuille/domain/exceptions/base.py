"""
Base domain exceptions.
"""


class PortefeuilleException(Exception):
    """Base exception for all Portefeuille domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(PortefeuilleException):
    """Raised when a parameter object fails validation."""

    def __init__(self, field: str, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
        self.reason = reason
