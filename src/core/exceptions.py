"""
Exception hierarchy for dtrscan.

Provides a standardized exception hierarchy for consistent error handling
across the application. All exceptions inherit from DTRScanException.
"""


class DTRScanException(Exception):
    """Base exception for all dtrscan errors."""
    pass


class ValidationException(DTRScanException):
    """Input validation failed."""

    def __init__(self, message: str, field: str = None):
        """
        Initialize validation exception.

        Args:
            message: Validation error message
            field: Field that failed validation (optional)
        """
        self.field = field
        if field:
            super().__init__(f"Validation failed for {field}: {message}")
        else:
            super().__init__(f"Validation failed: {message}")


class IntegrationException(DTRScanException):
    """External integration/API failed."""

    def __init__(self, service: str, reason: str):
        """
        Initialize integration exception.

        Args:
            service: Service name that failed
            reason: Reason for failure
        """
        self.service = service
        self.reason = reason
        super().__init__(f"{service} integration failed: {reason}")


class ConfigurationException(DTRScanException):
    """Configuration is invalid or missing."""
    pass


__all__ = [
    "DTRScanException",
    "ValidationException",
    "IntegrationException",
    "ConfigurationException",
]
