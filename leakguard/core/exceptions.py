"""Core exceptions for LeakGuard."""


class LeakGuardError(Exception):
    """Base exception for all LeakGuard errors."""

    def __init__(self, message: str, details: dict = None):
        """Initialize the exception."""
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ScanError(LeakGuardError):
    """Raised when the scan root cannot be traversed at all."""

    pass


class ConfigurationError(LeakGuardError):
    """Raised when configuration is invalid."""

    pass
