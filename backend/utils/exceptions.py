"""
Custom exception classes for error categorization in the JourneyCraft API.
"""


class JourneyCraftError(Exception):
    """Base exception for all JourneyCraft errors."""

    def __init__(self, message: str, context: dict = None):
        """
        Initialize exception with message and optional context.

        Args:
            message: Error message
            context: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class APIError(JourneyCraftError):
    """Base exception for external API errors."""
    pass


class CompletionProviderError(APIError):
    """
    Exception for transport failures talking to the completion provider.

    Examples:
        - Connection refused or DNS failure
        - Read/connect timeouts
        - TLS errors
    """
    pass


class UpstreamResponseError(APIError):
    """Exception for a provider body that is not valid JSON or has the wrong shape."""

    def __init__(self, message: str, status_code: int = None, context: dict = None):
        super().__init__(message, context)
        self.status_code = status_code


class ConfigurationError(JourneyCraftError):
    """Exception for configuration errors."""
    pass
