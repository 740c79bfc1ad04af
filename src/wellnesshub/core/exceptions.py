"""
Infrastructure exceptions for WellnessHub.

Raised by adapters (storage, external services, configuration); the API
layer maps all of them to a 500 response.
"""

from typing import Any, Dict, Optional


class WellnessHubException(Exception):
    """Base exception class for WellnessHub infrastructure failures."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(WellnessHubException):
    """Raised when there's a configuration error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "CONFIG_ERROR", details)


class ExternalServiceError(WellnessHubException):
    """Raised when there's an external service error."""

    def __init__(
        self, service: str, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.service = service
        full_message = f"{service} service error: {message}"
        super().__init__(full_message, "EXTERNAL_SERVICE_ERROR", details)


class EmbeddingServiceError(ExternalServiceError):
    """Raised when the embedding API call fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("Embedding", message, details)
