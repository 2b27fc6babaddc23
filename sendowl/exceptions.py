"""
Exception hierarchy for the SendOwl transport.

All custom exceptions inherit from SendOwlError base class.
"""

from typing import Optional


class SendOwlError(Exception):
    """Base exception for all SendOwl transport errors."""
    pass


# Configuration Errors
class ConfigurationError(SendOwlError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass


# SDK Errors
class SDKError(SendOwlError):
    """Base exception for SDK-related errors."""
    pass


class SDKConfigurationError(SDKError):
    """Raised when SDK configuration is invalid."""
    pass


class SerializationError(SDKError):
    """Raised when a value cannot be encoded, or wire text cannot be decoded into the target type."""
    pass


class NetworkError(SDKError):
    """Raised when the request fails at the transport level (connect, reset, timeout)."""
    pass


class ResourceDisposedError(SDKError):
    """Raised when an operation is attempted on a closed client."""
    pass


class HttpStatusError(SDKError):
    """
    Raised when the API answers with a status outside 200-299.

    The raw response body is kept so callers can inspect the service's
    own error payload.
    """

    def __init__(
        self,
        status_code: int,
        body: str,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        target = f"{method} {url} " if method and url else ""
        super().__init__(f"{target}failed with status {status_code}: {body}")

    @property
    def is_client_error(self) -> bool:
        """True for 4xx responses (validation, auth, not found)."""
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        """True for 5xx responses."""
        return 500 <= self.status_code < 600
