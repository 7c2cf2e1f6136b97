"""
Custom exceptions for nodejs-release-info.

This module defines the error taxonomy surfaced by the resolver. Each failure
kind is its own class carrying only the data its message needs, so callers can
catch the kind of failure they care about instead of matching on messages.
"""

from typing import Optional


class ReleaseInfoError(Exception):
    """
    Base exception for all nodejs-release-info errors.

    All custom exceptions in this package inherit from this class to allow
    for easy catching of all package-specific errors.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: The primary error message.
            details: Optional additional context about the error.
        """
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ReleaseInfoError):
    """
    Exception raised when configuration is invalid or missing.

    This includes:
    - Invalid configuration values
    - Configuration file parsing errors
    """

    pass


class ConfigFileError(ConfigurationError):
    """Exception raised when the configuration file cannot be read or parsed."""

    def __init__(
        self, message: str, path: Optional[str] = None, details: Optional[str] = None
    ) -> None:
        super().__init__(message, details)
        self.path = path


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(ReleaseInfoError):
    """
    Exception raised when caller-supplied input fails validation.

    Attributes:
        field: The name of the field that failed validation.
        value: The value that failed validation.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[str] = None,
    ) -> None:
        """
        Initialize the validation exception.

        Args:
            message: The primary error message.
            field: The name of the field that failed validation.
            value: The value that failed validation.
            details: Optional additional context.
        """
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvalidVersionError(ValidationError):
    """Exception raised when a version string is not a valid semantic version."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid version: '{value}'", field="version", value=value)


class UnrecognizedOSError(ValidationError):
    """Exception raised when an operating system name cannot be resolved."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Unrecognized operating system: '{value}'", field="os", value=value
        )


class UnrecognizedArchitectureError(ValidationError):
    """Exception raised when a CPU architecture name cannot be resolved."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Unrecognized architecture: '{value}'", field="arch", value=value
        )


class UnrecognizedArchiveFormatError(ValidationError):
    """Exception raised when an archive format (file extension) cannot be resolved."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Unrecognized archive format: '{value}'", field="format", value=value
        )


# =============================================================================
# Release Lookup Errors
# =============================================================================


class UnrecognizedVersionError(ReleaseInfoError):
    """
    Exception raised when the requested version is not published.

    Raised when the manifest endpoint answers with an error status, or when the
    manifest holds no usable artifact entries.

    Attributes:
        version: The normalized version that was requested.
        url: The manifest URL, when known.
        status_code: The HTTP status code returned, when the server answered.
    """

    def __init__(
        self,
        version: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        details = f"HTTP {status_code}" if status_code is not None else None
        super().__init__(f"Unrecognized version: '{version}'", details)
        self.version = version
        self.url = url
        self.status_code = status_code


class UnrecognizedConfigurationError(ReleaseInfoError):
    """
    Exception raised when a published version has no artifact for the requested
    OS/architecture/format combination.

    Attributes:
        filename: The artifact filename that was expected in the manifest.
    """

    def __init__(self, filename: str) -> None:
        super().__init__(f"Unrecognized configuration: '{filename}'")
        self.filename = filename


# =============================================================================
# Transport Errors
# =============================================================================


class TransportError(ReleaseInfoError):
    """
    Exception raised when the HTTP request itself fails.

    This includes:
    - DNS resolution failures
    - Connection refused errors and timeouts
    - SSL/TLS errors

    Attributes:
        url: The URL that was being requested.
        cause: The underlying transport exception, unchanged.
    """

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"Request to {url} failed", details=str(cause) or None)
        self.url = url
        self.cause = cause
