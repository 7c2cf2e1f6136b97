"""
nodejs-release-info - resolve Node.js release artifacts

Looks up the published checksum and download URL of Node.js release
artifacts by version, operating system, CPU architecture and archive format,
using the SHASUMS256.txt manifest of each release.

Core Components:
- resolver: ReleaseResolver / AsyncReleaseResolver, ReleaseQuery, ArtifactRecord
- platforms: OperatingSystem, Architecture, ArchiveFormat
- manifest: manifest line parsing
- transport: requests / aiohttp HTTP collaborators
- urls: URL and filename construction
- version: semantic version validation
"""

from .exceptions import (
    ConfigFileError,
    ConfigurationError,
    InvalidVersionError,
    ReleaseInfoError,
    TransportError,
    UnrecognizedArchitectureError,
    UnrecognizedArchiveFormatError,
    UnrecognizedConfigurationError,
    UnrecognizedOSError,
    UnrecognizedVersionError,
    ValidationError,
)
from .platforms import Architecture, ArchiveFormat, OperatingSystem
from .resolver import ArtifactRecord, AsyncReleaseResolver, ReleaseQuery, ReleaseResolver
from .transport import AiohttpTransport, RequestsTransport
from .urls import URLFormatter, artifact_filename
from .version import validate_version

__all__ = [
    # Resolution
    "ReleaseResolver",
    "AsyncReleaseResolver",
    "ReleaseQuery",
    "ArtifactRecord",
    # Classifications
    "OperatingSystem",
    "Architecture",
    "ArchiveFormat",
    # Building blocks
    "URLFormatter",
    "artifact_filename",
    "validate_version",
    "RequestsTransport",
    "AiohttpTransport",
    # Errors
    "ReleaseInfoError",
    "ConfigurationError",
    "ConfigFileError",
    "ValidationError",
    "InvalidVersionError",
    "UnrecognizedOSError",
    "UnrecognizedArchitectureError",
    "UnrecognizedArchiveFormatError",
    "UnrecognizedVersionError",
    "UnrecognizedConfigurationError",
    "TransportError",
]
