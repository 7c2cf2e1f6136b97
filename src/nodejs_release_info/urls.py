"""
URL and filename construction for the release server.

URLs follow ``<protocol>//<host><path_prefix>/v<version>/<name>`` where
``<name>`` is either the checksum manifest or an artifact filename.
"""

from dataclasses import dataclass

from nodejs_release_info.constants import (
    DEFAULT_HOST,
    DEFAULT_PATH_PREFIX,
    DEFAULT_PROTOCOL,
    MANIFEST_FILENAME,
    PRODUCT_NAME,
)
from nodejs_release_info.platforms import Architecture, ArchiveFormat, OperatingSystem


@dataclass(frozen=True)
class URLFormatter:
    """Builds manifest and artifact URLs for one release server."""

    protocol: str = DEFAULT_PROTOCOL
    """URL scheme including the trailing colon (e.g. 'https:')"""

    host: str = DEFAULT_HOST
    """Host name, optionally with a port (e.g. 'nodejs.org' or 'localhost:8080')"""

    path_prefix: str = DEFAULT_PATH_PREFIX
    """Path under which versioned release directories live"""

    def manifest_path(self, version: str) -> str:
        return f"{self.path_prefix}/v{version}/{MANIFEST_FILENAME}"

    def manifest_url(self, version: str) -> str:
        return f"{self.protocol}//{self.host}{self.manifest_path(version)}"

    def artifact_path(self, version: str, filename: str) -> str:
        return f"{self.path_prefix}/v{version}/{filename}"

    def artifact_url(self, version: str, filename: str) -> str:
        return f"{self.protocol}//{self.host}{self.artifact_path(version, filename)}"


def artifact_filename(
    version: str,
    os: OperatingSystem,
    arch: Architecture,
    fmt: ArchiveFormat,
    product: str = PRODUCT_NAME,
) -> str:
    """
    Build the published filename for one artifact configuration.

    Installer packages (msi) carry no OS segment:
    ``node-v20.6.1-arm64.msi``; every other format does:
    ``node-v20.6.1-darwin-arm64.tar.gz``.
    """
    if fmt is ArchiveFormat.MSI:
        return f"{product}-v{version}-{arch.canonical_token()}.{fmt.canonical_token()}"
    return (
        f"{product}-v{version}-{os.canonical_token()}-"
        f"{arch.canonical_token()}.{fmt.canonical_token()}"
    )
