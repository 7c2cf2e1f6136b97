"""
Release resolution.

ReleaseResolver answers two questions about a version of Node.js:

- fetch(query): what is the checksum and URL of one artifact configuration?
- fetch_all(version): which artifacts are published at all?

Both validate the version, download the version's checksum manifest once and
build ArtifactRecords from it. AsyncReleaseResolver offers the same operations
for asyncio callers.
"""

import json
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Optional, Union

from nodejs_release_info.config import build_url_formatter, get_request_timeout
from nodejs_release_info.constants import PRODUCT_NAME
from nodejs_release_info.exceptions import (
    UnrecognizedConfigurationError,
    UnrecognizedVersionError,
)
from nodejs_release_info.log_utils import logger
from nodejs_release_info.manifest import find_entry, parse_manifest
from nodejs_release_info.platforms import Architecture, ArchiveFormat, OperatingSystem
from nodejs_release_info.transport import (
    AiohttpTransport,
    AsyncHttpTransport,
    HttpTransport,
    RequestsTransport,
    async_fetch_manifest,
    fetch_manifest,
)
from nodejs_release_info.urls import URLFormatter, artifact_filename
from nodejs_release_info.version import validate_version


@dataclass(frozen=True)
class ReleaseQuery:
    """
    A request for one artifact configuration of a version.

    String values are accepted for `os`, `arch` and `format` and resolved
    leniently ("macos", "aarch64", ".zip" ...); unknown names raise the
    matching Unrecognized*Error.
    """

    version: str
    """The requested version (validated when the query is resolved)"""

    os: OperatingSystem = OperatingSystem.LINUX
    """Target operating system"""

    arch: Architecture = Architecture.X64
    """Target CPU architecture"""

    format: ArchiveFormat = ArchiveFormat.TAR_GZ
    """Archive format (file extension) of the artifact"""

    def __post_init__(self) -> None:
        object.__setattr__(self, "os", OperatingSystem.parse(self.os))
        object.__setattr__(self, "arch", Architecture.parse(self.arch))
        object.__setattr__(self, "format", ArchiveFormat.parse(self.format))

    @classmethod
    def from_host(cls, version: str) -> "ReleaseQuery":
        """
        Build a query matching the running machine.

        The archive format is zip on Windows and tar.gz everywhere else.

        Raises:
            UnrecognizedOSError: If the host OS is not a supported target.
            UnrecognizedArchitectureError: If the host CPU is not a supported target.
        """
        os = OperatingSystem.from_host()
        return cls(
            version=version,
            os=os,
            arch=Architecture.from_host(),
            format=ArchiveFormat.default_for(os),
        )

    def with_os(self, os: Union[OperatingSystem, str]) -> "ReleaseQuery":
        return replace(self, os=os)

    def with_arch(self, arch: Union[Architecture, str]) -> "ReleaseQuery":
        return replace(self, arch=arch)

    def with_format(self, fmt: Union[ArchiveFormat, str]) -> "ReleaseQuery":
        return replace(self, format=fmt)

    def filename(self, product: str = PRODUCT_NAME) -> str:
        """Return the artifact filename this query expects to find in the manifest."""
        return artifact_filename(self.version, self.os, self.arch, self.format, product)


@dataclass(frozen=True)
class ArtifactRecord:
    """The resolved checksum and download location of one artifact."""

    os: OperatingSystem
    arch: Architecture
    format: ArchiveFormat
    version: str
    filename: str
    sha256: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        """Return a JSON-ready mapping using canonical tokens."""
        data = asdict(self)
        data["os"] = self.os.canonical_token()
        data["arch"] = self.arch.canonical_token()
        data["format"] = self.format.canonical_token()
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArtifactRecord":
        """
        Rebuild a record from `to_dict()` output.

        Raises:
            KeyError: If a field is missing.
            UnrecognizedOSError, UnrecognizedArchitectureError, UnrecognizedArchiveFormatError:
                If a classification token is unknown.
        """
        return cls(
            os=OperatingSystem.parse(data["os"]),
            arch=Architecture.parse(data["arch"]),
            format=ArchiveFormat.parse(data["format"]),
            version=data["version"],
            filename=data["filename"],
            sha256=data["sha256"],
            url=data["url"],
        )


def _select_record(
    query: ReleaseQuery,
    version: str,
    manifest: str,
    url_formatter: URLFormatter,
    product: str,
) -> ArtifactRecord:
    filename = artifact_filename(version, query.os, query.arch, query.format, product)
    entry = find_entry(manifest, filename)
    if entry is None:
        raise UnrecognizedConfigurationError(filename)

    logger.debug("Resolved %s (sha256 %s)", filename, entry.sha256)
    return ArtifactRecord(
        os=query.os,
        arch=query.arch,
        format=query.format,
        version=version,
        filename=filename,
        sha256=entry.sha256,
        url=url_formatter.artifact_url(version, filename),
    )


def _collect_records(
    version: str,
    manifest: str,
    url_formatter: URLFormatter,
    product: str,
) -> List[ArtifactRecord]:
    specs = parse_manifest(manifest, version, product)
    if not specs:
        raise UnrecognizedVersionError(version)

    return [
        ArtifactRecord(
            os=spec.os,
            arch=spec.arch,
            format=spec.format,
            version=version,
            filename=spec.filename,
            sha256=spec.sha256,
            url=url_formatter.artifact_url(version, spec.filename),
        )
        for spec in specs
    ]


class ReleaseResolver:
    """
    Resolves release artifacts using a blocking HTTP transport.

    A transport created by the resolver is closed by `close()` or when leaving
    a `with` block; a transport passed in stays open and belongs to the caller.

    Usage:
        with ReleaseResolver() as resolver:
            record = resolver.fetch(ReleaseQuery("20.6.1", os="darwin", arch="arm64"))
            records = resolver.fetch_all("20.6.1")
    """

    def __init__(
        self,
        url_formatter: Optional[URLFormatter] = None,
        transport: Optional[HttpTransport] = None,
        product: str = PRODUCT_NAME,
    ) -> None:
        """
        Parameters:
            url_formatter (Optional[URLFormatter]): Release server location; the public server when omitted.
            transport (Optional[HttpTransport]): HTTP collaborator; a RequestsTransport when omitted.
            product (str): Leading token of artifact filenames.
        """
        self.url_formatter = url_formatter or URLFormatter()
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else RequestsTransport()
        self.product = product

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "ReleaseResolver":
        """Create a resolver from a loaded configuration mapping (see config.load_config)."""
        resolver = cls(
            url_formatter=build_url_formatter(config),
            transport=RequestsTransport(timeout=get_request_timeout(config)),
        )
        resolver._owns_transport = True
        return resolver

    def __enter__(self) -> "ReleaseResolver":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport if this resolver created it."""
        if self._owns_transport:
            self.transport.close()

    def _fetch_manifest(self, version: str) -> str:
        url = self.url_formatter.manifest_url(version)
        return fetch_manifest(url, version, self.transport)

    def fetch(self, query: ReleaseQuery) -> ArtifactRecord:
        """
        Resolve one artifact configuration.

        Raises:
            InvalidVersionError: If the query's version is not a semantic version.
            TransportError: If the manifest request could not be completed.
            UnrecognizedVersionError: If the version is not published.
            UnrecognizedConfigurationError: If the version has no artifact for
                the query's OS/architecture/format.
        """
        version = validate_version(query.version)
        manifest = self._fetch_manifest(version)
        return _select_record(query, version, manifest, self.url_formatter, self.product)

    def fetch_all(self, version: str) -> List[ArtifactRecord]:
        """
        Resolve every artifact published for `version`, in manifest order.

        Raises:
            InvalidVersionError: If `version` is not a semantic version.
            TransportError: If the manifest request could not be completed.
            UnrecognizedVersionError: If the version is not published or its
                manifest lists no recognizable artifacts.
        """
        version = validate_version(version)
        manifest = self._fetch_manifest(version)
        return _collect_records(version, manifest, self.url_formatter, self.product)


class AsyncReleaseResolver:
    """
    Resolves release artifacts using an asyncio HTTP transport.

    Example:
        async with AsyncReleaseResolver() as resolver:
            record = await resolver.fetch(ReleaseQuery("20.6.1", format="msi"))
    """

    def __init__(
        self,
        url_formatter: Optional[URLFormatter] = None,
        transport: Optional[AsyncHttpTransport] = None,
        product: str = PRODUCT_NAME,
    ) -> None:
        self.url_formatter = url_formatter or URLFormatter()
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else AiohttpTransport()
        self.product = product

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "AsyncReleaseResolver":
        resolver = cls(
            url_formatter=build_url_formatter(config),
            transport=AiohttpTransport(timeout=get_request_timeout(config)),
        )
        resolver._owns_transport = True
        return resolver

    async def __aenter__(self) -> "AsyncReleaseResolver":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the transport if this resolver created it; caller transports stay open."""
        if self._owns_transport:
            await self.transport.close()

    async def _fetch_manifest(self, version: str) -> str:
        url = self.url_formatter.manifest_url(version)
        return await async_fetch_manifest(url, version, self.transport)

    async def fetch(self, query: ReleaseQuery) -> ArtifactRecord:
        """Asyncio counterpart of ReleaseResolver.fetch()."""
        version = validate_version(query.version)
        manifest = await self._fetch_manifest(version)
        return _select_record(query, version, manifest, self.url_formatter, self.product)

    async def fetch_all(self, version: str) -> List[ArtifactRecord]:
        """Asyncio counterpart of ReleaseResolver.fetch_all()."""
        version = validate_version(version)
        manifest = await self._fetch_manifest(version)
        return _collect_records(version, manifest, self.url_formatter, self.product)
