"""
Checksum manifest parsing.

A manifest (``SHASUMS256.txt``) lists one ``<sha256> <filename>`` pair per
line. Besides the per-platform archives it also names sources, headers,
macOS packages and bare Windows binaries, none of which are modeled here.
Lines that do not decompose into a known OS/architecture/format are skipped,
never reported as errors.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from nodejs_release_info.constants import PRODUCT_NAME
from nodejs_release_info.log_utils import logger
from nodejs_release_info.platforms import Architecture, ArchiveFormat, OperatingSystem

# Fewest hyphen segments an OS-qualified filename can have: product, vX.Y.Z, os, arch.ext
MIN_FILENAME_SEGMENTS = 4


@dataclass(frozen=True)
class ManifestEntry:
    """One raw manifest line split into checksum and filename."""

    sha256: str
    filename: str


@dataclass(frozen=True)
class ParsedSpec:
    """A manifest entry decomposed into its artifact configuration."""

    os: OperatingSystem
    arch: Architecture
    format: ArchiveFormat
    sha256: str
    filename: str


def split_manifest_line(line: str) -> Optional[ManifestEntry]:
    """
    Split a manifest line on its first whitespace run.

    Returns:
        Optional[ManifestEntry]: The entry, or None when either half is empty.
    """
    parts = line.strip().split(None, 1)
    if len(parts) != 2:
        return None
    sha256, filename = parts[0], parts[1].strip()
    if not sha256 or not filename:
        return None
    return ManifestEntry(sha256=sha256, filename=filename)


def iter_manifest_entries(text: str) -> Iterator[ManifestEntry]:
    """Yield every well-formed entry of a manifest, in line order."""
    for line in text.splitlines():
        entry = split_manifest_line(line)
        if entry is not None:
            yield entry


def has_version_prefix(filename: str, version: str, product: str = PRODUCT_NAME) -> bool:
    """
    Check that `filename` belongs to `version`.

    The ``<product>-v<version>`` prefix must be followed by a hyphen or a dot
    so that "20.6.1" does not claim "node-v20.6.10-linux-x64.tar.gz".
    """
    prefix = f"{product}-v{version}"
    if not filename.startswith(prefix):
        return False
    return filename[len(prefix) : len(prefix) + 1] in ("-", ".")


def decompose_line(
    line: str, version: str, product: str = PRODUCT_NAME
) -> Optional[ParsedSpec]:
    """
    Decompose one manifest line into a ParsedSpec.

    Installer filenames (``node-v20.6.1-x64.msi``) have no OS segment and are
    attributed to Windows; all others must look like
    ``node-v20.6.1-<os>-<arch>.<ext>``. Tokens are resolved with the strict
    canonical lookups only.

    Args:
        line: A raw manifest line.
        version: The canonical version the manifest was fetched for.
        product: The product token filenames start with.

    Returns:
        Optional[ParsedSpec]: The decomposed entry, or None if the line does
        not describe a modeled artifact of `version`.
    """
    entry = split_manifest_line(line)
    if entry is None:
        return None

    filename = entry.filename
    if not has_version_prefix(filename, version, product):
        logger.debug("Skipping manifest entry for another product/version: %s", filename)
        return None

    segments = filename.split("-")
    last = segments[-1]

    if last.endswith(f".{ArchiveFormat.MSI.value}"):
        os_token = OperatingSystem.WINDOWS.canonical_token()
    elif len(segments) >= MIN_FILENAME_SEGMENTS:
        os_token = segments[-2]
    else:
        logger.debug("Skipping manifest entry without OS segment: %s", filename)
        return None

    arch_token, dot, ext_token = last.partition(".")
    if not dot:
        logger.debug("Skipping manifest entry without extension: %s", filename)
        return None

    os = OperatingSystem.from_canonical(os_token)
    arch = Architecture.from_canonical(arch_token)
    fmt = ArchiveFormat.from_canonical(ext_token)
    if os is None or arch is None or fmt is None:
        logger.debug(
            "Skipping manifest entry with unknown os/arch/format (%s/%s/%s): %s",
            os_token,
            arch_token,
            ext_token,
            filename,
        )
        return None

    return ParsedSpec(
        os=os, arch=arch, format=fmt, sha256=entry.sha256, filename=filename
    )


def parse_manifest(text: str, version: str, product: str = PRODUCT_NAME) -> List[ParsedSpec]:
    """
    Decompose every line of a manifest, keeping manifest order.

    Returns:
        List[ParsedSpec]: All lines that decompose; empty if none do.
    """
    specs: List[ParsedSpec] = []
    for line in text.splitlines():
        spec = decompose_line(line, version, product)
        if spec is not None:
            specs.append(spec)
    logger.debug("Parsed %d artifact entries for version %s", len(specs), version)
    return specs


def find_entry(text: str, filename: str) -> Optional[ManifestEntry]:
    """
    Return the first manifest entry whose filename equals `filename`.

    Matching is exact; a filename that merely contains `filename` (for
    example a detached signature) is not a match.
    """
    for entry in iter_manifest_entries(text):
        if entry.filename == filename:
            return entry
    return None
