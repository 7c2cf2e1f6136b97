"""
Semantic version validation.

Release manifests are namespaced by version, so every lookup starts by
checking that the requested version is a well-formed semantic version
(https://semver.org). Whether the version is actually published is only
known once the manifest is fetched.
"""

import re
from typing import Any

from nodejs_release_info.exceptions import InvalidVersionError

# major.minor.patch[-prerelease][+build], no leading zeros in numeric identifiers
SEMVER_RX = re.compile(
    r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

# Largest major/minor/patch value; components are unsigned 64-bit integers
MAX_VERSION_COMPONENT = 2**64 - 1
MAX_VERSION_COMPONENT_DIGITS = len(str(MAX_VERSION_COMPONENT))


def validate_version(version: Any) -> str:
    """
    Validate a semantic version string and return its canonical form.

    The whole string must match; surrounding whitespace, a leading "v" and
    partial versions such as "20.6" are rejected, as are major, minor or patch
    numbers above 2**64 - 1.

    Args:
        version: The version requested by the caller.

    Returns:
        str: The canonical version string (e.g. "20.6.1").

    Raises:
        InvalidVersionError: If `version` is not a syntactically valid semantic version.
    """
    if not isinstance(version, str):
        raise InvalidVersionError(str(version))

    match = SEMVER_RX.fullmatch(version)
    if match is None:
        raise InvalidVersionError(version)

    major, minor, patch, prerelease, build = match.groups()
    if any(
        len(part) > MAX_VERSION_COMPONENT_DIGITS or int(part) > MAX_VERSION_COMPONENT
        for part in (major, minor, patch)
    ):
        raise InvalidVersionError(version)

    canonical = f"{major}.{minor}.{patch}"
    if prerelease:
        canonical += f"-{prerelease}"
    if build:
        canonical += f"+{build}"
    return canonical
