"""
Tests for semantic version validation.
"""

import pytest

from nodejs_release_info.exceptions import InvalidVersionError, ValidationError
from nodejs_release_info.version import validate_version


@pytest.mark.parametrize(
    "version",
    [
        "20.6.1",
        "0.0.0",
        "1.0.0-rc.1",
        "1.0.0-alpha-1.beta",
        "1.0.0+build.5",
        "1.0.0-0.3.7+exp.sha.5114f85",
        "10.20.30",
    ],
)
def test_validate_version_accepts_semver(version):
    """Valid semantic versions are returned unchanged."""
    assert validate_version(version) == version


@pytest.mark.parametrize(
    "version",
    [
        "",
        "NOPE",
        "NOPE!",
        "20.6",
        "20",
        "v20.6.1",
        " 20.6.1",
        "20.6.1 ",
        "20.6.1\n",
        "01.2.3",
        "1.02.3",
        "1.2.3-",
        "1.2.3-01",
        "1.2.3+",
        "1.2.3.4",
    ],
)
def test_validate_version_rejects_invalid(version):
    """Anything that is not a full semantic version raises InvalidVersionError."""
    with pytest.raises(InvalidVersionError) as exc_info:
        validate_version(version)
    assert exc_info.value.value == version
    assert exc_info.value.field == "version"


def test_validate_version_rejects_non_string():
    with pytest.raises(InvalidVersionError) as exc_info:
        validate_version(None)
    assert exc_info.value.value == "None"


def test_invalid_version_error_message():
    with pytest.raises(ValidationError) as exc_info:
        validate_version("NOPE")
    assert str(exc_info.value) == "Invalid version: 'NOPE'"


@pytest.mark.parametrize(
    "version",
    [
        "18446744073709551616.0.0",
        "0.18446744073709551616.0",
        "0.0.18446744073709551616",
        "1" * 5000 + ".0.0",
    ],
)
def test_validate_version_rejects_components_above_u64(version):
    """Major, minor and patch must fit an unsigned 64-bit integer."""
    with pytest.raises(InvalidVersionError):
        validate_version(version)


def test_validate_version_accepts_u64_max():
    version = "18446744073709551615.18446744073709551615.18446744073709551615"
    assert validate_version(version) == version
