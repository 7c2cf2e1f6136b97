"""
Operating system, CPU architecture and archive format classifications.

Each classification is a closed enum whose value is the canonical token used
inside release filenames. Two lookups are offered:

- ``from_canonical`` is strict and only accepts canonical tokens. It is used
  when decomposing manifest filenames, which come from a fixed publishing
  process.
- ``from_alias`` is lenient and also accepts known synonyms. It is used for
  caller input, including values probed from the host machine.

Both return None for unknown input; ``parse`` raises instead.
"""

import platform
from enum import Enum
from typing import Dict, Optional, Type, TypeVar, Union

from nodejs_release_info.exceptions import (
    UnrecognizedArchitectureError,
    UnrecognizedArchiveFormatError,
    UnrecognizedOSError,
)

E = TypeVar("E", bound=Enum)

# Synonyms accepted from callers in addition to the canonical tokens
OS_ALIASES: Dict[str, str] = {
    "macos": "darwin",
    "windows": "win",
}

ARCH_ALIASES: Dict[str, str] = {
    "x86_64": "x64",
    "amd64": "x64",
    "i386": "x86",
    "i686": "x86",
    "aarch64": "arm64",
    "arm": "armv7l",
    "armv7": "armv7l",
    "powerpc64": "ppc64",
}

FORMAT_ALIASES: Dict[str, str] = {}


def _from_canonical(enum_cls: Type[E], token: str) -> Optional[E]:
    try:
        return enum_cls(token)
    except ValueError:
        return None


def _from_alias(enum_cls: Type[E], aliases: Dict[str, str], token: str) -> Optional[E]:
    if not isinstance(token, str):
        return None
    normalized = token.strip().lower()
    return _from_canonical(enum_cls, aliases.get(normalized, normalized))


class OperatingSystem(str, Enum):
    """Operating systems release artifacts are published for."""

    LINUX = "linux"
    DARWIN = "darwin"
    WINDOWS = "win"
    AIX = "aix"

    def canonical_token(self) -> str:
        return self.value

    @classmethod
    def from_canonical(cls, token: str) -> Optional["OperatingSystem"]:
        return _from_canonical(cls, token)

    @classmethod
    def from_alias(cls, token: str) -> Optional["OperatingSystem"]:
        return _from_alias(cls, OS_ALIASES, token)

    @classmethod
    def parse(cls, value: Union["OperatingSystem", str]) -> "OperatingSystem":
        """
        Resolve caller input into an OperatingSystem.

        Raises:
            UnrecognizedOSError: If `value` is neither a variant nor a known name.
        """
        if isinstance(value, cls):
            return value
        resolved = cls.from_alias(value)
        if resolved is None:
            raise UnrecognizedOSError(str(value))
        return resolved

    @classmethod
    def from_host(cls) -> "OperatingSystem":
        """Return the operating system of the running machine."""
        return cls.parse(platform.system())

    def __str__(self) -> str:
        return self.value


class Architecture(str, Enum):
    """CPU architectures release artifacts are published for."""

    X64 = "x64"
    X86 = "x86"
    ARM64 = "arm64"
    ARMV7L = "armv7l"
    PPC64 = "ppc64"
    PPC64LE = "ppc64le"
    S390X = "s390x"

    def canonical_token(self) -> str:
        return self.value

    @classmethod
    def from_canonical(cls, token: str) -> Optional["Architecture"]:
        return _from_canonical(cls, token)

    @classmethod
    def from_alias(cls, token: str) -> Optional["Architecture"]:
        return _from_alias(cls, ARCH_ALIASES, token)

    @classmethod
    def parse(cls, value: Union["Architecture", str]) -> "Architecture":
        """
        Resolve caller input into an Architecture.

        Raises:
            UnrecognizedArchitectureError: If `value` is neither a variant nor a known name.
        """
        if isinstance(value, cls):
            return value
        resolved = cls.from_alias(value)
        if resolved is None:
            raise UnrecognizedArchitectureError(str(value))
        return resolved

    @classmethod
    def from_host(cls) -> "Architecture":
        """Return the CPU architecture of the running machine."""
        return cls.parse(platform.machine())

    def __str__(self) -> str:
        return self.value


class ArchiveFormat(str, Enum):
    """
    Archive formats (file extensions) release artifacts are published as.

    Multi-part extensions such as "tar.gz" are a single token.
    """

    TAR_GZ = "tar.gz"
    TAR_XZ = "tar.xz"
    ZIP = "zip"
    MSI = "msi"
    SEVEN_ZIP = "7z"

    def canonical_token(self) -> str:
        return self.value

    @classmethod
    def from_canonical(cls, token: str) -> Optional["ArchiveFormat"]:
        return _from_canonical(cls, token)

    @classmethod
    def from_alias(cls, token: str) -> Optional["ArchiveFormat"]:
        if isinstance(token, str):
            token = token.strip().lstrip(".")
        return _from_alias(cls, FORMAT_ALIASES, token)

    @classmethod
    def parse(cls, value: Union["ArchiveFormat", str]) -> "ArchiveFormat":
        """
        Resolve caller input into an ArchiveFormat.

        Raises:
            UnrecognizedArchiveFormatError: If `value` is neither a variant nor a known extension.
        """
        if isinstance(value, cls):
            return value
        resolved = cls.from_alias(value)
        if resolved is None:
            raise UnrecognizedArchiveFormatError(str(value))
        return resolved

    @classmethod
    def default_for(cls, os: OperatingSystem) -> "ArchiveFormat":
        """Return the archive format usually wanted on `os` (zip on Windows, tar.gz elsewhere)."""
        return cls.ZIP if os is OperatingSystem.WINDOWS else cls.TAR_GZ

    def __str__(self) -> str:
        return self.value
