"""Error taxonomy for trusted construction, configuration and the CLI.

Parsers never raise: malformed input is reported as ``None``. These exceptions
are reserved for call sites that assert a literal is valid (``mk_*``), for an
unusable platform configuration, and for the command line.
"""

from __future__ import annotations

from dataclasses import dataclass

from typedpath.types import Base, Kind


class TypedPathError(Exception):
    """Base class for typedpath errors."""


@dataclass
class PathParseError(TypedPathError, ValueError):
    """A raw string could not be parsed as the requested kind of path."""

    raw: str
    expected: tuple[Base, Kind]

    def __str__(self) -> str:
        base, kind = self.expected
        return f"Invalid {base} {kind} path: {self.raw!r}"


class InvalidAbsDir(PathParseError):
    """Raised when a literal is not a valid absolute directory."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw=raw, expected=(Base.ABSOLUTE, Kind.DIRECTORY))


class InvalidRelDir(PathParseError):
    """Raised when a literal is not a valid relative directory."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw=raw, expected=(Base.RELATIVE, Kind.DIRECTORY))


class InvalidAbsFile(PathParseError):
    """Raised when a literal is not a valid absolute file."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw=raw, expected=(Base.ABSOLUTE, Kind.FILE))


class InvalidRelFile(PathParseError):
    """Raised when a literal is not a valid relative file."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw=raw, expected=(Base.RELATIVE, Kind.FILE))


@dataclass
class UnknownPlatformError(TypedPathError, ValueError):
    """Configured platform name is not one of the supported flavours."""

    name: str
    supported: tuple[str, ...]

    def __str__(self) -> str:
        choices = ", ".join(self.supported)
        return f"Unknown platform {self.name!r} (expected one of: {choices})"
