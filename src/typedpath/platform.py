"""Platform path capabilities consumed by the parser and the path algebra.

A platform supplies the logical separator, the alternate separators folded into
it, an absoluteness predicate, a character/name validity predicate and the
split between the absolute anchor and the rest of a path. The parser treats
these as a pluggable capability: tests and callers may pass either flavour
explicitly, everything else uses :func:`typedpath.config.default_platform`.
"""

from __future__ import annotations

import ntpath
import posixpath
import string
from dataclasses import dataclass
from typing import Protocol

__all__ = [
    "PLATFORMS",
    "POSIX",
    "WINDOWS",
    "Platform",
    "PosixPlatform",
    "WindowsPlatform",
]

# Characters no platform accepts inside a path.
_ALWAYS_INVALID = frozenset("\0\n\r")

_WINDOWS_RESERVED_CHARS = frozenset('<>:"|?*')
_WINDOWS_RESERVED_NAMES = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)


class Platform(Protocol):
    """Capabilities a host platform provides to the normalizer."""

    name: str
    separator: str

    def normalize_separators(self, raw: str) -> str:
        """Rewrite alternate separators to ``separator``."""
        ...

    def is_absolute(self, raw: str) -> bool:
        """Return True when ``raw`` is anchored at a filesystem root."""
        ...

    def is_valid(self, raw: str) -> bool:
        """Return True when ``raw`` holds no illegal characters or names."""
        ...

    def split_anchor(self, raw: str) -> tuple[str, str]:
        """Split a separator-normalized path into its canonical anchor and remainder."""
        ...


@dataclass(frozen=True)
class PosixPlatform:
    """POSIX paths: ``/`` separates, a leading ``/`` anchors."""

    name: str = "posix"
    separator: str = posixpath.sep

    def normalize_separators(self, raw: str) -> str:
        """
        Return ``raw`` unchanged; backslash is an ordinary character on POSIX.

        Returns
        -------
        str
            The input string.
        """
        return raw

    def is_absolute(self, raw: str) -> bool:
        """
        Delegate to :func:`posixpath.isabs`.

        Returns
        -------
        bool
            True when the path starts with ``/``.
        """
        return posixpath.isabs(raw)

    def is_valid(self, raw: str) -> bool:
        """
        Reject NUL, newline and carriage return characters.

        Emptiness is the parser's concern, not a validity rule.

        Returns
        -------
        bool
            True when no forbidden character appears.
        """
        return _ALWAYS_INVALID.isdisjoint(raw)

    def split_anchor(self, raw: str) -> tuple[str, str]:
        """
        Split leading separators off an absolute path.

        Any number of leading separators collapse into the single ``/`` anchor.

        Returns
        -------
        tuple[str, str]
            ``("/", rest)`` for absolute input, ``("", raw)`` otherwise.
        """
        if raw.startswith(self.separator):
            return self.separator, raw.lstrip(self.separator)
        return "", raw


@dataclass(frozen=True)
class WindowsPlatform:
    """Windows paths: ``\\`` and ``/`` separate, ``X:\\`` anchors."""

    name: str = "windows"
    separator: str = ntpath.sep
    alt_separator: str = ntpath.altsep

    def normalize_separators(self, raw: str) -> str:
        """
        Fold ``/`` into ``\\``.

        Returns
        -------
        str
            Path using only the primary separator.
        """
        return raw.replace(self.alt_separator, self.separator)

    def _drive(self, raw: str) -> str:
        drive, _ = ntpath.splitdrive(raw)
        # Only letter drives anchor a path; UNC shares are not supported.
        if len(drive) == 2 and drive[0] in string.ascii_letters and drive[1] == ":":
            return drive
        return ""

    def is_absolute(self, raw: str) -> bool:
        """
        Return True for a drive letter followed by a separator.

        Drive-relative (``C:foo``) and root-relative (``\\foo``) paths are not absolute.

        Returns
        -------
        bool
            Whether the path is fully qualified.
        """
        normalized = self.normalize_separators(raw)
        drive = self._drive(normalized)
        return bool(drive) and normalized[len(drive) : len(drive) + 1] == self.separator

    def is_valid(self, raw: str) -> bool:
        """
        Apply Windows naming rules to every segment after the anchor.

        Rejects control characters, ``<>:"|?*`` and reserved device names such as
        ``CON`` or ``lpt1.txt``. A drive is only accepted as part of an anchor.

        Returns
        -------
        bool
            True when the path is acceptable to Windows.
        """
        normalized = self.normalize_separators(raw)
        if not _ALWAYS_INVALID.isdisjoint(normalized):
            return False
        rest = normalized
        if self.is_absolute(normalized):
            rest = normalized[len(self._drive(normalized)) :]
        for segment in rest.split(self.separator):
            if any(ord(ch) < 32 or ch in _WINDOWS_RESERVED_CHARS for ch in segment):
                return False
            stem = segment.split(".", 1)[0].rstrip(" ").upper()
            if stem in _WINDOWS_RESERVED_NAMES:
                return False
        return True

    def split_anchor(self, raw: str) -> tuple[str, str]:
        """
        Split ``X:\\`` (plus any repeated separators) off an absolute path.

        Returns
        -------
        tuple[str, str]
            ``("X:\\", rest)`` for absolute input, ``("", raw)`` otherwise.
        """
        if not self.is_absolute(raw):
            return "", raw
        drive = self._drive(raw)
        return drive + self.separator, raw[len(drive) :].lstrip(self.separator)


POSIX = PosixPlatform()
WINDOWS = WindowsPlatform()

PLATFORMS: dict[str, Platform] = {
    POSIX.name: POSIX,
    WINDOWS.name: WINDOWS,
}
