"""Normalizing parsers for typed paths.

Each ``parse_*`` entry point validates a raw string for one (base, kind) pair
and returns the canonical path, or ``None`` when the input is malformed.
Malformed input is an expected outcome for user-supplied paths, so the parsers
never raise; the ``mk_*`` helpers are the raising variants for literals that
are known to be valid.

Normalization rules:

* alternate separators fold into the platform separator;
* empty segments (repeated separators) and ``.`` segments are dropped;
* any ``..`` segment rejects the whole input, it is never resolved;
* directories gain exactly one trailing separator, files must not have one;
* absolute paths keep a single anchor, relative paths must not have one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from typedpath.config import default_platform
from typedpath.errors import (
    InvalidAbsDir,
    InvalidAbsFile,
    InvalidRelDir,
    InvalidRelFile,
    PathParseError,
)
from typedpath.types import CUR_DIR, AbsDir, AbsFile, Base, Kind, Path, RelDir, RelFile

if TYPE_CHECKING:
    from typedpath.platform import Platform

__all__ = [
    "PARENT_DIR",
    "canonicalize",
    "has_parent_dir",
    "mk_abs_dir",
    "mk_abs_file",
    "mk_rel_dir",
    "mk_rel_file",
    "parse_abs_dir",
    "parse_abs_file",
    "parse_as",
    "parse_rel_dir",
    "parse_rel_file",
]

log = logging.getLogger(__name__)

PARENT_DIR = ".."

P = TypeVar("P", bound=Path[Any, Any])

_ERRORS: dict[type[Path[Any, Any]], Callable[[str], PathParseError]] = {
    AbsDir: InvalidAbsDir,
    RelDir: InvalidRelDir,
    AbsFile: InvalidAbsFile,
    RelFile: InvalidRelFile,
}


def has_parent_dir(raw: str, *, platform: Platform | None = None) -> bool:
    """
    Return True when any segment of ``raw`` is ``..``.

    Both separators count on platforms with an alternate separator, so
    ``a\\..`` is caught on Windows.

    Returns
    -------
    bool
        Whether a parent reference appears anywhere in the path.
    """
    resolved = platform or default_platform()
    logical = resolved.normalize_separators(raw)
    return PARENT_DIR in logical.split(resolved.separator)


def canonicalize(raw: str, base: Base, kind: Kind, platform: Platform) -> str | None:
    """
    Compute the canonical string for ``raw`` read as a ``base`` ``kind`` path.

    Returns
    -------
    str | None
        Canonical form, or None when the input is rejected.
    """
    if not raw:
        # The empty string is the current directory and nothing else.
        if base is Base.RELATIVE and kind is Kind.DIRECTORY:
            return ""
        return None
    if not platform.is_valid(raw):
        return None

    sep = platform.separator
    logical = platform.normalize_separators(raw)
    if base is Base.ABSOLUTE:
        if not platform.is_absolute(logical):
            return None
    elif platform.is_absolute(logical) or logical.startswith(sep):
        return None

    anchor, rest = platform.split_anchor(logical)
    raw_segments = rest.split(sep)
    if PARENT_DIR in raw_segments:
        return None
    segments = [segment for segment in raw_segments if segment and segment != CUR_DIR]

    if kind is Kind.FILE:
        # "a/" and "a/." both name directories.
        if logical.endswith(sep) or raw_segments[-1] == CUR_DIR or not segments:
            return None
        return anchor + sep.join(segments)

    if not segments:
        # A segment-less directory is only legal as the absolute root; "." and
        # "./" are not spellings of the empty relative directory.
        return anchor or None
    return anchor + sep.join(segments) + sep


def parse_as(cls: type[P], raw: str, *, platform: Platform | None = None) -> P | None:
    """
    Parse ``raw`` into the concrete path class ``cls``.

    Returns
    -------
    P | None
        Canonical path, or None when ``raw`` is malformed for ``cls``.
    """
    if not isinstance(raw, str):
        log.debug("Rejected non-string %s input: %r", cls.__name__, raw)
        return None
    resolved = platform or default_platform()
    canonical = canonicalize(raw, cls.base, cls.kind, resolved)
    if canonical is None:
        log.debug("Rejected %s path: %r", cls.__name__, raw)
        return None
    return cls._from_canonical(canonical, resolved)


def parse_abs_dir(raw: str, *, platform: Platform | None = None) -> AbsDir | None:
    """
    Parse an absolute directory such as ``/foo/bar/``.

    ``"///foo//bar//mu/"`` normalizes to ``"/foo/bar/mu/"``; a missing trailing
    separator is added.

    Returns
    -------
    AbsDir | None
        Parsed directory or None.
    """
    return parse_as(AbsDir, raw, platform=platform)


def parse_rel_dir(raw: str, *, platform: Platform | None = None) -> RelDir | None:
    """
    Parse a relative directory such as ``foo/bar/``.

    The empty string is the current directory. ``~`` is an ordinary leading
    segment, so ``"~/foo"`` parses to ``"~/foo/"``.

    Returns
    -------
    RelDir | None
        Parsed directory or None.
    """
    return parse_as(RelDir, raw, platform=platform)


def parse_abs_file(raw: str, *, platform: Platform | None = None) -> AbsFile | None:
    """
    Parse an absolute file such as ``/foo/bar.txt``.

    Returns
    -------
    AbsFile | None
        Parsed file or None.
    """
    return parse_as(AbsFile, raw, platform=platform)


def parse_rel_file(raw: str, *, platform: Platform | None = None) -> RelFile | None:
    """
    Parse a relative file such as ``foo/bar.txt``.

    Returns
    -------
    RelFile | None
        Parsed file or None.
    """
    return parse_as(RelFile, raw, platform=platform)


def _mk(cls: type[P], literal: str, platform: Platform | None) -> P:
    path = parse_as(cls, literal, platform=platform)
    if path is None:
        raise _ERRORS[cls](literal)
    return path


def mk_abs_dir(literal: str, *, platform: Platform | None = None) -> AbsDir:
    """
    Build an absolute directory from a known-good literal.

    Returns
    -------
    AbsDir
        Parsed directory.

    Raises
    ------
    InvalidAbsDir
        If ``literal`` does not parse.
    """
    return _mk(AbsDir, literal, platform)


def mk_rel_dir(literal: str, *, platform: Platform | None = None) -> RelDir:
    """
    Build a relative directory from a known-good literal.

    Returns
    -------
    RelDir
        Parsed directory.

    Raises
    ------
    InvalidRelDir
        If ``literal`` does not parse.
    """
    return _mk(RelDir, literal, platform)


def mk_abs_file(literal: str, *, platform: Platform | None = None) -> AbsFile:
    """
    Build an absolute file from a known-good literal.

    Returns
    -------
    AbsFile
        Parsed file.

    Raises
    ------
    InvalidAbsFile
        If ``literal`` does not parse.
    """
    return _mk(AbsFile, literal, platform)


def mk_rel_file(literal: str, *, platform: Platform | None = None) -> RelFile:
    """
    Build a relative file from a known-good literal.

    Returns
    -------
    RelFile
        Parsed file.

    Raises
    ------
    InvalidRelFile
        If ``literal`` does not parse.
    """
    return _mk(RelFile, literal, platform)
