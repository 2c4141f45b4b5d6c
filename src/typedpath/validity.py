"""Validity predicates for randomized testing.

A raw string is a valid canonical ``(base, kind)`` path when it satisfies the
structural rules directly and parsing it with the matching parser gives back
exactly the same string. Property-based tests generate arbitrary strings, keep
the ones these predicates accept and check the algebra laws on them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typedpath.config import default_platform
from typedpath.parsing import has_parent_dir, parse_as
from typedpath.types import CUR_DIR, AbsDir, AbsFile, Base, Kind, Path, RelDir, RelFile

if TYPE_CHECKING:
    from typedpath.platform import Platform

__all__ = [
    "has_parent_dir",
    "is_valid",
    "is_valid_abs_dir",
    "is_valid_abs_file",
    "is_valid_rel_dir",
    "is_valid_rel_file",
]


def _is_valid_raw(cls: type[Path[Any, Any]], raw: str, platform: Platform | None) -> bool:
    resolved = platform or default_platform()
    if not isinstance(raw, str) or not resolved.is_valid(raw) or has_parent_dir(raw, platform=resolved):
        return False
    absolute = resolved.is_absolute(raw)
    if absolute != (cls.base is Base.ABSOLUTE):
        return False
    trailing = raw.endswith(resolved.separator)
    if cls.kind is Kind.FILE and (trailing or raw == CUR_DIR):
        return False
    # The empty string is the only directory spelling without a trailing separator.
    if cls.kind is Kind.DIRECTORY and raw and not trailing:
        return False
    parsed = parse_as(cls, raw, platform=resolved)
    return parsed is not None and parsed._path == raw


def is_valid_abs_dir(raw: str, *, platform: Platform | None = None) -> bool:
    """
    Return True when ``raw`` is already a canonical absolute directory.

    Returns
    -------
    bool
        Whether ``raw`` could be stored in an ``AbsDir`` as-is.
    """
    return _is_valid_raw(AbsDir, raw, platform)


def is_valid_rel_dir(raw: str, *, platform: Platform | None = None) -> bool:
    """
    Return True when ``raw`` is already a canonical relative directory.

    Returns
    -------
    bool
        Whether ``raw`` could be stored in a ``RelDir`` as-is.
    """
    return _is_valid_raw(RelDir, raw, platform)


def is_valid_abs_file(raw: str, *, platform: Platform | None = None) -> bool:
    """
    Return True when ``raw`` is already a canonical absolute file.

    Returns
    -------
    bool
        Whether ``raw`` could be stored in an ``AbsFile`` as-is.
    """
    return _is_valid_raw(AbsFile, raw, platform)


def is_valid_rel_file(raw: str, *, platform: Platform | None = None) -> bool:
    """
    Return True when ``raw`` is already a canonical relative file.

    Returns
    -------
    bool
        Whether ``raw`` could be stored in a ``RelFile`` as-is.
    """
    return _is_valid_raw(RelFile, raw, platform)


def is_valid(path: Path[Any, Any]) -> bool:
    """Check that a constructed path still has the canonical form of its class."""
    return _is_valid_raw(type(path), path._path, path.platform)
