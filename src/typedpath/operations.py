"""Path algebra over canonical paths.

Every operation here works on canonical strings directly. Concatenating a
canonical directory (which ends in one separator) with a canonical relative
path (which never starts with one) cannot produce ``//``, ``.`` or ``..``, so
results are wrapped without re-parsing.
"""

from __future__ import annotations

from typing import Any, TypeVar

from typedpath.types import Abs, Base, Dir, File, Kind, Path, Rel, RelDir, RelFile, path_class

__all__ = [
    "append",
    "dirname",
    "filename",
    "is_parent_of",
    "parent",
    "strip_dir",
]

B = TypeVar("B", Abs, Rel)
K = TypeVar("K", File, Dir)


def _require_kind(path: object, kind: Kind, operation: str) -> None:
    if not isinstance(path, Path) or path.kind is not kind:
        msg = f"{operation} expects a {kind} path, got {path!r}"
        raise TypeError(msg)


def _same_platform(left: Path[Any, Any], right: Path[Any, Any]) -> bool:
    return left.platform.name == right.platform.name


def _segments(path: Path[Any, Any]) -> tuple[str, list[str]]:
    """Split a canonical path into its anchor and its non-empty segments."""
    platform = path.platform
    anchor, rest = platform.split_anchor(path._path)
    return anchor, [segment for segment in rest.split(platform.separator) if segment]


def append(parent_dir: Path[B, Dir], child: Path[Rel, K]) -> Path[B, K]:
    """
    Append a relative path to a directory; same as ``parent_dir / child``.

    The result keeps the base of ``parent_dir`` and the kind of ``child``.

    Returns
    -------
    Path[B, K]
        Concatenated path.

    Raises
    ------
    TypeError
        If ``parent_dir`` is not a directory or ``child`` is not relative, or
        the two were parsed with different platforms.
    """
    if (
        not isinstance(parent_dir, Path)
        or parent_dir.kind is not Kind.DIRECTORY
        or not isinstance(child, Path)
        or child.base is not Base.RELATIVE
        or not _same_platform(parent_dir, child)
    ):
        msg = f"cannot append {child!r} to {parent_dir!r}"
        raise TypeError(msg)
    return parent_dir / child


def strip_dir(parent_dir: Path[B, Dir], path: Path[B, K]) -> Path[Rel, K] | None:
    """
    Remove ``parent_dir`` from the front of ``path``.

    Only strict descendants match: ``strip_dir(d, d)`` is None rather than the
    empty relative directory. Paths of another base, or parsed with another
    platform, never match.

    Returns
    -------
    Path[Rel, K] | None
        The remainder relative to ``parent_dir`` with the kind of ``path``, or
        None when ``parent_dir`` is not a proper prefix.

    Raises
    ------
    TypeError
        If ``parent_dir`` is not a directory.
    """
    _require_kind(parent_dir, Kind.DIRECTORY, "strip_dir")
    if parent_dir.base is not path.base or not _same_platform(parent_dir, path):
        return None
    prefix = parent_dir._path
    if len(path._path) <= len(prefix) or not path._path.startswith(prefix):
        return None
    remainder_cls = path_class(Base.RELATIVE, path.kind)
    return remainder_cls._from_canonical(path._path[len(prefix) :], path.platform)


def is_parent_of(parent_dir: Path[B, Dir], path: Path[B, Any]) -> bool:
    """
    Return True when ``path`` lies strictly inside ``parent_dir``.

    This is a prefix test on canonical strings; no filesystem lookup happens.

    Returns
    -------
    bool
        Whether ``strip_dir(parent_dir, path)`` would succeed.

    Raises
    ------
    TypeError
        If ``parent_dir`` is not a directory.
    """
    return strip_dir(parent_dir, path) is not None


def parent(path: Path[B, Any]) -> Path[B, Dir]:
    """
    Return the directory that contains ``path``.

    The absolute root is its own parent. A single-segment relative path has the
    empty relative directory as parent.

    Returns
    -------
    Path[B, Dir]
        Containing directory, same base as ``path``.
    """
    anchor, segments = _segments(path)
    sep = path.platform.separator
    canonical = anchor + "".join(segment + sep for segment in segments[:-1])
    return path_class(path.base, Kind.DIRECTORY)._from_canonical(canonical, path.platform)


def filename(path: Path[Any, File]) -> RelFile:
    """
    Return the last segment of a file path.

    ``filename(d / f) == filename(f)`` for every directory ``d``.

    Returns
    -------
    RelFile
        File name without any directory part.

    Raises
    ------
    TypeError
        If ``path`` is not a file.
    """
    _require_kind(path, Kind.FILE, "filename")
    _, segments = _segments(path)
    return RelFile._from_canonical(segments[-1] if segments else "", path.platform)


def dirname(path: Path[Any, Dir]) -> RelDir:
    """
    Return the last segment of a directory path as a relative directory.

    Only the trailing segment matters: ``dirname(a / b) == dirname(b)``. The
    root and the empty relative directory have no segment and map to the empty
    relative directory.

    Returns
    -------
    RelDir
        Final directory name with its trailing separator.

    Raises
    ------
    TypeError
        If ``path`` is not a directory.
    """
    _require_kind(path, Kind.DIRECTORY, "dirname")
    _, segments = _segments(path)
    sep = path.platform.separator
    return RelDir._from_canonical(segments[-1] + sep if segments else "", path.platform)
