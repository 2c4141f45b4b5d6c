"""Typed path values.

A :class:`Path` wraps one canonical string. Its base (absolute or relative) and
kind (file or directory) are fixed by the concrete class and mirrored by the
phantom type parameters, so ``Path[Abs, Dir]`` and ``AbsDir`` describe the same
values to a type checker.

Values cannot be built directly: the parsers in :mod:`typedpath.parsing` and the
operations in :mod:`typedpath.operations` are the only producers, and both hand
over strings that are already canonical.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Self, TypeVar

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

    from typedpath.platform import Platform

__all__ = [
    "CUR_DIR",
    "Abs",
    "AbsDir",
    "AbsFile",
    "Base",
    "Dir",
    "File",
    "Kind",
    "Path",
    "Rel",
    "RelDir",
    "RelFile",
    "path_class",
]

CUR_DIR = "."


class Base(StrEnum):
    """Where a path is anchored."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class Kind(StrEnum):
    """What a path points at."""

    FILE = "file"
    DIRECTORY = "directory"


class Abs:
    """Phantom marker: the path is anchored at a filesystem root."""


class Rel:
    """Phantom marker: the path is relative to some directory."""


class File:
    """Phantom marker: the path names a file."""


class Dir:
    """Phantom marker: the path names a directory."""


B = TypeVar("B", Abs, Rel)
K = TypeVar("K", File, Dir)

_REGISTRY: dict[tuple[Base, Kind], type[Path[Any, Any]]] = {}


def _rebuild(cls: type[Path[Any, Any]], raw: str, platform: Platform) -> Path[Any, Any]:
    return cls._from_canonical(raw, platform)


class Path(Generic[B, K]):
    """
    Immutable, canonical path of some base and kind.

    Equality, ordering and hashing are defined on the canonical string alone.
    Directory paths always end in exactly one separator; file paths never do.
    """

    __slots__ = ("_path", "_platform")

    base: ClassVar[Base]
    kind: ClassVar[Kind]

    _path: str
    _platform: Platform

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _REGISTRY[(cls.base, cls.kind)] = cls

    def __init__(self, *args: object, **kwargs: object) -> None:
        msg = f"{type(self).__name__} values are created by the parse_* and mk_* functions"
        raise TypeError(msg)

    @classmethod
    def _from_canonical(cls, raw: str, platform: Platform) -> Self:
        """Wrap an already-canonical string without checking it."""
        path = object.__new__(cls)
        object.__setattr__(path, "_path", raw)
        object.__setattr__(path, "_platform", platform)
        return path

    @property
    def platform(self) -> Platform:
        """Platform whose separator rules produced this path."""
        return self._platform

    def to_file_path(self) -> str:
        """
        Return the external string form of the path.

        The empty relative directory is stored as ``""`` and rendered as ``./``
        (``.\\`` on Windows); every other path renders as its canonical string.

        Returns
        -------
        str
            Display form suitable for ``open``/``os`` calls and serialization.
        """
        if not self._path:
            return CUR_DIR + self._platform.separator
        return self._path

    def __str__(self) -> str:
        return self.to_file_path()

    def __fspath__(self) -> str:
        return self.to_file_path()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_file_path()!r})"

    def _same_class(self, other: object) -> bool:
        return type(self) is type(other) and self._platform.name == other._platform.name  # type: ignore[attr-defined]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._same_class(other) and self._path == other._path
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not self._same_class(other):
            return NotImplemented
        return self._path < other._path  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if not self._same_class(other):
            return NotImplemented
        return self._path <= other._path  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if not self._same_class(other):
            return NotImplemented
        return self._path > other._path  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if not self._same_class(other):
            return NotImplemented
        return self._path >= other._path  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        # "" would hash like the bare salt; hash the display form instead.
        return hash((self._platform.name, self.to_file_path()))

    def __truediv__(self: Path[B, Dir], child: Path[Rel, K]) -> Path[B, K]:
        if self.kind is not Kind.DIRECTORY or not isinstance(child, Path):
            return NotImplemented
        if child.base is not Base.RELATIVE or child._platform.name != self._platform.name:
            return NotImplemented
        result_cls = path_class(self.base, child.kind)
        return result_cls._from_canonical(self._path + child._path, self._platform)

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable: cannot set {name!r}"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable: cannot delete {name!r}"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[Any, ...]:
        return _rebuild, (type(self), self._path, self._platform)

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        from typedpath.serialization import path_core_schema

        return path_core_schema(cls)


class AbsDir(Path[Abs, Dir]):
    """Absolute directory, e.g. ``/home/chris/``."""

    __slots__ = ()
    base = Base.ABSOLUTE
    kind = Kind.DIRECTORY


class RelDir(Path[Rel, Dir]):
    """Relative directory, e.g. ``chris/`` or the empty current directory."""

    __slots__ = ()
    base = Base.RELATIVE
    kind = Kind.DIRECTORY


class AbsFile(Path[Abs, File]):
    """Absolute file, e.g. ``/home/chris/notes.txt``."""

    __slots__ = ()
    base = Base.ABSOLUTE
    kind = Kind.FILE


class RelFile(Path[Rel, File]):
    """Relative file, e.g. ``chris/notes.txt``."""

    __slots__ = ()
    base = Base.RELATIVE
    kind = Kind.FILE


def path_class(base: Base, kind: Kind) -> type[Path[Any, Any]]:
    """
    Return the concrete path class for a (base, kind) pair.

    Returns
    -------
    type[Path]
        One of ``AbsDir``, ``RelDir``, ``AbsFile`` or ``RelFile``.
    """
    return _REGISTRY[(base, kind)]
