"""Typed, canonical filesystem paths.

Paths are tagged as absolute or relative and as file or directory, parsed once
into a canonical form and combined with a small algebra that never touches the
filesystem.
"""

from typedpath.errors import (
    InvalidAbsDir,
    InvalidAbsFile,
    InvalidRelDir,
    InvalidRelFile,
    PathParseError,
    TypedPathError,
    UnknownPlatformError,
)
from typedpath.operations import append, dirname, filename, is_parent_of, parent, strip_dir
from typedpath.parsing import (
    mk_abs_dir,
    mk_abs_file,
    mk_rel_dir,
    mk_rel_file,
    parse_abs_dir,
    parse_abs_file,
    parse_as,
    parse_rel_dir,
    parse_rel_file,
)
from typedpath.types import Abs, AbsDir, AbsFile, Base, Dir, File, Kind, Path, Rel, RelDir, RelFile

__version__ = "0.1.0"

__all__ = [
    "Abs",
    "AbsDir",
    "AbsFile",
    "Base",
    "Dir",
    "File",
    "InvalidAbsDir",
    "InvalidAbsFile",
    "InvalidRelDir",
    "InvalidRelFile",
    "Kind",
    "Path",
    "PathParseError",
    "Rel",
    "RelDir",
    "RelFile",
    "TypedPathError",
    "UnknownPlatformError",
    "append",
    "dirname",
    "filename",
    "is_parent_of",
    "mk_abs_dir",
    "mk_abs_file",
    "mk_rel_dir",
    "mk_rel_file",
    "parent",
    "parse_abs_dir",
    "parse_abs_file",
    "parse_as",
    "parse_rel_dir",
    "parse_rel_file",
    "strip_dir",
]
