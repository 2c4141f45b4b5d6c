"""CLI entrypoint for parsing and combining typed paths."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Iterable
from typing import Any

from typedpath.config import PathSettings, default_platform
from typedpath.errors import TypedPathError
from typedpath.operations import strip_dir
from typedpath.parsing import mk_rel_dir, mk_rel_file, parse_abs_dir, parse_as, parse_rel_dir
from typedpath.platform import Platform
from typedpath.serialization import encode_json
from typedpath.types import AbsDir, AbsFile, Kind, Path, RelDir, RelFile, path_class

LOG = logging.getLogger("typedpath.cli")

CommandHandler = Callable[[argparse.Namespace], int]

PATH_CLASSES: dict[str, type[Path[Any, Any]]] = {
    "abs-dir": AbsDir,
    "rel-dir": RelDir,
    "abs-file": AbsFile,
    "rel-file": RelFile,
}


# ---------------------------------------------------------------------------
# Argument parsing / logging setup
# ---------------------------------------------------------------------------


def _setup_logging(verbosity: int) -> None:
    """
    Configure logging based on -v/--verbose count.

    0 -> WARNING, 1 -> INFO, 2+ -> DEBUG.
    """
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _resolve_platform(name: str | None) -> Platform:
    if name is None:
        return default_platform()
    return PathSettings(platform_name=name).resolve_platform()


def _parse_dir(raw: str, platform: Platform) -> Path[Any, Any]:
    directory = parse_abs_dir(raw, platform=platform) or parse_rel_dir(raw, platform=platform)
    if directory is None:
        msg = f"Not a directory path: {raw!r}"
        raise TypedPathError(msg)
    return directory


def _parse_child(raw: str, platform: Platform) -> Path[Any, Any]:
    if platform.normalize_separators(raw).endswith(platform.separator):
        return mk_rel_dir(raw, platform=platform)
    return mk_rel_file(raw, platform=platform)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_parse(args: argparse.Namespace) -> int:
    platform = _resolve_platform(args.platform)
    cls = PATH_CLASSES[args.kind]
    results = [parse_as(cls, raw, platform=platform) for raw in args.paths]
    rejected = [raw for raw, path in zip(args.paths, results, strict=True) if path is None]
    for raw in rejected:
        LOG.warning("Rejected %s input: %r", args.kind, raw)

    if args.json:
        print(encode_json(results, list[cls | None]))  # type: ignore[valid-type]
    else:
        for path in results:
            if path is not None:
                print(path)
    return 1 if rejected else 0


def _cmd_join(args: argparse.Namespace) -> int:
    platform = _resolve_platform(args.platform)
    directory = _parse_dir(args.dir, platform)
    child = _parse_child(args.child, platform)
    print(directory / child)
    return 0


def _cmd_strip(args: argparse.Namespace) -> int:
    platform = _resolve_platform(args.platform)
    directory = _parse_dir(args.dir, platform)
    is_dir = platform.normalize_separators(args.path).endswith(platform.separator)
    cls = path_class(directory.base, Kind.DIRECTORY if is_dir else Kind.FILE)
    target = parse_as(cls, args.path, platform=platform)
    if target is None:
        msg = f"Not a {directory.base} path: {args.path!r}"
        raise TypedPathError(msg)

    remainder = strip_dir(directory, target)
    if remainder is None:
        LOG.info("%s is not inside %s", target, directory)
        return 1
    print(remainder)
    return 0


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typedpath",
        description="Parse, normalize and combine typed filesystem paths",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be repeated)",
    )
    parser.add_argument(
        "--platform",
        choices=("auto", "posix", "windows"),
        default=None,
        help="Path rules to apply (default: TYPEDPATH_PLATFORM or auto)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    p_parse = subparsers.add_parser("parse", help="Print the canonical form of each path")
    p_parse.add_argument(
        "--as",
        dest="kind",
        choices=tuple(PATH_CLASSES),
        required=True,
        help="Base and kind to parse as",
    )
    p_parse.add_argument("--json", action="store_true", help="Emit a JSON list (null for rejected input)")
    p_parse.add_argument("paths", nargs="+", help="Raw path strings")
    p_parse.set_defaults(func=_cmd_parse)

    p_join = subparsers.add_parser("join", help="Append a relative path to a directory")
    p_join.add_argument("dir", help="Absolute or relative directory")
    p_join.add_argument("child", help="Relative file, or relative directory when it ends in a separator")
    p_join.set_defaults(func=_cmd_join)

    p_strip = subparsers.add_parser("strip", help="Express a path relative to one of its parents")
    p_strip.add_argument("dir", help="Parent directory")
    p_strip.add_argument("path", help="File or directory inside the parent (trailing separator for directories)")
    p_strip.set_defaults(func=_cmd_strip)

    return parser


def make_parser() -> argparse.ArgumentParser:
    """
    Public helper to construct the CLI parser (for tests/tools).

    Returns
    -------
    argparse.ArgumentParser
        Configured parser.
    """
    return _make_parser()


def main(argv: Iterable[str] | None = None) -> int:
    """
    CLI entrypoint for typedpath.

    Parameters
    ----------
    argv:
        Optional argument list (defaults to sys.argv).

    Returns
    -------
    int
        Exit code (0 on success).
    """
    parser = _make_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    _setup_logging(args.verbose)

    try:
        func: CommandHandler = args.func
        return int(func(args))
    except TypedPathError as exc:
        LOG.error("%s failed: %s", args.command, exc)  # noqa: TRY400
        return 1


if __name__ == "__main__":
    sys.exit(main())
