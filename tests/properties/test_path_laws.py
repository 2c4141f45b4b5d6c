"""Property-based checks of parser idempotence and the path algebra laws."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tests._helpers.expect import expect_equal, expect_true
from tests._helpers.strategies import (
    abs_dirs,
    abs_files,
    any_dirs,
    pathy_text,
    rel_dirs,
    rel_files,
    relative_children,
)
from typedpath.operations import append, dirname, filename, is_parent_of, parent, strip_dir
from typedpath.parsing import mk_abs_dir, parse_abs_dir, parse_abs_file, parse_rel_dir, parse_rel_file
from typedpath.platform import POSIX, WINDOWS, Platform
from typedpath.types import Path
from typedpath.validity import is_valid

PARSERS = (parse_abs_dir, parse_rel_dir, parse_abs_file, parse_rel_file)
PLATFORMS = (POSIX, WINDOWS)


@pytest.mark.parametrize("parser", PARSERS, ids=lambda p: p.__name__)
@settings(max_examples=200)
@given(raw=pathy_text())
def test_parsing_is_idempotent(parser: Callable[[str], Path[Any, Any] | None], raw: str) -> None:
    """Re-parsing the display form of a parsed path gives the same path."""
    parsed = parser(raw)
    if parsed is None:
        return
    expect_true(is_valid(parsed), message=f"{parser.__name__}({raw!r}) produced an invalid value")
    if str(parsed) == "./":
        # The current directory displays as ./ but is stored, and re-parsed, as "".
        expect_equal(parser(""), parsed)
        return
    expect_equal(parser(str(parsed)), parsed, label=repr(raw))


@settings(max_examples=100)
@given(x=abs_files(), y=abs_files())
def test_display_equality_matches_value_equality(x: Path[Any, Any], y: Path[Any, Any]) -> None:
    """x == y exactly when str(x) == str(y) and repr(x) == repr(y)."""
    expect_equal(x == y, str(x) == str(y))
    expect_equal(x == y, repr(x) == repr(y))


@settings(max_examples=100)
@given(directory=any_dirs(), child=st.data())
def test_strip_dir_undoes_append(directory: Path[Any, Any], child: st.DataObject) -> None:
    """strip_dir d (d / c) == c and is_parent_of d (d / c)."""
    relative = child.draw(relative_children())
    combined = directory / relative
    expect_equal(strip_dir(directory, combined), relative)
    expect_true(is_parent_of(directory, combined))
    expect_true(is_valid(combined))


@settings(max_examples=50)
@given(directory=any_dirs())
def test_strip_dir_of_itself_is_none(directory: Path[Any, Any]) -> None:
    """No directory is a strict descendant of itself."""
    expect_equal(strip_dir(directory, directory), None)
    expect_true(not is_parent_of(directory, directory))


@settings(max_examples=100)
@given(directory=any_dirs(), child=rel_dirs(), file=rel_files())
def test_decomposition_ignores_prefix(directory: Path[Any, Any], child: Path[Any, Any], file: Path[Any, Any]) -> None:
    """dirname and filename only look at the trailing segment."""
    expect_equal(dirname(directory / child), dirname(child))
    expect_equal(filename(directory / file), filename(file))
    expect_equal(parent(directory / filename(file)), directory)


@settings(max_examples=50)
@given(path=st.one_of(abs_dirs(), abs_files()))
def test_parent_chain_reaches_root(path: Path[Any, Any]) -> None:
    """Repeated parent calls end at the root and stay there."""
    root = mk_abs_dir("/")
    current = parent(path)
    for _ in range(len(str(path))):
        current = parent(current)
    expect_equal(current, root)
    expect_equal(parent(parent(root)), root)


@pytest.mark.parametrize("platform", PLATFORMS, ids=lambda p: p.name)
@settings(max_examples=100)
@given(data=st.data())
def test_algebra_results_stay_valid(platform: Platform, data: st.DataObject) -> None:
    """Every value the algebra builds from same-platform operands is canonical."""
    directory = data.draw(any_dirs(platform))
    child = data.draw(relative_children(platform))
    file = data.draw(rel_files(platform))
    combined = directory / child
    results = [combined, parent(combined), dirname(directory), filename(file), parent(file)]
    remainder = strip_dir(directory, combined)
    if remainder is not None:
        results.append(remainder)
    for result in results:
        expect_true(is_valid(result), message=f"{result!r} is not canonical for {platform.name}")
        expect_equal(result.platform, platform)


@settings(max_examples=50)
@given(data=st.data())
def test_mixed_platform_operands_are_rejected(data: st.DataObject) -> None:
    """Paths from different platforms never combine or strip."""
    directory = data.draw(any_dirs(WINDOWS))
    child = data.draw(relative_children(POSIX))
    with pytest.raises(TypeError):
        _ = directory / child
    with pytest.raises(TypeError):
        append(directory, child)
    expect_equal(strip_dir(directory, child), None)
    expect_true(not is_parent_of(directory, child))
