"""Pydantic integration and JSON helpers for typed paths.

Paths serialize to their display string. Validation runs the parser of the
target class, so a string that is well formed for another (base, kind) still
fails: decoding ``["/foo/bar"]`` as ``list[RelDir]`` raises a
``ValidationError`` instead of substituting anything.
"""

from __future__ import annotations

from functools import cache
from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic_core import CoreSchema, core_schema

from typedpath.parsing import parse_as
from typedpath.types import Path

__all__ = ["decode_json", "encode_json", "path_core_schema"]

P = TypeVar("P", bound=Path[Any, Any])
T = TypeVar("T")


def _to_text(path: Path[Any, Any]) -> str:
    return path.to_file_path()


def path_core_schema(cls: type[P]) -> CoreSchema:
    """
    Build the pydantic core schema for a concrete path class.

    JSON input must be a string; Python input may also be an instance of
    ``cls``, which passes through untouched.

    Returns
    -------
    CoreSchema
        Schema validating through ``parse_as(cls, ...)`` and serializing to str.
    """

    def _from_text(raw: str) -> P:
        path = parse_as(cls, raw)
        if path is None:
            msg = f"not a valid {cls.base} {cls.kind} path: {raw!r}"
            raise ValueError(msg)
        return path

    from_text = core_schema.no_info_after_validator_function(_from_text, core_schema.str_schema())
    return core_schema.json_or_python_schema(
        json_schema=from_text,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_text],
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            _to_text,
            return_schema=core_schema.str_schema(),
        ),
    )


@cache
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def encode_json(value: Any, tp: Any) -> str:
    """
    Serialize ``value`` of type ``tp`` (for example ``list[AbsFile]``) to JSON.

    Returns
    -------
    str
        Compact JSON text.
    """
    return _adapter(tp).dump_json(value).decode("utf-8")


def decode_json(raw: str | bytes, tp: type[T] | Any) -> T:
    """
    Parse JSON text as ``tp``, running the path parsers on every path value.

    Returns
    -------
    T
        Decoded value.

    Raises
    ------
    pydantic.ValidationError
        If the text is not valid JSON or any path fails to parse as its target class.
    """
    return _adapter(tp).validate_json(raw)
