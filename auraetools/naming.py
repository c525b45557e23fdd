"""Name conversions used when generating operation names and code."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator

__all__ = [
    "to_snake_case",
    "to_lower_camel_case",
    "path_to_snake_case",
    "op_name",
    "to_unqualified_type",
]


class _Mode(enum.Enum):
    BOUNDARY = enum.auto()
    LOWER = enum.auto()
    UPPER = enum.auto()


def _chunks(text: str) -> Iterator[str]:
    current: list[str] = []
    for ch in text:
        if ch.isalnum():
            current.append(ch)
        elif current:
            yield "".join(current)
            current = []
    if current:
        yield "".join(current)


def _words(text: str) -> Iterator[str]:
    """Split ``text`` into words at separators and case boundaries."""
    for chunk in _chunks(text):
        start = 0
        mode = _Mode.BOUNDARY
        last = len(chunk) - 1
        for i, ch in enumerate(chunk):
            if i == last:
                yield chunk[start:]
                break
            nxt = chunk[i + 1]
            if ch.islower():
                next_mode = _Mode.LOWER
            elif ch.isupper():
                next_mode = _Mode.UPPER
            else:
                next_mode = mode
            if next_mode is _Mode.LOWER and nxt.isupper():
                yield chunk[start : i + 1]
                start = i + 1
                mode = _Mode.BOUNDARY
            elif mode is _Mode.UPPER and ch.isupper() and nxt.islower():
                yield chunk[start:i]
                start = i
                mode = _Mode.BOUNDARY
            else:
                mode = next_mode


def to_snake_case(text: str) -> str:
    """Convert ``text`` to snake_case."""
    return "_".join(word.lower() for word in _words(text))


def to_lower_camel_case(text: str) -> str:
    """Convert ``text`` to lowerCamelCase."""
    words = list(_words(text))
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(word.capitalize() for word in rest)


def _segments(module: str | Iterable[str]) -> list[str]:
    if isinstance(module, str):
        return [part for part in module.split("::") if part]
    return list(module)


def path_to_snake_case(module: str | Iterable[str]) -> str:
    """Join the snake_cased segments of a module path with ``_``.

    ``module`` is either a ``::``-separated path or a sequence of segments.
    """
    return "_".join(to_snake_case(segment) for segment in _segments(module))


def op_name(
    module: str | Iterable[str], service_name: str, method_name: str
) -> str:
    """Return the operation name for a service method, e.g. ``ae__runtime__cell_service__allocate``."""
    return (
        f"ae__{path_to_snake_case(module)}"
        f"__{to_snake_case(service_name)}"
        f"__{to_snake_case(method_name)}"
    )


def to_unqualified_type(type_name: str) -> str:
    """Strip the package qualification from a dotted protobuf type name."""
    return type_name.split(".")[-1]