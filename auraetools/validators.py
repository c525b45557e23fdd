"""Field validators that raise :class:`ValidationError` subclasses."""

from __future__ import annotations

import enum
import json
import re
from collections.abc import Sized
from typing import Any, TypeVar
from urllib.parse import SplitResult, urlsplit

from .errors import (
    AllowRegexViolation,
    InvalidError,
    MaximumError,
    MinimumError,
    RequiredError,
    field_name as _field_name,
)

__all__ = [
    "UNIT_BYTES",
    "UNIT_CHARACTER",
    "UNIT_CHARACTERS",
    "UNIT_ITEM",
    "UNIT_ITEMS",
    "DOMAIN_NAME_LABEL_REGEX",
    "UNRESERVED_URL_PATH_SEGMENT_REGEX",
    "allow_regex",
    "maximum_length",
    "minimum_length",
    "maximum_value",
    "minimum_value",
    "required",
    "required_not_empty",
    "valid_enum",
    "valid_json",
    "valid_url",
]

UNIT_BYTES = "bytes"
UNIT_CHARACTER = "character"
UNIT_CHARACTERS = "characters"
UNIT_ITEM = "item"
UNIT_ITEMS = "items"

DOMAIN_NAME_LABEL_REGEX = re.compile(
    r"^(?=.{1,63}\Z)(?![-])[a-zA-Z0-9-]+(?<![-])\Z", re.DOTALL
)
UNRESERVED_URL_PATH_SEGMENT_REGEX = re.compile(
    r"^(?=.{1,1745}\Z)[a-zA-Z0-9_.~-]+\Z", re.DOTALL
)

T = TypeVar("T")
E = TypeVar("E", bound=enum.Enum)

_SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})
_FORBIDDEN_HOST_CHARS = frozenset(" \t\n\r#%/:<>?@[\\]^|")


def allow_regex(
    value: str,
    pattern: re.Pattern[str] | str,
    field_name: str,
    parent_name: str | None = None,
) -> None:
    """Require ``value`` to contain a match for ``pattern``."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    if compiled.search(value) is None:
        raise AllowRegexViolation(
            _field_name(field_name, parent_name), compiled.pattern
        )


def maximum_length(
    value: Sized,
    length: int,
    units: str,
    field_name: str,
    parent_name: str | None = None,
) -> None:
    """Require ``len(value)`` to be at most ``length``."""
    if len(value) > length:
        raise MaximumError(_field_name(field_name, parent_name), str(length), units)


def minimum_length(
    value: Sized,
    length: int,
    units: str,
    field_name: str,
    parent_name: str | None = None,
) -> None:
    """Require ``len(value)`` to be at least ``length``."""
    if len(value) < length:
        raise MinimumError(_field_name(field_name, parent_name), str(length), units)


def maximum_value(
    value: Any,
    maximum: Any,
    units: str,
    field_name: str,
    parent_name: str | None = None,
) -> None:
    """Require ``value`` to be no greater than ``maximum``."""
    if value > maximum:
        raise MaximumError(_field_name(field_name, parent_name), str(maximum), units)


def minimum_value(
    value: Any,
    minimum: Any,
    units: str,
    field_name: str,
    parent_name: str | None = None,
) -> None:
    """Require ``value`` to be no less than ``minimum``."""
    if value < minimum:
        raise MinimumError(_field_name(field_name, parent_name), str(minimum), units)


def required(value: T | None, field_name: str, parent_name: str | None = None) -> T:
    """Return ``value``, raising :class:`RequiredError` if it is ``None``."""
    if value is None:
        raise RequiredError(_field_name(field_name, parent_name))
    return value


def required_not_empty(
    value: T | None, field_name: str, parent_name: str | None = None
) -> T:
    """Return ``value``, raising :class:`RequiredError` if it is ``None`` or empty."""
    present = required(value, field_name, parent_name)
    if len(present) == 0:  # type: ignore[arg-type]
        raise RequiredError(_field_name(field_name, parent_name))
    return present


def valid_enum(
    enum_type: type[E],
    value: int,
    field_name: str,
    parent_name: str | None = None,
) -> E:
    """Convert ``value`` to a member of ``enum_type``."""
    try:
        return enum_type(value)
    except (ValueError, TypeError):
        raise InvalidError(_field_name(field_name, parent_name)) from None


def valid_json(value: str, field_name: str, parent_name: str | None = None) -> Any:
    """Parse ``value`` as JSON and return the decoded document."""
    try:
        return json.loads(value)
    except (ValueError, TypeError):
        raise InvalidError(_field_name(field_name, parent_name)) from None


def _check_url(text: str) -> SplitResult:
    stripped = text.strip("\x00\x01\x02\x03\x04\x05\x06\x07\x08\t\n\x0b\x0c\r"
                          "\x0e\x0f\x10\x11\x12\x13\x14\x15\x16\x17\x18\x19"
                          "\x1a\x1b\x1c\x1d\x1e\x1f ")
    parts = urlsplit(stripped)
    scheme = parts.scheme
    if not scheme or not scheme[0].isascii() or not scheme[0].isalpha():
        raise ValueError("missing or malformed scheme")
    if not stripped.lower().startswith(scheme + ":"):
        raise ValueError("missing scheme")
    parts.port  # raises ValueError for a malformed port
    if scheme in _SPECIAL_SCHEMES:
        host = parts.hostname or ""
        if not host:
            raise ValueError("empty host")
        raw_host = parts.netloc.rpartition("@")[2]
        if raw_host.startswith("["):
            if "]" not in raw_host:
                raise ValueError("unterminated IPv6 host")
        elif any(ch in _FORBIDDEN_HOST_CHARS for ch in host):
            raise ValueError("forbidden host character")
    return parts


def valid_url(
    value: str, field_name: str, parent_name: str | None = None
) -> SplitResult:
    """Parse ``value`` as an absolute URL and return its components."""
    try:
        return _check_url(value)
    except ValueError:
        raise InvalidError(_field_name(field_name, parent_name)) from None