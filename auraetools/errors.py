"""Validation errors raised by the field validators."""

from __future__ import annotations

__all__ = [
    "ValidationError",
    "RequiredError",
    "MinimumError",
    "MaximumError",
    "AllowRegexViolation",
    "InvalidError",
    "field_name",
]


def field_name(field_name: str, parent_name: str | None = None) -> str:
    """Return the dotted name of a field, prefixed by its parent if given."""
    if parent_name is None:
        return field_name
    return f"{parent_name}.{field_name}"


class ValidationError(Exception):
    """Base class for every validation failure; carries the offending field."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"Field = {self.field}; Invalid"

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), str(self)))

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"


class RequiredError(ValidationError):
    """A required value was missing or empty."""

    def _describe(self) -> str:
        return f"Field = {self.field}; Required"


class MinimumError(ValidationError):
    """A value or length fell below its minimum."""

    def __init__(self, field: str, minimum: str, units: str) -> None:
        self.minimum = minimum
        self.units = units
        super().__init__(field)

    def _describe(self) -> str:
        return f"Field = {self.field}; Minimum = {self.minimum} {self.units}"


class MaximumError(ValidationError):
    """A value or length rose above its maximum."""

    def __init__(self, field: str, maximum: str, units: str) -> None:
        self.maximum = maximum
        self.units = units
        super().__init__(field)

    def _describe(self) -> str:
        return f"Field = {self.field}; Maximum = {self.maximum} {self.units}"


class AllowRegexViolation(ValidationError):
    """A value did not match the pattern it had to match."""

    def __init__(self, field: str, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(field)

    def _describe(self) -> str:
        return f"Field = {self.field};  Regex = {self.pattern}"


class InvalidError(ValidationError):
    """A value could not be interpreted as the expected kind of value."""

    def _describe(self) -> str:
        return f"Field = {self.field}; Invalid"