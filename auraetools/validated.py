"""Declarative validation of whole records, field by field."""

from __future__ import annotations

import dataclasses
import enum
import types
import typing
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

__all__ = [
    "AutoValidate",
    "ValidatedField",
    "TypeValidator",
    "FieldRule",
    "field_rule",
    "unvalidated_name",
]

_VALIDATED_PREFIX = "Validated"


class AutoValidate(enum.Enum):
    """How a field is validated when no explicit validator method exists."""

    NO = enum.auto()
    VALIDATE = enum.auto()
    VALIDATE_OPT = enum.auto()
    VALIDATE_NONE = enum.auto()
    VALIDATE_FOR_CREATION = enum.auto()


_MODE_ARGS = {
    "": AutoValidate.VALIDATE,
    "opt": AutoValidate.VALIDATE_OPT,
    "none": AutoValidate.VALIDATE_NONE,
    "create": AutoValidate.VALIDATE_FOR_CREATION,
}


class ValidatedField(ABC):
    """A type that builds itself from an unvalidated value."""

    @classmethod
    @abstractmethod
    def validate(cls, value: Any, field_name: str, parent_name: str | None = None):
        """Build an instance from ``value`` or raise a ValidationError."""

    @classmethod
    def validate_optional(
        cls, value: Any, field_name: str, parent_name: str | None = None
    ):
        """Return ``None`` for a missing value, otherwise validate it."""
        if value is None:
            return None
        return cls.validate(value, field_name, parent_name)

    @classmethod
    def validate_for_creation(
        cls, value: Any, field_name: str, parent_name: str | None = None
    ):
        """Stricter validation used when creating things; defaults to ``validate``."""
        return cls.validate(value, field_name, parent_name)


@dataclasses.dataclass(frozen=True)
class FieldRule:
    """The automatic validation applied to one field.

    ``field_type`` is the :class:`ValidatedField` subclass that performs the
    validation; when ``None`` it is taken from the output type's annotation,
    which must then be a real type rather than a string.
    """

    mode: AutoValidate = AutoValidate.NO
    field_type: type[ValidatedField] | None = None


def field_rule(
    mode: AutoValidate | str = AutoValidate.VALIDATE,
    field_type: type[ValidatedField] | None = None,
) -> FieldRule:
    """Build a :class:`FieldRule` from a mode or one of ``""``, ``opt``, ``none``, ``create``."""
    if isinstance(mode, str):
        try:
            mode = _MODE_ARGS[mode]
        except KeyError:
            raise ValueError(
                "`opt`, `none`, and `create` are valid args for the `validate` rule"
            ) from None
    return FieldRule(mode, field_type)


def unvalidated_name(validated_name: str) -> str:
    """Return the name of the unvalidated type for a ``Validated``-prefixed name."""
    if not validated_name.startswith(_VALIDATED_PREFIX):
        raise ValueError(
            "Validated type should be named the same as the unvalidated type "
            "with a `Validated` prefix"
        )
    return validated_name.replace(_VALIDATED_PREFIX, "")


def _unwrap_optional(annotation: Any) -> Any:
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


class TypeValidator:
    """Validates an input record into an instance of ``output_type``.

    Subclasses set ``output_type`` to a dataclass whose name starts with
    ``Validated`` and describe each field either with an entry in ``rules`` or
    with a ``validate_<field>(value, field_name, parent_name)`` method, which
    takes precedence over the rule.
    """

    output_type: ClassVar[type | None] = None
    rules: ClassVar[Mapping[str, FieldRule]] = {}
    input_name: ClassVar[str | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        output_type = cls.__dict__.get("output_type")
        if output_type is None:
            return
        if not (isinstance(output_type, type) and dataclasses.is_dataclass(output_type)):
            raise TypeError("Validated type should be a dataclass with named fields")
        cls.input_name = unvalidated_name(output_type.__name__)

    def _output_type(self) -> type:
        if self.output_type is None:
            raise TypeError(f"{type(self).__name__} has no output_type")
        return self.output_type

    def _field_type(self, name: str, rule: FieldRule) -> type[ValidatedField]:
        field_type = rule.field_type
        if field_type is None:
            annotations = {
                field.name: field.type
                for field in dataclasses.fields(self._output_type())
            }
            field_type = _unwrap_optional(annotations.get(name))
        if not (isinstance(field_type, type) and issubclass(field_type, ValidatedField)):
            raise TypeError(f"field {name!r} has no ValidatedField type to validate with")
        return field_type

    def pre_validate(self, value: Any, parent_name: str | None = None) -> None:
        """Check the whole input before its fields; does nothing by default."""

    def post_validate(self, output: Any, parent_name: str | None = None) -> None:
        """Check the whole output after its fields; does nothing by default."""

    def validate_field(self, name: str, value: Any, parent_name: str | None = None) -> Any:
        """Validate one field's value and return the validated value."""
        custom = getattr(self, f"validate_{name}", None)
        if custom is not None:
            return custom(value, name, parent_name)
        rule = self.rules.get(name, FieldRule())
        if rule.mode is AutoValidate.VALIDATE_NONE:
            return value
        if rule.mode is AutoValidate.NO:
            raise TypeError(
                f"{type(self).__name__} defines no validator for field {name!r}"
            )
        field_type = self._field_type(name, rule)
        if rule.mode is AutoValidate.VALIDATE:
            return field_type.validate(value, name, parent_name)
        if rule.mode is AutoValidate.VALIDATE_OPT:
            return field_type.validate_optional(value, name, parent_name)
        return field_type.validate_for_creation(value, name, parent_name)

    def validate(self, value: Any, parent_name: str | None = None) -> Any:
        """Validate ``value`` field by field and build the output instance."""
        output_type = self._output_type()
        self.pre_validate(value, parent_name)
        validated = {}
        for field in dataclasses.fields(output_type):
            if isinstance(value, Mapping):
                raw = value.get(field.name)
            else:
                raw = getattr(value, field.name)
            validated[field.name] = self.validate_field(field.name, raw, parent_name)
        output = output_type(**validated)
        self.post_validate(output, parent_name)
        return output