# auraetools

Small building blocks for validating request messages, and for generating
TypeScript client classes from protobuf service descriptions. The package
has no dependencies beyond the standard library.

## Installation

```
pip install auraetools
```

To run the test suite:

```
pip install "auraetools[test]"
pytest
```

## Field validation

`auraetools.validators` holds small checks. Each raises a subclass of
`auraetools.errors.ValidationError` when the value is not acceptable. The
field path in the error is the field name, prefixed with `parent.` when a
parent name is given (see `auraetools.errors.field_name`).

| Check | On success | On failure |
| --- | --- | --- |
| `required(value, field_name, parent_name)` | returns `value` | `RequiredError` if `value` is `None` |
| `required_not_empty(value, ...)` | returns `value` | `RequiredError` if `None` or of length 0 |
| `minimum_length(value, length, units, ...)` | returns `None` | `MinimumError` if `len(value) < length` |
| `maximum_length(value, length, units, ...)` | returns `None` | `MaximumError` if `len(value) > length` |
| `minimum_value(value, minimum, units, ...)` | returns `None` | `MinimumError` if `value < minimum` |
| `maximum_value(value, maximum, units, ...)` | returns `None` | `MaximumError` if `value > maximum` |
| `allow_regex(value, pattern, ...)` | returns `None` | `AllowRegexViolation` if `pattern` finds no match |
| `valid_enum(enum_type, value, ...)` | returns the enum member | `InvalidError` |
| `valid_json(value, ...)` | returns the decoded document | `InvalidError` |
| `valid_url(value, ...)` | returns a `urllib.parse.SplitResult` | `InvalidError` |

The module also defines the unit names `UNIT_BYTES`, `UNIT_CHARACTER`,
`UNIT_CHARACTERS`, `UNIT_ITEM`, `UNIT_ITEMS` and the compiled patterns
`DOMAIN_NAME_LABEL_REGEX` and `UNRESERVED_URL_PATH_SEGMENT_REGEX`.

```python
from auraetools.errors import MaximumError
from auraetools.validators import maximum_value, required_not_empty

name = required_not_empty("my-cell", "name", "cell")   # 'my-cell'

try:
    maximum_value(150, 100, "percent", "cpu_percentage", "cell")
except MaximumError as err:
    print(err)   # Field = cell.cpu_percentage; Maximum = 100 percent
```

Errors compare equal when they are of the same class and carry the same
attributes (`field`, and `minimum`/`maximum`/`units` or `pattern`).

## Validating whole messages

`auraetools.validated.TypeValidator` validates an input record, either a
mapping or an object with attributes, into an instance of a dataclass. A
subclass sets `output_type` to a dataclass whose name starts with
`Validated`; the unvalidated name is kept in `input_name`
(`unvalidated_name("ValidatedCell")` gives `"Cell"`).

Each field of the output is validated in this order of preference:

1. a method `validate_<field>(value, field_name, parent_name)` on the
   validator;
2. an entry in `rules`, built with `field_rule(mode, field_type)`, where
   `mode` is an `AutoValidate` member or one of `""`, `"opt"`, `"none"`,
   `"create"`:
   - `VALIDATE` calls `field_type.validate`,
   - `VALIDATE_OPT` calls `field_type.validate_optional` (`None` stays `None`),
   - `VALIDATE_FOR_CREATION` calls `field_type.validate_for_creation`,
   - `VALIDATE_NONE` passes the value through unchanged.

   When `field_type` is not given it is taken from the output dataclass's
   annotation (with `Optional[...]` unwrapped), which must be a
   `ValidatedField` subclass and not a string annotation.

A field with neither a method nor a rule raises `TypeError`. The hooks
`pre_validate` and `post_validate` run before and after the fields and do
nothing unless overridden.

```python
import dataclasses

from auraetools.validated import TypeValidator, ValidatedField, field_rule
from auraetools.validators import maximum_value, required_not_empty


@dataclasses.dataclass(frozen=True)
class CellName(ValidatedField):
    value: str

    @classmethod
    def validate(cls, value, field_name, parent_name=None):
        return cls(required_not_empty(value, field_name, parent_name))


@dataclasses.dataclass
class ValidatedCell:
    name: CellName
    cpu_percentage: int


class CellValidator(TypeValidator):
    output_type = ValidatedCell
    rules = {"name": field_rule()}

    def validate_cpu_percentage(self, value, field_name, parent_name):
        maximum_value(value, 100, "percent", field_name, parent_name)
        return value


cell = CellValidator().validate({"name": "my-cell", "cpu_percentage": 50})
# ValidatedCell(name=CellName(value='my-cell'), cpu_percentage=50)
```

## Code generation helpers

- `auraetools.naming`: `to_snake_case`, `to_lower_camel_case`,
  `path_to_snake_case` (takes a `::`-separated path or a sequence of
  segments), `op_name` and `to_unqualified_type`.
- `auraetools.protodesc`: frozen descriptor dataclasses `FileDescriptor`,
  `ServiceDescriptor`, `MethodDescriptor` (with `is_streaming()`),
  `MessageDescriptor` and the `FieldType` enum, plus `find_message`,
  `to_rust_type` and `find_api_dir` (nearest enclosing `api` directory of an
  existing file).
- `auraetools.tsgen`: `select_services`, `typescript_service_generator`,
  `typescript_services`, `op_names` (non-streaming methods only),
  `generated_ts_relative_path`, `typescript_generator` (appends the
  generated classes to the existing `.ts` file for a proto and writes
  `<module>.ts` into the gen directory) and `copy_helpers` (writes
  `helpers.ts`).

```python
from auraetools.naming import op_name
from auraetools.protodesc import MethodDescriptor, ServiceDescriptor
from auraetools.tsgen import typescript_service_generator

op_name("runtime", "CellService", "Allocate")
# 'ae__runtime__cell_service__allocate'

service = ServiceDescriptor(
    "CellService",
    (MethodDescriptor("Allocate", ".aurae.CellServiceAllocateRequest",
                      ".aurae.CellServiceAllocateResponse"),),
)
print(typescript_service_generator("runtime", service))
```

## What this package does not do

- It does not read or parse `.proto` files. Descriptors are built in Python
  by the caller; `typescript_generator` expects the TypeScript message
  definitions for the proto to be present already in the gen directory.
- It does not run the generated TypeScript, and it contains no client for
  calling the described services.
- It has no command-line program.