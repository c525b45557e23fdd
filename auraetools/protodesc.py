"""Minimal protobuf descriptor model and helpers over it."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterable
from pathlib import Path

__all__ = [
    "FieldType",
    "MethodDescriptor",
    "ServiceDescriptor",
    "MessageDescriptor",
    "FileDescriptor",
    "to_rust_type",
    "find_message",
    "find_api_dir",
]


class FieldType(enum.IntEnum):
    """Protobuf scalar and composite field types, numbered as in descriptor.proto."""

    TYPE_DOUBLE = 1
    TYPE_FLOAT = 2
    TYPE_INT64 = 3
    TYPE_UINT64 = 4
    TYPE_INT32 = 5
    TYPE_FIXED64 = 6
    TYPE_FIXED32 = 7
    TYPE_BOOL = 8
    TYPE_STRING = 9
    TYPE_GROUP = 10
    TYPE_MESSAGE = 11
    TYPE_BYTES = 12
    TYPE_UINT32 = 13
    TYPE_ENUM = 14
    TYPE_SFIXED32 = 15
    TYPE_SFIXED64 = 16
    TYPE_SINT32 = 17
    TYPE_SINT64 = 18


_RUST_TYPES = {
    FieldType.TYPE_DOUBLE: "f64",
    FieldType.TYPE_FLOAT: "f32",
    FieldType.TYPE_INT64: "i64",
    FieldType.TYPE_UINT64: "u64",
    FieldType.TYPE_INT32: "i32",
    FieldType.TYPE_FIXED64: "u64",
    FieldType.TYPE_FIXED32: "u32",
    FieldType.TYPE_BOOL: "bool",
    FieldType.TYPE_STRING: "String",
    FieldType.TYPE_BYTES: "Vec<u8>",
    FieldType.TYPE_UINT32: "u32",
    FieldType.TYPE_ENUM: "i32",
    FieldType.TYPE_SFIXED32: "i32",
    FieldType.TYPE_SFIXED64: "i64",
    FieldType.TYPE_SINT32: "i32",
    FieldType.TYPE_SINT64: "i64",
}


@dataclasses.dataclass(frozen=True)
class MethodDescriptor:
    """One RPC method of a service."""

    name: str
    input_type: str
    output_type: str
    client_streaming: bool = False
    server_streaming: bool = False

    def is_streaming(self) -> bool:
        """True if either side of the call streams."""
        return self.client_streaming or self.server_streaming


@dataclasses.dataclass(frozen=True)
class ServiceDescriptor:
    """A service and its methods, in declaration order."""

    name: str
    methods: tuple[MethodDescriptor, ...] = ()


@dataclasses.dataclass(frozen=True)
class MessageDescriptor:
    """A message type and its fields as ``(name, type)`` pairs."""

    name: str
    fields: tuple[tuple[str, FieldType], ...] = ()


@dataclasses.dataclass(frozen=True)
class FileDescriptor:
    """The messages and services declared by one proto file."""

    name: str
    package: str = ""
    messages: tuple[MessageDescriptor, ...] = ()
    services: tuple[ServiceDescriptor, ...] = ()


def to_rust_type(field_type: FieldType | int) -> str:
    """Return the Rust type that holds a scalar field of ``field_type``."""
    kind = FieldType(field_type)
    try:
        return _RUST_TYPES[kind]
    except KeyError:
        raise ValueError(f"type not supported: {kind.name}") from None


def find_message(
    files: Iterable[FileDescriptor], name: str
) -> MessageDescriptor | None:
    """Return the first message called ``name`` across ``files``, or ``None``."""
    return next(
        (m for f in files for m in f.messages if m.name == name),
        None,
    )


def find_api_dir(proto_path: str | Path) -> Path:
    """Return the nearest enclosing ``api`` directory of an existing proto file."""
    resolved = Path(proto_path).resolve(strict=True)
    for parent in resolved.parents:
        if parent.is_dir() and parent.name == "api":
            return parent
    raise ValueError("proto file not in api directory")