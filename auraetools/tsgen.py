"""Generation of TypeScript service clients that call runtime operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from .naming import op_name, path_to_snake_case, to_lower_camel_case, to_unqualified_type
from .protodesc import FileDescriptor, ServiceDescriptor

__all__ = [
    "select_services",
    "typescript_service_generator",
    "typescript_services",
    "op_names",
    "generated_ts_relative_path",
    "typescript_generator",
    "copy_helpers",
]

Module = str | Iterable[str]


def select_services(
    files: Iterable[FileDescriptor], service_names: Iterable[str]
) -> Iterator[ServiceDescriptor]:
    """Yield the services of ``files`` whose names are in ``service_names``, in file order."""
    wanted = set(service_names)
    return (s for f in files for s in f.services if s.name in wanted)


def typescript_service_generator(module: Module, service: ServiceDescriptor) -> str:
    """Return a TypeScript class implementing ``service`` by calling runtime ops."""
    name = service.name
    parts = [f"export class {name}Client implements {name} {{"]
    for method in service.methods:
        op = op_name(module, name, method.name)
        fn_name = to_lower_camel_case(method.name)
        input_type = to_unqualified_type(method.input_type)
        output_type = to_unqualified_type(method.output_type)
        parts.append(
            f"\n{fn_name}(request: {input_type}): Promise<{output_type}> {{\n"
            f"    // @ts-ignore\n"
            f"    return Deno.core.ops.{op}(request);\n"
            f"}}      \n"
            f"        "
        )
    parts.append("}")
    return "".join(parts)


def typescript_services(
    module: Module, files: Iterable[FileDescriptor], service_names: Iterable[str]
) -> str:
    """Generate every selected service class, separated by a blank line."""
    return "\n\n".join(
        typescript_service_generator(module, s)
        for s in select_services(files, service_names)
    )


def op_names(
    module: Module, files: Iterable[FileDescriptor], service_names: Iterable[str]
) -> list[str]:
    """Return the op names of all non-streaming methods of the selected services."""
    return [
        op_name(module, service.name, method.name)
        for service in select_services(files, service_names)
        for method in service.methods
        if not method.is_streaming()
    ]


def generated_ts_relative_path(proto_path: str | Path) -> str:
    """Map a proto path to the path of its TypeScript output below the gen directory."""
    text = str(proto_path)
    relative = text.split("/api/", 1)[-1]
    return relative.replace(".proto", ".ts")


def typescript_generator(
    gen_dir: str | Path,
    proto_path: str | Path,
    module: Module,
    files: Iterable[FileDescriptor],
    service_names: Iterable[str],
) -> Path:
    """Append generated service clients to the protoc output and write the module file.

    Returns the path of the written ``<module>.ts`` file.
    """
    gen_dir = Path(gen_dir)
    files = list(files)
    services = typescript_services(module, files, service_names)
    source = gen_dir / generated_ts_relative_path(proto_path)
    contents = source.read_text()
    if not contents:
        raise ValueError(f"{source} is empty")
    target = gen_dir / f"{path_to_snake_case(module)}.ts"
    target.write_text(contents + services)
    return target


def copy_helpers(helpers_text: str, gen_dir: str | Path) -> Path:
    """Write ``helpers_text`` to ``helpers.ts`` in ``gen_dir``, replacing any old copy."""
    target = Path(gen_dir) / "helpers.ts"
    target.write_text(helpers_text)
    return target