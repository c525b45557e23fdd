import pytest

from auraetools.naming import op_name, path_to_snake_case
from auraetools.protodesc import FileDescriptor, MethodDescriptor, ServiceDescriptor
from auraetools.tsgen import (
    copy_helpers,
    generated_ts_relative_path,
    op_names,
    select_services,
    typescript_generator,
    typescript_service_generator,
    typescript_services,
)

HEALTH = ServiceDescriptor(
    "Health",
    (
        MethodDescriptor(
            "Check", ".grpc.health.v1.HealthCheckRequest", ".grpc.health.v1.HealthCheckResponse"
        ),
        MethodDescriptor(
            "Watch",
            ".grpc.health.v1.HealthCheckRequest",
            ".grpc.health.v1.HealthCheckResponse",
            server_streaming=True,
        ),
    ),
)
OTHER = ServiceDescriptor("Other", (MethodDescriptor("Ping", ".x.In", ".x.Out"),))
FILES = [FileDescriptor("health.proto", "grpc.health.v1", services=(HEALTH, OTHER))]


def test_select_services_filters_by_name():
    assert list(select_services(FILES, ["Health"])) == [HEALTH]
    assert list(select_services(FILES, [])) == []


def test_service_class_shape():
    text = typescript_service_generator("grpc::health", HEALTH)
    assert text.startswith("export class HealthClient implements Health {")
    assert text.endswith("}")
    assert "check(request: HealthCheckRequest): Promise<HealthCheckResponse> {" in text
    assert "// @ts-ignore" in text


def test_service_class_calls_every_op_including_streaming():
    text = typescript_service_generator("grpc::health", HEALTH)
    for method in HEALTH.methods:
        expected = f"return Deno.core.ops.{op_name('grpc::health', 'Health', method.name)}(request);"
        assert expected in text


def test_empty_service_class():
    text = typescript_service_generator("m", ServiceDescriptor("Empty"))
    assert text == "export class EmptyClient implements Empty {}"


def test_typescript_services_joined_by_blank_line():
    joined = typescript_services("grpc::health", FILES, ["Health", "Other"])
    assert joined.split("\n\n") != [] and joined == "\n\n".join(
        [
            typescript_service_generator("grpc::health", HEALTH),
            typescript_service_generator("grpc::health", OTHER),
        ]
    )


def test_op_names_skip_streaming_methods():
    names = op_names("grpc::health", FILES, ["Health"])
    assert names == [op_name("grpc::health", "Health", "Check")]


def test_generated_ts_relative_path():
    assert generated_ts_relative_path("/repo/api/v0/cells/cells.proto") == "v0/cells/cells.ts"


def test_generated_ts_relative_path_without_api():
    assert generated_ts_relative_path("health.proto") == "health.ts"


def test_typescript_generator_appends_services(tmp_path):
    source = tmp_path / "grpc" / "health" / "v1" / "health.ts"
    source.parent.mkdir(parents=True)
    source.write_text("export interface Health {}\n")
    written = typescript_generator(
        tmp_path, "/repo/api/grpc/health/v1/health.proto", "grpc::health", FILES, ["Health"]
    )
    assert written == tmp_path / f"{path_to_snake_case('grpc::health')}.ts"
    assert written.read_text() == "export interface Health {}\n" + typescript_services(
        "grpc::health", FILES, ["Health"]
    )


def test_typescript_generator_rejects_empty_source(tmp_path):
    (tmp_path / "x.ts").write_text("")
    with pytest.raises(ValueError, match="empty"):
        typescript_generator(tmp_path, "/repo/api/x.proto", "x", FILES, ["Health"])


def test_typescript_generator_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        typescript_generator(tmp_path, "/repo/api/x.proto", "x", FILES, ["Health"])


def test_copy_helpers_overwrites(tmp_path):
    (tmp_path / "helpers.ts").write_text("old contents that are longer")
    path = copy_helpers("export const a = 1;\n", tmp_path)
    assert path == tmp_path / "helpers.ts"
    assert path.read_text() == "export const a = 1;\n"