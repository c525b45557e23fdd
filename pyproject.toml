[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "auraetools"
version = "0.1.0"
description = "Field validation helpers and TypeScript client generation from protobuf service descriptions"
requires-python = ">=3.10"
dependencies = []
keywords = ["validation", "protobuf", "codegen", "typescript", "grpc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["auraetools"]

[tool.pytest.ini_options]
addopts = "-ra"
