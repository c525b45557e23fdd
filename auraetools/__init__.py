"""Field validation helpers, whole-record validators, and TypeScript client generation from protobuf service descriptors."""

__version__ = "0.1.0"

__all__ = ["errors", "validators", "validated", "naming", "protodesc", "tsgen"]