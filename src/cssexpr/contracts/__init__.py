"""Bundled JSON schemas for the payloads cssexpr emits."""

from cssexpr.contracts.load import load_schema, validate_file, validate_instance

__all__ = ["load_schema", "validate_file", "validate_instance"]
