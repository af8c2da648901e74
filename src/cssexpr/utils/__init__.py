"""Shared utilities for cssexpr."""

from cssexpr.utils.exit_codes import ExitCode
from cssexpr.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
