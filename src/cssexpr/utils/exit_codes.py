"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — every expression evaluated / committed
  1   Invalid — an expression failed to evaluate or fell outside its field
  2   Error — usage error, missing file, runtime failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    INVALID = 1
    ERROR = 2
