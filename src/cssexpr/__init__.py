"""cssexpr — arithmetic evaluator for CSS values such as ``"-1.5 * (2 + 3)px"``."""

__all__ = [
    "__version__",
    "evaluate",
    "InvalidExpression",
    "Unit",
    "ValueWithUnit",
    "CommitResult",
    "FieldSpec",
    # Programmatic API
    "evaluate_expression",
    "evaluate_many",
    "check_field",
    "commit_field",
]
__version__ = "0.1.0"

from cssexpr.core.evaluator import evaluate  # noqa: E402
from cssexpr.errors import InvalidExpression  # noqa: E402
from cssexpr.model import CommitResult, Unit, ValueWithUnit  # noqa: E402
from cssexpr.policy.fields import FieldSpec  # noqa: E402

from cssexpr.api import (  # noqa: E402
    check_field,
    commit_field,
    evaluate_expression,
    evaluate_many,
)
