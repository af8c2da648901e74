"""
cssexpr.api
===========

Programmatic entrypoints for services and scripts that embed the evaluator.

Goals:
  - No argparse / CLI dependencies
  - Stable, JSON-friendly outputs that match the bundled schemas

Non-goals:
  - Unit conversion — units are carried, never converted
  - Owning presentation (UI strings) — callers render results

Usage::

    from cssexpr.api import evaluate_expression, commit_field

    evaluate_expression("(2 + 3) * 4em")
    commit_field("12", current="1.5em", field="line-height")
"""

from __future__ import annotations

from typing import Any, Iterable, Union

from cssexpr.core.evaluator import evaluate
from cssexpr.errors import InvalidExpression
from cssexpr.model.value import ValueWithUnit
from cssexpr.policy.fields import FieldSpec, check, commit, get_field

FieldRef = Union[str, FieldSpec]


def _to_field(field: FieldRef) -> FieldSpec:
    return field if isinstance(field, FieldSpec) else get_field(field)


def _to_value(current: Union[str, ValueWithUnit], field: FieldSpec) -> ValueWithUnit:
    if isinstance(current, ValueWithUnit):
        return current
    value = evaluate(current)
    if value.is_unitless:
        return value.with_unit(field.default_unit)
    return value


# ── evaluate ────────────────────────────────────────────────────────


def evaluate_expression(expression: str) -> dict[str, Any]:
    """Evaluate one expression.

    Returns
    -------
    ``{"expression", "value", "unit", "css"}``

    Raises
    ------
    InvalidExpression
        If the expression cannot be evaluated.
    """
    result = evaluate(expression)
    return {"expression": expression, **result.to_dict()}


def evaluate_many(expressions: Iterable[str]) -> list[dict[str, Any]]:
    """Evaluate several expressions; failures are reported, never raised.

    Each entry carries ``"ok"``.  Successful entries add the fields of
    :func:`evaluate_expression`; failed ones add ``"error"``.
    """
    out: list[dict[str, Any]] = []
    for expression in expressions:
        try:
            out.append({"ok": True, **evaluate_expression(expression)})
        except InvalidExpression as e:
            out.append({"ok": False, "expression": expression, "error": str(e)})
    return out


# ── fields ──────────────────────────────────────────────────────────


def check_field(expression: str, field: FieldRef) -> dict[str, Any]:
    """Keystroke validity for *field* (a preset name or ``FieldSpec``)."""
    spec = _to_field(field)
    return {
        "expression": expression,
        "field": spec.name,
        "valid": check(expression, spec),
    }


def commit_field(
    expression: str,
    *,
    current: Union[str, ValueWithUnit],
    field: FieldRef,
) -> dict[str, Any]:
    """Commit *expression* to a field holding *current*.

    *current* may be a ``ValueWithUnit`` or CSS text such as ``"1.5em"``;
    unitless text takes the field's default unit.

    Raises
    ------
    KeyError
        If *field* names no known preset.
    InvalidExpression
        If *current* is text that cannot be evaluated.
    """
    spec = _to_field(field)
    result = commit(expression, _to_value(current, spec), spec)
    return {"expression": expression, "field": spec.name, **result.to_dict()}


def validate_instance(instance: dict[str, Any], schema_name: str) -> None:
    """Validate a payload against a bundled schema.

    Raises
    ------
    jsonschema.ValidationError
        If validation fails.
    """
    from cssexpr.contracts.load import validate_instance as _validate

    _validate(instance, schema_name)
