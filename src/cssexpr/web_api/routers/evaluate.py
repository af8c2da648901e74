"""
Evaluate Router
===============
Endpoints for evaluating, checking and committing field expressions.
"""
import math

from fastapi import APIRouter, HTTPException

from cssexpr import api as core_api
from cssexpr.errors import InvalidExpression
from cssexpr.policy.fields import FieldSpec, get_field
from cssexpr.web_api.schemas.evaluate import (
    CheckRequest,
    CheckResponse,
    CommitRequest,
    CommitResponse,
    EvaluateRequest,
    EvaluateResponse,
)

router = APIRouter()


def _resolve_field(name: str) -> FieldSpec:
    try:
        return get_field(name)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0])


@router.post("/", response_model=EvaluateResponse)
async def evaluate_expression(request: EvaluateRequest):
    """
    Evaluate an expression.

    - **expression**: arithmetic with `+ - * /`, parentheses and an optional
      trailing unit
    """
    return core_api.evaluate_expression(request.expression)


@router.post("/check", response_model=CheckResponse)
async def check_expression(request: CheckRequest):
    """
    Report whether an expression is valid for a field.

    Uses the preset named by **field**, or the explicit **min_value** /
    **max_value** range when no preset is given.
    """
    if request.field is not None:
        spec = _resolve_field(request.field)
    else:
        try:
            spec = FieldSpec(
                name="custom",
                min_value=request.min_value if request.min_value is not None else -math.inf,
                max_value=request.max_value if request.max_value is not None else math.inf,
            )
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
    return core_api.check_field(request.expression, spec)


@router.post("/commit", response_model=CommitResponse)
async def commit_expression(request: CommitRequest):
    """
    Commit typed text to a field.

    Invalid or out-of-range text returns the current value with
    `reverted: true`.
    """
    spec = _resolve_field(request.field)
    try:
        return core_api.commit_field(
            request.expression, current=request.current, field=spec
        )
    except InvalidExpression as e:
        raise HTTPException(status_code=422, detail=f"current: {e}")
