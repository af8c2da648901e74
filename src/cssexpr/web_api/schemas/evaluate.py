"""
Evaluate Schemas
================
Request and response models for the evaluate endpoints.
"""
from pydantic import BaseModel, Field
from typing import Optional

MAX_EXPRESSION_LENGTH = 256


class EvaluateRequest(BaseModel):
    """Request to evaluate one expression"""

    expression: str = Field(
        ...,
        max_length=MAX_EXPRESSION_LENGTH,
        description="Expression such as '(2 + 3) * 4em'",
    )

    class Config:
        json_schema_extra = {
            "example": {"expression": "-1.5 * (2 + 3)px"}
        }


class ValueOut(BaseModel):
    """A finite value and its unit"""

    value: float
    unit: str = Field(..., description="Lower-cased unit, or 'none'")
    css: str = Field(..., description="Value rendered as CSS text")


class EvaluateResponse(ValueOut):
    """Result of a successful evaluation"""

    expression: str

    class Config:
        json_schema_extra = {
            "example": {
                "expression": "-1.5 * (2 + 3)px",
                "value": -7.5,
                "unit": "px",
                "css": "-7.5px",
            }
        }


class CheckRequest(BaseModel):
    """Keystroke validity check against a preset or an explicit range"""

    expression: str = Field(..., max_length=MAX_EXPRESSION_LENGTH)
    field: Optional[str] = Field(default=None, description="Field preset name")
    min_value: Optional[float] = Field(default=None, description="Lower bound when no preset")
    max_value: Optional[float] = Field(default=None, description="Upper bound when no preset")

    class Config:
        json_schema_extra = {
            "example": {"expression": "1.2 * 1.5", "field": "line-height"}
        }


class CheckResponse(BaseModel):
    expression: str
    field: str
    valid: bool


class CommitRequest(BaseModel):
    """Commit typed text to a field holding a current value"""

    expression: str = Field(..., max_length=MAX_EXPRESSION_LENGTH)
    current: str = Field(..., description="Currently committed value, e.g. '1.5em'")
    field: str = Field(..., description="Field preset name")

    class Config:
        json_schema_extra = {
            "example": {"expression": "2 * 3", "current": "1em", "field": "line-height"}
        }


class CommitResponse(BaseModel):
    """Committed value, or the previous value when reverted"""

    expression: str
    field: str
    value: ValueOut
    valid: bool
    reverted: bool
    error: Optional[str] = None
