"""
Pydantic Schemas
================
Request and response models for the API.
"""
from .evaluate import (
    CheckRequest,
    CheckResponse,
    CommitRequest,
    CommitResponse,
    EvaluateRequest,
    EvaluateResponse,
    ValueOut,
)

__all__ = [
    "CheckRequest",
    "CheckResponse",
    "CommitRequest",
    "CommitResponse",
    "EvaluateRequest",
    "EvaluateResponse",
    "ValueOut",
]
