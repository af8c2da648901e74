"""
cssexpr Web API
===============
FastAPI service that lets browser input fields validate and commit CSS
value expressions.

Quick Start:
    uvicorn cssexpr.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
