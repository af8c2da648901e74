"""
Health Check Router
===================
Endpoints for health and readiness checks.
"""
from fastapi import APIRouter

from cssexpr import __version__
from cssexpr.core.evaluator import evaluate

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    Returns OK once the evaluator answers a known expression correctly.
    """
    ready = evaluate("(2 + 3) * 4px").value == 20
    return {"status": "ready" if ready else "degraded"}
