"""
FastAPI Application
===================
Main entry point for the cssexpr API.

Run with:
    uvicorn cssexpr.web_api.main:app --reload
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cssexpr import __version__
from cssexpr.errors import InvalidExpression
from cssexpr.policy.fields import FIELDS
from cssexpr.web_api.config import settings
from cssexpr.web_api.routers import evaluate, health

logger = logging.getLogger(__name__)

logging.getLogger("cssexpr").setLevel(settings.LOG_LEVEL)

# Create application
app = FastAPI(
    title="CSS Expression API",
    description="Evaluate and commit CSS value expressions for numeric input fields",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidExpression)
async def invalid_expression_handler(request: Request, exc: InvalidExpression):
    """Rejected expressions are client errors: 422 with the reason."""
    logger.debug(f"{request.url.path}: rejected {exc.expression!r} ({exc.reason})")
    return JSONResponse(
        status_code=422,
        content={
            "detail": str(exc),
            "expression": exc.expression,
            "reason": exc.reason,
        },
    )


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(evaluate.router, prefix="/evaluate", tags=["Evaluate"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "CSS Expression API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
        "fields": sorted(FIELDS),
    }


# For running directly: python -m cssexpr.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
