"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import evaluate, health

__all__ = ["evaluate", "health"]
