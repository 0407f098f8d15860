"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from decision_engine.domain.engine import DecisionEngine

_engine = DecisionEngine()


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_decision_engine() -> DecisionEngine:
    """Provide the shared, stateless decision engine"""
    return _engine
