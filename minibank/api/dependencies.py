"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from minibank.domain.registry import AccountRegistry


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_registry(request: Request) -> AccountRegistry:
    """Provide the registry owned by the running application"""
    return request.app.state.registry
