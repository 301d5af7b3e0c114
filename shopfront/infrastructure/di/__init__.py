"""Dependency Injection package."""

from .container import DIContainer, get_container, reset_container
from .decorators import injectable

__all__ = [
    "DIContainer",
    "get_container",
    "reset_container",
    "injectable",
]
