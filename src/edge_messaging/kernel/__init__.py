"""Kernel – framework-agnostic building blocks."""

from edge_messaging.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    MissingFieldError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "MissingFieldError",
    "ValidationError",
]
