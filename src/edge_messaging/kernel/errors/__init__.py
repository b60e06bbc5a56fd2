"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── MissingFieldError
    └── ApplicationError     (application.py)
        └── ConfigError      (edge_messaging.config.validation)
"""

from edge_messaging.kernel.errors.application import ApplicationError
from edge_messaging.kernel.errors.base import BaseError
from edge_messaging.kernel.errors.domain import (
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
