"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       ├── InvalidLevelError
    │       └── InvalidHandlerLevelError
    └── ApplicationError         (application.py)
        ├── WorldClosedError
        ├── DiagnosticError
        └── ConfigError          (kblog.config.validation)
"""

from kblog.kernel.errors.application import (
    ApplicationError,
    DiagnosticError,
    WorldClosedError,
)
from kblog.kernel.errors.base import BaseError
from kblog.kernel.errors.domain import (
    DomainError,
    InvalidHandlerLevelError,
    InvalidLevelError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DiagnosticError",
    "DomainError",
    "InvalidHandlerLevelError",
    "InvalidLevelError",
    "ValidationError",
    "WorldClosedError",
]
