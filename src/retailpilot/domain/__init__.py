"""Domain layer for retailpilot.

Services live in their own modules (``inventory``, ``supplier``, ``finance``,
``insights``) and are imported from there, so the store layer can depend on
the entities and ledger rules without importing the services.
"""

from retailpilot.domain.errors import (
    DomainError,
    ValidationError,
    NotFoundError,
    ConflictError,
    ExternalServiceError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ExternalServiceError",
]
