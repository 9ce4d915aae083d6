"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and by port implementations.
Request handlers turn them into Result failures; nothing crosses the router.
"""

from officeops.domain.exceptions.entity_not_found import EntityNotFoundError
from officeops.domain.exceptions.persistence_error import PersistenceError
from officeops.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "EntityNotFoundError",
    "DomainValidationError",
    "PersistenceError",
]
