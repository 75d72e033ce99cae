"""Domain error classes.

Errors raised by the pricing engine, the dealership service and the stores.
They carry no transport details; the HTTP entrypoint maps them to status codes.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all dealership errors.

    Carries a human-readable message plus arbitrary context (VIN, ids,
    offending values) that adapters can serialize.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g., vin, vehicle_id)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Construction-time validation error.

    Raised before an invalid entity can exist.

    Examples:
        - Blank VIN, make, model or color
        - Year outside 1886..current year + 1
        - Negative price or odometer
        - Missing contract date or customer name
        - Non-positive amortization term
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "price", "message": "Must be >= 0"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Raised instead of returning None so callers can tell "absent" apart
    from "present but invalid".

    Examples:
        - No vehicle with the given VIN in inventory
        - Deleting a vehicle id that is no longer stored
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Vehicle", "SalesContract")
            identifier: Resource identifier (e.g., VIN, surrogate id)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InvalidStateError(DomainError):
    """Business rule violation spanning more than one field.

    Raised after the vehicle is found but before anything is written.

    Examples:
        - Leasing a vehicle older than the lease age limit
    """

    error_code: str = "INVALID_STATE"


class ConflictError(DomainError):
    """Store-level uniqueness conflict.

    Examples:
        - Adding a vehicle whose VIN is already in inventory
    """

    error_code: str = "CONFLICT"


class PersistenceError(DomainError):
    """A store failed to read or write.

    The original exception is chained as ``__cause__``.
    """

    error_code: str = "PERSISTENCE_ERROR"


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.
    """

    error_code: str = "INTERNAL_ERROR"
