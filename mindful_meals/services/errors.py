"""Typed errors raised by the inventory services.

The HTTP layer maps each class to a status code, so services never deal with
HTTP concerns and never need to inspect error messages.
"""


class InventoryError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class NotFoundError(InventoryError):
    """A household, pantry item, list or list item does not exist."""

    status_code = 404
    error_code = "NOT_FOUND"


class ValidationError(InventoryError):
    """Input is well-formed JSON but breaks a business rule."""

    status_code = 400
    error_code = "VALIDATION_ERROR"


class ConflictError(InventoryError):
    """A unique constraint or state rule was violated."""

    status_code = 409
    error_code = "CONFLICT"


class InternalError(InventoryError):
    """Unexpected persistence failure."""
