"""
Typed failures raised by the record store.

The API layer translates ``InvalidArgumentError`` and
``EntrantNotFoundError`` into client errors.  Every other exception,
``EntrantStoreError`` included, is reported as a generic internal
failure.
"""


class EntrantError(Exception):
    """Base class for all entrant related failures."""


class InvalidArgumentError(EntrantError, ValueError):
    """Caller supplied data that violates a precondition."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field} can not be blank")


class EntrantNotFoundError(EntrantError, LookupError):
    """No entrant with the requested id exists."""

    def __init__(self, entrant_id: int) -> None:
        self.entrant_id = entrant_id
        super().__init__(f"Entrant with id = {entrant_id} not found")


class EntrantStoreError(EntrantError):
    """The store detected a broken internal invariant."""
