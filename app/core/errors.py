# app/core/errors.py


class ExpenseTrackerError(Exception):
    """Base class for errors surfaced to API clients as `{"error": ...}`."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(ExpenseTrackerError):
    """Required input is missing from the request body."""

    status_code = 400
    message = "Invalid request"


class NotFoundError(ExpenseTrackerError):
    status_code = 404
    message = "Transaction not found"


class StorageError(ExpenseTrackerError):
    """
    Any fault raised by the database layer. The underlying cause is logged
    where it happens; clients only ever see the generic message.
    """

    status_code = 500
    message = "Database error"
