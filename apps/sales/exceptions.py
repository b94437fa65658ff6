"""
Typed failures raised by the sale commit.

Every failure aborts the whole sale with nothing persisted. Each class
carries a machine-readable ``code``, a recovery ``action`` hint for the
caller and the HTTP status the API maps it to.
"""

from rest_framework import status


class SaleCommitError(Exception):
    """Base class for sale commit failures."""

    code = "sale_error"
    action = "retry_later"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message=None):
        self.message = message or "Sale could not be committed."
        super().__init__(self.message)

    def as_dict(self):
        """Response body for the API."""
        return {"detail": self.message, "code": self.code, "action": self.action}


class ValidationError(SaleCommitError):
    """Raised when the sale request is malformed."""

    code = "validation_error"
    action = "fix_input"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors, message="Invalid sale request."):
        self.errors = list(errors)
        super().__init__(message)

    def as_dict(self):
        data = super().as_dict()
        data["errors"] = self.errors
        return data


class NotFoundError(SaleCommitError):
    """Raised when a referenced product or client does not exist."""

    code = "not_found"
    action = "refresh"
    status_code = status.HTTP_404_NOT_FOUND


class InsufficientStockError(SaleCommitError):
    """Raised when a product does not have enough stock for a line item."""

    code = "insufficient_stock"
    action = "refresh"
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, product_id, requested, available=None, product_name=None):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        label = product_name or product_id
        message = f"Insufficient stock for {label}: requested {requested}"
        if available is not None:
            message += f", available {available}"
        super().__init__(message)

    def as_dict(self):
        data = super().as_dict()
        data["product_id"] = str(self.product_id)
        data["requested"] = self.requested
        return data


class PersistenceError(SaleCommitError):
    """Raised when the database rejects or fails the transaction."""

    code = "persistence_error"
    action = "retry_later"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
