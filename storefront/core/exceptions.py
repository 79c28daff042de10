"""
Exception hierarchy for the storefront application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class StorefrontException(Exception):
    """Base exception for all storefront application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(StorefrontException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = dict(details or {})
        if field:
            details["field"] = field
        super().__init__(message, details)


class SellerNotConnectedError(ValidationError):
    """Raised when an operation needs seller credentials and none are available."""


class NotFoundError(StorefrontException):
    """Raised when a locally resolvable resource does not exist."""


class PromoCodeNotFoundError(NotFoundError):
    """Raised when a promo code is not in the promo table."""

    def __init__(self, code: str) -> None:
        super().__init__("Invalid promo code", {"code": code})


class LineItemNotFoundError(NotFoundError):
    """Raised when an order has no line item with the requested uid."""

    def __init__(self, order_id: str, line_item_uid: str) -> None:
        super().__init__(
            "line item uid not found",
            {"order_id": order_id, "line_item_uid": line_item_uid},
        )


class PaymentLinkError(StorefrontException):
    """Raised when an order cannot be turned into a payment link."""


class RemoteServiceError(StorefrontException):
    """Base exception for failures talking to the payment platform."""

    @property
    def public_details(self) -> Any:
        """Value exposed to API callers in the error envelope."""
        return self.message


class SquareAPIError(RemoteServiceError):
    """Raised when the Square API answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        errors: list[dict[str, Any]] | None = None,
        operation: str | None = None,
    ) -> None:
        """
        Initialize Square API error.

        Args:
            status_code: HTTP status returned by Square
            errors: The ``errors`` array from the response body
            operation: Client operation that failed
        """
        self.status_code = status_code
        self.errors = errors or []
        details: dict[str, Any] = {"status_code": status_code}
        if operation:
            details["operation"] = operation
        codes = ", ".join(e.get("code", "UNKNOWN") for e in self.errors) or "no error body"
        super().__init__(f"Square API request failed ({status_code}): {codes}", details)

    @property
    def public_details(self) -> Any:
        return self.errors or self.message


class SquareTransportError(RemoteServiceError):
    """Raised when Square cannot be reached or the response is unreadable."""
