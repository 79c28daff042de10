"""
Storefront error handling utilities.

Provides a decorator that turns domain and remote failures into the
``{"error": true, "details": ...}`` envelope with the matching status code.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from storefront.core.exceptions import (
    NotFoundError,
    PaymentLinkError,
    RemoteServiceError,
    ValidationError,
)
from storefront.models.common import ErrorResponse
from storefront.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def error_response(status_code: int, details: Any) -> JSONResponse:
    """Build the uniform error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(details=details).model_dump(mode="json"),
    )


def handle_storefront_errors(func: F) -> F:
    """
    Decorator mapping storefront exceptions to error responses.

    - ValidationError (incl. seller not connected) -> 400
    - NotFoundError -> 404
    - RemoteServiceError -> 500 with the remote errors array
    - PaymentLinkError and anything unexpected -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except ValidationError as e:
            log_with_context(
                logger, logging.WARNING, "Invalid request", error=e.message, details=e.details
            )
            return error_response(status.HTTP_400_BAD_REQUEST, e.message)

        except NotFoundError as e:
            log_with_context(
                logger, logging.WARNING, "Resource not found", error=e.message, details=e.details
            )
            return error_response(status.HTTP_404_NOT_FOUND, e.message)

        except RemoteServiceError as e:
            log_with_context(
                logger,
                logging.ERROR,
                "Square request failed",
                error=e.message,
                operation=e.details.get("operation"),
            )
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e.public_details)

        except PaymentLinkError as e:
            log_with_context(
                logger, logging.ERROR, "Payment link rejected", error=e.message, details=e.details
            )
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)

        except Exception as e:
            log_exception_with_context(logger, "Unexpected failure in storefront operation", e)
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    return wrapper  # type: ignore
