"""Shared router helpers: error handling and request validation."""

from .error_handling import error_response, handle_storefront_errors

__all__ = ["error_response", "handle_storefront_errors"]
