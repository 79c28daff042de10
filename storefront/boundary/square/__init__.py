"""Square REST API boundary."""

from storefront.boundary.square.client import SquareClient, SquareClientFactory

__all__ = ["SquareClient", "SquareClientFactory"]
