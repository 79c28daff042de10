"""
Tenant credential routing.

Decides which access token and location scope each remote call: the
connected seller when one is set, otherwise the platform account.

Dependencies: storefront.boundary.square, storefront.core.seller, storefront.configs
System role: Multi-tenant credential resolution
"""

import logging

from storefront.boundary.square.client import SquareClient, SquareClientFactory
from storefront.core.exceptions import SellerNotConnectedError
from storefront.core.seller import ConnectedSeller

logger = logging.getLogger(__name__)

SELLER_REQUIRED_MESSAGE = "Set seller with /api/set"


class TenantRouter:
    """Resolve credentials and locations for outbound calls."""

    def __init__(
        self,
        factory: SquareClientFactory,
        seller: ConnectedSeller,
        default_location_id: str | None = None,
        require_connected_seller: bool = False,
    ) -> None:
        """
        Initialize router.

        Args:
            factory: Square client factory
            seller: Connected seller record (shared, mutable)
            default_location_id: Platform location from settings
            require_connected_seller: Refuse store calls until a seller is set
        """
        self.factory = factory
        self.seller = seller
        self.default_location_id = default_location_id
        self.require_connected_seller = require_connected_seller

    def ensure_seller(self) -> None:
        """
        Raises:
            SellerNotConnectedError: If a seller is required and none is set
        """
        if self.require_connected_seller and not self.seller.is_connected:
            raise SellerNotConnectedError(SELLER_REQUIRED_MESSAGE)

    def store_client(self) -> SquareClient:
        """
        Client for catalog and cart operations.

        Uses the connected seller, falling back to the platform token.
        """
        self.ensure_seller()
        token = self.seller.access_token or self.factory.platform_token
        if not token:
            raise SellerNotConnectedError(
                f"No Square credentials configured. {SELLER_REQUIRED_MESSAGE} "
                "or configure SQUARE_ACCESS_TOKEN"
            )
        return self.factory.for_token(token)

    def checkout_client(self, seller_token: str | None = None) -> SquareClient:
        """
        Client for payment links, which must run on the seller's account.

        Args:
            seller_token: Token from the request; the connected seller is used otherwise
        """
        self.ensure_seller()
        return self.factory.for_token(seller_token or self.seller.access_token)

    def resolve_location(self, *candidates: str | None) -> str | None:
        """First non-empty of the candidates, the seller location, then the default."""
        for location_id in (*candidates, self.seller.location_id, self.default_location_id):
            if location_id:
                return location_id
        return None
