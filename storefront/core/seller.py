"""
Connected seller credentials.

A single mutable record holding the access token and default location of
the seller whose account scopes API calls. Read and overwritten without
locking.

Dependencies: storefront.observability.log_utils
System role: Multi-tenant credential routing state
"""

import logging
from dataclasses import dataclass

from storefront.observability.log_utils import mask_token

logger = logging.getLogger(__name__)


@dataclass
class ConnectedSeller:
    """Currently connected seller."""

    access_token: str | None = None
    location_id: str | None = None

    @property
    def is_connected(self) -> bool:
        return bool(self.access_token)

    def connect(
        self,
        access_token: str,
        location_id: str | None = None,
        fallback_location_id: str | None = None,
    ) -> None:
        """
        Replace the connected seller.

        The location falls back to the previously stored one, then to
        ``fallback_location_id``.
        """
        self.access_token = access_token
        self.location_id = location_id or self.location_id or fallback_location_id
        logger.info(
            "Connected seller updated",
            extra={"seller_token": mask_token(access_token), "location_id": self.location_id},
        )

    def masked_token(self) -> str | None:
        return mask_token(self.access_token)
