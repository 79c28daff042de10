"""
In-memory promo code table.

Maps upper-cased promo codes to discount rules. Lives for the lifetime of
the process; nothing is persisted.

Dependencies: storefront.core.exceptions
System role: Local discount lookup
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum

from storefront.core.exceptions import PromoCodeNotFoundError

logger = logging.getLogger(__name__)


class DiscountType(str, Enum):
    """Discount kinds. FIXED values are in the currency's minor units."""

    PERCENT = "PERCENT"
    FIXED = "FIXED"


@dataclass
class PromoRule:
    """Discount rule stored behind a promo code."""

    type: DiscountType
    value: float
    name: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["type"] = self.type.value
        return data


class PromoCodeStore:
    """Case-insensitive promo code table."""

    def __init__(self, seed: dict[str, PromoRule] | None = None) -> None:
        self._codes: dict[str, PromoRule] = {}
        for code, rule in (seed or {}).items():
            self._codes[normalize_code(code)] = rule

    def create(
        self,
        code: str,
        type: DiscountType,
        value: float,
        name: str | None = None,
    ) -> str:
        """
        Create or overwrite a promo code.

        Args:
            code: Promo code, stored upper-cased
            type: PERCENT or FIXED
            value: Percentage, or amount in minor units
            name: Display name (defaults to the upper-cased code)

        Returns:
            str: The normalized code
        """
        key = normalize_code(code)
        self._codes[key] = PromoRule(type=DiscountType(type), value=value, name=name or key)
        logger.info("Promo code saved", extra={"code": key, "discount_type": str(type)})
        return key

    def get(self, code: str) -> PromoRule:
        """
        Look up a promo code.

        Raises:
            PromoCodeNotFoundError: If the code is unknown
        """
        rule = self._codes.get(normalize_code(code))
        if rule is None:
            raise PromoCodeNotFoundError(normalize_code(code))
        return rule

    def __contains__(self, code: str) -> bool:
        return normalize_code(code) in self._codes

    def __len__(self) -> int:
        return len(self._codes)


def normalize_code(code: str) -> str:
    return code.strip().upper()


def default_promo_codes() -> dict[str, PromoRule]:
    """Promo codes available out of the box."""
    return {
        "WELCOME10": PromoRule(type=DiscountType.PERCENT, value=10, name="Welcome 10%"),
    }
