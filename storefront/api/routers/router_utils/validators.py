"""
Request validation utilities.

Presence and type rules for request bodies that Pydantic does not enforce,
so that each failure maps to a 400 with a readable message.

Dependencies: storefront.core, storefront.models
System role: Storefront request validation
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from storefront.core.exceptions import ValidationError
from storefront.core.promo_codes import DiscountType
from storefront.models.cart import AddLineItemRequest, ApplyDiscountRequest
from storefront.models.catalog import CreateItemRequest
from storefront.models.promo import CreatePromoCodeRequest

DISCOUNT_TYPES = {t.value for t in DiscountType}

# Square accepts up to 5 decimal places; whole part kept to 10 digits
MAX_QUANTITY_EXPONENT = 9
MAX_QUANTITY_DECIMALS = 5
QUANTITY_QUANTUM = Decimal(1).scaleb(-MAX_QUANTITY_DECIMALS)

FIXED_VALUE_MESSAGE = "value must be a whole number of minor units for FIXED discounts"


def is_number(value: Any) -> bool:
    """JSON number check; booleans and numeric strings do not count."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_create_item(request: CreateItemRequest) -> None:
    """
    Raises:
        ValidationError: If the name is missing or there are no variations
    """
    if not request.name or not request.variations:
        raise ValidationError("name and at least one variation are required")


def validate_promo_code(request: CreatePromoCodeRequest) -> None:
    """
    Raises:
        ValidationError: If code, type or numeric value is missing
    """
    if (
        not request.code
        or not request.code.strip()
        or request.type not in DISCOUNT_TYPES
        or not is_number(request.value)
    ):
        raise ValidationError("code, type(PERCENT|FIXED), value required")
    _require_whole_fixed_value(request.type, request.value)


def _require_whole_fixed_value(discount_type: str | None, value: Any) -> None:
    """FIXED amounts are minor units and must be whole."""
    if discount_type != DiscountType.FIXED.value or isinstance(value, int):
        return
    if not float(value).is_integer():
        raise ValidationError(FIXED_VALUE_MESSAGE, field="value")


def parse_quantity(quantity: Any) -> str:
    """
    Normalize a quantity to Square's decimal-string form.

    Accepts positive JSON numbers or numeric strings.

    Raises:
        ValidationError: If the quantity is missing, zero, negative or not numeric
    """
    if quantity is None or quantity == "" or isinstance(quantity, bool):
        raise ValidationError("quantity required", field="quantity")
    try:
        if isinstance(quantity, int):
            amount = Decimal(quantity)
        else:
            amount = Decimal(str(quantity).strip())
    except InvalidOperation:
        raise ValidationError("quantity must be a number", field="quantity")
    if not amount.is_finite() or amount <= 0:
        raise ValidationError("quantity must be greater than zero", field="quantity")
    if amount.adjusted() > MAX_QUANTITY_EXPONENT:
        raise ValidationError("quantity is too large", field="quantity")
    if amount != amount.quantize(QUANTITY_QUANTUM):
        raise ValidationError(
            f"quantity allows at most {MAX_QUANTITY_DECIMALS} decimal places", field="quantity"
        )
    return format(amount.quantize(QUANTITY_QUANTUM).normalize(), "f")


def validate_add_line_item(request: AddLineItemRequest) -> str:
    """
    Returns:
        str: Normalized quantity

    Raises:
        ValidationError: If variationId or quantity is missing
    """
    if not request.variation_id or request.quantity in (None, "", 0):
        raise ValidationError("variationId and quantity required")
    return parse_quantity(request.quantity)


def validate_discount(request: ApplyDiscountRequest) -> None:
    """
    A promo code wins; otherwise a direct discount needs name, type and value.

    Raises:
        ValidationError: If neither form is complete
    """
    if request.promo_code:
        return
    if not request.name or request.type not in DISCOUNT_TYPES or not is_number(request.value):
        raise ValidationError("promoCode or (name,type,value) required")
    _require_whole_fixed_value(request.type, request.value)


def require_order_id(order_id: str | None) -> str:
    if not order_id:
        raise ValidationError("orderId required", field="orderId")
    return order_id
