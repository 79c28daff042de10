"""
Square request payload builders.

Pure functions turning validated API input into bodies that mirror the
Square REST schema. No I/O happens here.

Dependencies: uuid, decimal, storefront.core
System role: Request shaping for catalog, order and checkout calls
"""

import uuid
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from storefront.core.exceptions import PaymentLinkError
from storefront.core.promo_codes import DiscountType

ORDER_SCOPE = "ORDER"


def new_idempotency_key() -> str:
    return str(uuid.uuid4())


def temporary_id() -> str:
    """Client-side catalog id; Square requires the leading ``#``."""
    return f"#{uuid.uuid4()}"


def compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in data.items() if value is not None}


def format_quantity(quantity: int | str | Decimal) -> str:
    """Square quantities are decimal strings."""
    return str(quantity)


def build_catalog_objects(
    name: str,
    variations: Iterable[Any],
    description: str | None = None,
    category_id: str | None = None,
    default_currency: str = "USD",
) -> list[dict[str, Any]]:
    """
    Build one ITEM plus one ITEM_VARIATION per variation.

    Args:
        name: Item name
        variations: Objects with name, price, currency and sku attributes
        description: Optional item description
        category_id: Optional category object id
        default_currency: Currency for prices given without one

    Returns:
        list[dict]: Catalog objects for a single upsert batch
    """
    item_id = temporary_id()
    objects: list[dict[str, Any]] = [
        {
            "type": "ITEM",
            "id": item_id,
            "item_data": compact(
                {"name": name, "description": description, "category_id": category_id}
            ),
        }
    ]
    for variation in variations:
        price_money = None
        if variation.price is not None:
            price_money = {
                "amount": int(variation.price),
                "currency": variation.currency or default_currency,
            }
        objects.append(
            {
                "type": "ITEM_VARIATION",
                "id": temporary_id(),
                "item_variation_data": compact(
                    {
                        "item_id": item_id,
                        "name": variation.name,
                        "pricing_type": "FIXED_PRICING",
                        "price_money": price_money,
                        "sku": variation.sku,
                    }
                ),
            }
        )
    return objects


def build_line_item(variation_id: str, quantity: int | str | Decimal) -> dict[str, Any]:
    """Line item priced from the catalog variation."""
    return {
        "uid": str(uuid.uuid4()),
        "quantity": format_quantity(quantity),
        "catalog_object_id": variation_id,
    }


def build_order_discount(
    name: str,
    discount_type: DiscountType,
    value: float,
    currency: str,
) -> dict[str, Any]:
    """
    Build an ORDER-scoped discount.

    PERCENT discounts carry ``percentage`` as a string; FIXED discounts carry
    ``amount_money`` in minor units.
    """
    discount: dict[str, Any] = {"uid": str(uuid.uuid4()), "name": name, "scope": ORDER_SCOPE}
    if DiscountType(discount_type) is DiscountType.PERCENT:
        discount["percentage"] = _format_percentage(value)
    else:
        discount["amount_money"] = {"amount": int(value), "currency": currency}
    return discount


def _format_percentage(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def order_currency(order: dict[str, Any], default: str) -> str:
    return (order.get("total_money") or {}).get("currency") or default


def build_payment_link_line_items(
    order: dict[str, Any],
    default_currency: str,
) -> list[dict[str, Any]]:
    """
    Rebuild an order's line items as quick-pay items for a payment link.

    Payment links cannot reference an existing order, so each line becomes
    ``{name, quantity, base_price_money}``. The unit price is the line's base
    price, or its total divided by quantity when no base price is present.

    Raises:
        PaymentLinkError: If a line's unit price cannot be inferred
    """
    fallback_currency = order_currency(order, default_currency)
    items = []
    for line in order.get("line_items") or []:
        quantity = line.get("quantity") or "1"
        base_price = line.get("base_price_money") or {}
        price = base_price.get("amount")
        if price is None:
            price = _unit_price_from_total(line, quantity)
        if not price:
            raise PaymentLinkError(
                "Cannot infer line item price for payment link.",
                {"line_item_uid": line.get("uid")},
            )
        items.append(
            {
                "name": line.get("name") or "Item",
                "quantity": quantity,
                "base_price_money": {
                    "amount": int(price),
                    "currency": base_price.get("currency") or fallback_currency,
                },
            }
        )
    return items


def _unit_price_from_total(line: dict[str, Any], quantity: str) -> int | None:
    total = (line.get("total_money") or {}).get("amount")
    if not total:
        return None
    try:
        units = Decimal(quantity)
    except InvalidOperation:
        return None
    if units <= 0:
        return None
    return int(Decimal(total) // units)
