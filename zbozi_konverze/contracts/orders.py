"""
Order contract: the order and cart item shapes reported to Zbozi.cz,
plus validation and payload helpers.

Optional fields are omitted from the payload when they are empty-like.
The receiving service relies on absent keys rather than nulls or zeros,
so a unit price or quantity of 0 is never sent.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

# Decimal amounts go on the wire as JSON numbers: integral values as ints,
# fractional values through float (exact up to 15 significant digits).
Number = Union[int, float, Decimal]


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CartItem:
    id: Optional[str] = None
    name: Optional[str] = None
    unit_price: Optional[Number] = None
    quantity: Optional[Number] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CartItem":
        return cls(
            id=_pick(data, "id", "itemId"),
            name=_pick(data, "name", "productName"),
            unit_price=_pick(data, "unit_price", "unitPrice"),
            quantity=_pick(data, "quantity"),
        )


@dataclass(frozen=True)
class Order:
    id: Optional[str] = None
    email: Optional[str] = None
    delivery_type: Optional[str] = None
    delivery_price: Optional[Number] = None
    payment_type: Optional[str] = None
    other_costs: Optional[Number] = None
    cart_items: Tuple[CartItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # accept any sequence but keep the stored value immutable
        object.__setattr__(self, "cart_items", tuple(self.cart_items or ()))

    def with_cart_item(self, item: CartItem) -> "Order":
        """Return a copy of this order with ``item`` appended to the cart."""
        return replace(self, cart_items=self.cart_items + (item,))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Order":
        raw_items = _pick(data, "cart_items", "cartItems", "cart") or []
        return cls(
            id=_pick(data, "id", "orderId"),
            email=_pick(data, "email"),
            delivery_type=_pick(data, "delivery_type", "deliveryType"),
            delivery_price=_pick(data, "delivery_price", "deliveryPrice"),
            payment_type=_pick(data, "payment_type", "paymentType"),
            other_costs=_pick(data, "other_costs", "otherCosts"),
            cart_items=tuple(
                item if isinstance(item, CartItem) else CartItem.from_dict(item)
                for item in raw_items
            ),
        )


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def is_empty_like(value: Any) -> bool:
    """
    Return True when ``value`` counts as absent for the conversion payload.

    None, False, numeric zero, "", "0" and empty collections are absent.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (int, float, Decimal)):
        return value == 0
    if isinstance(value, str):
        return value == "" or value == "0"
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def validate_order(order: Order) -> List[str]:
    """
    Return a list of validation errors.
    Empty list means the order can be submitted.
    """
    errors: List[str] = []

    if is_empty_like(order.id):
        errors.append("Missing order code")

    return errors


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------

_ORDER_OPTIONAL_FIELDS: Sequence[Tuple[str, str]] = (
    ("delivery_type", "deliveryType"),
    ("delivery_price", "deliveryPrice"),
    ("payment_type", "paymentType"),
    ("other_costs", "otherCosts"),
)

_CART_ITEM_FIELDS: Sequence[Tuple[str, str]] = (
    ("id", "itemId"),
    ("name", "productName"),
    ("unit_price", "unitPrice"),
    ("quantity", "quantity"),
)


def serialize_cart_item(item: CartItem) -> Dict[str, Any]:
    entry: Dict[str, Any] = {}
    for attr, key in _CART_ITEM_FIELDS:
        value = getattr(item, attr)
        if not is_empty_like(value):
            entry[key] = value
    return entry


def build_order_payload(order: Order, *, private_key: str, sandbox: bool) -> Dict[str, Any]:
    """Map an order onto the JSON object expected by the conversion endpoint."""
    data: Dict[str, Any] = {
        "PRIVATE_KEY": private_key,
        "sandbox": bool(sandbox),
        "orderId": order.id,
        "email": order.email,
    }

    for attr, key in _ORDER_OPTIONAL_FIELDS:
        value = getattr(order, attr)
        if not is_empty_like(value):
            data[key] = value

    if order.cart_items:
        data["cart"] = [serialize_cart_item(item) for item in order.cart_items]

    return data


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None
