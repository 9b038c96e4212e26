"""
Contracts (data models).

This folder defines the request/response shapes of the Zbozi.cz conversion API:
- the order and cart item reported by the shop
- the HTTP request sent to the conversion endpoint

Both mock and real HTTP clients use these contracts, so a payload built in
development is byte-for-byte the payload sent in production.
"""

from .orders import (
    CartItem,
    Order,
    build_order_payload,
    is_empty_like,
    serialize_cart_item,
    validate_order,
)
from .requests import ConversionRequest, build_endpoint_url, encode_payload

__all__ = [
    "CartItem", "Order", "build_order_payload", "is_empty_like",
    "serialize_cart_item", "validate_order",
    "ConversionRequest", "build_endpoint_url", "encode_payload",
]
