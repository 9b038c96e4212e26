"""
Zbozi.cz conversion client.

Reports completed orders ("conversions") to the Zbozi.cz shopping-comparison
service so the shop's conversion statistics stay accurate.

Key rule:
- Application code MUST NOT build conversion payloads by hand.
- Build an Order, then hand it to a client from get_conversion_client().

Switching implementations:
- Mock vs real HTTP client is selected in ONE place (zbozi_konverze/factory.py).
"""

from .clients.mocks.conversions import MockConversionClient
from .clients.real_http.conversions import ConversionClient
from .contracts.orders import CartItem, Order, is_empty_like, validate_order
from .contracts.requests import ConversionRequest
from .errors import (
    ApplicationError,
    ConfigurationError,
    ConnectivityError,
    ConversionError,
    ValidationError,
)
from .factory import get_conversion_client
from .utils.config_loader import ConversionConfig, load_conversion_config

__all__ = [
    # contracts
    "CartItem", "Order", "ConversionRequest", "is_empty_like", "validate_order",
    # clients
    "ConversionClient", "MockConversionClient", "get_conversion_client",
    # config
    "ConversionConfig", "load_conversion_config",
    # errors
    "ConversionError", "ConfigurationError", "ValidationError",
    "ConnectivityError", "ApplicationError",
]
