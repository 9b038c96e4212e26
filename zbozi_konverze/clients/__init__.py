"""
Conversion clients.

- real_http/: sends orders to Zbozi.cz over HTTPS
- mocks/: same interface, no network, payloads persisted to disk
"""

from .mocks import MockConversionClient
from .real_http import ConversionClient

__all__ = ["ConversionClient", "MockConversionClient"]
