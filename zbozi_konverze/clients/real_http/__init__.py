"""
Real HTTP integration clients.

These clients talk to the Zbozi.cz conversion endpoint over HTTPS.

Important:
- Must implement the same interface as the mock clients
- Must build payloads through zbozi_konverze/contracts/*

Switching:
The selection of mock vs real clients happens in zbozi_konverze/factory.py only.
"""

from .conversions import ConversionClient

__all__ = ["ConversionClient"]
