"""
Mock integration clients.

These clients build the exact payload a real submission would carry but never
call the Zbozi.cz API. They are used when:
- a shop is being integrated and has no sandbox credentials yet
- we want to exercise order export end-to-end without network access

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Rejections are simulated through the same response policy as production.

Switching to real:
Set ``client: real_http`` in config/conversion_config.yml (or ZBOZI_CLIENT).
"""

from .conversions import MockConversionClient

__all__ = ["MockConversionClient"]
