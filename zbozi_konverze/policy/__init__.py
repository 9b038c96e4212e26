"""
Response policy.

Decides whether a conversion-endpoint response counts as accepted and turns
rejections into ApplicationError. Shared by the real and mock clients.
"""

from .response_wrappers import (
    ConversionErrorResponseModel,
    parse_error_response,
    raise_for_conversion_response,
)

__all__ = ["ConversionErrorResponseModel", "parse_error_response", "raise_for_conversion_response"]
