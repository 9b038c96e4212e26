"""Error kinds raised by the conversion client."""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class ConversionError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(ConversionError, ValueError):
    """Client was constructed with a missing shop id or private key."""


class ValidationError(ConversionError, ValueError):
    def __init__(self, message: str, *, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [message])


class ConnectivityError(ConversionError, IOError):
    """The HTTP transport could not complete the request."""


class ApplicationError(ConversionError):
    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        status_message: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status_message = status_message
        self.payload = payload or {}
