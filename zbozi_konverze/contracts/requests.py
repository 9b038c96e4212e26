"""
Request contract for the conversion endpoint.

``ConversionRequest`` is what the client hands to the transport. Callers that
ship conversions through their own HTTP stack can build one and send it
themselves.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict

import httpx

PRODUCTION_HOST = "www.zbozi.cz"
SANDBOX_HOST = "sandbox.zbozi.cz"
REDACTED = "***"


@dataclass(frozen=True)
class ConversionRequest:
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    def payload(self) -> Dict[str, Any]:
        return json.loads(self.body) if self.body else {}

    def redacted_payload(self) -> Dict[str, Any]:
        """Payload safe for logs and mock output (private key masked)."""
        data = self.payload()
        if "PRIVATE_KEY" in data:
            data["PRIVATE_KEY"] = REDACTED
        return data

    def to_httpx(self) -> httpx.Request:
        return httpx.Request(
            self.method,
            self.url,
            headers=self.headers,
            content=self.body.encode("utf-8"),
        )


def build_endpoint_url(shop_id: str, sandbox: bool) -> str:
    # shop_id goes into the path as given; existing shop ids must keep working
    host = SANDBOX_HOST if sandbox else PRODUCTION_HOST
    return f"https://{host}/action/{shop_id}/conversion/backend"


def encode_payload(data: Dict[str, Any]) -> str:
    return json.dumps(data, default=_json_default)


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        # whole amounts stay exact; fractional ones are exact up to 15 significant digits
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
