"""Mock conversion client.

Builds the same request as the real client, persists it under the
project-level ``conversion_mocks`` folder (grouped by shop) and answers with a
configurable simulated response instead of calling Zbozi.cz.
"""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from zbozi_konverze.clients.real_http.conversions import ConversionClient
from zbozi_konverze.contracts.requests import ConversionRequest

logger = logging.getLogger(__name__)


class MockConversionClient(ConversionClient):
    """Conversion client that never leaves the machine."""

    def __init__(
        self,
        shop_id: str,
        private_key: str,
        sandbox: bool = False,
        *,
        output_root: Optional[Path] = None,
        status_code: int = 200,
        response_body: Union[Dict[str, Any], str, None] = None,
    ) -> None:
        super().__init__(shop_id, private_key, sandbox)
        self.output_root = Path(output_root) if output_root is not None else self._default_output_root()
        self.status_code = status_code
        self.response_body = response_body
        self.sent_requests: List[ConversionRequest] = []

    def _dispatch(self, request: ConversionRequest) -> Tuple[int, bytes]:
        self.sent_requests.append(request)
        output_path = self._write_mock_output(request)
        logger.info("[MOCK] Conversion stored at %s (HTTP %s)", output_path, self.status_code)
        return self.status_code, self._response_content()

    async def _dispatch_async(self, request: ConversionRequest) -> Tuple[int, bytes]:
        return await asyncio.to_thread(self._dispatch, request)

    def _response_content(self) -> bytes:
        if self.response_body is None:
            return b""
        if isinstance(self.response_body, str):
            return self.response_body.encode("utf-8")
        return json.dumps(self.response_body).encode("utf-8")

    def _write_mock_output(self, request: ConversionRequest) -> Path:
        shop_dir = self.output_root / _safe_name(self.shop_id)
        shop_dir.mkdir(parents=True, exist_ok=True)

        payload = request.redacted_payload()
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        file_path = shop_dir / f"{timestamp}_{_safe_name(payload.get('orderId'))}.json"

        output_document = {
            "created_at": datetime.now(timezone.utc).isoformat(),
            "method": request.method,
            "url": request.url,
            "headers": request.headers,
            "payload": payload,
            "simulated_status": self.status_code,
        }
        file_path.write_text(json.dumps(output_document, indent=2, default=str), encoding="utf-8")
        return file_path

    @staticmethod
    def _default_output_root() -> Path:
        return Path(__file__).resolve().parents[3] / "conversion_mocks"


def _safe_name(value: Any) -> str:
    return str(value or "unknown").replace("/", "_").replace("\\", "_")
