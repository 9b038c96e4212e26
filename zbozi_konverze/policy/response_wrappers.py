from __future__ import annotations

import json
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from zbozi_konverze.contracts.orders import is_empty_like
from zbozi_konverze.errors import ApplicationError

ACCEPTED_STATUS = 200


class ConversionErrorResponseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    status_message: Optional[Any] = Field(default=None, alias="statusMessage")
    raw: Dict[str, Any] = Field(default_factory=dict)


def raise_for_conversion_response(status_code: int, content: Union[bytes, str, None]) -> None:
    """
    Accept exactly HTTP 200; raise ApplicationError for anything else.

    The body of an accepted response is not inspected.
    """
    if status_code == ACCEPTED_STATUS:
        return

    error = parse_error_response(content)
    message = _message_text(error.status_message) if error is not None else None
    payload = error.raw if error is not None else {}

    if message:
        raise ApplicationError(
            f"Request was not accepted HTTP {status_code}: {message}",
            status_code=status_code,
            status_message=message,
            payload=payload,
        )
    raise ApplicationError(
        f"Request was not accepted (HTTP {status_code})",
        status_code=status_code,
        payload=payload,
    )


def parse_error_response(content: Union[bytes, str, None]) -> Optional[ConversionErrorResponseModel]:
    if not content:
        return None
    try:
        raw = json.loads(content)
    except (TypeError, ValueError):
        return None
    if not isinstance(raw, dict):
        return None
    try:
        return ConversionErrorResponseModel.model_validate({**raw, "raw": raw})
    except ValidationError:
        return None


def _message_text(value: Any) -> Optional[str]:
    if is_empty_like(value):
        return None
    text = str(value).strip()
    return text or None
