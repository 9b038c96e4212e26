import json

import pytest

from zbozi_konverze.errors import ApplicationError
from zbozi_konverze.policy.response_wrappers import parse_error_response, raise_for_conversion_response


def test_200_is_accepted_regardless_of_body():
    raise_for_conversion_response(200, b"not json")
    raise_for_conversion_response(200, None)


@pytest.mark.parametrize("content", [None, b"", b"oops", b"[1, 2]", b'"text"', b"\xff\xfe"])
def test_unusable_body_gives_generic_error(content):
    with pytest.raises(ApplicationError) as exc:
        raise_for_conversion_response(503, content)
    assert str(exc.value) == "Request was not accepted (HTTP 503)"


def test_empty_status_message_gives_generic_error():
    with pytest.raises(ApplicationError) as exc:
        raise_for_conversion_response(400, b'{"statusMessage": ""}')
    assert str(exc.value) == "Request was not accepted (HTTP 400)"
    assert exc.value.payload == {"statusMessage": ""}


def test_status_message_is_included():
    with pytest.raises(ApplicationError) as exc:
        raise_for_conversion_response(403, '{"statusMessage": "Bad private key", "status": 403}')
    assert str(exc.value) == "Request was not accepted HTTP 403: Bad private key"
    assert exc.value.payload["status"] == 403


def test_parse_error_response_keeps_raw_payload():
    parsed = parse_error_response(b'{"statusMessage": "Invalid shop", "extra": 1}')
    assert parsed.status_message == "Invalid shop"
    assert parsed.raw == {"statusMessage": "Invalid shop", "extra": 1}


@pytest.mark.parametrize("status_message", ["0", 0, [], {}, False, "   "])
def test_empty_like_status_message_gives_generic_error(status_message):
    content = json.dumps({"statusMessage": status_message})
    with pytest.raises(ApplicationError) as exc:
        raise_for_conversion_response(400, content)
    assert str(exc.value) == "Request was not accepted (HTTP 400)"
    assert exc.value.status_message is None
