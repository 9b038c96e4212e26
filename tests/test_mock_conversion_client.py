import json
import threading

import pytest

from zbozi_konverze.clients.mocks.conversions import MockConversionClient
from zbozi_konverze.contracts.orders import Order
from zbozi_konverze.errors import ApplicationError, ConfigurationError, ValidationError


def test_mock_send_persists_redacted_request(order, tmp_path):
    client = MockConversionClient("1234", "secret", sandbox=True, output_root=tmp_path)

    client.send(order)

    written_files = list((tmp_path / "1234").glob("*.json"))
    assert len(written_files) == 1
    assert written_files[0].name.endswith("_2024-0001.json")

    document = json.loads(written_files[0].read_text(encoding="utf-8"))
    assert document["url"] == "https://sandbox.zbozi.cz/action/1234/conversion/backend"
    assert document["payload"]["PRIVATE_KEY"] == "***"
    assert document["payload"]["orderId"] == "2024-0001"
    assert document["simulated_status"] == 200
    assert "secret" not in written_files[0].read_text(encoding="utf-8")


def test_mock_keeps_sent_requests(order, tmp_path):
    client = MockConversionClient("1234", "secret", output_root=tmp_path)

    client.send(order)
    client.send(Order(id="2024-0002"))

    assert [r.payload()["orderId"] for r in client.sent_requests] == ["2024-0001", "2024-0002"]
    assert client.sent_requests[0].payload()["PRIVATE_KEY"] == "secret"


def test_mock_simulated_rejection_uses_response_policy(order, tmp_path):
    client = MockConversionClient(
        "1234", "secret", output_root=tmp_path,
        status_code=400, response_body={"statusMessage": "Invalid shop"},
    )

    with pytest.raises(ApplicationError) as exc:
        client.send(order)

    assert str(exc.value) == "Request was not accepted HTTP 400: Invalid shop"


def test_mock_simulated_rejection_with_plain_text_body(order, tmp_path):
    client = MockConversionClient("1234", "secret", output_root=tmp_path, status_code=500, response_body="boom")

    with pytest.raises(ApplicationError) as exc:
        client.send(order)

    assert str(exc.value) == "Request was not accepted (HTTP 500)"


def test_mock_validates_and_checks_credentials(tmp_path):
    with pytest.raises(ConfigurationError):
        MockConversionClient("", "secret", output_root=tmp_path)

    client = MockConversionClient("1234", "secret", output_root=tmp_path)
    with pytest.raises(ValidationError):
        client.send(Order(id=""))
    assert client.sent_requests == []
    assert not (tmp_path / "1234").exists()


@pytest.mark.asyncio
async def test_mock_send_async(order, tmp_path):
    client = MockConversionClient("1234", "secret", output_root=tmp_path)

    await client.send_async(order)

    assert len(client.sent_requests) == 1
    assert len(list((tmp_path / "1234").glob("*.json"))) == 1


@pytest.mark.asyncio
async def test_mock_send_async_writes_off_the_event_loop_thread(order, tmp_path):
    client = MockConversionClient("1234", "secret", output_root=tmp_path)
    threads = []
    original_write = client._write_mock_output

    def _recording_write(request):
        threads.append(threading.get_ident())
        return original_write(request)

    client._write_mock_output = _recording_write

    await client.send_async(order)

    assert len(threads) == 1
    assert threads[0] != threading.get_ident()
