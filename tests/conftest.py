"""Pytest fixtures for conversion client tests."""

import json

import httpx
import pytest

from zbozi_konverze.contracts.orders import CartItem, Order


class RecordingTransport:
    """httpx handler that answers with a fixed response and keeps every request."""

    def __init__(self, status_code=200, body=b""):
        self.status_code = status_code
        self.body = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body)


@pytest.fixture
def order():
    return Order(
        id="2024-0001",
        email="buyer@example.com",
        delivery_type="PPL",
        delivery_price=99,
        payment_type="card",
        other_costs=15.5,
        cart_items=[
            CartItem(id="A1", name="Widget", unit_price=9.99, quantity=2),
            CartItem(id="B2", name="Gadget", unit_price=120, quantity=1),
        ],
    )


@pytest.fixture
def make_http_client():
    """Build an httpx.Client backed by a RecordingTransport."""
    clients = []

    def _make(status_code=200, body=b""):
        recorder = RecordingTransport(status_code, body)
        client = httpx.Client(transport=httpx.MockTransport(recorder))
        clients.append(client)
        return client, recorder

    yield _make
    for client in clients:
        client.close()
