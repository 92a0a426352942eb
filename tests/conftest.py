"""Pytest fixtures for the Mollie client tests."""

import json

import pytest

from mollie_api.client import MollieClient
from mollie_api.transport import RawResponse


class FakeTransport:
    """Records every request and answers from a queue of canned responses."""

    def __init__(self):
        self.requests = []
        self.responses = []
        self.error = None
        self.closed = False

    def queue(self, status_code, body=""):
        if not isinstance(body, str):
            body = json.dumps(body)
        self.responses.append(RawResponse(status_code=status_code, body=body))

    async def send(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    async def aclose(self):
        self.closed = True


def _payment_payload(method="ideal", **overrides):
    payload = {
        "resource": "payment",
        "id": "tr_WDqYK6vllg",
        "mode": "test",
        "createdDatetime": "2018-03-20T09:13:37.0Z",
        "status": "paid",
        "paidDatetime": "2018-03-20T09:14:37.0Z",
        "amount": "35.07",
        "amountRefunded": "0.00",
        "amountRemaining": "35.07",
        "description": "Order 33",
        "method": method,
        "metadata": {"order_id": "33"},
        "locale": "nl",
        "profileId": "pfl_QkEhN94Ba",
        "links": {
            "paymentUrl": "https://www.mollie.com/payscreen/select-method/WDqYK6vllg",
            "redirectUrl": "https://webshop.example.org/order/33/",
            "webhookUrl": "https://webshop.example.org/payments/webhook/",
        },
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def payment_payload():
    """Factory for a paid test-mode payment body; override any wire field."""
    return _payment_payload


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return MollieClient("test_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM", transport=transport)
