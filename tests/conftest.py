"""Shared fixtures: the reference plays and invoice."""

import pytest

from theater.models import Invoice, PlayCatalog


@pytest.fixture
def plays_data():
    return {
        "hamlet": {"name": "Hamlet", "type": "tragedy"},
        "as-like": {"name": "As You Like It", "type": "comedy"},
        "othello": {"name": "Othello", "type": "tragedy"},
        "henry-v": {"name": "Henry V", "type": "history"},
        "john": {"name": "King John", "type": "history"},
        "richard-iii": {"name": "Richard III", "type": "history"},
        "pericles": {"name": "Pericles", "type": "pastoral"},
    }


@pytest.fixture
def invoice_data():
    return {
        "customer": "BigCo",
        "performances": [
            {"playID": "hamlet", "audience": 55},
            {"playID": "as-like", "audience": 35},
            {"playID": "othello", "audience": 40},
        ],
    }


@pytest.fixture
def catalog(plays_data):
    return PlayCatalog.from_dict(plays_data)


@pytest.fixture
def invoice(invoice_data):
    return Invoice.from_dict(invoice_data)


@pytest.fixture
def request_payload(invoice_data, plays_data):
    return {"invoice": invoice_data, "plays": plays_data}
