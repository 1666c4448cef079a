"""Shared fixtures: an in-memory product store and a deterministic creator."""

import itertools
from datetime import datetime, timezone

import pytest

from shared.product_handler import ProductCreator


class FakeStore:
    """Records every put per table, like a DynamoDB table that never fails."""

    def __init__(self, tables, table_name, fail_with=None):
        self.tables = tables
        self.table_name = table_name
        self.fail_with = fail_with

    def put(self, record):
        if self.fail_with is not None:
            raise self.fail_with
        self.tables.setdefault(self.table_name, []).append(record.to_item())
        return {}


@pytest.fixture()
def fake_store():
    return FakeStore


@pytest.fixture()
def tables():
    return {}


@pytest.fixture()
def valid_payload():
    return {
        "productName": "Ring",
        "productType": "Jewelry",
        "productDescription": "Gold ring",
        "productWeight": 5,
        "productLabour": 2,
        "productMetalType": "gold",
        "productExtraCharges": 0,
        "productMediaURLs": [{"mediaType": "image", "mediaURL": "http://x/y.png"}],
    }


@pytest.fixture()
def fixed_clock():
    return lambda: datetime(2024, 5, 1, 12, 30, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture()
def creator(tables, fixed_clock):
    counter = itertools.count(1)
    return ProductCreator(
        "products-dev",
        "products-prod",
        store_factory=lambda name: FakeStore(tables, name),
        id_factory=lambda: f"prd-{next(counter)}",
        clock=fixed_clock,
    )


@pytest.fixture()
def make_event():
    """Build a mapping-template event; environment=None leaves out stage variables."""

    def _make(payload, environment="DEV"):
        event = {"body-json": payload}
        if environment is not None:
            event["stage-variables"] = {"ENVIRONMENT": environment}
        return event

    return _make
