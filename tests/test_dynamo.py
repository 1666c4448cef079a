"""Tests for the DynamoDB product store."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from shared.dynamo import DynamoProductStore
from shared.errors import StoreError
from shared.models import MediaRef, ProductRecord


@pytest.fixture()
def record():
    return ProductRecord(
        product_id="prd-1",
        product_created_at="2024-05-01T12:30:00.123Z",
        product_name="Ring",
        product_type="Jewelry",
        product_description="Gold ring",
        product_weight=5.5,
        product_labour=2,
        product_metal_type="gold",
        product_extra_charges=0.1,
        product_media_urls=[MediaRef("image", "http://x/y.png")],
    )


def test_put_writes_single_item_without_return_values(record):
    table = MagicMock()
    table.put_item.return_value = {"ResponseMetadata": {"HTTPStatusCode": 200}}
    store = DynamoProductStore("products-dev", table=table)

    result = store.put(record)

    assert result == {"ResponseMetadata": {"HTTPStatusCode": 200}}
    table.put_item.assert_called_once()
    kwargs = table.put_item.call_args.kwargs
    assert kwargs["ReturnValues"] == "NONE"
    item = kwargs["Item"]
    assert item["productID"] == "prd-1"
    assert item["productWeight"] == Decimal("5.5")
    assert item["productExtraCharges"] == Decimal("0.1")
    assert item["productLabour"] == 2
    assert item["productMediaURLs"] == [{"mediaType": "image", "mediaURL": "http://x/y.png"}]


def test_client_error_becomes_store_error(record):
    table = MagicMock()
    table.put_item.side_effect = ClientError(
        {"Error": {"Code": "ResourceNotFoundException", "Message": "Requested resource not found"}},
        "PutItem",
    )
    store = DynamoProductStore("products-prod", table=table)

    with pytest.raises(StoreError) as exc_info:
        store.put(record)

    assert exc_info.value.table_name == "products-prod"
    assert str(exc_info.value) == "products-prod: ResourceNotFoundException: Requested resource not found"


def test_connection_error_becomes_store_error(record):
    table = MagicMock()
    table.put_item.side_effect = EndpointConnectionError(endpoint_url="https://dynamodb.local")
    store = DynamoProductStore("products-dev", table=table)

    with pytest.raises(StoreError, match="products-dev"):
        store.put(record)
