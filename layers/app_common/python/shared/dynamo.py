from __future__ import annotations
from decimal import Decimal
from typing import Dict, Any, Protocol
from botocore.exceptions import BotoCoreError, ClientError
from .aws import dynamodb_resource
from .errors import StoreError
from .models import ProductRecord

class ProductStore(Protocol):
    def put(self, record: ProductRecord) -> Dict[str, Any]: ...

def _to_dynamo(x):
    # DynamoDB rejects Python floats
    if isinstance(x, list):  return [_to_dynamo(v) for v in x]
    if isinstance(x, dict):  return {k: _to_dynamo(v) for k, v in x.items()}
    if isinstance(x, float): return Decimal(str(x))
    return x

class DynamoProductStore:
    def __init__(self, table_name: str, table=None):
        self.table_name = table_name
        self._table = table

    @property
    def table(self):
        if self._table is None:
            self._table = dynamodb_resource().Table(self.table_name)
        return self._table

    def put(self, record: ProductRecord) -> Dict[str, Any]:
        try:
            return self.table.put_item(Item=_to_dynamo(record.to_item()), ReturnValues="NONE")
        except ClientError as e:
            err = e.response.get("Error", {})
            raise StoreError(self.table_name, f"{err.get('Code', 'ClientError')}: {err.get('Message', e)}") from e
        except BotoCoreError as e:
            raise StoreError(self.table_name, str(e)) from e
