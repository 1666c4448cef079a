from __future__ import annotations
import json
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
from .dynamo import DynamoProductStore, ProductStore
from .errors import ConfigurationError
from .http import _ok, validation_error, internal_error
from .logging import get_logger
from .models import ProductRecord
from .validation import validate

log = get_logger(__name__)

DEV_ENVIRONMENT = "DEV"

def _utc_now() -> datetime:
    return datetime.now(timezone.utc)

def _iso(ts: datetime) -> str:
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def extract_payload(event: Dict[str, Any]) -> Any:
    # mapping-template events carry the parsed body, proxy events a JSON string
    if "body-json" in event:
        return event["body-json"]
    body = event.get("body") or "{}"
    try:
        return json.loads(body)
    except Exception:
        return {}

def extract_environment(event: Dict[str, Any]) -> Optional[str]:
    stage_vars = event.get("stage-variables") or event.get("stageVariables") or {}
    return stage_vars.get("ENVIRONMENT")


class ProductCreator:
    """
    Validates a product payload and writes it to the DEV or PROD table.

    Table names come in at construction; the target is chosen per request
    from the ENVIRONMENT stage variable. Each call generates a fresh
    productID and productCreatedAt, so submitting the same payload twice
    stores two products.
    """

    def __init__(
        self,
        dev_table: str,
        prod_table: str,
        *,
        store_factory: Callable[[str], ProductStore] = DynamoProductStore,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.dev_table = dev_table
        self.prod_table = prod_table
        self.store_factory = store_factory
        self.id_factory = id_factory
        self.clock = clock

    def resolve_table(self, environment: Optional[str]) -> str:
        if not environment:
            raise ConfigurationError("ENVIRONMENT stage variable not defined.")
        table_name = self.dev_table if environment == DEV_ENVIRONMENT else self.prod_table
        if not table_name:
            raise ConfigurationError(f"No table name configured for environment {environment!r}.")
        return table_name

    def handle(self, event: Dict[str, Any]) -> Dict[str, Any]:
        payload = extract_payload(event)
        errors = validate(payload)
        if errors:
            log.info("rejected product payload: {}", [e.field for e in errors])
            return validation_error(errors)

        try:
            table_name = self.resolve_table(extract_environment(event))
            record = ProductRecord.from_payload(payload, self.id_factory(), _iso(self.clock()))
            result = self.store_factory(table_name).put(record)
        except Exception as e:
            log.exception("product write failed")
            return internal_error(e)

        log.info("stored product {} in {}", record.product_id, table_name)
        return _ok(result)
