from __future__ import annotations
from typing import Any, Dict


class ProductServiceError(Exception):
    """Base for faults raised after a payload passed validation."""


class ConfigurationError(ProductServiceError):
    """Missing stage variable or table name."""


class StoreError(ProductServiceError):
    def __init__(self, table_name: str, message: str):
        super().__init__(f"{table_name}: {message}")
        self.table_name = table_name


def fault_summary(exc: BaseException) -> Dict[str, Any]:
    return {"type": type(exc).__name__, "message": str(exc)}
