from __future__ import annotations
import json
from decimal import Decimal
from typing import Any, Dict, List
from .errors import fault_summary
from .models import ValidationError

def _to_jsonable(x):
    if isinstance(x, list):  return [_to_jsonable(v) for v in x]
    if isinstance(x, dict):  return {k: _to_jsonable(v) for k, v in x.items()}
    if isinstance(x, Decimal):
        return int(x) if x == x.to_integral_value() else float(x)
    return x

def _ok(b, c=200):
    return {"statusCode": c, "headers": {"Content-Type": "application/json"},
            "body": json.dumps(_to_jsonable(b), ensure_ascii=False, default=str)}

def validation_error(errors: List[ValidationError]) -> Dict[str, Any]:
    return _ok({
        "code": "VALIDATION_ERROR",
        "message": "Validation failed. See details for specific errors.",
        "details": [e.to_dict() for e in errors],
    }, 400)

def internal_error(exc: BaseException) -> Dict[str, Any]:
    return _ok({
        "code": "INTERNAL_ERROR",
        "message": f"Internal Error. See details for specific errors. {exc}",
        "details": fault_summary(exc),
    }, 500)
