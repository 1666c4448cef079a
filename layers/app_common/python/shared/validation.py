from __future__ import annotations
from typing import Any, List, Mapping
from .models import ValidationError, METAL_TYPES, MEDIA_TYPES

MSG_NAME = "ProductName must be between 1 and 100 characters."
MSG_TYPE = "ProductType must be between 1 and 50 characters."
MSG_DESCRIPTION = "ProductDescription must be between 1 and 500 characters."
MSG_WEIGHT = "ProductWeight must be a non-negative number."
MSG_LABOUR = "ProductLabour must be a non-negative number."
MSG_METAL = "Invalid ProductMetalType. Choose from gold, silver, platinum, imitation or alloy."
MSG_EXTRA = "ProductExtraCharges must be a non-negative number."
MSG_MEDIA = "Invalid ProductMediaURLs. Check the format of mediaType and mediaURL."

def _text_between(v: Any, lo: int, hi: int) -> bool:
    return isinstance(v, str) and lo <= len(v) <= hi

def _non_negative(v: Any) -> bool:
    # bool is an int subclass; NaN fails the comparison
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    return v >= 0

def _media_ref_ok(m: Any) -> bool:
    return (
        isinstance(m, Mapping)
        and m.get("mediaType") in MEDIA_TYPES
        and _text_between(m.get("mediaURL"), 1, 255)
    )

def validate(data: Any) -> List[ValidationError]:
    """
    Check a product payload and return every field violation, in field order.
    An empty list means the payload can be written. Never raises; anything
    that is not a mapping is checked as an empty payload.
    """
    d = data if isinstance(data, Mapping) else {}
    errors: List[ValidationError] = []

    if not _text_between(d.get("productName"), 1, 100):
        errors.append(ValidationError("productName", MSG_NAME))

    if not _text_between(d.get("productType"), 1, 50):
        errors.append(ValidationError("productType", MSG_TYPE))

    if not _text_between(d.get("productDescription"), 1, 500):
        errors.append(ValidationError("productDescription", MSG_DESCRIPTION))

    if not _non_negative(d.get("productWeight")):
        errors.append(ValidationError("productWeight", MSG_WEIGHT))

    if not _non_negative(d.get("productLabour")):
        errors.append(ValidationError("productLabour", MSG_LABOUR))

    metal = d.get("productMetalType")
    if not isinstance(metal, str) or metal not in METAL_TYPES:
        errors.append(ValidationError("productMetalType", MSG_METAL))

    if not _non_negative(d.get("productExtraCharges")):
        errors.append(ValidationError("productExtraCharges", MSG_EXTRA))

    # one aggregate error for the whole list
    media = d.get("productMediaURLs")
    if not isinstance(media, list) or not all(_media_ref_ok(m) for m in media):
        errors.append(ValidationError("productMediaURLs", MSG_MEDIA))

    return errors
