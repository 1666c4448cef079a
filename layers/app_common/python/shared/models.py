from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any

METAL_TYPES = ("gold", "silver", "platinum", "imitation", "alloy")
MEDIA_TYPES = ("video", "image")

@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

@dataclass
class MediaRef:
    media_type: str
    media_url: str

    def to_item(self) -> Dict[str, str]:
        return {"mediaType": self.media_type, "mediaURL": self.media_url}

@dataclass
class ProductRecord:
    product_id: str
    product_created_at: str
    product_name: str
    product_type: str
    product_description: str
    product_weight: float
    product_labour: float
    product_metal_type: str
    product_extra_charges: float
    product_media_urls: List[MediaRef] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], product_id: str, created_at: str) -> "ProductRecord":
        """Build a record from a payload that already passed `validate`."""
        return cls(
            product_id=product_id,
            product_created_at=created_at,
            product_name=payload["productName"],
            product_type=payload["productType"],
            product_description=payload["productDescription"],
            product_weight=payload["productWeight"],
            product_labour=payload["productLabour"],
            product_metal_type=payload["productMetalType"],
            product_extra_charges=payload["productExtraCharges"],
            product_media_urls=[
                MediaRef(media_type=m["mediaType"], media_url=m["mediaURL"])
                for m in payload["productMediaURLs"]
            ],
        )

    def to_item(self) -> Dict[str, Any]:
        return {
            "productName": self.product_name,
            "productType": self.product_type,
            "productDescription": self.product_description,
            "productWeight": self.product_weight,
            "productLabour": self.product_labour,
            "productMetalType": self.product_metal_type,
            "productExtraCharges": self.product_extra_charges,
            "productMediaURLs": [m.to_item() for m in self.product_media_urls],
            "productID": self.product_id,
            "productCreatedAt": self.product_created_at,
        }
