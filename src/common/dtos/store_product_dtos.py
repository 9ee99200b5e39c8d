"""Data Transfer Objects for store catalog products."""

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional

from src.purchase_domain.domain.entities.information import Information


@dataclass
class StoreProductDTO:
    """A single product entry as listed in a store catalog."""

    identifier: str
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[str] = None
    price_in_cents: Optional[int] = None
    price_currency_code: Optional[str] = None

    @classmethod
    def from_catalog_entry(cls, data: dict[str, Any]) -> "StoreProductDTO":
        """Creates StoreProductDTO from a catalog record, accepting camelCase and snake_case keys."""
        if not isinstance(data, dict):
            raise ValueError(f"Catalog entry must be an object, got {type(data).__name__}")

        identifier = _first_present(data, "identifier", "productId", "product_id")
        mapped_data = {
            "identifier": str(identifier) if identifier is not None else None,
            "title": _first_present(data, "title", "localName", "local_name"),
            "description": _first_present(data, "description", "localDescription", "local_description"),
            "price": _first_present(data, "price", "localPricing", "local_pricing"),
            "price_in_cents": _first_present(data, "priceInCents", "price_in_cents"),
            "price_currency_code": _first_present(data, "priceCurrencyCode", "price_currency_code", "currency"),
        }

        if not mapped_data["identifier"]:
            raise ValueError("Product identifier is required for a catalog entry")

        valid_keys = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in mapped_data.items() if k in valid_keys})

    def to_information(self) -> Information:
        return (
            Information.new_builder()
            .local_name(self.title)
            .local_description(self.description)
            .local_pricing(self.price)
            .price_in_cents(self.price_in_cents)
            .price_currency_code(self.price_currency_code)
            .build()
        )


def _first_present(data: dict[str, Any], *keys: str) -> Any:
    """Returns the value of the first key present in data, or None."""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None
