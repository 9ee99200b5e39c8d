"""Purchase manager backed by a local JSON product catalog."""

import json
import logging
from typing import Optional

from src.common.dtos.store_product_dtos import StoreProductDTO
from src.common.exceptions.custom_exceptions import CatalogError
from src.purchase_domain.domain.entities.information import Information
from src.purchase_domain.domain.repositories.purchase_manager import IPurchaseManager

logger = logging.getLogger(__name__)


class JsonCatalogPurchaseManager(IPurchaseManager):
    def __init__(self, catalog_path: str) -> None:
        self.catalog_path = catalog_path
        self._products: Optional[dict[str, StoreProductDTO]] = None

    def store_name(self) -> str:
        return "json-catalog"

    def get_information(self, identifier: str) -> Information:
        product = self._load_catalog().get(identifier)
        if product is None:
            logger.warning(f"Product '{identifier}' not found in catalog {self.catalog_path}")
            return Information.UNAVAILABLE
        return product.to_information()

    def identifiers(self) -> list[str]:
        """Product identifiers in catalog order."""
        return list(self._load_catalog().keys())

    def _load_catalog(self) -> dict[str, StoreProductDTO]:
        """Reads the catalog file on first use and caches the parsed products."""
        if self._products is not None:
            return self._products

        try:
            with open(self.catalog_path, "r", encoding="utf-8") as f:
                catalog_data = json.load(f)
        except FileNotFoundError as e:
            raise CatalogError(f"Product catalog not found at {self.catalog_path}", e)
        except OSError as e:
            raise CatalogError(f"Product catalog could not be read from {self.catalog_path}", e)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CatalogError(f"Error decoding product catalog from {self.catalog_path}", e)

        # Handle different JSON structures
        if isinstance(catalog_data, dict) and "products" in catalog_data:
            entries = catalog_data["products"]
        elif isinstance(catalog_data, list):
            entries = catalog_data
        else:
            raise CatalogError(f"Invalid product catalog format in {self.catalog_path}")

        if not isinstance(entries, list):
            raise CatalogError(f"Product list in {self.catalog_path} is not a list")

        products: dict[str, StoreProductDTO] = {}
        for entry in entries:
            try:
                product = StoreProductDTO.from_catalog_entry(entry)
            except ValueError as e:
                logger.error(f"Skipping catalog entry: {e}")
                continue
            if product.identifier in products:
                logger.warning(f"Duplicate product '{product.identifier}' in catalog, keeping the last entry")
            products[product.identifier] = product

        logger.info(f"Loaded {len(products)} products from {self.catalog_path}")
        self._products = products
        return products
