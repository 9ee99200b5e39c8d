"""Main application entry point for product information lookups."""

import logging
import sys

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import CatalogError
from src.common.logger_config import setup_logging
from src.purchase_domain.application.information_service import InformationApplicationService
from src.purchase_domain.domain.entities.information import Information
from src.purchase_domain.domain.repositories.purchase_manager import IPurchaseManager
from src.purchase_domain.infrastructure.purchase_managers.json_catalog_purchase_manager import (
    JsonCatalogPurchaseManager,
)
from src.purchase_domain.infrastructure.purchase_managers.null_purchase_manager import NullPurchaseManager

logger = logging.getLogger(__name__)


def setup_purchase_manager(identifiers: list[str]) -> tuple[IPurchaseManager, list[str]]:
    """
    Wires up the catalog purchase manager.

    Falls back to NullPurchaseManager when the catalog cannot be loaded. When no
    identifiers were requested, every catalog product is listed.
    """
    catalog_manager = JsonCatalogPurchaseManager(settings.PRODUCT_CATALOG_PATH)
    try:
        catalog_identifiers = catalog_manager.identifiers()
    except CatalogError as e:
        logger.error(f"{e}. Product information will be unavailable.")
        return NullPurchaseManager(), identifiers

    return catalog_manager, identifiers or catalog_identifiers


def print_information(identifier: str, information: Information) -> None:
    if information == Information.UNAVAILABLE:
        print(f"  {identifier}: information unavailable")
        return
    print(f"  {identifier}: {information}")
    if information.price_in_cents is not None or information.price_currency_code is not None:
        print(f"    Price in cents: {information.price_in_cents}, Currency: {information.price_currency_code}")


def main(argv: list[str]) -> int:
    setup_logging()

    purchase_manager, identifiers = setup_purchase_manager(argv)
    if not identifiers:
        print("No products to look up.")
        return 0

    information_service = InformationApplicationService(purchase_manager=purchase_manager)

    print(f"\n--- Product information ({purchase_manager.store_name()}) ---")
    results = information_service.get_information_for(identifiers)
    for identifier, information in results.items():
        print_information(identifier, information)

    unavailable = [identifier for identifier, information in results.items() if information == Information.UNAVAILABLE]
    if unavailable:
        print(f"\n{len(unavailable)} of {len(results)} products have no information.")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
