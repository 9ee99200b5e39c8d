"""Purchase manager for stores without product information support."""

import logging

from src.purchase_domain.domain.entities.information import Information
from src.purchase_domain.domain.repositories.purchase_manager import IPurchaseManager

logger = logging.getLogger(__name__)


class NullPurchaseManager(IPurchaseManager):
    def get_information(self, identifier: str) -> Information:
        logger.debug(f"No product information support, returning UNAVAILABLE for '{identifier}'")
        return Information.UNAVAILABLE

    def store_name(self) -> str:
        return "null"
