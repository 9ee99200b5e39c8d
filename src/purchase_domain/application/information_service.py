# src/purchase_domain/application/information_service.py
"""Application service for product information lookups."""

import logging
from typing import Iterable

from src.common.exceptions.custom_exceptions import ApplicationError
from src.purchase_domain.domain.entities.information import Information
from src.purchase_domain.domain.repositories.purchase_manager import IPurchaseManager

logger = logging.getLogger(__name__)


class InformationApplicationService:
    """Service for querying product information from a purchase manager."""

    def __init__(self, purchase_manager: IPurchaseManager) -> None:
        """Initializes the InformationApplicationService."""
        self.purchase_manager = purchase_manager

    def get_information(self, identifier: str) -> Information:
        """Retrieves information for a single product."""
        try:
            information = self.purchase_manager.get_information(identifier)
        except ApplicationError:
            raise
        except Exception as e:
            raise ApplicationError(
                f"Failed to get information for '{identifier}' from {self.purchase_manager.store_name()}", e
            )

        if information == Information.UNAVAILABLE:
            logger.info(f"No information available for '{identifier}' ({self.purchase_manager.store_name()})")
        return information

    def get_information_for(self, identifiers: Iterable[str]) -> dict[str, Information]:
        """
        Retrieves information for several products.

        The result keeps the order of the given identifiers; duplicates are looked up once.
        """
        result: dict[str, Information] = {}
        for identifier in identifiers:
            if identifier not in result:
                result[identifier] = self.get_information(identifier)
        return result

    def get_unavailable(self, identifiers: Iterable[str]) -> list[str]:
        """Returns the identifiers for which no information is available."""
        return [
            identifier
            for identifier, information in self.get_information_for(identifiers).items()
            if information == Information.UNAVAILABLE
        ]
