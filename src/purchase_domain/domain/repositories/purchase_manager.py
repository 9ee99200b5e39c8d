# src/purchase_domain/domain/repositories/purchase_manager.py
"""Purchase manager interface."""
from abc import ABC, abstractmethod

from src.purchase_domain.domain.entities.information import Information


class IPurchaseManager(ABC):

    @abstractmethod
    def get_information(self, identifier: str) -> Information:
        """
        Returns information about the product with the given identifier.

        Managers that cannot supply any information return Information.UNAVAILABLE
        instead of raising.
        """
        pass

    @abstractmethod
    def store_name(self) -> str:
        """Short name of the store backing this manager."""
        pass
