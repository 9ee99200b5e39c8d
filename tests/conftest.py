# tests/conftest.py
import json
from unittest.mock import Mock

import pytest

from src.purchase_domain.application.information_service import InformationApplicationService
from src.purchase_domain.domain.entities.information import Information
from src.purchase_domain.domain.repositories.purchase_manager import IPurchaseManager


@pytest.fixture
def mock_purchase_manager() -> Mock:
    """Mock for IPurchaseManager."""
    manager = Mock(spec=IPurchaseManager)
    manager.store_name.return_value = "mock-store"
    return manager


@pytest.fixture
def information_service(mock_purchase_manager) -> InformationApplicationService:
    """Instance of InformationApplicationService with a mocked purchase manager."""
    return InformationApplicationService(purchase_manager=mock_purchase_manager)


@pytest.fixture
def gem_pack_information() -> Information:
    """Sample Information for a consumable product."""
    return (
        Information.new_builder()
        .local_name("Gem Pack")
        .local_description("A handful of gems")
        .local_pricing("$0.99")
        .price_in_cents(99)
        .price_currency_code("USD")
        .build()
    )


@pytest.fixture
def sample_catalog_entries() -> list[dict]:
    """Catalog entries mixing camelCase and snake_case keys."""
    return [
        {
            "identifier": "gems.small",
            "title": "Gem Pack",
            "description": "A handful of gems",
            "price": "$0.99",
            "priceInCents": 99,
            "priceCurrencyCode": "USD",
        },
        {
            "product_id": "remove_ads",
            "local_name": "Remove Ads",
            "local_pricing": "2,29 €",
            "currency": "EUR",
        },
    ]


@pytest.fixture
def catalog_file(tmp_path, sample_catalog_entries) -> str:
    """Writes the sample catalog to a temporary JSON file and returns its path."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"products": sample_catalog_entries}), encoding="utf-8")
    return str(path)
