from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from tailor_configurator.core.application.catalog import ProductDescriptorMapper
from tailor_configurator.core.application.catalog.contracts.product_descriptor_dto import (
    ProductDescriptorDTO,
)
from tailor_configurator.core.application.persistence.local_design_store import LocalDesignStore
from tailor_configurator.core.application.rendering import ConventionPathTable
from tailor_configurator.core.application.store import ConfigurationStore
from tailor_configurator.core.domain.catalog import Product
from tailor_configurator.core.domain.configuration import ConfigurationSnapshot, SnapshotItem
from tailor_configurator.core.domain.design import DesignOrigin, SavedDesign
from tailor_configurator.core.domain.shared import Money
from tailor_configurator.infrastructure.repositories.in_memory_key_value_store import (
    InMemoryKeyValueStore,
)


def _shirt_descriptor() -> dict[str, Any]:
    return {
        "_id": "shirt-oxford",
        "name": "Oxford Shirt",
        "category": "shirt",
        "basePrice": 8500,
        "images": {"baseImage": "/img/shirt-front.png", "backImage": "/img/shirt-back.png"},
        "customizationOptions": {
            "fabrics": [
                {"id": "fabric-white", "name": "White", "priceModifier": 0, "isDefault": True},
                {"id": "fabric-champagne", "name": "Champagne", "priceModifier": 200},
                {
                    "id": "navy",
                    "name": "Navy Twill",
                    "color": "navy",
                    "priceModifier": 300,
                    "previewImage": "/img/navy-front.png",
                    "backPreviewImage": "/img/navy-back.png",
                },
            ],
            "optionGroups": [
                {
                    "id": "g-collar",
                    "label": "Collar",
                    "category": "collar",
                    "order": 1,
                    "options": [
                        {"id": "collar-classic", "name": "Classic", "priceModifier": 250},
                        {"id": "collar-button-down", "name": "Button Down", "priceModifier": 400},
                    ],
                },
                {
                    "id": "g-cuff",
                    "label": "Cuffs",
                    "category": "cuff",
                    "order": 2,
                    "options": [
                        {"id": "cuff-single", "name": "Single"},
                        {"id": "cuff-french", "name": "French", "priceModifier": 150},
                    ],
                },
                {
                    "id": "g-sleeve",
                    "label": "Sleeves",
                    "category": "sleeve",
                    "order": 3,
                    "options": [
                        {"id": "sleeve-full", "name": "Full Sleeve", "isDefault": True},
                        {"id": "sleeve-half", "name": "Half Sleeve", "priceModifier": -500},
                    ],
                },
                {
                    "id": "g-pocket",
                    "label": "Pocket",
                    "category": "pocket",
                    "order": 4,
                    "options": [
                        {"id": "pocket-none", "name": "No Pocket"},
                        {"id": "pocket-standard", "name": "Standard", "priceModifier": 100},
                    ],
                },
                {
                    "id": "g-button",
                    "label": "Buttons",
                    "category": "button",
                    "order": 5,
                    "options": [
                        {
                            "id": "button-pearl",
                            "name": "Pearl",
                            "priceModifier": 50,
                            "previewImage": "/img/buttons/pearl.png",
                            "layersByFabric": {"navy": {"front": "/img/buttons/pearl-navy.png"}},
                        },
                    ],
                },
            ],
        },
    }


@pytest.fixture()
def shirt_descriptor() -> dict[str, Any]:
    return _shirt_descriptor()


@pytest.fixture()
def shirt_product(shirt_descriptor: dict[str, Any]) -> Product:
    dto = ProductDescriptorDTO.model_validate(shirt_descriptor)
    return ProductDescriptorMapper().to_product(dto)


@pytest.fixture()
def shirt_conventions(shirt_product: Product) -> ConventionPathTable:
    return ConventionPathTable.build(shirt_product)


@pytest.fixture()
def shirt_store(
    shirt_product: Product, shirt_conventions: ConventionPathTable
) -> ConfigurationStore:
    return ConfigurationStore(shirt_product, conventions=shirt_conventions)


@pytest.fixture()
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def local_store(kv: InMemoryKeyValueStore) -> LocalDesignStore:
    return LocalDesignStore(kv, capacity=20)


@pytest.fixture()
def make_design() -> Callable[..., SavedDesign]:
    """Factory for saved designs of the Oxford shirt with a small, valid snapshot."""

    def _make(
        design_id: str,
        *,
        product_id: str = "shirt-oxford",
        saved_at: datetime | None = None,
        origin: DesignOrigin = DesignOrigin.LOCAL,
        selections: dict[str, SnapshotItem | None] | None = None,
        fabric: SnapshotItem | None = None,
        measurements: dict[str, str] | None = None,
    ) -> SavedDesign:
        snapshot = ConfigurationSnapshot.of(
            fabric=fabric or SnapshotItem("fabric-champagne", "Champagne", 200),
            selections=(
                selections
                if selections is not None
                else {"collar": SnapshotItem("collar-button-down", "Button Down", 400)}
            ),
            measurements=measurements or {"chest": "40"},
        )
        return SavedDesign(
            id=design_id,
            product_id=product_id,
            snapshot=snapshot,
            computed_price=Money(9100),
            origin=origin,
            saved_at=saved_at or datetime(2026, 1, 1, tzinfo=UTC),
            product_name="Oxford Shirt",
            product_category="shirt",
        )

    return _make
