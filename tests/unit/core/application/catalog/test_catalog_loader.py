"""Unit tests for CatalogLoader (catalog port mocked)."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from tailor_configurator.core.application.catalog import CatalogLoader
from tailor_configurator.core.application.exceptions import CatalogLoadError
from tailor_configurator.core.application.ports.common.exceptions import ProviderError
from tailor_configurator.core.application.store import ConfigurationStore

# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture()
def mock_catalog(shirt_descriptor: dict[str, Any]) -> AsyncMock:
    catalog = AsyncMock()
    catalog.get.return_value = shirt_descriptor
    return catalog


@pytest.fixture()
def loader(mock_catalog: AsyncMock) -> CatalogLoader:
    return CatalogLoader(mock_catalog, asset_root="/assets/shirts")


# ═══════════════════════════════════════════════════════════════════════
# Tests
# ═══════════════════════════════════════════════════════════════════════


class TestLoad:
    @pytest.mark.asyncio
    async def test_seeds_the_store(
        self, loader: CatalogLoader, mock_catalog: AsyncMock
    ) -> None:
        store = ConfigurationStore()

        product = await loader.load("shirt-oxford", store)

        mock_catalog.get.assert_awaited_once_with("shirt-oxford")
        assert store.product is product
        assert store.configuration.selections["collar"].id == "collar-classic"
        assert store.layers()[0].image_ref == "/assets/shirts/Front/front-white.png"

    @pytest.mark.asyncio
    async def test_fetch_builds_the_convention_table(self, loader: CatalogLoader) -> None:
        product, conventions = await loader.fetch("shirt-oxford")

        assert product.category == "shirt"
        assert conventions.covers("collar")
        assert len(conventions) > 0

    @pytest.mark.asyncio
    async def test_provider_failure_leaves_store_unseeded(
        self, loader: CatalogLoader, mock_catalog: AsyncMock
    ) -> None:
        mock_catalog.get.side_effect = ProviderError(
            "catalog", "bad gateway", retryable=True, status_code=502
        )
        store = ConfigurationStore()

        with pytest.raises(CatalogLoadError) as exc_info:
            await loader.load("shirt-oxford", store)

        assert exc_info.value.retryable
        assert exc_info.value.context["status_code"] == 502
        assert not store.is_catalog_loaded

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "descriptor",
        [
            {"name": "no id"},
            {"id": "p", "basePrice": -100},
            {"id": "p", "basePrice": "abc"},
            {
                "id": "p",
                "customizationOptions": {
                    "optionGroups": [{"category": "collar"}, {"category": "collar"}]
                },
            },
        ],
    )
    async def test_malformed_descriptor_is_a_load_error(
        self, loader: CatalogLoader, mock_catalog: AsyncMock, descriptor: dict[str, Any]
    ) -> None:
        mock_catalog.get.return_value = descriptor
        store = ConfigurationStore()

        with pytest.raises(CatalogLoadError):
            await loader.load("p", store)

        assert not store.is_catalog_loaded
