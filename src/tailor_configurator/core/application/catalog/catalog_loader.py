import structlog
from pydantic import ValidationError

from tailor_configurator.core.application.catalog.contracts.product_descriptor_dto import (
    ProductDescriptorDTO,
)
from tailor_configurator.core.application.catalog.product_descriptor_mapper import (
    ProductDescriptorMapper,
)
from tailor_configurator.core.application.exceptions import CatalogLoadError
from tailor_configurator.core.application.ports import CatalogPort
from tailor_configurator.core.application.ports.common.exceptions import ProviderError
from tailor_configurator.core.application.rendering import DEFAULT_ASSET_ROOT, ConventionPathTable
from tailor_configurator.core.application.store import ConfigurationStore
from tailor_configurator.core.domain.catalog import Product
from tailor_configurator.infrastructure.observability.metrics_service import CATALOG_LOADS_TOTAL
from tailor_configurator.infrastructure.observability.tracing_setup import trace_operation

logger = structlog.get_logger()


class CatalogLoader:
    """Fetches a product descriptor, normalizes it and seeds a ConfigurationStore.

    Any failure leaves the store unseeded and surfaces as a retryable CatalogLoadError.
    """

    def __init__(
        self,
        catalog: CatalogPort,
        *,
        price_minor_unit_factor: int = 1,
        asset_root: str = DEFAULT_ASSET_ROOT,
    ) -> None:
        self._catalog = catalog
        self._mapper = ProductDescriptorMapper(price_minor_unit_factor)
        self._asset_root = asset_root

    async def fetch(self, product_id: str) -> tuple[Product, ConventionPathTable]:
        try:
            raw = await self._catalog.get(product_id)
        except ProviderError as e:
            raise CatalogLoadError(
                f"Catalog fetch failed for '{product_id}': {e}",
                context={"product_id": product_id, "status_code": e.status_code},
            ) from e

        try:
            descriptor = ProductDescriptorDTO.model_validate(raw)
            product = self._mapper.to_product(descriptor)
        except (ValidationError, ValueError, TypeError) as e:
            raise CatalogLoadError(
                f"Malformed descriptor for '{product_id}': {e}",
                context={"product_id": product_id},
            ) from e

        return product, ConventionPathTable.build(product, self._asset_root)

    @trace_operation("catalog.load")
    async def load(self, product_id: str, store: ConfigurationStore) -> Product:
        try:
            product, conventions = await self.fetch(product_id)
        except CatalogLoadError as e:
            CATALOG_LOADS_TOTAL.labels(outcome="error").inc()
            logger.warning(
                "Catalog load failed",
                product_id=product_id,
                error_type=type(e).__name__,
                error_details=str(e),
                error_retryable=True,
            )
            raise

        store.attach_product(product, conventions=conventions)
        CATALOG_LOADS_TOTAL.labels(outcome="success").inc()
        logger.info(
            "Catalog loaded",
            product_id=product.id,
            fabrics=len(product.fabric_options),
            groups=len(product.option_groups),
            convention_entries=len(conventions),
        )
        return product
