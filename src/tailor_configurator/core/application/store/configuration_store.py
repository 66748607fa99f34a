"""The single mutable Configuration of one configurator session."""

import asyncio
from collections.abc import Mapping

import structlog

from tailor_configurator.core.application.exceptions import (
    ConfigurationDiscarded,
    InvalidSelection,
)
from tailor_configurator.core.application.pricing import price
from tailor_configurator.core.application.rendering import ConventionPathTable, LayerResolver
from tailor_configurator.core.domain.catalog import CustomizationOption, FabricOption, Product
from tailor_configurator.core.domain.configuration import (
    Configuration,
    ConfigurationSnapshot,
    RenderLayer,
)
from tailor_configurator.core.domain.shared import Money, ViewMode

logger = structlog.get_logger()


class ConfigurationStore:
    """Owns one Configuration and guards its invariants.

    Every mutation validates first and writes second, so a rejected mutation
    leaves the previous state untouched. One owner drives the store at a time;
    there is no internal locking.
    """

    def __init__(
        self, product: Product | None = None, *, conventions: ConventionPathTable | None = None
    ) -> None:
        self._configuration = Configuration()
        self._product: Product | None = None
        self._resolver: LayerResolver | None = None
        self._catalog_loaded = asyncio.Event()
        self._discarded = False
        self._revision = 0
        self._price_cache: tuple[int, Money] | None = None
        self._layers_cache: tuple[int, list[RenderLayer]] | None = None
        self._restored_design_ids: set[str] = set()
        self._restoring_design_ids: set[str] = set()
        if product is not None:
            self.attach_product(product, conventions=conventions)

    # ── Lifecycle ──

    @property
    def product(self) -> Product | None:
        return self._product

    @property
    def is_catalog_loaded(self) -> bool:
        return self._product is not None

    @property
    def is_discarded(self) -> bool:
        return self._discarded

    @property
    def revision(self) -> int:
        return self._revision

    def attach_product(
        self, product: Product, *, conventions: ConventionPathTable | None = None
    ) -> None:
        """Binds the loaded product, seeds defaults and wakes anyone waiting for the catalog.

        Reseeding wipes restored choices, so the restore record is cleared too.
        """
        self._ensure_live()
        self._product = product
        self._resolver = LayerResolver(product, conventions)
        self._configuration = self._seeded(product)
        self._restored_design_ids.clear()
        self._touch()
        self._catalog_loaded.set()
        logger.info(
            "Configuration seeded",
            product_id=product.id,
            categories=list(product.category_keys),
        )

    async def wait_for_catalog(self, timeout: float) -> Product:
        """Suspends until a product is attached. Raises TimeoutError after ``timeout`` seconds."""
        self._ensure_live()
        if self._product is None:
            await asyncio.wait_for(self._catalog_loaded.wait(), timeout)
        self._ensure_live()
        if self._product is None:
            raise ConfigurationDiscarded("Catalog wait ended without a product")
        return self._product

    def reset(self) -> None:
        self._ensure_live()
        self._restored_design_ids.clear()
        if self._product is not None:
            self._configuration = self._seeded(self._product)
        else:
            self._configuration = Configuration()
        self._touch()

    def discard(self) -> None:
        """Drops the session. Later mutations raise and catalog waiters are released."""
        if self._discarded:
            return
        self._discarded = True
        self._catalog_loaded.set()
        product_id = self._product.id if self._product else None
        logger.info("Configuration discarded", product_id=product_id)

    # ── Mutations ──

    def set_fabric(self, fabric: FabricOption | None) -> None:
        product = self._require_product("fabric")
        if fabric is not None:
            canonical = product.fabric(fabric.id)
            if canonical is None or canonical != fabric:
                raise InvalidSelection(
                    f"Fabric '{fabric.id}' does not belong to product '{product.id}'",
                    context={"product_id": product.id, "fabric_id": fabric.id},
                )
            fabric = canonical
        self._configuration.fabric = fabric
        self._touch()

    def select_fabric_by_id(self, fabric_id: str | None) -> None:
        product = self._require_product("fabric")
        if fabric_id is None:
            self.set_fabric(None)
            return
        fabric = product.fabric(fabric_id)
        if fabric is None:
            raise InvalidSelection(
                f"Unknown fabric '{fabric_id}' for product '{product.id}'",
                context={"product_id": product.id, "fabric_id": fabric_id},
            )
        self.set_fabric(fabric)

    def set_selection(self, category_key: str, option: CustomizationOption | None) -> None:
        product = self._require_product(category_key)
        group = product.group(category_key)
        if group is None:
            raise InvalidSelection(
                f"Unknown category '{category_key}' for product '{product.id}'",
                context={"product_id": product.id, "category_key": category_key},
            )
        if option is not None:
            canonical = group.option(option.id)
            if canonical is None or canonical != option or option.category_key != category_key:
                raise InvalidSelection(
                    f"Option '{option.id}' does not belong to category '{category_key}'",
                    context={
                        "product_id": product.id,
                        "category_key": category_key,
                        "option_id": option.id,
                    },
                )
            option = canonical
        self._configuration.selections[category_key] = option
        self._touch()

    def select_option_by_id(self, category_key: str, option_id: str | None) -> None:
        product = self._require_product(category_key)
        if option_id is None:
            self.set_selection(category_key, None)
            return
        option = product.option(category_key, option_id)
        if option is None:
            raise InvalidSelection(
                f"Unknown option '{option_id}' in category '{category_key}'",
                context={"product_id": product.id, "category_key": category_key},
            )
        self.set_selection(category_key, option)

    def set_measurement(self, field: str, value: str) -> None:
        self._ensure_live()
        self._configuration.measurements[field] = str(value)
        self._touch()

    def update_measurements(self, measurements: Mapping[str, str]) -> None:
        self._ensure_live()
        self._configuration.measurements.update({k: str(v) for k, v in measurements.items()})
        self._touch()

    def set_view_mode(self, mode: ViewMode | str) -> None:
        self._ensure_live()
        try:
            view_mode = ViewMode(mode)
        except ValueError as e:
            raise InvalidSelection(f"Unknown view mode '{mode}'") from e
        self._configuration.view_mode = view_mode
        self._touch()

    # ── Reads ──

    @property
    def configuration(self) -> Configuration:
        return self._configuration.copy()

    def snapshot(self) -> ConfigurationSnapshot:
        return self._configuration.to_snapshot()

    def price(self) -> Money:
        if self._product is None:
            return Money.zero()
        if self._price_cache is None or self._price_cache[0] != self._revision:
            self._price_cache = (self._revision, price(self._configuration, self._product))
        return self._price_cache[1]

    def layers(self) -> list[RenderLayer]:
        if self._resolver is None:
            return []
        if self._layers_cache is None or self._layers_cache[0] != self._revision:
            self._layers_cache = (self._revision, self._resolver.resolve(self._configuration))
        return list(self._layers_cache[1])

    # ── Restore bookkeeping ──

    def has_restored(self, design_id: str) -> bool:
        return design_id in self._restored_design_ids

    def is_restoring(self, design_id: str) -> bool:
        return design_id in self._restoring_design_ids

    def begin_restore(self, design_id: str) -> None:
        self._restoring_design_ids.add(design_id)

    def end_restore(self, design_id: str, *, applied: bool) -> None:
        """Releases an in-flight restore; only an applied one counts as restored."""
        self._restoring_design_ids.discard(design_id)
        if applied:
            self._restored_design_ids.add(design_id)

    # ── Internals ──

    @staticmethod
    def _seeded(product: Product) -> Configuration:
        selections = {
            group.category_key: group.default_option()
            for group in product.groups_in_display_order()
        }
        return Configuration(fabric=product.default_fabric(), selections=selections)

    def _touch(self) -> None:
        self._revision += 1

    def _ensure_live(self) -> None:
        if self._discarded:
            raise ConfigurationDiscarded("Configuration was discarded")

    def _require_product(self, target: str) -> Product:
        self._ensure_live()
        if self._product is None:
            raise InvalidSelection(
                f"Cannot set '{target}' before a product is loaded",
                context={"target": target},
            )
        return self._product
