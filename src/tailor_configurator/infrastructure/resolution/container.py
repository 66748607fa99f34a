"""Builders wiring the configurator's application services to their adapters."""

import logging

from tailor_configurator.core.application.catalog import CatalogLoader
from tailor_configurator.core.application.checkout import CartOrderAdapter, LocalCartStore
from tailor_configurator.core.application.persistence.design_persistence_coordinator import (
    DesignPersistenceCoordinator,
)
from tailor_configurator.core.application.persistence.local_design_store import LocalDesignStore
from tailor_configurator.core.application.ports import (
    CatalogPort,
    KeyValueStorePort,
    RemoteDesignStorePort,
)
from tailor_configurator.core.application.workflows.restore import RestoreDesignWorkflow
from tailor_configurator.infrastructure.common.retry.retry_policy import RetryPolicy
from tailor_configurator.infrastructure.configuration.app_config import AppConfig
from tailor_configurator.infrastructure.observability import configure_logging
from tailor_configurator.infrastructure.observability.tracing_setup import configure_tracing
from tailor_configurator.infrastructure.repositories.json_file_key_value_store import (
    JsonFileKeyValueStore,
)
from tailor_configurator.infrastructure.tools.catalog.catalog_http_client import (
    CatalogHttpClient,
)
from tailor_configurator.infrastructure.tools.catalog.yaml_catalog_source import (
    YamlCatalogSource,
)
from tailor_configurator.infrastructure.tools.customer.customer_designs_http_client import (
    CustomerDesignsHttpClient,
)
from tailor_configurator.infrastructure.tools.orders.order_http_client import OrderHttpClient


def bootstrap_observability(level: int = logging.INFO) -> None:
    """One-shot logging and tracing setup for the embedding host."""
    configure_logging(level)
    configure_tracing()


def build_catalog_port(config: AppConfig) -> CatalogPort:
    settings = config.catalog
    if settings.seed_file:
        return YamlCatalogSource(settings.seed_file)
    return CatalogHttpClient(
        settings.base_url,
        settings.timeout_seconds,
        retry_policy=RetryPolicy(max_attempts=settings.retry_attempts),
    )


def build_catalog_loader(config: AppConfig, catalog: CatalogPort | None = None) -> CatalogLoader:
    return CatalogLoader(
        catalog or build_catalog_port(config),
        price_minor_unit_factor=config.catalog.price_minor_unit_factor,
        asset_root=config.catalog.asset_root,
    )


def build_local_design_store(
    config: AppConfig, kv: KeyValueStorePort | None = None
) -> LocalDesignStore:
    settings = config.local_store
    return LocalDesignStore(
        kv or JsonFileKeyValueStore(settings.data_dir),
        capacity=settings.capacity,
        key=settings.key,
    )


def build_local_cart_store(
    config: AppConfig, kv: KeyValueStorePort | None = None
) -> LocalCartStore:
    settings = config.local_store
    return LocalCartStore(kv or JsonFileKeyValueStore(settings.data_dir), key=settings.cart_key)


def build_persistence_coordinator(
    config: AppConfig,
    kv: KeyValueStorePort | None = None,
    remote: RemoteDesignStorePort | None = None,
) -> DesignPersistenceCoordinator:
    local = build_local_design_store(config, kv)
    remote = remote or CustomerDesignsHttpClient(
        config.customer_api.base_url, config.customer_api.timeout_seconds
    )
    restore = RestoreDesignWorkflow(
        local, remote, hydration_timeout_seconds=config.restore.hydration_timeout_seconds
    )
    return DesignPersistenceCoordinator(
        local,
        remote,
        restore,
        purge_local_on_remote_save=config.persistence.purge_local_on_remote_save,
    )


def build_cart_order_adapter(config: AppConfig) -> CartOrderAdapter:
    return CartOrderAdapter(
        OrderHttpClient(config.order_api.base_url, config.order_api.timeout_seconds)
    )
