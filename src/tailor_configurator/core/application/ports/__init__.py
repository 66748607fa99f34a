from tailor_configurator.core.application.ports.catalog_port import CatalogPort
from tailor_configurator.core.application.ports.key_value_store_port import KeyValueStorePort
from tailor_configurator.core.application.ports.order_port import OrderPort
from tailor_configurator.core.application.ports.remote_design_store_port import (
    RemoteDesignStorePort,
)

__all__ = ["CatalogPort", "KeyValueStorePort", "OrderPort", "RemoteDesignStorePort"]
