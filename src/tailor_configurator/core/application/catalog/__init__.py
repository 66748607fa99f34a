from tailor_configurator.core.application.catalog.catalog_loader import CatalogLoader
from tailor_configurator.core.application.catalog.product_descriptor_mapper import (
    ProductDescriptorMapper,
    color_token_for,
    to_minor_units,
)

__all__ = ["CatalogLoader", "ProductDescriptorMapper", "color_token_for", "to_minor_units"]
