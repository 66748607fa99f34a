from tailor_configurator.core.domain.catalog.entities.customization_option import (
    CustomizationOption,
    ExclusionPredicate,
    SuppressCategories,
    suppress_categories,
)
from tailor_configurator.core.domain.catalog.entities.fabric_option import FabricOption
from tailor_configurator.core.domain.catalog.entities.option_group import OptionGroup
from tailor_configurator.core.domain.catalog.entities.product import Product
from tailor_configurator.core.domain.catalog.value_objects.view_images import ViewImages

__all__ = [
    "CustomizationOption",
    "ExclusionPredicate",
    "FabricOption",
    "OptionGroup",
    "Product",
    "SuppressCategories",
    "ViewImages",
    "suppress_categories",
]
