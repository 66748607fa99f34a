from dataclasses import dataclass, field

from tailor_configurator.core.domain.catalog.entities.customization_option import (
    CustomizationOption,
)
from tailor_configurator.core.domain.catalog.entities.fabric_option import FabricOption
from tailor_configurator.core.domain.catalog.entities.option_group import OptionGroup
from tailor_configurator.core.domain.catalog.value_objects.view_images import ViewImages
from tailor_configurator.core.domain.shared import Money


@dataclass(frozen=True, kw_only=True)
class Product:
    """Immutable catalog entry. Fabric is first-class, not an option group."""

    id: str
    name: str = ""
    category: str = ""
    base_price: Money = field(default_factory=Money.zero)
    fabric_options: tuple[FabricOption, ...] = ()
    option_groups: tuple[OptionGroup, ...] = ()
    base_images: ViewImages = field(default_factory=ViewImages)

    def __post_init__(self) -> None:
        keys = [g.category_key for g in self.option_groups]
        if len(keys) != len(set(keys)):
            raise ValueError(f"Duplicate category keys in product '{self.id}': {keys}")

    @property
    def category_keys(self) -> tuple[str, ...]:
        return tuple(g.category_key for g in self.groups_in_display_order())

    def groups_in_display_order(self) -> list[OptionGroup]:
        return sorted(self.option_groups, key=lambda g: g.display_order)

    def has_category(self, category_key: str) -> bool:
        return self.group(category_key) is not None

    def group(self, category_key: str) -> OptionGroup | None:
        return next((g for g in self.option_groups if g.category_key == category_key), None)

    def option(self, category_key: str, option_id: str) -> CustomizationOption | None:
        group = self.group(category_key)
        return group.option(option_id) if group else None

    def fabric(self, fabric_id: str) -> FabricOption | None:
        return next((f for f in self.fabric_options if f.id == fabric_id), None)

    def default_fabric(self) -> FabricOption | None:
        chosen = next((f for f in self.fabric_options if f.is_default), None)
        if chosen is not None:
            return chosen
        return self.fabric_options[0] if self.fabric_options else None
