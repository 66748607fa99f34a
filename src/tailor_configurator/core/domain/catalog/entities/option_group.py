from dataclasses import dataclass

from tailor_configurator.core.domain.catalog.entities.customization_option import (
    CustomizationOption,
)


@dataclass(frozen=True, kw_only=True)
class OptionGroup:
    """All options of one customization category.

    ``z_index`` and ``back_visible`` override the garment's layer profile when set.
    """

    category_key: str
    label: str = ""
    display_order: int = 0
    options: tuple[CustomizationOption, ...] = ()
    z_index: int | None = None
    back_visible: bool | None = None

    def option(self, option_id: str) -> CustomizationOption | None:
        return next((o for o in self.options if o.id == option_id), None)

    def default_option(self) -> CustomizationOption | None:
        """First option flagged as default, else the first option, else None."""
        chosen = next((o for o in self.options if o.is_default_choice), None)
        if chosen is not None:
            return chosen
        return self.options[0] if self.options else None
