from dataclasses import dataclass, field

from tailor_configurator.core.domain.catalog import CustomizationOption, FabricOption
from tailor_configurator.core.domain.configuration.value_objects.configuration_snapshot import (
    ConfigurationSnapshot,
    SnapshotItem,
)
from tailor_configurator.core.domain.shared import ViewMode

# Named slots of the storefront's shirt configurator, mapped onto category keys.
LEGACY_SHIRT_SLOTS: tuple[str, ...] = (
    "collar",
    "cuff",
    "pocket",
    "button",
    "sleeve",
    "placket",
    "back",
    "necktie",
    "bowtie",
)


@dataclass(frozen=True)
class LegacyShirtView:
    """Read-only named-field projection of ``Configuration.selections``."""

    collar: CustomizationOption | None = None
    cuff: CustomizationOption | None = None
    pocket: CustomizationOption | None = None
    button: CustomizationOption | None = None
    sleeve: CustomizationOption | None = None
    placket: CustomizationOption | None = None
    back: CustomizationOption | None = None
    necktie: CustomizationOption | None = None
    bowtie: CustomizationOption | None = None


@dataclass
class Configuration:
    fabric: FabricOption | None = None
    selections: dict[str, CustomizationOption | None] = field(default_factory=dict)
    measurements: dict[str, str] = field(default_factory=dict)
    view_mode: ViewMode = ViewMode.FRONT

    def copy(self) -> "Configuration":
        # Options are frozen, so copying the containers is enough for independence.
        return Configuration(
            fabric=self.fabric,
            selections=dict(self.selections),
            measurements=dict(self.measurements),
            view_mode=self.view_mode,
        )

    def legacy_view(self) -> LegacyShirtView:
        return LegacyShirtView(**{slot: self.selections.get(slot) for slot in LEGACY_SHIRT_SLOTS})

    def to_snapshot(self) -> ConfigurationSnapshot:
        fabric = None
        if self.fabric is not None:
            fabric = SnapshotItem(self.fabric.id, self.fabric.name, self.fabric.price_modifier)
        selections = {
            key: SnapshotItem(option.id, option.name, option.price_modifier) if option else None
            for key, option in self.selections.items()
        }
        return ConfigurationSnapshot.of(
            fabric=fabric,
            selections=selections,
            measurements=self.measurements,
            view_mode=self.view_mode,
        )
