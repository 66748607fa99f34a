from tailor_configurator.core.domain.configuration.entities.configuration import (
    LEGACY_SHIRT_SLOTS,
    Configuration,
    LegacyShirtView,
)
from tailor_configurator.core.domain.configuration.value_objects.configuration_snapshot import (
    ConfigurationSnapshot,
    SnapshotItem,
)
from tailor_configurator.core.domain.configuration.value_objects.render_layer import (
    BASE_LAYER_KEY,
    RenderLayer,
)

__all__ = [
    "BASE_LAYER_KEY",
    "LEGACY_SHIRT_SLOTS",
    "Configuration",
    "ConfigurationSnapshot",
    "LegacyShirtView",
    "RenderLayer",
    "SnapshotItem",
]
