from tailor_configurator.core.application.rendering.convention_path_table import (
    CONVENTION_COLOR_TOKENS,
    DEFAULT_ASSET_ROOT,
    ConventionPathTable,
    is_short_sleeve,
)
from tailor_configurator.core.application.rendering.layer_profile import (
    CategoryLayerRule,
    LayerProfile,
    profile_for,
)
from tailor_configurator.core.application.rendering.layer_resolver import (
    LayerResolver,
    resolve_layers,
)

__all__ = [
    "CONVENTION_COLOR_TOKENS",
    "DEFAULT_ASSET_ROOT",
    "CategoryLayerRule",
    "ConventionPathTable",
    "LayerProfile",
    "LayerResolver",
    "is_short_sleeve",
    "profile_for",
    "resolve_layers",
]
