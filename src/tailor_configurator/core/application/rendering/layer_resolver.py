"""Resolution of the preview layer stack for a configuration.

A category is drawn only when an option is selected, the category is visible in
the active view and no other selection suppresses it. The image of a visible
selection is the first match of:

1. the option's override for the active fabric, in the active view;
2. the option's override for the active view;
3. the naming-convention table, for the categories it covers (a miss there is final);
4. the option's default image, in front view only.

The base garment sits below every category layer. The resolver never raises.
"""

from collections.abc import Mapping

import structlog

from tailor_configurator.core.application.rendering.convention_path_table import (
    ConventionPathTable,
)
from tailor_configurator.core.application.rendering.layer_profile import (
    BASE_Z_INDEX,
    LayerProfile,
    profile_for,
)
from tailor_configurator.core.domain.catalog import CustomizationOption, Product
from tailor_configurator.core.domain.configuration import (
    BASE_LAYER_KEY,
    Configuration,
    RenderLayer,
)
from tailor_configurator.core.domain.shared import ViewMode

logger = structlog.get_logger()


class LayerResolver:
    def __init__(
        self,
        product: Product,
        conventions: ConventionPathTable | None = None,
        profile: LayerProfile | None = None,
    ) -> None:
        self._product = product
        self._conventions = conventions or ConventionPathTable.empty()
        self._profile = profile or profile_for(product.category)

    def resolve(self, configuration: Configuration) -> list[RenderLayer]:
        view = configuration.view_mode
        selections = configuration.selections
        ranked: list[tuple[int, int, RenderLayer]] = []

        for position, group in enumerate(self._product.groups_in_display_order()):
            key = group.category_key
            option = selections.get(key)
            if option is None:
                continue
            rule = self._profile.rule_for(group, position)
            if not rule.visible_in(view) or self._is_suppressed(key, selections):
                continue
            image = self._image_for(key, option, configuration)
            if not image:
                continue
            z_index = option.z_index if option.z_index is not None else rule.z_index
            ranked.append((z_index, position, RenderLayer(key, image, z_index)))

        ranked.sort(key=lambda entry: (entry[0], entry[1]))
        layers = [layer for _, _, layer in ranked]

        base = self._base_layer(configuration, layers)
        return [base, *layers] if base else layers

    @staticmethod
    def _is_suppressed(
        category_key: str, selections: Mapping[str, CustomizationOption | None]
    ) -> bool:
        return any(
            other.suppresses(category_key, selections)
            for other_key, other in selections.items()
            if other is not None and other_key != category_key
        )

    def _image_for(
        self, category_key: str, option: CustomizationOption, configuration: Configuration
    ) -> str | None:
        view = configuration.view_mode
        fabric = configuration.fabric

        if fabric is not None:
            fabric_override = option.per_fabric_override.get(fabric.id)
            if fabric_override is not None:
                image = fabric_override.for_view(view)
                if image:
                    return image

        image = option.per_view_override.for_view(view)
        if image:
            return image

        if self._conventions.covers(category_key):
            color = fabric.color_token if fabric else None
            return self._conventions.lookup(category_key, color, option.id, view)

        if view is ViewMode.FRONT and option.default_image:
            return option.default_image
        return None

    def _base_layer(
        self, configuration: Configuration, layers: list[RenderLayer]
    ) -> RenderLayer | None:
        view = configuration.view_mode
        fabric = configuration.fabric

        image = fabric.image_for(view) if fabric else None
        if not image and fabric is not None:
            image = self._conventions.base_path(fabric.color_token, view)
        if not image:
            image = self._product.base_images.for_view(view)
        if not image:
            logger.debug("No base layer resolved", product_id=self._product.id, view=view.value)
            return None

        lowest = min((layer.z_index for layer in layers), default=BASE_Z_INDEX + 1)
        return RenderLayer(BASE_LAYER_KEY, image, min(BASE_Z_INDEX, lowest - 1))


def resolve_layers(
    configuration: Configuration,
    product: Product,
    conventions: ConventionPathTable | None = None,
) -> list[RenderLayer]:
    return LayerResolver(product, conventions).resolve(configuration)
