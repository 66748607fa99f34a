"""Normalizes a validated product descriptor into the canonical Product."""

import re
from decimal import ROUND_HALF_UP, Decimal

from tailor_configurator.core.application.catalog.contracts.product_descriptor_dto import (
    FabricDTO,
    OptionDTO,
    OptionGroupDTO,
    ProductDescriptorDTO,
)
from tailor_configurator.core.application.rendering import (
    CONVENTION_COLOR_TOKENS,
    is_short_sleeve,
)
from tailor_configurator.core.domain.catalog import (
    CustomizationOption,
    FabricOption,
    OptionGroup,
    Product,
    SuppressCategories,
    ViewImages,
    suppress_categories,
)
from tailor_configurator.core.domain.shared import Money

SLEEVE_CATEGORY = "sleeve"
CUFF_CATEGORY = "cuff"


def to_minor_units(value: Decimal | None, factor: int = 1) -> int:
    if value is None:
        return 0
    return int((Decimal(value) * factor).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _slug(text: str) -> str:
    return re.sub(r"\s+", "-", text.strip().lower())


def color_token_for(fabric: FabricDTO) -> str | None:
    """Explicit color when it is a known token, else the id without ``fabric-``, else the name.

    Unknown tokens are kept as-is rather than replaced by a default color.
    """
    explicit = _slug(fabric.color or "")
    from_id = fabric.id.removeprefix("fabric-").lower()
    from_name = _slug(fabric.name)
    for candidate in (explicit, from_id, from_name):
        if candidate in CONVENTION_COLOR_TOKENS:
            return candidate
    return explicit or from_id or from_name or None


class ProductDescriptorMapper:
    def __init__(self, price_minor_unit_factor: int = 1) -> None:
        self._factor = price_minor_unit_factor

    def to_product(self, dto: ProductDescriptorDTO) -> Product:
        base_price = to_minor_units(dto.base_price, self._factor)
        if base_price < 0:
            raise ValueError(f"Negative base price for product '{dto.id}': {dto.base_price}")

        options = dto.customization_options
        fabrics = sorted(options.fabrics, key=lambda f: f.order)
        return Product(
            id=dto.id,
            name=dto.name,
            category=dto.category,
            base_price=Money(base_price),
            fabric_options=tuple(self._to_fabric(f) for f in fabrics),
            option_groups=tuple(self._to_groups(dto)),
            base_images=ViewImages(dto.images.base_image, dto.images.back_image),
        )

    def _to_fabric(self, dto: FabricDTO) -> FabricOption:
        return FabricOption(
            id=dto.id,
            name=dto.name,
            price_modifier=to_minor_units(dto.price_modifier, self._factor),
            front_image=dto.preview_image or None,
            back_image=dto.back_preview_image or None,
            color_token=color_token_for(dto),
            is_default=dto.is_default,
        )

    def _to_groups(self, dto: ProductDescriptorDTO) -> list[OptionGroup]:
        options = dto.customization_options
        if options.option_groups:
            groups = options.option_groups
        else:
            # Older records only carry a category -> options map
            groups = [
                OptionGroupDTO(id=key, label=key.title(), order=position, options=items)
                for position, (key, items) in enumerate(options.styles.items())
            ]
        return [self._to_group(group, position) for position, group in enumerate(groups)]

    def _to_group(self, dto: OptionGroupDTO, position: int) -> OptionGroup:
        category_key = dto.category or dto.id
        if not category_key:
            raise ValueError(f"Option group at position {position} has neither category nor id")
        ordered = sorted(dto.options, key=lambda o: o.order)
        return OptionGroup(
            category_key=category_key,
            label=dto.label or category_key,
            display_order=dto.order,
            options=tuple(self._to_option(o, category_key) for o in ordered),
            z_index=dto.z_index,
            back_visible=dto.back_visible,
        )

    def _to_option(self, dto: OptionDTO, category_key: str) -> CustomizationOption:
        return CustomizationOption(
            id=dto.id,
            category_key=category_key,
            name=dto.name,
            price_modifier=to_minor_units(dto.price_modifier, self._factor),
            default_image=dto.preview_image or dto.image or dto.image_url or None,
            per_fabric_override=self._fabric_overrides(dto),
            per_view_override=ViewImages(
                dto.layers_by_view.get("front") or None, dto.layers_by_view.get("back") or None
            ),
            is_default_choice=dto.is_default,
            display_order=dto.order,
            z_index=dto.z_index,
            mutually_exclusive_with=self._exclusion(dto, category_key),
        )

    @staticmethod
    def _fabric_overrides(dto: OptionDTO) -> dict[str, ViewImages]:
        overrides: dict[str, ViewImages] = {}
        for fabric_id, variant in dto.layers_by_fabric.items():
            if variant is None:
                continue
            if isinstance(variant, str):
                # A bare string is a front-view asset
                overrides[fabric_id] = ViewImages(front=variant or None)
            else:
                overrides[fabric_id] = ViewImages(variant.front or None, variant.back or None)
        return overrides

    @staticmethod
    def _exclusion(dto: OptionDTO, category_key: str) -> SuppressCategories | None:
        predicate = suppress_categories(*dto.suppresses) if dto.suppresses else None
        if category_key == SLEEVE_CATEGORY and is_short_sleeve(dto.id, dto.name):
            short_sleeve = suppress_categories(CUFF_CATEGORY)
            predicate = predicate | short_sleeve if predicate else short_sleeve
        return predicate
