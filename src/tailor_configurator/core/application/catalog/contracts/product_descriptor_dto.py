"""Wire shape of a catalog product descriptor.

Field names follow the catalog service's camelCase records. Unknown fields are
ignored; every field the engine does not strictly need is optional.
"""

from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DescriptorModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class LayerVariantDTO(DescriptorModel):
    front: str | None = None
    back: str | None = None


class OptionDTO(DescriptorModel):
    id: str = Field(min_length=1)
    name: str = ""
    category: str | None = None
    image: str | None = None
    image_url: str | None = None
    preview_image: str | None = None
    price_modifier: Decimal | None = None
    order: int = 0
    is_default: bool = False
    layers_by_fabric: dict[str, str | LayerVariantDTO | None] = Field(default_factory=dict)
    layers_by_view: dict[str, str | None] = Field(default_factory=dict)
    suppresses: list[str] = Field(default_factory=list)
    z_index: int | None = None


class OptionGroupDTO(DescriptorModel):
    id: str = ""
    label: str = ""
    category: str | None = None
    order: int = 0
    options: list[OptionDTO] = Field(default_factory=list)
    z_index: int | None = None
    back_visible: bool | None = None


class FabricDTO(DescriptorModel):
    id: str = Field(min_length=1)
    name: str = ""
    color: str | None = None
    image: str | None = None
    image_url: str | None = None
    preview_image: str | None = None
    back_preview_image: str | None = None
    price_modifier: Decimal | None = None
    order: int = 0
    is_default: bool = False


class CustomizationOptionsDTO(DescriptorModel):
    fabrics: list[FabricDTO] = Field(default_factory=list)
    styles: dict[str, list[OptionDTO]] = Field(default_factory=dict)
    option_groups: list[OptionGroupDTO] | None = None


class ProductImagesDTO(DescriptorModel):
    base_image: str | None = None
    back_image: str | None = None


class ProductDescriptorDTO(DescriptorModel):
    id: str = Field(min_length=1, validation_alias=AliasChoices("_id", "id"))
    name: str = ""
    category: str = ""
    base_price: Decimal = Decimal(0)
    images: ProductImagesDTO = Field(default_factory=ProductImagesDTO)
    customization_options: CustomizationOptionsDTO = Field(
        default_factory=CustomizationOptionsDTO
    )
