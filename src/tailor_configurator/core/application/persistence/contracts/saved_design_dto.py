"""Wire record of a saved design, shared by the local cache and the account API.

Remote records carry their id as ``_id``; local records use ``id``. Both are accepted.
Amounts are integer minor units; numeric strings and floats are rounded half-up.
"""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from tailor_configurator.core.application.catalog.product_descriptor_mapper import to_minor_units
from tailor_configurator.core.domain.configuration import ConfigurationSnapshot, SnapshotItem
from tailor_configurator.core.domain.design import DesignOrigin, SavedDesign
from tailor_configurator.core.domain.shared import Money, ViewMode


def as_minor_units(value: Any) -> int:
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValueError("Amount must be numeric")
    return to_minor_units(Decimal(str(value)))


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class SnapshotItemDTO(WireModel):
    id: str
    name: str = ""
    price_modifier: int = 0

    @field_validator("price_modifier", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> int:
        return as_minor_units(value)

    @classmethod
    def from_domain(cls, item: SnapshotItem) -> "SnapshotItemDTO":
        return cls(id=item.id, name=item.name, price_modifier=item.price_modifier)

    def to_domain(self) -> SnapshotItem:
        return SnapshotItem(self.id, self.name, self.price_modifier)


class SavedDesignDTO(WireModel):
    id: str | None = Field(default=None, validation_alias=AliasChoices("_id", "id"))
    product_id: str
    product_name: str = ""
    product_category: str = ""
    base_image: str | None = None
    fabric: SnapshotItemDTO | None = None
    styles: dict[str, SnapshotItemDTO | None] = Field(default_factory=dict)
    measurements: dict[str, str] = Field(default_factory=dict)
    view_mode: ViewMode = ViewMode.FRONT
    total_price: int = 0
    saved_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("measurements", mode="before")
    @classmethod
    def stringify_measurements(cls, value: Any) -> dict[str, str]:
        if not value:
            return {}
        return {str(k): str(v) for k, v in dict(value).items() if v is not None and v != ""}

    @field_validator("total_price", mode="before")
    @classmethod
    def parse_total(cls, value: Any) -> int:
        return as_minor_units(value)

    @field_validator("saved_at", mode="after")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        return value if value.tzinfo else value.replace(tzinfo=UTC)

    @classmethod
    def from_domain(cls, design: SavedDesign) -> "SavedDesignDTO":
        snapshot = design.snapshot
        return cls(
            id=design.id,
            product_id=design.product_id,
            product_name=design.product_name,
            product_category=design.product_category,
            base_image=design.base_image,
            fabric=SnapshotItemDTO.from_domain(snapshot.fabric) if snapshot.fabric else None,
            styles={
                key: SnapshotItemDTO.from_domain(item) if item else None
                for key, item in snapshot.selections
            },
            measurements=snapshot.measurement_map(),
            view_mode=snapshot.view_mode,
            total_price=design.computed_price.amount,
            saved_at=design.saved_at,
        )

    def to_domain(self, origin: DesignOrigin) -> SavedDesign:
        if not self.id:
            raise ValueError(f"Saved design for product '{self.product_id}' has no id")
        snapshot = ConfigurationSnapshot.of(
            fabric=self.fabric.to_domain() if self.fabric else None,
            selections={k: v.to_domain() if v else None for k, v in self.styles.items()},
            measurements=self.measurements,
            view_mode=self.view_mode,
        )
        return SavedDesign(
            id=self.id,
            product_id=self.product_id,
            product_name=self.product_name,
            product_category=self.product_category,
            base_image=self.base_image,
            snapshot=snapshot,
            computed_price=Money(self.total_price),
            saved_at=self.saved_at,
            origin=origin,
        )

    def to_wire(self, *, include_id: bool = True) -> dict[str, Any]:
        exclude = None if include_id else {"id"}
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)
