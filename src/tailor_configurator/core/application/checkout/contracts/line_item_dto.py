"""Stored shape of a cart line item, field-compatible with the storefront's cart records."""

from datetime import UTC, datetime
from typing import Any

from pydantic import Field, field_validator

from tailor_configurator.core.application.persistence.contracts.saved_design_dto import (
    SnapshotItemDTO,
    WireModel,
    as_minor_units,
)
from tailor_configurator.core.domain.configuration import ConfigurationSnapshot
from tailor_configurator.core.domain.order import LineItem
from tailor_configurator.core.domain.shared import Money, ViewMode


class LineItemDTO(WireModel):
    id: str
    product_id: str
    product_name: str = ""
    product_category: str = ""
    base_image: str | None = None
    fabric: SnapshotItemDTO | None = None
    styles: dict[str, SnapshotItemDTO | None] = Field(default_factory=dict)
    measurements: dict[str, str] = Field(default_factory=dict)
    view_mode: ViewMode = ViewMode.FRONT
    base_price: int = 0
    total_price: int = 0
    quantity: int = Field(default=1, ge=1)
    added_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("base_price", "total_price", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> int:
        return as_minor_units(value)

    @field_validator("added_at", mode="after")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        return value if value.tzinfo else value.replace(tzinfo=UTC)

    @classmethod
    def from_domain(cls, item: LineItem) -> "LineItemDTO":
        snapshot = item.snapshot
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            product_category=item.product_category,
            base_image=item.base_image,
            fabric=SnapshotItemDTO.from_domain(snapshot.fabric) if snapshot.fabric else None,
            styles={
                key: SnapshotItemDTO.from_domain(option) if option else None
                for key, option in snapshot.selections
            },
            measurements=snapshot.measurement_map(),
            view_mode=snapshot.view_mode,
            base_price=item.base_price.amount,
            total_price=item.unit_price.amount,
            quantity=item.quantity,
            added_at=item.added_at,
        )

    def to_domain(self) -> LineItem:
        snapshot = ConfigurationSnapshot.of(
            fabric=self.fabric.to_domain() if self.fabric else None,
            selections={k: v.to_domain() if v else None for k, v in self.styles.items()},
            measurements=self.measurements,
            view_mode=self.view_mode,
        )
        return LineItem(
            id=self.id,
            product_id=self.product_id,
            product_name=self.product_name,
            product_category=self.product_category,
            base_image=self.base_image,
            snapshot=snapshot,
            base_price=Money(self.base_price),
            unit_price=Money(self.total_price),
            quantity=self.quantity,
            added_at=self.added_at,
        )
