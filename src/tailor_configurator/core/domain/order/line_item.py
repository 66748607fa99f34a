from dataclasses import dataclass, field
from datetime import UTC, datetime

from tailor_configurator.core.domain.configuration import ConfigurationSnapshot
from tailor_configurator.core.domain.shared import Money


@dataclass(frozen=True, kw_only=True)
class LineItem:
    """Cart entry: a configuration snapshot priced at the time it was added."""

    id: str
    product_id: str
    snapshot: ConfigurationSnapshot
    base_price: Money
    unit_price: Money
    quantity: int = 1
    product_name: str = ""
    product_category: str = ""
    base_image: str | None = None
    added_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise TypeError(f"quantity must be int, got {type(self.quantity).__name__}")
        if self.quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {self.quantity}")

    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity
