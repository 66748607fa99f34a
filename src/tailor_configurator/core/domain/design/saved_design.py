from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

from tailor_configurator.core.domain.configuration import ConfigurationSnapshot
from tailor_configurator.core.domain.design.value_objects.design_origin import DesignOrigin
from tailor_configurator.core.domain.shared import Money


@dataclass(frozen=True, kw_only=True)
class SavedDesign:
    """Immutable snapshot of a Configuration plus the metadata needed to list and restore it."""

    id: str
    product_id: str
    snapshot: ConfigurationSnapshot
    computed_price: Money
    origin: DesignOrigin
    saved_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    product_name: str = ""
    product_category: str = ""
    base_image: str | None = None

    def with_origin(self, origin: DesignOrigin) -> "SavedDesign":
        return replace(self, origin=origin)
