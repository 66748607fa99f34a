"""Catalog-independent, immutable copy of a Configuration.

Snapshots hold ids and display data only, never references to live catalog
objects, so a restore rebinds every slot against the catalog that is current
at restore time.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from tailor_configurator.core.domain.shared import ViewMode


@dataclass(frozen=True)
class SnapshotItem:
    id: str
    name: str = ""
    price_modifier: int = 0


@dataclass(frozen=True)
class ConfigurationSnapshot:
    fabric: SnapshotItem | None = None
    selections: tuple[tuple[str, SnapshotItem | None], ...] = ()
    measurements: tuple[tuple[str, str], ...] = ()
    view_mode: ViewMode = ViewMode.FRONT

    @classmethod
    def of(
        cls,
        *,
        fabric: SnapshotItem | None,
        selections: Mapping[str, SnapshotItem | None],
        measurements: Mapping[str, str],
        view_mode: ViewMode = ViewMode.FRONT,
    ) -> "ConfigurationSnapshot":
        return cls(
            fabric=fabric,
            selections=tuple(selections.items()),
            measurements=tuple((k, str(v)) for k, v in measurements.items()),
            view_mode=view_mode,
        )

    def selection_map(self) -> dict[str, SnapshotItem | None]:
        return dict(self.selections)

    def measurement_map(self) -> dict[str, str]:
        return dict(self.measurements)

    def selected_option_id(self, category_key: str) -> str | None:
        item = self.selection_map().get(category_key)
        return item.id if item else None
