from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from tailor_configurator.core.domain.catalog.value_objects.view_images import ViewImages

# (category_key, current selections) -> True when the owning option hides that category.
ExclusionPredicate = Callable[[str, Mapping[str, "CustomizationOption | None"]], bool]


@dataclass(frozen=True)
class SuppressCategories:
    """Exclusion predicate that always hides the named categories."""

    categories: frozenset[str]

    def __call__(
        self, category_key: str, selections: Mapping[str, CustomizationOption | None]
    ) -> bool:
        return category_key in self.categories

    def __or__(self, other: SuppressCategories) -> SuppressCategories:
        return SuppressCategories(self.categories | other.categories)


def suppress_categories(*category_keys: str) -> SuppressCategories:
    return SuppressCategories(frozenset(category_keys))


@dataclass(frozen=True, kw_only=True)
class CustomizationOption:
    """One selectable style within a category (a collar cut, a cuff, ...)."""

    id: str
    category_key: str
    name: str = ""
    price_modifier: int = 0
    default_image: str | None = None
    per_fabric_override: Mapping[str, ViewImages] = field(default_factory=dict)
    per_view_override: ViewImages = field(default_factory=ViewImages)
    is_default_choice: bool = False
    display_order: int = 0
    z_index: int | None = None
    mutually_exclusive_with: ExclusionPredicate | None = field(
        default=None, compare=False, repr=False
    )

    def suppresses(
        self, category_key: str, selections: Mapping[str, CustomizationOption | None]
    ) -> bool:
        if self.mutually_exclusive_with is None:
            return False
        return bool(self.mutually_exclusive_with(category_key, selections))
