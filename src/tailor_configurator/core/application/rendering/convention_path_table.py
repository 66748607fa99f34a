"""Asset paths derived from the shirt image library's naming convention.

The library only covers a closed set of categories and fabric colors, so every
path is computed once per product into a lookup table. Anything outside the
table has no layer.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from tailor_configurator.core.domain.catalog import CustomizationOption, Product
from tailor_configurator.core.domain.shared import ViewMode

DEFAULT_ASSET_ROOT = "/shirt-style-customization"
CONVENTION_GARMENT = "shirt"
CONVENTION_COLOR_TOKENS: tuple[str, ...] = (
    "white",
    "champagne",
    "light-blue",
    "cobalt-blue",
    "deep-blue",
)
CONVENTION_FAMILY = frozenset({"collar", "cuff", "sleeve", "pocket"})

# Long-sleeve files use a hyphen for these colors and an underscore for the rest.
_HYPHENATED_SLEEVE_COLORS = frozenset({"white", "cobalt-blue"})

_VIEW_FOLDER = {ViewMode.FRONT: "Front", ViewMode.BACK: "Back"}

EntryKey = tuple[str, str, str, ViewMode]


def is_short_sleeve(option_id: str, name: str = "") -> bool:
    text = f"{option_id} {name}".lower()
    return "half" in text or "short" in text


def _is_no_pocket(option: CustomizationOption) -> bool:
    return option.id == "pocket-none" or "no pocket" in option.name.lower()


def _collar_path(root: str, color: str, option: CustomizationOption, view: ViewMode) -> str:
    if view is ViewMode.BACK:
        return f"{root}/Back/Collar/back-collar-{color}.png"
    style = option.id.replace("collar-", "", 1)
    if color == "cobalt-blue" and style == "button-down":
        return f"{root}/Front/Collar/{color}/button-down-collar.png"
    return f"{root}/Front/Collar/{color}/{style}.png"


def _cuff_path(root: str, color: str, option: CustomizationOption, view: ViewMode) -> str | None:
    if view is ViewMode.BACK:
        return None
    style = option.id.replace("cuff-", "", 1)
    return f"{root}/Front/Cuffs/{color}/{style}.png"


def _sleeve_path(root: str, color: str, option: CustomizationOption, view: ViewMode) -> str:
    if is_short_sleeve(option.id, option.name):
        filename = "sleeves_short.png"
    elif color in _HYPHENATED_SLEEVE_COLORS:
        filename = "sleeves-long.png"
    else:
        filename = "sleeves_long.png"
    return f"{root}/{_VIEW_FOLDER[view]}/Sleeves/{color}/{filename}"


def _pocket_path(root: str, color: str, option: CustomizationOption, view: ViewMode) -> str | None:
    if view is ViewMode.BACK or _is_no_pocket(option):
        return None
    return f"{root}/Front/Chestpocket/{color}/standard.png"


_DERIVERS = {
    "collar": _collar_path,
    "cuff": _cuff_path,
    "sleeve": _sleeve_path,
    "pocket": _pocket_path,
}


@dataclass(frozen=True)
class ConventionPathTable:
    entries: Mapping[EntryKey, str] = field(default_factory=dict)
    base_entries: Mapping[tuple[str, ViewMode], str] = field(default_factory=dict)
    family: frozenset[str] = frozenset()

    @classmethod
    def empty(cls) -> ConventionPathTable:
        return cls()

    @classmethod
    def build(cls, product: Product, asset_root: str = DEFAULT_ASSET_ROOT) -> ConventionPathTable:
        if product.category.strip().lower() != CONVENTION_GARMENT:
            return cls.empty()

        root = asset_root.rstrip("/")
        entries: dict[EntryKey, str] = {}
        for group in product.option_groups:
            derive = _DERIVERS.get(group.category_key)
            if derive is None:
                continue
            for option in group.options:
                for color in CONVENTION_COLOR_TOKENS:
                    for view in ViewMode:
                        path = derive(root, color, option, view)
                        if path:
                            entries[(group.category_key, color, option.id, view)] = path

        base_entries = {
            (color, view): f"{root}/{_VIEW_FOLDER[view]}/{view.value}-{color}.png"
            for color in CONVENTION_COLOR_TOKENS
            for view in ViewMode
        }
        return cls(entries=entries, base_entries=base_entries, family=CONVENTION_FAMILY)

    def covers(self, category_key: str) -> bool:
        return category_key in self.family

    def lookup(
        self, category_key: str, color_token: str | None, option_id: str, view_mode: ViewMode
    ) -> str | None:
        if not color_token:
            return None
        return self.entries.get((category_key, color_token, option_id, view_mode))

    def base_path(self, color_token: str | None, view_mode: ViewMode) -> str | None:
        if not color_token:
            return None
        return self.base_entries.get((color_token, view_mode))

    def __len__(self) -> int:
        return len(self.entries)
