"""Per-garment stacking order and view visibility of customization categories."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from tailor_configurator.core.domain.catalog import OptionGroup
from tailor_configurator.core.domain.shared import ViewMode

BASE_Z_INDEX = 1
GENERIC_Z_START = 20
GENERIC_Z_STEP = 10

FRONT_ONLY = frozenset({ViewMode.FRONT})
BACK_ONLY = frozenset({ViewMode.BACK})
BOTH_VIEWS = frozenset({ViewMode.FRONT, ViewMode.BACK})


@dataclass(frozen=True)
class CategoryLayerRule:
    z_index: int
    views: frozenset[ViewMode] = FRONT_ONLY

    def visible_in(self, view_mode: ViewMode) -> bool:
        return view_mode in self.views


@dataclass(frozen=True)
class LayerProfile:
    name: str
    rules: Mapping[str, CategoryLayerRule] = field(default_factory=dict)

    def rule_for(self, group: OptionGroup, position: int) -> CategoryLayerRule:
        """Profile rule for the group, with descriptor-level overrides applied.

        Categories the profile does not know stack by display position and are front-only.
        """
        rule = self.rules.get(group.category_key) or CategoryLayerRule(
            GENERIC_Z_START + position * GENERIC_Z_STEP
        )
        z_index = group.z_index if group.z_index is not None else rule.z_index
        views = rule.views
        if group.back_visible is not None:
            views = views | BACK_ONLY if group.back_visible else views - BACK_ONLY
        return CategoryLayerRule(z_index, views)


SHIRT_PROFILE = LayerProfile(
    "shirt",
    {
        "sleeve": CategoryLayerRule(60, BOTH_VIEWS),
        "placket": CategoryLayerRule(70),
        "cuff": CategoryLayerRule(130),
        "collar": CategoryLayerRule(140, BOTH_VIEWS),
        "pocket": CategoryLayerRule(145),
        "button": CategoryLayerRule(150),
        "necktie": CategoryLayerRule(160),
        "bowtie": CategoryLayerRule(165),
        "back": CategoryLayerRule(200, BACK_ONLY),
    },
)

PANTS_PROFILE = LayerProfile(
    "pants",
    {
        "fit": CategoryLayerRule(10, BOTH_VIEWS),
        "back-pockets": CategoryLayerRule(20, BACK_ONLY),
        "waist": CategoryLayerRule(30, BOTH_VIEWS),
        "pleats": CategoryLayerRule(40),
        "cuffs": CategoryLayerRule(45, BOTH_VIEWS),
        "fastening": CategoryLayerRule(50),
    },
)

GENERIC_PROFILE = LayerProfile("generic")

_PROFILES = {SHIRT_PROFILE.name: SHIRT_PROFILE, PANTS_PROFILE.name: PANTS_PROFILE}


def profile_for(garment: str | None) -> LayerProfile:
    return _PROFILES.get((garment or "").strip().lower(), GENERIC_PROFILE)
