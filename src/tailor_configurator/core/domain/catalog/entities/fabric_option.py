from dataclasses import dataclass

from tailor_configurator.core.domain.shared import ViewMode


@dataclass(frozen=True, kw_only=True)
class FabricOption:
    id: str
    name: str = ""
    price_modifier: int = 0
    front_image: str | None = None
    back_image: str | None = None
    color_token: str | None = None
    is_default: bool = False

    def image_for(self, view_mode: ViewMode) -> str | None:
        image = self.back_image if view_mode is ViewMode.BACK else self.front_image
        return image or None
