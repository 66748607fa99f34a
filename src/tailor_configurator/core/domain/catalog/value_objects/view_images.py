from dataclasses import dataclass

from tailor_configurator.core.domain.shared import ViewMode


@dataclass(frozen=True)
class ViewImages:
    """Optional front/back image pair. An empty string counts as absent."""

    front: str | None = None
    back: str | None = None

    def for_view(self, view_mode: ViewMode) -> str | None:
        image = self.back if view_mode is ViewMode.BACK else self.front
        return image or None

    def is_empty(self) -> bool:
        return not (self.front or self.back)
