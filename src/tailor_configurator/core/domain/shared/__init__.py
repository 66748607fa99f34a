from tailor_configurator.core.domain.shared.money import Money
from tailor_configurator.core.domain.shared.view_mode import ViewMode

__all__ = ["Money", "ViewMode"]
