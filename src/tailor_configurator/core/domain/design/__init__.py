from tailor_configurator.core.domain.design.saved_design import SavedDesign
from tailor_configurator.core.domain.design.value_objects.design_origin import DesignOrigin

__all__ = ["DesignOrigin", "SavedDesign"]
