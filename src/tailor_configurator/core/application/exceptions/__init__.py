from tailor_configurator.core.application.exceptions.configurator_exceptions import (
    CatalogLoadError,
    ConfigurationDiscarded,
    ConfiguratorError,
    InvalidQuantity,
    InvalidSelection,
    InvalidStateTransition,
    OrderSubmissionError,
    PersistenceWriteError,
)

__all__ = [
    "CatalogLoadError",
    "ConfigurationDiscarded",
    "ConfiguratorError",
    "InvalidQuantity",
    "InvalidSelection",
    "InvalidStateTransition",
    "OrderSubmissionError",
    "PersistenceWriteError",
]
