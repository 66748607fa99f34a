"""Configurator exception hierarchy.

Everything the engine raises derives from ``ConfiguratorError`` so callers can
handle the whole family, or one kind, without string-matching.
"""

from typing import Any


class ConfiguratorError(Exception):
    """Base exception for all configurator errors."""

    retryable: bool = False

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class InvalidSelection(ConfiguratorError):
    """An option or fabric does not belong to the loaded product (catalog drift or a bug)."""


class InvalidQuantity(ConfiguratorError):
    """A line item quantity below one."""


class ConfigurationDiscarded(ConfiguratorError):
    """The target configuration was discarded; no further mutation may land on it."""


class CatalogLoadError(ConfiguratorError):
    """Catalog fetch or descriptor validation failed. The caller may retry."""

    retryable = True


class PersistenceWriteError(ConfiguratorError):
    """Remote save or delete failed. The local store remains usable as a fallback."""

    retryable = True


class OrderSubmissionError(ConfiguratorError):
    """The order service rejected or failed the submission."""


class InvalidStateTransition(ConfiguratorError):
    """A restore attempt tried to move between two states that are not linked."""
