from dataclasses import dataclass

from tailor_configurator.core.application.exceptions import PersistenceWriteError
from tailor_configurator.core.domain.design import DesignOrigin, SavedDesign


@dataclass(frozen=True)
class SaveOutcome:
    """Where a design ended up.

    ``error`` is set when a write failed. With ``persisted`` still true the
    remote write failed and the local cache took the design instead.
    """

    design: SavedDesign
    origin: DesignOrigin
    error: PersistenceWriteError | None = None
    persisted: bool = True

    @property
    def fell_back_to_local(self) -> bool:
        return self.persisted and self.error is not None and self.origin is DesignOrigin.LOCAL


@dataclass(frozen=True)
class DeleteOutcome:
    design_id: str
    deleted_remote: bool = False
    deleted_local: bool = False
    error: PersistenceWriteError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
