from __future__ import annotations

from abc import ABC, abstractmethod

from tailor_configurator.core.domain.design import SavedDesign


class RemoteDesignStorePort(ABC):
    """Authenticated, authoritative saved-design store of a signed-in account."""

    @abstractmethod
    async def list(self, product_id: str | None, session_token: str) -> list[SavedDesign]:
        """Designs of the account, filtered to ``product_id`` unless it is None."""
        pass

    @abstractmethod
    async def create(self, design: SavedDesign, session_token: str) -> SavedDesign:
        """Persists ``design`` and returns the stored copy with its remote id."""
        pass

    @abstractmethod
    async def delete(self, design_id: str, session_token: str) -> None:
        pass
