from abc import ABC, abstractmethod
from typing import Any


class CatalogPort(ABC):
    @abstractmethod
    async def get(self, product_id: str) -> dict[str, Any]:
        """Returns the raw product descriptor. Raises ProviderError on transport failure."""
        pass
