from abc import ABC, abstractmethod

from tailor_configurator.core.domain.order import OrderRequest


class OrderPort(ABC):
    @abstractmethod
    async def submit(self, order: OrderRequest) -> str:
        """Submits the order and returns the order number assigned by the service."""
        pass
