from abc import ABC, abstractmethod


class KeyValueStorePort(ABC):
    """Durable, device-scoped string storage supplied by the host."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        pass

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass
