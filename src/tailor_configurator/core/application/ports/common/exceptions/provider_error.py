from dataclasses import dataclass

from tailor_configurator.core.application.exceptions import ConfiguratorError


@dataclass(eq=False)
class ProviderError(ConfiguratorError):
    """Failure reported by an external collaborator (catalog, customer or order service)."""

    provider: str
    message: str
    retryable: bool = False
    status_code: int | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message, context={"provider": self.provider})

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{code}"
