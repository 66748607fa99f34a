from tailor_configurator.core.application.ports.common.exceptions.provider_error import (
    ProviderError,
)

__all__ = ["ProviderError"]
