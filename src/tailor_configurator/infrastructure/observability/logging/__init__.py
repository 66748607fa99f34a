from tailor_configurator.infrastructure.observability.logging.schema_processor import (
    configurator_schema_processor,
)

__all__ = ["configurator_schema_processor"]
