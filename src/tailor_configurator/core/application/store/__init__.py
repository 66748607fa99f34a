from tailor_configurator.core.application.store.configuration_store import ConfigurationStore

__all__ = ["ConfigurationStore"]
