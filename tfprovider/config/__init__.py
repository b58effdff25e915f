"""Configuration module for the provider."""
from .settings import ProviderConfig, load_settings, configure_logging

__all__ = ["ProviderConfig", "load_settings", "configure_logging"]
