"""Configuration module for the OneLogin SDK."""
from .settings import ClientConfig, load_settings

__all__ = ["ClientConfig", "load_settings"]
