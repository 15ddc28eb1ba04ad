"""Python SDK for the OneLogin identity-management API."""
from .version import __version__
from .client import OneLoginClient

__all__ = ["__version__", "OneLoginClient"]
