"""Custom exceptions for Simple Directory Chooser."""

from .base import SimpleDirectoryChooserException
from .icons import ConfigurationError, InvalidSetError, ResourceLoadError

__all__ = [
    "SimpleDirectoryChooserException",
    "ConfigurationError",
    "InvalidSetError",
    "ResourceLoadError",
]
