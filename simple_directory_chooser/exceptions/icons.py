"""Icon set related exceptions."""

from .base import SimpleDirectoryChooserException


class ConfigurationError(SimpleDirectoryChooserException):
    """Raised when the icon set registry or a set descriptor is invalid."""

    pass


class InvalidSetError(SimpleDirectoryChooserException):
    """Raised when activating an icon set that is not declared."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = list(available)
        super().__init__(f"Invalid icon set name (available: {','.join(self.available)}): {name}")


class ResourceLoadError(SimpleDirectoryChooserException):
    """Raised when an icon resource cannot be decoded or scaled."""

    pass
