"""Data models for icon sets and cached icons."""

from dataclasses import dataclass, field
from typing import Any

# Registry keys
KEY_AVAILABLE_SETS = "available_sets"
KEY_ACTIVE_SET = "active_set"
KEY_LOCATION_PREFIX = "location_"

# Descriptor keys
KEY_SOURCE = "source"
KEY_LICENSE = "license"
KEY_DRIVE = "drive"
KEY_OPEN = "open"
KEY_CLOSED = "closed"
KEY_ICON_SIZE = "icon_size"

DESCRIPTOR_KEYS = (KEY_SOURCE, KEY_LICENSE, KEY_DRIVE, KEY_OPEN, KEY_CLOSED, KEY_ICON_SIZE)
ICON_ROLES = (KEY_DRIVE, KEY_OPEN, KEY_CLOSED)


@dataclass(frozen=True)
class IconSetDescriptor:
    """The loaded icons.props of one icon set."""

    name: str  # Set name as declared in available_sets
    location: str  # Resource directory of the set
    properties: dict[str, str] = field(default_factory=dict)

    @property
    def source(self) -> str:
        """Where the icons come from."""
        return self.properties.get(KEY_SOURCE, "")

    @property
    def license(self) -> str:
        """License the icons are distributed under."""
        return self.properties.get(KEY_LICENSE, "")

    def filename_for(self, role: str) -> str:
        """Get the file name mapped to a role, empty if the role has no icon."""
        return self.properties.get(role, "").strip()

    def resolve(self, filename: str) -> str:
        """Build the resource path of a file inside this set."""
        return f"{self.location}/{filename}"

    def __str__(self) -> str:
        return f"{self.name} ({self.location})"


@dataclass(frozen=True)
class LoadedIcon:
    """Cache entry for an icon that was loaded and scaled."""

    image: Any
    size: int


@dataclass(frozen=True)
class FailedIcon:
    """Cache entry remembering that an icon could not be loaded."""

    reason: str = ""


CacheEntry = LoadedIcon | FailedIcon
