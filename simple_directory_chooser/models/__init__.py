"""Data models for Simple Directory Chooser."""

from .icon_set import (
    DESCRIPTOR_KEYS,
    ICON_ROLES,
    KEY_ACTIVE_SET,
    KEY_AVAILABLE_SETS,
    KEY_CLOSED,
    KEY_DRIVE,
    KEY_ICON_SIZE,
    KEY_LICENSE,
    KEY_LOCATION_PREFIX,
    KEY_OPEN,
    KEY_SOURCE,
    CacheEntry,
    FailedIcon,
    IconSetDescriptor,
    LoadedIcon,
)

__all__ = [
    "IconSetDescriptor",
    "LoadedIcon",
    "FailedIcon",
    "CacheEntry",
    "DESCRIPTOR_KEYS",
    "ICON_ROLES",
    "KEY_AVAILABLE_SETS",
    "KEY_ACTIVE_SET",
    "KEY_LOCATION_PREFIX",
    "KEY_SOURCE",
    "KEY_LICENSE",
    "KEY_DRIVE",
    "KEY_OPEN",
    "KEY_CLOSED",
    "KEY_ICON_SIZE",
]
