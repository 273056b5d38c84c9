"""Service managing the icon sets used by the directory tree."""

import logging
import re
import threading
from collections.abc import Mapping
from typing import Any

from simple_directory_chooser.config import IconManagerConfig
from simple_directory_chooser.exceptions import (
    ConfigurationError,
    InvalidSetError,
    ResourceLoadError,
)
from simple_directory_chooser.interfaces import ImageLoader, ResourceResolver
from simple_directory_chooser.models import (
    DESCRIPTOR_KEYS,
    ICON_ROLES,
    KEY_ACTIVE_SET,
    KEY_AVAILABLE_SETS,
    KEY_CLOSED,
    KEY_DRIVE,
    KEY_ICON_SIZE,
    KEY_LOCATION_PREFIX,
    KEY_OPEN,
    CacheEntry,
    FailedIcon,
    IconSetDescriptor,
    LoadedIcon,
)
from simple_directory_chooser.resources import get_resource_dir
from simple_directory_chooser.services.image_loader import QtImageLoader
from simple_directory_chooser.services.properties import load_properties
from simple_directory_chooser.services.resolvers import FileSystemResolver

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def split_sets(value: str) -> list[str]:
    """Split a comma separated list of set names.

    Entries are not trimmed or deduplicated; trailing empty entries
    (e.g. from a trailing comma) are dropped.
    """
    names = value.split(",")
    while names and names[-1] == "":
        names.pop()
    return names


def check_sets(props: Mapping[str, str]) -> str | None:
    """Check a registry of icon sets.

    Returns:
        None if all checks passed, otherwise the first violation
    """
    if props.get(KEY_AVAILABLE_SETS) is None:
        return f"Missing sets key: {KEY_AVAILABLE_SETS}"
    if props.get(KEY_ACTIVE_SET) is None:
        return f"Missing sets key: {KEY_ACTIVE_SET}"

    sets = split_sets(props[KEY_AVAILABLE_SETS])
    for name in sets:
        if props.get(KEY_LOCATION_PREFIX + name) is None:
            return f"Missing sets location key: {KEY_LOCATION_PREFIX}{name}"

    if props[KEY_ACTIVE_SET] not in sets:
        return f"Active set not available: {props[KEY_ACTIVE_SET]}"

    return None


def check_icon_set(props: Mapping[str, str]) -> str | None:
    """Check the descriptor of a single icon set.

    Returns:
        None if all checks passed, otherwise the first violation
    """
    for key in DESCRIPTOR_KEYS:
        if props.get(key) is None:
            return f"Missing icon set key: {key}"
    return None


class IconManager:
    """Manage the icon sets for the directory tree.

    The registry lists the available sets, the active one and where each
    set lives. The active set's descriptor maps the drive, open and closed
    roles to image files and gives the pixel size icons are scaled to.

    Icons are loaded lazily and cached by resolved resource path. A path
    that failed to load is remembered as failed and never retried.
    """

    def __init__(
        self,
        sets: str | Mapping[str, str] | None = None,
        resolver: ResourceResolver | None = None,
        image_loader: ImageLoader | None = None,
        config: IconManagerConfig | None = None,
    ):
        """Initialize the manager and activate the registry's active set.

        Args:
            sets: Registry resource path, an in-memory registry, or None for the built-in sets
            resolver: Resource lookup (defaults to the package resource directory)
            image_loader: Image decoder (defaults to QtImageLoader)
            config: Manager configuration

        Raises:
            ConfigurationError: If the registry or the active set's descriptor is invalid
        """
        self.config = config or IconManagerConfig()

        if resolver is None:
            resolver = FileSystemResolver(get_resource_dir())
        if image_loader is None:
            image_loader = QtImageLoader(smooth=self.config.smooth_scaling)

        self._resolver = resolver
        self._image_loader = image_loader
        self._cache: dict[str, CacheEntry] = {}
        self._lock = threading.RLock()

        if sets is None:
            sets = self.config.sets_resource
        if isinstance(sets, str):
            registry = self._load_properties(sets, "Failed to read icon sets")
        else:
            registry = dict(sets)

        msg = check_sets(registry)
        if msg is not None:
            raise ConfigurationError(f"Icon sets definition invalid:\n{msg}")

        self._sets = registry
        self._active = self._load_descriptor(registry[KEY_ACTIVE_SET])
        logger.info(f"Activated icon set {self._active}")

    def _load_properties(self, path: str, error: str) -> dict[str, str]:
        """Read and parse a properties resource.

        Raises:
            ConfigurationError: If the resource is missing or malformed
        """
        data = self._resolver.read(path)
        if data is None:
            raise ConfigurationError(f"{error}: {path}")
        try:
            return load_properties(data)
        except ValueError as e:
            raise ConfigurationError(f"{error}: {path} ({e})") from e

    def _load_descriptor(self, name: str) -> IconSetDescriptor:
        """Load and check the descriptor of a set without activating it."""
        location = self._sets[KEY_LOCATION_PREFIX + name]
        path = f"{location}/{self.config.descriptor_name}"
        try:
            props = self._load_properties(path, "Failed to read icon set")
        except ConfigurationError as e:
            raise ConfigurationError(f"Failed to initialize icon set '{name}':\n{e}") from e

        msg = check_icon_set(props)
        if msg is not None:
            raise ConfigurationError(f"Failed to initialize icon set '{name}':\n{msg}")

        return IconSetDescriptor(name=name, location=location, properties=props)

    def get_available_sets(self) -> list[str]:
        """Get the names of the declared icon sets, in declaration order."""
        with self._lock:
            return split_sets(self._sets[KEY_AVAILABLE_SETS])

    def get_active_set(self) -> str:
        """Get the name of the active icon set."""
        with self._lock:
            return self._sets[KEY_ACTIVE_SET]

    def set_active_set(self, name: str) -> None:
        """Activate another icon set.

        The new descriptor is loaded and checked before anything changes,
        so a failing set leaves the previous one active.

        Args:
            name: Name of the set to activate

        Raises:
            InvalidSetError: If the name is not one of the available sets
            ConfigurationError: If the set's descriptor is missing or invalid
        """
        with self._lock:
            available = self.get_available_sets()
            if name not in available:
                raise InvalidSetError(name, available)

            descriptor = self._load_descriptor(name)
            self._sets[KEY_ACTIVE_SET] = name
            self._active = descriptor
            logger.info(f"Activated icon set {descriptor}")

    def get_active_descriptor(self) -> IconSetDescriptor:
        """Get the descriptor of the active set."""
        with self._lock:
            return self._active

    def get_registry(self) -> dict[str, str]:
        """Get a copy of the registry."""
        with self._lock:
            return dict(self._sets)

    def get_location(self, name: str | None = None) -> str:
        """Get the resource directory of a set (the active one by default).

        Raises:
            InvalidSetError: If the name is not one of the available sets
        """
        with self._lock:
            if name is None:
                return self._active.location
            available = self.get_available_sets()
            if name not in available:
                raise InvalidSetError(name, available)
            return self._sets[KEY_LOCATION_PREFIX + name]

    def get_source(self) -> str:
        """Get where the active set's icons come from."""
        return self.get_active_descriptor().source

    def get_license(self) -> str:
        """Get the license of the active set's icons."""
        return self.get_active_descriptor().license

    def get_icon_size(self) -> int:
        """Get the pixel size icons are scaled to.

        Only plain ASCII digits with an optional sign are accepted, so
        "32 " or "3_2" count as invalid. Missing, invalid or non-positive
        values fall back to the configured default size instead of failing.
        """
        value = self.get_active_descriptor().properties.get(KEY_ICON_SIZE)
        size = int(value) if value is not None and _INTEGER.fullmatch(value) else 0
        if size <= 0:
            logger.debug(f"Invalid icon size {value!r}, using {self.config.default_icon_size}")
            return self.config.default_icon_size
        return size

    def get_icon(self, role: str) -> Any | None:
        """Get the icon for a role of the active set.

        Args:
            role: One of the icon roles (drive, open, closed)

        Returns:
            The scaled image, or None if the role is unknown, has no icon or failed to load
        """
        if role not in ICON_ROLES:
            return None
        with self._lock:
            descriptor = self._active
            filename = descriptor.filename_for(role)
            if not filename:
                return None
            return self._load_icon(descriptor.resolve(filename))

    def get_drive_icon(self) -> Any | None:
        """Get the drive icon, None if not available."""
        return self.get_icon(KEY_DRIVE)

    def get_open_icon(self) -> Any | None:
        """Get the open folder icon, None if not available."""
        return self.get_icon(KEY_OPEN)

    def get_closed_icon(self) -> Any | None:
        """Get the closed folder icon, None if not available."""
        return self.get_icon(KEY_CLOSED)

    def _load_icon(self, path: str) -> Any | None:
        """Load an icon through the cache."""
        entry = self._cache.get(path)
        if entry is not None:
            logger.debug(f"Icon cache hit: {path}")
            return entry.image if isinstance(entry, LoadedIcon) else None

        size = self.get_icon_size()
        data = self._resolver.read(path)
        if data is None:
            logger.warning(f"Failed to load icon: {path} (not found)")
            self._cache[path] = FailedIcon("not found")
            return None

        try:
            image = self._image_loader.load(data, size)
        except ResourceLoadError as e:
            logger.warning(f"Failed to load icon: {path} ({e})")
            self._cache[path] = FailedIcon(str(e))
            return None

        self._cache[path] = LoadedIcon(image=image, size=size)
        return image
