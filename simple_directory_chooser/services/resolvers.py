"""Resource resolvers for icon registries, descriptors and images."""

import logging
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class FileSystemResolver:
    """Resolve resources against a directory on disk.

    Relative paths are looked up below ``root``; absolute paths are used as is.
    """

    def __init__(self, root: Path | str | None = None):
        """Initialize the resolver.

        Args:
            root: Base directory for relative paths (defaults to the current directory)
        """
        self._root = Path(root) if root is not None else Path.cwd()

    @property
    def root(self) -> Path:
        """Base directory for relative paths."""
        return self._root

    def path_for(self, path: str) -> Path:
        """Map a logical resource path to a filesystem path."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self._root / candidate

    def read(self, path: str) -> bytes | None:
        """Read a resource from disk, None if missing or unreadable."""
        file_path = self.path_for(path)
        if not file_path.is_file():
            logger.debug(f"Resource not found: {file_path}")
            return None
        try:
            return file_path.read_bytes()
        except OSError as e:
            logger.warning(f"Failed to read resource {file_path}: {e}")
            return None


class MappingResolver:
    """Resolve resources from an in-memory mapping of path to content."""

    def __init__(self, resources: Mapping[str, bytes | str] | None = None):
        """Initialize the resolver.

        Args:
            resources: Initial resources; str values are stored UTF-8 encoded
        """
        self._resources: dict[str, bytes] = {}
        for path, content in (resources or {}).items():
            self.add(path, content)

    def add(self, path: str, content: bytes | str) -> None:
        """Register or replace a resource."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._resources[path] = content

    def read(self, path: str) -> bytes | None:
        """Return the registered content, None if unknown."""
        return self._resources.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self._resources

    def __len__(self) -> int:
        return len(self._resources)
