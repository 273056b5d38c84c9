"""Protocol for icon resource lookup."""

from typing import Protocol


class ResourceResolver(Protocol):
    """Interface for mapping a logical resource path to its raw content.

    The icon manager never touches the filesystem directly. Registries,
    set descriptors and icon images are all fetched through a resolver,
    so sets can live on disk, inside a frozen bundle or purely in memory.
    """

    def read(self, path: str) -> bytes | None:
        """Read a resource.

        Args:
            path: Logical resource path (e.g. 'icons/default/icons.props').

        Returns:
            The raw bytes, or None if the resource does not exist.
        """
        ...
