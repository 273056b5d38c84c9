"""Protocol for icon image decoding."""

from typing import Any, Protocol


class ImageLoader(Protocol):
    """Interface for turning raw image bytes into a square icon image."""

    def load(self, data: bytes, size: int) -> Any:
        """Decode and scale an image.

        Args:
            data: Raw image content (PNG, SVG, ...).
            size: Edge length in pixels of the resulting square image.

        Returns:
            The scaled image handle.

        Raises:
            ResourceLoadError: If the data cannot be decoded.
        """
        ...
