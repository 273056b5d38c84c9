"""Configuration classes for Simple Directory Chooser."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IconManagerConfig:
    """Immutable configuration for the icon manager.

    Resource paths are logical paths handed to the resource resolver,
    relative to its root unless absolute.
    """

    # Registry settings
    sets_resource: str = "icons/sets.props"
    descriptor_name: str = "icons.props"

    # Rendering settings
    default_icon_size: int = 16  # Used when icon_size is missing or not a number
    smooth_scaling: bool = True

    def __post_init__(self):
        """Reject sizes the image loader could not honour."""
        if self.default_icon_size <= 0:
            raise ValueError(f"default_icon_size must be positive, got {self.default_icon_size}")
