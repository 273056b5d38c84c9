"""Default configuration values for Simple Directory Chooser."""

from .config import IconManagerConfig


def create_default_config(**overrides) -> IconManagerConfig:
    """Build an icon manager configuration, replacing selected fields.

    Args:
        **overrides: IconManagerConfig field values to use instead of the defaults

    Returns:
        The resulting IconManagerConfig

    Example:
        config = create_default_config(sets_resource="themes/sets.props")
    """
    return IconManagerConfig(**overrides)
