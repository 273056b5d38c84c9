"""Configuration management for Simple Directory Chooser."""

from .config import IconManagerConfig
from .defaults import create_default_config

__all__ = ["IconManagerConfig", "create_default_config"]
