"""Interface protocols for Simple Directory Chooser."""

from .image_loader import ImageLoader
from .resource_resolver import ResourceResolver

__all__ = ["ImageLoader", "ResourceResolver"]
