"""Icon set services for Simple Directory Chooser."""

from .icon_manager import IconManager, check_icon_set, check_sets, split_sets
from .image_loader import QtImageLoader
from .properties import load_properties, parse_properties
from .resolvers import FileSystemResolver, MappingResolver

__all__ = [
    "IconManager",
    "QtImageLoader",
    "FileSystemResolver",
    "MappingResolver",
    "load_properties",
    "parse_properties",
    "check_sets",
    "check_icon_set",
    "split_sets",
]
