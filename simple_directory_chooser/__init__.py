"""
Simple Directory Chooser - Tree-based directory picker components

Provides the icon-set management used by the directory tree: named,
switchable icon sets declared in properties files, with lazily loaded
and cached role icons.
"""

__version__ = "0.1.0"
__author__ = "Simple Directory Chooser Contributors"
