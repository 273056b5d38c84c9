"""Base exception classes for Simple Directory Chooser."""


class SimpleDirectoryChooserException(Exception):
    """Base exception for all Simple Directory Chooser errors.

    All custom exceptions in the simple_directory_chooser package should
    inherit from this base class for consistent error handling.
    """

    pass
