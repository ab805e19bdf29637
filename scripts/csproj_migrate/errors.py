"""Exceptions raised while migrating a legacy project file.

Every error carries the path of the file that caused it so the orchestrator
can report it against the right project and move on to the next one.
"""

from pathlib import Path
from typing import Optional


class MigrationError(Exception):
    """Base error for all migration failures."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class NotFoundError(MigrationError):
    """Raised when an input file does not exist."""


class MalformedInputError(MigrationError):
    """Raised when an input file is not well-formed XML or has an invalid shape."""


class MissingAttributeError(MalformedInputError):
    """Raised when a ``<Reference>`` element has no ``Include`` attribute."""


class MissingFieldError(MigrationError):
    """Raised when a required ``.nuspec`` metadata field is absent."""

    def __init__(self, field: str, path: Optional[Path] = None):
        super().__init__(f"Required nuspec field <{field}> is missing", path)
        self.field = field


class InputTooLargeError(MigrationError):
    """Raised when an input file exceeds the configured read bound."""


class WriteError(MigrationError):
    """Raised when the migrated project cannot be written back to disk."""


class ConfigurationError(MigrationError):
    """Raised when the migration options are inconsistent."""
