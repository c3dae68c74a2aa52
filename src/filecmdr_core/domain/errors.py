"""Error hierarchy for FileCmdr.

Every failure raised by the core derives from FileCmdrError. Adapters
translate OSError/KeyError into these types; only the CLI turns them into a
diagnostic and an exit status.
"""

from typing import Optional


class FileCmdrError(Exception):
    """Base exception for all FileCmdr errors."""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message}\nSuggestion: {self.suggestion}"
        return self.message


class ValidationError(FileCmdrError):
    """Invalid command line usage."""
    pass


class MetadataError(FileCmdrError):
    """Metadata could not be fetched or the owner could not be resolved."""
    pass


class DomainError(FileCmdrError):
    """A value is outside the range a renderer can represent."""
    pass


class ActionIOError(FileCmdrError):
    """A user action (list, print, execute) failed on I/O."""
    pass
