"""
Domain models for FileCmdr.

Contains DTOs, enums, settings and the error hierarchy.
"""

from .models import (
    MetadataSnapshot,
    FileInfoLine,
    Settings,
)
from .enums import FileClassification
from .errors import (
    FileCmdrError,
    ValidationError,
    MetadataError,
    DomainError,
    ActionIOError,
)

__all__ = [
    # Models
    "MetadataSnapshot",
    "FileInfoLine",
    "Settings",
    # Enums
    "FileClassification",
    # Errors
    "FileCmdrError",
    "ValidationError",
    "MetadataError",
    "DomainError",
    "ActionIOError",
]
