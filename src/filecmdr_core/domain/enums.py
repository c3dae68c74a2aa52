"""
Enumerations for FileCmdr domain.
"""

from enum import Enum
from typing import Optional


class FileClassification(str, Enum):
    """Semantic file type of an inspected path."""
    DIRECTORY = "directory"
    USER_EXECUTABLE = "user_executable"   # Regular file the invoking user may execute
    REGULAR = "regular"
    SYMLINK = "symlink"
    OTHER = "other"                       # FIFO, character or block device
    ERROR = "error"                       # Matched none of the above

    @property
    def type_char(self) -> Optional[str]:
        """Leading character of the mode string for this classification."""
        TYPE_CHARS = {
            FileClassification.DIRECTORY: "d",
            FileClassification.USER_EXECUTABLE: "e",
            FileClassification.REGULAR: "f",
            FileClassification.SYMLINK: "l",
            FileClassification.OTHER: "o",
        }
        return TYPE_CHARS.get(self)

    @property
    def is_actionable(self) -> bool:
        """Whether the dispatcher offers an action for this classification."""
        return self in (
            FileClassification.DIRECTORY,
            FileClassification.USER_EXECUTABLE,
            FileClassification.REGULAR,
        )
