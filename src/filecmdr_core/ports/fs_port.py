"""
Filesystem port interface.

Defines the contract for the operating-system collaborators FileCmdr needs:
metadata, owner lookup, directory scans, file reads, changing directory and
replacing the process image.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, NoReturn, Sequence

from ..domain.models import MetadataSnapshot


class FSPort(ABC):
    """
    Abstract interface for filesystem and process operations.

    Implementations raise the FileCmdr error types (MetadataError,
    ActionIOError), never bare OSError.
    """

    @abstractmethod
    def lstat(self, path: str) -> MetadataSnapshot:
        """
        Get metadata for a path without following a terminal symlink.

        Raises:
            MetadataError: If the path cannot be stat'ed
        """
        pass

    @abstractmethod
    def owner_name(self, uid: int) -> str:
        """
        Map a numeric user id to a user name.

        Raises:
            MetadataError: If the uid has no user name
        """
        pass

    @abstractmethod
    def list_dir(self, path: str) -> List[str]:
        """
        List the entry names of a directory, sorted lexicographically.

        Raises:
            ActionIOError: If the directory cannot be scanned
        """
        pass

    @abstractmethod
    def change_dir(self, path: str) -> None:
        """
        Change the process working directory.

        Raises:
            ActionIOError: If the directory cannot be entered
        """
        pass

    @abstractmethod
    def read_lines(self, path: str) -> Iterator[bytes]:
        """
        Iterate over the raw byte lines of a file, line endings included.

        Raises:
            ActionIOError: If the file cannot be opened or read
        """
        pass

    @abstractmethod
    def execute(self, path: str, argv: Sequence[str]) -> NoReturn:
        """
        Replace the current process image with the program at path.

        Args:
            path: Program to execute
            argv: Full argument vector, argv[0] included

        Raises:
            ActionIOError: If the program could not be executed
        """
        pass
