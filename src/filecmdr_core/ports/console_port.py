"""
Console port interface.

Defines the contract for the interactive terminal: writing output and
prompts, and reading the user's answers.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ConsolePort(ABC):
    """Abstract interface for terminal interaction."""

    @abstractmethod
    def write(self, text: str) -> None:
        """
        Write text to standard output.

        Text may carry surrogate-escaped bytes (undecodable file names);
        they are written back as the original bytes.

        Raises:
            ActionIOError: If the write fails
        """
        pass

    @abstractmethod
    def write_bytes(self, data: bytes) -> None:
        """
        Write raw bytes to standard output, unchanged.

        Raises:
            ActionIOError: If the write fails
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """Flush buffered output."""
        pass

    @abstractmethod
    def read_char(self) -> Optional[str]:
        """Read a single-character answer. Returns None at end of input."""
        pass

    @abstractmethod
    def read_line(self) -> Optional[str]:
        """Read one line without its newline. Returns None at end of input."""
        pass

    @abstractmethod
    def discard_pending(self) -> None:
        """Discard any input still buffered after an answer."""
        pass

    def prompt(self, text: str) -> None:
        """Write a prompt and flush so it is visible before blocking on input."""
        self.write(text)
        self.flush()
