"""
Adapters for FileCmdr.

Implementations of the port interfaces.
"""

from .posix_fs import PosixFS
from .terminal import TerminalConsole

__all__ = ["PosixFS", "TerminalConsole"]
