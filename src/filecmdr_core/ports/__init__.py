"""
Ports (interfaces) for FileCmdr.

These define the contracts that adapters must implement.
This enables dependency injection and testing with fakes.
"""

from .fs_port import FSPort
from .console_port import ConsolePort

__all__ = ["FSPort", "ConsolePort"]
