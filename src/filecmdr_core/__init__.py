"""
FileCmdr Core - Headless library for interactive file inspection.

Describes a path in a fixed-column info line, classifies it, and offers
a type-specific action: list a directory, print a file, or execute a
program. It has no CLI dependencies and can be embedded in other tools.
"""

__version__ = "0.1.0"
__author__ = "FileCmdr Team"

# Lazy imports to avoid loading everything at once
def __getattr__(name):
    if name == "PosixFS":
        from .adapters.posix_fs import PosixFS
        return PosixFS
    elif name == "TerminalConsole":
        from .adapters.terminal import TerminalConsole
        return TerminalConsole
    elif name == "Inspector":
        from .services.inspector import Inspector
        return Inspector
    elif name == "ActionDispatcher":
        from .services.dispatcher import ActionDispatcher
        return ActionDispatcher
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "__version__",
    "PosixFS",
    "TerminalConsole",
    "Inspector",
    "ActionDispatcher",
]
