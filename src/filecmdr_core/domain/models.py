"""
Domain models (DTOs) for FileCmdr.

These are pure data classes with no filesystem or terminal dependencies.
"""

import os
import stat
from dataclasses import dataclass


# Column widths of the info line
OWNER_WIDTH = 8
SIZE_WIDTH = 12


@dataclass(frozen=True)
class MetadataSnapshot:
    """Metadata of one path, fetched once per inspection (never cached)."""
    mode: int                    # Type bits + permission bits
    uid: int                     # Owner user id
    gid: int                     # Owner group id
    size_bytes: int
    mtime: float                 # Seconds since the epoch

    @property
    def file_type(self) -> int:
        """Raw type bits (S_IFMT portion of the mode)."""
        return stat.S_IFMT(self.mode)

    @classmethod
    def from_stat(cls, stat_info: os.stat_result) -> "MetadataSnapshot":
        return cls(
            mode=stat_info.st_mode,
            uid=stat_info.st_uid,
            gid=stat_info.st_gid,
            size_bytes=stat_info.st_size,
            mtime=stat_info.st_mtime,
        )


@dataclass(frozen=True)
class FileInfoLine:
    """The printed record for an inspected path."""
    mode: str                    # 10-char rendered mode string
    owner: str                   # Owner user name
    size_bytes: int
    mtime: str                   # 16-char rendered time string
    path: str                    # Path as given by the caller

    def format(self) -> str:
        """Render the fixed-column output line (newline-terminated)."""
        return (
            f"{self.mode} {self.owner:<{OWNER_WIDTH}} "
            f"{self.size_bytes:>{SIZE_WIDTH}} {self.mtime} {self.path}\n"
        )


@dataclass(frozen=True)
class Settings:
    """Runtime settings for a FileCmdr run."""
    invoking_uid: int            # Real uid of the user running the tool
    invoking_gid: int            # Real gid of the user running the tool
    verbose: bool = False        # Emit debug logging on stderr

    @classmethod
    def from_process(cls, verbose: bool = False) -> "Settings":
        """Build settings from the identity of the running process."""
        return cls(
            invoking_uid=os.getuid(),
            invoking_gid=os.getgid(),
            verbose=verbose,
        )
