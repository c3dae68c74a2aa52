"""
POSIX Filesystem Adapter.

This is the only place FileCmdr touches the operating system for metadata,
directory scans, file reads and program execution. OSError and KeyError are
translated into FileCmdr errors here.

NOTE: change_dir() alters the working directory of the whole process and
nothing restores it. Directory listing relies on this so that entry names
can be inspected relative to the listed directory. This makes the listing
non-reentrant.
"""

import logging
import os
import pwd
from typing import Iterator, List, NoReturn, Sequence

from ..domain.errors import ActionIOError, MetadataError
from ..domain.models import MetadataSnapshot
from ..ports.fs_port import FSPort

logger = logging.getLogger(__name__)


class PosixFS(FSPort):
    """
    FSPort implementation backed by os and pwd.

    Directory listings include the "." and ".." entries, as a raw
    directory scan does. Names that are not valid in the filesystem
    encoding come back surrogate-escaped, as os.listdir returns them.
    """

    def lstat(self, path: str) -> MetadataSnapshot:
        """Get metadata without following a terminal symlink."""
        try:
            stat_info = os.lstat(path)
        except (OSError, ValueError) as e:
            raise MetadataError(f"Cannot stat {path}: {_describe(e)}") from e

        snapshot = MetadataSnapshot.from_stat(stat_info)
        logger.debug("lstat %s -> mode=%o uid=%d gid=%d size=%d",
                     path, snapshot.mode, snapshot.uid, snapshot.gid,
                     snapshot.size_bytes)
        return snapshot

    def owner_name(self, uid: int) -> str:
        """Look the uid up in the password database."""
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError as e:
            raise MetadataError(
                f"No user name for uid {uid}",
                "Check the password database for this user id",
            ) from e

    def list_dir(self, path: str) -> List[str]:
        """List entry names (including "." and ".."), sorted."""
        try:
            names = os.listdir(path)
        except (OSError, ValueError) as e:
            raise ActionIOError(f"Cannot list directory {path}: {_describe(e)}") from e

        return sorted([os.curdir, os.pardir] + names)

    def change_dir(self, path: str) -> None:
        """Change the process working directory (never restored)."""
        try:
            os.chdir(path)
        except (OSError, ValueError) as e:
            raise ActionIOError(f"Cannot change directory to {path}: {_describe(e)}") from e
        logger.debug("Working directory is now %s", os.getcwd())

    def read_lines(self, path: str) -> Iterator[bytes]:
        """Yield the byte lines of a file, contents and line endings untouched."""
        try:
            with open(path, "rb") as f:
                for line in f:
                    yield line
        except (OSError, ValueError) as e:
            raise ActionIOError(f"Cannot read file {path}: {_describe(e)}") from e

    def execute(self, path: str, argv: Sequence[str]) -> NoReturn:
        """Replace the process image; only returns by raising."""
        logger.debug("execv %s %r", path, list(argv))
        try:
            os.execv(path, list(argv))
        except (OSError, ValueError) as e:
            raise ActionIOError(f"Cannot execute {path}: {_describe(e)}") from e
        # os.execv only comes back by raising
        raise ActionIOError(f"Cannot execute {path}")


def _describe(error: Exception) -> str:
    """Short human-readable reason for an OS-level failure."""
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)
