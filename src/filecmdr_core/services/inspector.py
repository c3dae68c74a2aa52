"""
Inspector Service - one info line per path.

Fetches fresh metadata, prints the fixed-column info line and returns the
classification that selects the user action:

    drwxr-xr-x root         1408 08/09/2016 20:06 /
"""

import logging
from typing import Optional, Tuple

from ..ports.fs_port import FSPort
from ..ports.console_port import ConsolePort
from ..domain.enums import FileClassification
from ..domain.errors import MetadataError
from ..domain.models import FileInfoLine, Settings
from .classifier import classify_snapshot
from .rendering import render_mode, render_time

logger = logging.getLogger(__name__)


class Inspector:
    """
    Service for describing a single path.

    Symbolic links are described as links, never as their targets.
    """

    def __init__(self, fs: FSPort, console: ConsolePort,
                 settings: Optional[Settings] = None):
        """
        Initialize the inspector.

        Args:
            fs: Filesystem adapter
            console: Console the info line is written to
            settings: Identity of the invoking user (defaults to this process)
        """
        self.fs = fs
        self.console = console
        self.settings = settings or Settings.from_process()

    def describe(self, path: str) -> Tuple[FileInfoLine, FileClassification]:
        """
        Build the info line and classification for a path without printing.

        Raises:
            MetadataError: If the path is empty, cannot be stat'ed, or its
                           owner has no user name
            DomainError: If the mode or modification time cannot be rendered
        """
        if not path:
            raise MetadataError("No path given", "Pass a file or directory path")

        snapshot = self.fs.lstat(path)
        owner = self.fs.owner_name(snapshot.uid)

        info = FileInfoLine(
            mode=render_mode(snapshot.mode, snapshot.uid, snapshot.gid, self.settings),
            owner=owner,
            size_bytes=snapshot.size_bytes,
            mtime=render_time(snapshot.mtime),
            path=path,
        )
        classification = classify_snapshot(snapshot, self.settings)
        logger.debug("%s classified as %s", path, classification.value)
        return info, classification

    def inspect(self, path: str) -> FileClassification:
        """
        Print the info line for a path and return its classification.

        Exactly one line is written on success; nothing on failure.
        """
        info, classification = self.describe(path)
        self.console.write(info.format())
        return classification
