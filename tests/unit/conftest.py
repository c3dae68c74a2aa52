"""
Shared fixtures: in-memory fakes of the filesystem and console ports.
"""

import os
import stat
import sys
import time
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Union

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from filecmdr_core.domain.errors import ActionIOError, MetadataError
from filecmdr_core.domain.models import MetadataSnapshot, Settings
from filecmdr_core.ports.console_port import ConsolePort
from filecmdr_core.ports.fs_port import FSPort


# 08/09/2016 20:06 local time
SEPT_8_2016 = time.mktime((2016, 9, 8, 20, 6, 0, 0, 0, -1))

INVOKING_UID = 1000
INVOKING_GID = 1000


class FakeFS(FSPort):
    """FSPort over dictionaries; records directory changes and exec calls."""

    def __init__(self):
        self.entries: Dict[str, MetadataSnapshot] = {}
        self.users: Dict[int, str] = {0: "root", INVOKING_UID: "alice"}
        self.directories: Dict[str, List[str]] = {}
        self.files: Dict[str, List[bytes]] = {}
        self.chdir_calls: List[str] = []
        self.exec_calls: List[tuple] = []
        self.exec_error: Optional[str] = None

    def add(self, path: str, mode: int, uid: int = 0, gid: int = 0,
            size: int = 0, mtime: float = SEPT_8_2016) -> None:
        self.entries[path] = MetadataSnapshot(mode=mode, uid=uid, gid=gid,
                                              size_bytes=size, mtime=mtime)

    def lstat(self, path: str) -> MetadataSnapshot:
        if path not in self.entries:
            raise MetadataError(f"Cannot stat {path}: No such file or directory")
        return self.entries[path]

    def owner_name(self, uid: int) -> str:
        if uid not in self.users:
            raise MetadataError(f"No user name for uid {uid}")
        return self.users[uid]

    def list_dir(self, path: str) -> List[str]:
        if path not in self.directories:
            raise ActionIOError(f"Cannot list directory {path}")
        return sorted(self.directories[path])

    def change_dir(self, path: str) -> None:
        self.chdir_calls.append(path)

    def read_lines(self, path: str) -> Iterator[bytes]:
        if path not in self.files:
            raise ActionIOError(f"Cannot read file {path}")
        yield from self.files[path]

    def execute(self, path: str, argv: Sequence[str]):
        self.exec_calls.append((path, list(argv)))
        if self.exec_error:
            raise ActionIOError(self.exec_error)


class FakeConsole(ConsolePort):
    """
    ConsolePort fed from a list of input lines.

    With fail_after set, every write beyond that many fails like a
    broken pipe.
    """

    def __init__(self, lines: Optional[List[str]] = None,
                 fail_after: Optional[int] = None):
        self.lines = list(lines or [])
        self.fail_after = fail_after
        self.writes: List[Union[str, bytes]] = []
        self.flushes = 0
        self.discards = 0

    @property
    def output(self) -> str:
        return "".join(os.fsdecode(w) if isinstance(w, bytes) else w
                       for w in self.writes)

    @property
    def raw_output(self) -> bytes:
        return b"".join(w if isinstance(w, bytes) else os.fsencode(w)
                        for w in self.writes)

    def _record(self, item: Union[str, bytes]) -> None:
        if self.fail_after is not None and len(self.writes) >= self.fail_after:
            raise ActionIOError("Cannot write to standard output: Broken pipe")
        self.writes.append(item)

    def write(self, text: str) -> None:
        self._record(text)

    def write_bytes(self, data: bytes) -> None:
        self._record(data)

    def flush(self) -> None:
        self.flushes += 1

    def read_char(self) -> Optional[str]:
        if not self.lines:
            return None
        return self.lines.pop(0)[:1] or None

    def read_line(self) -> Optional[str]:
        if not self.lines:
            return None
        return self.lines.pop(0)

    def discard_pending(self) -> None:
        self.discards += 1


@pytest.fixture
def settings():
    return Settings(invoking_uid=INVOKING_UID, invoking_gid=INVOKING_GID)


@pytest.fixture
def fake_fs():
    return FakeFS()


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def populated_fs(fake_fs):
    """A small tree of every file type."""
    fake_fs.add("/", stat.S_IFDIR | 0o755, size=1408)
    fake_fs.add("/etc/motd", stat.S_IFREG | 0o640, size=1408)
    fake_fs.add("/bin/tool", stat.S_IFREG | 0o755, size=2048)
    fake_fs.add("/tmp/link", stat.S_IFLNK | 0o777, size=9)
    fake_fs.add("/tmp/pipe", stat.S_IFIFO | 0o777)
    fake_fs.add("/dev/sda", stat.S_IFBLK | 0o660)
    return fake_fs
