"""
Terminal Console Adapter.

Reads answers from standard input and writes output to standard output.
"""

import io
import logging
import os
import sys
import termios
from typing import Optional, TextIO

from ..domain.errors import ActionIOError
from ..ports.console_port import ConsolePort

logger = logging.getLogger(__name__)


class TerminalConsole(ConsolePort):
    """
    ConsolePort implementation over text streams.

    Output is written as bytes through the stream's binary buffer when it
    has one, so file contents and undecodable names pass through unchanged.

    Input is line-buffered: read_char() consumes the whole line the answer
    was typed on. discard_pending() then throws away anything further that
    is already waiting:
    - terminal: the kernel input queue is flushed
    - seekable input (redirected file): skipped to end of input
    - pipe: nothing more can be discarded without blocking
    """

    def __init__(self, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        # Paths from os.listdir/argv may hold surrogate-escaped bytes
        self.write_bytes(os.fsencode(text))

    def write_bytes(self, data: bytes) -> None:
        try:
            buffer = getattr(self.stdout, "buffer", None)
            if buffer is not None:
                # Keep ordering with anything written through the text layer
                self.stdout.flush()
                buffer.write(data)
            else:
                self.stdout.write(os.fsdecode(data))
        except (OSError, UnicodeError) as e:
            raise ActionIOError(f"Cannot write to standard output: {e}") from e

    def flush(self) -> None:
        try:
            self.stdout.flush()
        except OSError as e:
            raise ActionIOError(f"Cannot flush standard output: {e}") from e

    def read_char(self) -> Optional[str]:
        line = self.stdin.readline()
        return line[:1] or None

    def read_line(self) -> Optional[str]:
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def discard_pending(self) -> None:
        try:
            if self.stdin.isatty():
                termios.tcflush(self.stdin.fileno(), termios.TCIFLUSH)
            elif self.stdin.seekable():
                self.stdin.seek(0, io.SEEK_END)
            else:
                logger.debug("Input is a pipe; nothing further to discard")
        except (OSError, termios.error) as e:
            raise ActionIOError(f"Cannot discard pending input: {e}") from e
