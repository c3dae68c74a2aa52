"""
Action Dispatcher - offer and perform the action for a classified path.

    directory        -> list its entries (one info line each)
    user executable  -> execute it with user-supplied arguments
    regular file     -> print its content
    anything else    -> nothing

Every action is confirmed first; only "y" or "Y" proceeds.
"""

import logging
from typing import Callable, Dict

from ..ports.fs_port import FSPort
from ..ports.console_port import ConsolePort
from ..domain.enums import FileClassification
from ..domain.errors import ActionIOError
from .inspector import Inspector

logger = logging.getLogger(__name__)


ACTION_PROMPTS = {
    FileClassification.DIRECTORY: "Do you want to list the directory {path} (y/n): ",
    FileClassification.USER_EXECUTABLE: "Do you want to execute {path} (y/n): ",
    FileClassification.REGULAR: "Do you want to list the file {path} (y/n): ",
}

ARGUMENTS_PROMPT = "Enter any arguments to {path}: "

AFFIRMATIVE_ANSWERS = ("y", "Y")


class ActionDispatcher:
    """
    Prompts for and runs the type-specific action of a path.

    Directory listing changes the process working directory to the listed
    directory and leaves it there (see PosixFS.change_dir).
    """

    def __init__(self, fs: FSPort, console: ConsolePort, inspector: Inspector):
        """
        Initialize the dispatcher.

        Args:
            fs: Filesystem adapter
            console: Console for prompts, answers and listings
            inspector: Describes each entry of a listed directory
        """
        self.fs = fs
        self.console = console
        self.inspector = inspector

    def dispatch(self, classification: FileClassification, path: str) -> bool:
        """
        Offer the action for a classified path and run it if confirmed.

        Args:
            classification: Result of inspecting path
            path: Path as given by the user

        Returns:
            True if an action ran, False if there was none or the user
            declined. Executing a program does not return on success.

        Raises:
            FileCmdrError: If the confirmed action fails
        """
        if not classification.is_actionable:
            logger.debug("No action for %s (%s)", path, classification.value)
            return False

        if not self.confirm(ACTION_PROMPTS[classification].format(path=path)):
            logger.debug("Action declined for %s", path)
            return False

        actions: Dict[FileClassification, Callable[[str], None]] = {
            FileClassification.DIRECTORY: self.list_directory,
            FileClassification.USER_EXECUTABLE: self.execute,
            FileClassification.REGULAR: self.list_file,
        }
        actions[classification](path)
        return True

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question. End of input counts as no."""
        self.console.prompt(prompt)
        answer = self.console.read_char()
        self.console.discard_pending()
        return answer is not None and answer in AFFIRMATIVE_ANSWERS

    def list_directory(self, path: str) -> None:
        """
        Print one info line per directory entry, in sorted order.

        Entries are inspected relative to the directory, which becomes the
        working directory. The first entry that fails aborts the listing.
        """
        names = self.fs.list_dir(path)
        self.fs.change_dir(path)

        for name in names:
            self.inspector.inspect(name)

    def list_file(self, path: str) -> None:
        """Print the file's bytes line by line, followed by one extra newline."""
        for line in self.fs.read_lines(path):
            self.console.write_bytes(line)
        self.console.write_bytes(b"\n")
        self.console.flush()

    def execute(self, path: str) -> None:
        """
        Ask for arguments and replace this process with the program.

        The argument line is split on whitespace; path is always argv[0].
        """
        self.console.prompt(ARGUMENTS_PROMPT.format(path=path))
        line = self.console.read_line()
        if line is None:
            raise ActionIOError(f"No arguments read for {path}: end of input")

        argv = [path] + line.split()
        # Buffered output would be lost with the process image
        self.console.flush()
        self.fs.execute(path, argv)
