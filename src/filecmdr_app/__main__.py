"""
Main entry point for FileCmdr.

Usage:
    python -m filecmdr_app <pathname>
    filecmdr <pathname>  (if installed)
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    from filecmdr_core import __version__

    parser = argparse.ArgumentParser(
        prog="filecmdr",
        description="Describe a file or directory and offer an action on it",
    )
    parser.add_argument("path", nargs="?", metavar="pathname",
                        help="File or directory to inspect")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug details to standard error")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def setup_logging(verbose: bool) -> None:
    """Log to stderr so the info lines on stdout stay clean."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def validate_args(args: argparse.Namespace) -> None:
    from filecmdr_core.domain import ValidationError

    if args.path is None:
        raise ValidationError("Missing pathname argument")


def main(argv: Optional[List[str]] = None) -> int:
    """Run FileCmdr and return the process exit status."""
    # Ensure src is in path for development
    src_path = Path(__file__).parent.parent
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))

    from filecmdr_core.adapters import PosixFS, TerminalConsole
    from filecmdr_core.domain import FileCmdrError, Settings, ValidationError
    from filecmdr_core.services import ActionDispatcher, Inspector

    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        validate_args(args)
    except ValidationError as e:
        logging.getLogger(__name__).debug("Usage error: %s", e)
        # Usage goes to stdout, like any other output of the tool
        print(parser.format_usage(), end="", file=sys.stdout)
        return EXIT_FAILURE

    settings = Settings.from_process(verbose=args.verbose)
    fs = PosixFS()
    console = TerminalConsole(sys.stdin, sys.stdout)
    inspector = Inspector(fs, console, settings)
    dispatcher = ActionDispatcher(fs, console, inspector)

    stage = "inspect"
    try:
        classification = inspector.inspect(args.path)
        stage = "action"
        dispatcher.dispatch(classification, args.path)
        console.flush()
    except FileCmdrError as e:
        report_error(console, stage, e)
        return EXIT_FAILURE

    return EXIT_SUCCESS


def report_error(console, stage: str, error: Exception) -> None:
    """Print the diagnostic for a failed run, even if stdout is broken."""
    from filecmdr_core.domain import FileCmdrError

    try:
        console.flush()
    except FileCmdrError as flush_error:
        logging.getLogger(__name__).warning("Output lost: %s", flush_error)
    print(f"{stage} error: {error}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
