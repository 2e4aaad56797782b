# -*- coding: utf-8 -*-
"""
CLI Handler Module

Parses the command line and dispatches to folder-scan, explicit-file or
log-management mode. The exit status is 0 when at least one item succeeded.
"""

import os
import sys
import shlex
import logging
import argparse
from collections import Counter
from pathlib import Path
from typing import List, Optional, Sequence

from .config import (
    APP_NAME,
    APP_VERSION,
    LOG_LEVEL,
    LOG_LEVELS,
    SCAN_WORKERS,
    SHOW_LOG_TOKENS,
    CLEAR_LOG_TOKENS,
    parse_scan_workers,
    validate_config,
)
from .logger import RunLogger, detect_log_file_path
from .mover import FolderMover
from .scanner import FolderScanner

logger = logging.getLogger(__name__)


def normalise_arguments(args: Sequence[str], platform: str = sys.platform) -> List[str]:
    """
    Re-split quoted argument groups.

    Explorer "Send To" on Windows can hand over several quoted paths as a
    single argument. Elsewhere the arguments are returned unchanged.
    """
    if platform != "win32":
        return list(args)

    normalised: List[str] = []
    for arg in args:
        if '"' in arg:
            for part in shlex.split(arg, posix=False):
                normalised.append(part.strip('"'))
        else:
            normalised.append(arg)
    return normalised


class UsageError(Exception):
    """Raised instead of argparse's exit(2) so that bad arguments exit with 1."""


class _ArgumentParser(argparse.ArgumentParser):

    def error(self, message):
        raise UsageError(message)


def _ordered_operands(argv: Sequence[str], operands: Sequence[str]) -> List[str]:
    """
    Restore argument order for operands split between parsed positionals
    and unrecognised tokens such as '-draft.png'.
    """
    remaining = Counter(operands)
    ordered = []
    for arg in argv:
        if remaining[arg] > 0:
            ordered.append(arg)
            remaining[arg] -= 1
    return ordered


def is_log_command(operands: Sequence[str]) -> bool:
    """True when every operand is a show-log or clear-log token."""
    return bool(operands) and all(
        arg in SHOW_LOG_TOKENS or arg in CLEAR_LOG_TOKENS for arg in operands
    )


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=APP_NAME,
        description=f"{APP_NAME} - Organise images into same-named folders",
        epilog=(
            "log commands (used on their own):\n"
            "  --show-log, /showlog    display the log file\n"
            "  --clear-log, /clearlog  clear the log file\n\n"
            f'e.g. {APP_NAME} "C:/path/to/folder" (folder mode), '
            f"{APP_NAME} <image1> <image2> ... (selection mode)"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        add_help=False
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="a folder to organise, or one or more image files"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=LOG_LEVEL,
        choices=list(LOG_LEVELS),
        help="run log level"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="echo log records to the console"
    )
    parser.add_argument(
        "--workers",
        default=None,
        help="worker threads used when scanning a folder"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )
    parser.add_argument(
        "--help",
        action="help",
        help="show this help message and exit"
    )
    return parser


class CLIHandler:
    """
    Dispatches one invocation.
    """

    def __init__(self, log_file: Optional[Path] = None):
        """
        Initialize CLI Handler

        Args:
            log_file (Optional[Path]): run log location, detected when omitted
        """
        self.log_file = Path(log_file) if log_file else detect_log_file_path()
        self.parser = build_parser()

    def run(self, argv: Sequence[str]) -> int:
        """
        Run the invocation and return the process exit code.
        """
        argv = normalise_arguments(argv)
        try:
            args, unknown = self.parser.parse_known_args(argv)
        except UsageError as e:
            print(f"{APP_NAME}: error: {e}\n", file=sys.stderr)
            self.print_usage()
            return 1

        # Unrecognised dash tokens are file names, not options
        operands = _ordered_operands(argv, list(args.paths) + unknown)

        if is_log_command(operands):
            return self._manage_log(
                show=any(arg in SHOW_LOG_TOKENS for arg in operands),
                clear=any(arg in CLEAR_LOG_TOKENS for arg in operands)
            )

        if not operands:
            self.print_usage()
            return 1

        raw_workers = args.workers if args.workers is not None else SCAN_WORKERS
        try:
            validate_config(args.log_level, raw_workers)
        except ValueError as e:
            print(f"Configuration error: {e}", file=sys.stderr)
            return 1
        workers = parse_scan_workers(raw_workers)

        run_logger = RunLogger(self.log_file, log_level=args.log_level)
        if args.verbose:
            run_logger.add_console_handler()

        try:
            mover = FolderMover(run_logger)
            # "" is not a directory (Path("") would resolve to the cwd)
            if len(operands) == 1 and operands[0] and os.path.isdir(operands[0]):
                return self._process_folder(Path(operands[0]), mover, workers)
            return self._process_files(operands, mover)
        finally:
            run_logger.close()

    def print_usage(self) -> None:
        print(self.parser.format_help())
        print(f"Log file: {self.log_file}")

    def _process_folder(self, folder: Path, mover: FolderMover, workers: int) -> int:
        logger.debug(f"Folder mode: {folder}")
        report = FolderScanner(mover, max_workers=workers).scan(folder)

        print("Finished processing folder.")
        print(f"Check the log for any errors: {self.log_file}")
        return 0 if report.any_moved else 1

    def _process_files(self, files: List[str], mover: FolderMover) -> int:
        logger.debug(f"File mode: {len(files)} path(s)")
        results = mover.move_many(files)

        print(f"Finished processing files. Check the log for any errors: {self.log_file}")
        return 0 if any(r.moved for r in results) else 1

    def _manage_log(self, show: bool, clear: bool) -> int:
        # No run marker here: the log being inspected stays untouched
        run_logger = RunLogger(self.log_file, write_marker=False)
        ok = True
        try:
            if show:
                contents = run_logger.read_all()
                if contents is None:
                    print(f"No log file found at {self.log_file}", file=sys.stderr)
                    ok = False
                else:
                    print(f"Log file: {self.log_file}")
                    print(contents, end="")

            if clear:
                if run_logger.clear():
                    print(f"Log file cleared: {self.log_file}")
                else:
                    print(f"Unable to clear log file at {self.log_file}", file=sys.stderr)
                    ok = False
        finally:
            run_logger.close()

        return 0 if ok else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Console entry point.
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        return CLIHandler().run(argv)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
