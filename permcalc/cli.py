"""Permission calculator CLI - main entry point.

Prompts for a mode and a umask, each as 4-digit octal, and prints the
effective permission in octal and symbolic form.
"""

import argparse
import logging
import sys
from typing import TextIO

from . import __version__
from .config import (
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
    MODE_PROMPT,
    UMASK_PROMPT,
)
from .exceptions import PermCalcError
from .models import OctalPermission
from .octal import parse_field
from .reporter import Reporter

logger = logging.getLogger(__name__)


class TokenReader:
    """Reads whitespace-delimited tokens from a text stream."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdin
        self._pending: list[str] = []

    def next_token(self) -> str:
        """Return the next token, or an empty string at end of input."""
        while not self._pending:
            line = self.stream.readline()
            if not line:
                return ""
            self._pending = line.split()
        return self._pending.pop(0)


def run(reader: TokenReader, reporter: Reporter) -> int:
    """
    Run one calculation: read mode, read umask, compute and report.

    The first failing field ends the run; the umask is not prompted for
    when the mode is malformed.

    Returns:
        Process exit code (0 on success, 1 on any input error)
    """
    try:
        reporter.prompt(MODE_PROMPT)
        mode = parse_field(reader.next_token(), "mode")

        reporter.prompt(UMASK_PROMPT)
        umask = parse_field(reader.next_token(), "umask")

        mode_perm = OctalPermission.from_field(mode, "mode")
        umask_perm = OctalPermission.from_field(umask, "umask")
    except PermCalcError as e:
        logger.debug(f"Input rejected: {e}")
        reporter.error(e)
        return EXIT_FAILURE

    effective = mode_perm.apply_umask(umask_perm)
    logger.debug(f"mode={mode_perm} umask={umask_perm} effective={effective}")
    reporter.success(effective)
    return EXIT_SUCCESS


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="permcalc",
        description="Compute effective file permissions from a mode and a umask.",
    )
    parser.add_argument("--version", "-V", action="version", version=f"permcalc {__version__}")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log parsing details to stderr"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the permcalc command."""
    args = create_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        return run(TokenReader(), Reporter())
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
