"""
Line-oriented result and error reporting.

Every message goes through a Rich console with markup and highlighting
disabled, so the text written is exactly the protocol text::

    OK: EFFECTIVE 0644
    OK: SYMBOLIC rw-r--r--
    ERROR: E_OCTAL: mode must be 4-digit octal (0000-0777)
"""

from typing import TextIO

from rich.console import Console

from .exceptions import PermCalcError
from .models import OctalPermission


def make_console(file: TextIO | None = None) -> Console:
    """Create a console that writes protocol text verbatim."""
    return Console(file=file, highlight=False, markup=False, emoji=False, soft_wrap=True)


class Reporter:
    """Writes prompts, results and errors for one calculator run."""

    def __init__(self, console: Console | None = None):
        self.console = console or make_console()

    def prompt(self, text: str) -> None:
        self.console.print(text, end="")

    def success(self, effective: OctalPermission) -> None:
        self.console.print()
        self.console.print(f"OK: EFFECTIVE {effective.to_octal()}")
        self.console.print(f"OK: SYMBOLIC {effective.to_symbolic()}")

    def error(self, err: PermCalcError) -> None:
        self.console.print(f"ERROR: {err}")
