"""Console output formatting utilities for YAML Shredder."""

from __future__ import annotations

import sys
from typing import Optional


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
        """
        self.debug = debug

    def print_header(self, title: str) -> None:
        """Print a section header."""
        print(f"\n{title}", file=sys.stderr)
        print("-" * len(title), file=sys.stderr)

    def print_code(self, code: str) -> None:
        """Print generated code to stdout, untouched."""
        sys.stdout.write(code)
        if not code.endswith("\n"):
            sys.stdout.write("\n")

    def print_stats(self, yaml_lines: int, code_lines: int) -> None:
        """Print line-count comparison between input and output."""
        self.print_header("STATS")
        print(f"YAML lines: {yaml_lines}", file=sys.stderr)
        print(f"Dagger lines: {code_lines}", file=sys.stderr)
        print(f"Lines saved: {yaml_lines - code_lines}", file=sys.stderr)

    def print_languages(self, rows: list[tuple[str, str]]) -> None:
        """Print supported target languages."""
        width = max((len(name) for name, _ in rows), default=0)
        for name, url in rows:
            print(f"  {name.ljust(width)}  {url}")

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=sys.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=sys.stderr)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exc()
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message, file=sys.stderr)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
