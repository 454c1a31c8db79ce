"""Diagnostics and inspection output with strict stdout/stderr discipline.

* **stdout** -- primary data only: operation tables, composed help text,
  replayed response bodies.
* **stderr** -- everything else.  The compiler reports non-fatal document
  problems here (an ``x-cli-config`` block that cannot be decoded, say)
  through the module-level :func:`warning` helper.

Colour is disabled by ``--no-color``, ``NO_COLOR`` (any value) and
``TERM=dumb``.  Without colour, diagnostics are written as plain
``Warning: ...`` / ``Error: ...`` lines so hosts can grep them.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table


class OutputFormat(str, Enum):
    """How stdout data is rendered.

    ``AUTO`` becomes ``RICH`` on a colour-capable TTY and ``PLAIN``
    elsewhere.
    """

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


# level -> (label, rich style)
_LEVELS = {
    "info": ("", ""),
    "warning": ("Warning:", "yellow"),
    "error": ("Error:", "bold red"),
    "debug": ("[debug]", "dim"),
}


class OutputManager:
    """Writes data to stdout and diagnostics to stderr.

    Args:
        format: Rendering for stdout data.
        no_color: Force colourless output.
        quiet: Drop informational messages (warnings and errors still show).
        verbose: Show debug messages.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self.no_color = no_color or _should_disable_color()
        self.quiet = quiet
        self.verbose = verbose

        if format == OutputFormat.AUTO:
            format = OutputFormat.RICH if _is_tty() and not self.no_color else OutputFormat.PLAIN
        self._format = format

        self._out = Console(
            no_color=self.no_color,
            force_terminal=format == OutputFormat.RICH,
            highlight=False,
        )
        self._err = Console(stderr=True, no_color=self.no_color, highlight=False)

    @property
    def format(self) -> OutputFormat:
        return self._format

    # -- stdout ---------------------------------------------------------

    def print_data(self, text: str) -> None:
        print(text, file=sys.stdout, flush=True)

    def print_table(
        self,
        headers: list[str],
        rows: list[list[str]],
        title: Optional[str] = None,
    ) -> None:
        """Print *rows* as a Rich table, a JSON array of objects, or TSV."""
        if self._format == OutputFormat.JSON:
            self.print_data(json.dumps([dict(zip(headers, row)) for row in rows], indent=2))
            return
        if self._format == OutputFormat.PLAIN:
            for row in [headers, *rows]:
                self.print_data("\t".join(row))
            return

        table = Table(title=title, header_style="bold cyan")
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*row)
        self._out.print(table)

    def print_markdown(self, text: str) -> None:
        """Print composed help text, rendered as Markdown in Rich mode."""
        if self._format == OutputFormat.RICH:
            self._out.print(Markdown(text))
        else:
            self.print_data(text)

    # -- stderr ---------------------------------------------------------

    def info(self, message: str) -> None:
        if not self.quiet:
            self._emit("info", message)

    def warning(self, message: str) -> None:
        self._emit("warning", message)

    def error(self, message: str) -> None:
        self._emit("error", message)

    def debug(self, message: str) -> None:
        if self.verbose:
            self._emit("debug", message)

    def _emit(self, level: str, message: str) -> None:
        label, style = _LEVELS[level]
        if self.no_color or not style:
            print(f"{label} {message}" if label else message, file=sys.stderr, flush=True)
            return
        self._err.print(f"[{style}]{escape(label)}[/{style}] {escape(message)}")


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


# -- global instance ----------------------------------------------------

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Drop the global instance (used by tests)."""
    global _output
    _output = None


def print_data(text: str) -> None:
    get_output().print_data(text)


def print_markdown(text: str) -> None:
    get_output().print_markdown(text)


def info(message: str) -> None:
    get_output().info(message)


def warning(message: str) -> None:
    get_output().warning(message)


def error(message: str) -> None:
    get_output().error(message)


def debug(message: str) -> None:
    get_output().debug(message)
