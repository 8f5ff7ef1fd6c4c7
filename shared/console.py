"""
SecurePass Console Interface
=============================

Rich-powered console abstraction providing a unified presentation layer
for the SecurePass command-line tools.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, status messages, tables and spinners, all
with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_SECUREPASS_THEME = Theme(
    {
        "sp.banner": "bold bright_cyan",
        "sp.section": "bold bright_magenta",
        "sp.success": "bold green",
        "sp.warning": "bold yellow",
        "sp.error": "bold red",
        "sp.info": "bold bright_blue",
        "sp.dim": "dim white",
        "sp.highlight": "bold bright_white",
    }
)

_TAGLINE = "Secure password generation & strength estimation"


class SecurePassConsole:
    """Unified console interface for SecurePass output.

    Usage::

        con = SecurePassConsole()
        con.banner()
        con.section("Generated Password")
        con.success("Copied")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
        """
        self._console = Console(
            theme=_SECUREPASS_THEME,
            quiet=quiet,
            highlight=False,
        )

    # ------------------------------------------------------------------ #
    #  Banner and headers
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the SecurePass title panel."""
        text = Text.from_markup(
            f"[sp.banner]SecurePass[/sp.banner]\n"
            f"[sp.dim]{_TAGLINE}  |  v{version}[/sp.dim]"
        )
        self._console.print(
            Panel(Align.center(text), border_style="bright_cyan", padding=(0, 2))
        )

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(f"  {title}  ", style="sp.section", characters="─")

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[sp.success][✔] SUCCESS:[/sp.success] {message}")

    def warning(self, message: str) -> None:
        self._console.print(f"[sp.warning][⚠] WARNING:[/sp.warning] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[sp.info][ℹ] INFO:[/sp.info] {message}")

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    def key_values(self, title: str, pairs: Sequence[tuple[str, Any]]) -> None:
        """Render a two-column property/value table."""
        self.table(title, ["Property", "Value"], pairs, styles=["bold", ""])

    # ------------------------------------------------------------------ #
    #  Status spinner
    # ------------------------------------------------------------------ #

    @contextmanager
    def status(self, message: str = "Working...") -> Generator[Any, None, None]:
        """Context-manager showing a spinner with a status message.

        Example::

            with con.status("Sampling generator..."):
                audit = engine.audit(options)
        """
        with self._console.status(
            f"[sp.info]{message}[/sp.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)
