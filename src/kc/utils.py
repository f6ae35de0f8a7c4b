"""Small CLI helpers."""

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

_stderr = Console(stderr=True, soft_wrap=True, highlight=False)


def fatal(message: str, code: int = 1) -> NoReturn:
    """Print an error message to stderr and exit with ``code``."""
    _stderr.print(f"[bold red]error:[/bold red] {escape(message)}")
    raise typer.Exit(code)
