"""kc: read out and search plain text files on standard output.

Single-command Typer application::

    kc FILE              print the file as-is
    kc -l FILE           print with line numbers
    kc -s TERM FILE      print lines containing TERM as a whole word

"""

import importlib.metadata
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from .config import ViewerConfig, format_validation_errors
from .errors import FileAccessError
from .output import ViewerOutput, print_plain
from .utils import fatal
from .viewer import resolve_mode, view

PACKAGE_NAME = "kc"

log = logging.getLogger(__name__)


def create_version_callback(package_name: str) -> Callable[[bool], None]:
    """Create a --version flag callback.

    Args:
        package_name: The installed package name to look up the version for.

    """

    def version_callback(value: bool) -> None:
        """Print the version and exit when --version is passed."""
        if value:
            print_plain(f"{package_name}: {importlib.metadata.version(package_name)}")
            raise typer.Exit

    return version_callback


def configure_logging(verbose: bool) -> None:
    """Send debug logs of the ``kc`` package to stderr when ``verbose`` is set."""
    if not verbose:
        return
    logging.basicConfig(stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger(PACKAGE_NAME).setLevel(logging.DEBUG)


app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def main(
    path: Annotated[Path, typer.Argument(help="File to read.", show_default=False)],
    number_lines: Annotated[bool, typer.Option("--number-lines", "-l", help="Number all lines in output.")] = False,
    search: Annotated[
        str | None, typer.Option("--search", "-s", metavar="TERM", help="Print only lines containing TERM as a whole word.")
    ] = None,
    all_occurrences: Annotated[
        bool | None,
        typer.Option(
            "--all-occurrences/--first-occurrence",
            help="With -s, print a line once for every occurrence of TERM, or only once per line.",
            show_default=False,
        ),
    ] = None,
    max_line_length: Annotated[
        int | None, typer.Option("--max-line-length", min=1, help="Split lines longer than this many characters.")
    ] = None,
    encoding: Annotated[str | None, typer.Option("--encoding", help="Text encoding of FILE (utf-8 unless configured).")] = None,
    config_path: Annotated[Path | None, typer.Option("--config", "-c", help="Path to a TOML config file.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Output a JSON envelope instead of text.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug information to stderr.")] = False,
    _version: Annotated[
        bool | None,
        typer.Option(
            "--version", "-V", callback=create_version_callback(PACKAGE_NAME), is_eager=True, help="Show version and exit."
        ),
    ] = None,
) -> None:
    """Read out and search plain text files on standard output."""
    configure_logging(verbose)
    mode = resolve_mode(number_lines, search)

    config = ViewerConfig.load_or_exit(config_path)
    try:
        config = config.with_overrides(
            max_line_length=max_line_length,
            encoding=encoding,
            all_occurrences=all_occurrences,
        )
    except ValidationError as e:
        fatal(format_validation_errors(e.errors()))
    log.debug("mode=%s config=%s", mode, config.model_dump())

    output = ViewerOutput(json_mode=as_json, encoding=config.encoding)
    try:
        view(path, mode, output, config=config, term=search)
    except FileAccessError as e:
        output.print_error_and_exit("FILE_ACCESS", str(e))
