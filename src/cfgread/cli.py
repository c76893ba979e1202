"""CLI entrypoint.

    cfgread [PATH] [--encoding utf-8] [--verbose]

CONTRACT
- Inputs: Optional config path (default: config.txt in the current dir)
- Outputs (required):
  - On success, stdout gets "Config Contents:", the contents, then
    "Config file read successfully."; exit code 0
  - On failure, stdout gets only the generic failure message; exit code 1
- Invariants:
  - The stdout failure message is the same for open and read failures
  - No "Config Contents:" header is printed unless the whole file was read
- Failure:
  - Load failures are reported, never raised
  - Invalid arguments raise Typer usage errors (exit code 2)
"""

from __future__ import annotations

import codecs
import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from . import __version__
from .loader import DEFAULT_CONFIG_PATH, DEFAULT_ENCODING, load_config

SUCCESS_HEADER = "Config Contents:"
SUCCESS_MESSAGE = "Config file read successfully."
FAILURE_MESSAGE = "An error occurred while reading the config file."

app = typer.Typer(add_completion=False, help="Read a config file and print its contents.")

err_console = Console(stderr=True)


def _version_callback(value: bool):
    if value:
        typer.echo(f"cfgread version: {__version__}")
        raise typer.Exit()


def _encoding_callback(value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError as e:
        raise typer.BadParameter(f"Unknown encoding: {value}") from e
    return value


def _stderr_sink(message) -> None:
    sys.stderr.write(message)


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(_stderr_sink, level="DEBUG" if verbose else "WARNING")


_PATH_ARGUMENT = typer.Argument(
    Path(DEFAULT_CONFIG_PATH),
    help="Config file to read (default: config.txt in the current dir).",
)
_ENCODING_OPTION = typer.Option(
    DEFAULT_ENCODING,
    "--encoding",
    callback=_encoding_callback,
    help="Text encoding of the config file.",
)
_VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    help="Show failure details on stderr.",
)


@app.command()
def main(
    path: Path = _PATH_ARGUMENT,
    encoding: str = _ENCODING_OPTION,
    verbose: bool = _VERBOSE_OPTION,
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version."
    ),
) -> None:
    """Read a config file and print its contents."""
    _configure_logging(verbose)

    res = load_config(path, encoding=encoding)
    if not res.ok:
        typer.echo(FAILURE_MESSAGE)
        if verbose:
            err_console.print(f"[red]{res.error_kind} failure[/red]", end=" ")
            err_console.print(res.detail, markup=False, highlight=False)
        raise typer.Exit(code=1)

    typer.echo(f"{SUCCESS_HEADER}\n{res.contents}", color=True)
    typer.echo(SUCCESS_MESSAGE)


def run() -> None:
    app()
