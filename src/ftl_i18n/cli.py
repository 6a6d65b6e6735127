"""
Command-line interface for inspecting translations.

The tool reads the same ``I18N_ID`` / ``I18N_DIR`` environment variables as
the library and goes through the same lookup facade, so what it prints is
what an application would get.

Commands:
    - ``get``: Translate a key, optionally with ``--arg name=value`` parameters.
    - ``check``: Load the configured locale file and list its messages and
      parse errors.

Example:
    .. code-block:: console

        $ I18N_ID=en-US ftl-i18n get greeting --arg name=Alice
        Hello, Alice!
        $ ftl-i18n -v 1 check
"""
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text
from typing_extensions import Annotated

from ftl_i18n import __version__, i18n
from ftl_i18n.errors import I18nError
from ftl_i18n.logger import setup_logging

APP_NAME = "ftl-i18n"

app = typer.Typer(help="Look up and check Fluent translations", no_args_is_help=True)


class CliUtils:
    console = Console()
    err_console = Console(stderr=True)
    logger = logging.getLogger(__name__)

    @staticmethod
    def warning(message: str):
        CliUtils.err_console.print(f"[yellow]:warning:[/yellow] {message}")
        CliUtils.logger.warning(message)

    @staticmethod
    def fatal(message: str):
        CliUtils.err_console.print(f"[red]:skull:[/red] {message}")
        CliUtils.logger.critical(message)
        raise typer.Exit(code=1)

    @staticmethod
    def success(message: str):
        CliUtils.console.print(f"[green]:white_check_mark:[/green] {message}")
        CliUtils.logger.info(message)


def parse_arg(value: str) -> Tuple[str, str]:
    """
    Split a ``name=value`` command-line parameter.

    :raises typer.BadParameter: If there is no ``=`` or the name is empty.
    """
    name, sep, arg = value.partition("=")
    name = name.strip()
    if not sep or not name:
        raise typer.BadParameter(f"Expected name=value, got {value!r}")
    return name, arg


def _version_callback(value: bool):
    if value:
        CliUtils.console.print(f"{APP_NAME} {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbosity: Annotated[int, typer.Option("--verbosity", "-v", min=0, max=2,
                         help="Logger level: 0 (warning), 1 (info), 2 (debug).")] = 0,
    log_file: Annotated[Optional[Path], typer.Option("--logfile", help="Path to the log file")] = None,
    version: Annotated[Optional[bool], typer.Option("--version", callback=_version_callback,
                       is_eager=True, help="Show program's version number and exit")] = None,
):
    """
    Configure logging before running a subcommand.

    :param verbosity: Logging level (0=WARNING, 1=INFO, 2=DEBUG).
    :type verbosity: int
    :param log_file: Optional path to a log file.
    :type log_file: Path, optional
    """
    setup_logging("ftl_i18n", verbosity, log_file)


@app.command(help="Translate a key with the configured locale")
def get(
    key: Annotated[str, typer.Argument(help="Message id, or message.attribute")],
    arg: Annotated[Optional[List[str]], typer.Option("--arg", "-a",
                   help="Parameter as name=value; may be repeated")] = None,
    strict: Annotated[bool, typer.Option("--strict",
                      help="Fail on unknown keys and formatting errors instead of falling back")] = False,
):
    """
    Print the translation of ``key``.

    :param key: Translation key.
    :type key: str
    :param arg: ``name=value`` parameters.
    :type arg: list[str], optional
    :param strict: Use the raising lookup variants.
    :type strict: bool
    """
    builder = i18n.new(key)
    for item in arg or []:
        builder.set_args(*parse_arg(item))

    try:
        text = builder.try_build() if strict else builder.build()
    except I18nError as e:
        CliUtils.fatal(str(e))

    CliUtils.console.print(text, markup=False, highlight=False)


@app.command(help="Load the configured locale file and report its contents")
def check():
    """
    Load the catalog, list every message and report entries that failed to parse.

    Exits with code 1 if the catalog cannot be loaded or contains parse errors.
    """
    try:
        catalog = i18n.catalog()
    except I18nError as e:
        CliUtils.fatal(str(e))

    table = Table(title=f"{catalog.settings.resource_path} ({catalog.locale})")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for message_id in catalog.message_ids():
        if catalog.has(message_id):
            text, _ = catalog.format(message_id)
            value = Text(text)
        else:
            value = Text("(attributes only)", style="dim")
        table.add_row(message_id, value)
    CliUtils.console.print(table)

    for message_id in catalog.duplicates:
        CliUtils.warning(f"Duplicate message '{message_id}', the first definition is used")

    if catalog.junk:
        for entry in catalog.junk:
            for annotation in entry.annotations:
                CliUtils.warning(f"{annotation.code}: {annotation.message}")
        CliUtils.fatal(f"{len(catalog.junk)} entries could not be parsed")

    CliUtils.success(f"{len(catalog.message_ids())} messages loaded for {catalog.locale}")


if __name__ == "__main__":
    app()
