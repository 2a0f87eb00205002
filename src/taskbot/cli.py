"""Command-line interface for taskbot."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from . import ui
from .config import Config, get_config
from .errors import StorageCorruptError
from .logging_setup import setup_logging
from .session import Session
from .storage import FileStorage

logger = logging.getLogger(__name__)


def print_result(console: Console, text: str, failed: bool = False) -> None:
    """Print a result message; task lines contain brackets, so markup is off."""
    console.print(
        text,
        style="bold red" if failed else None,
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to config file")
@click.option("--data-file", type=click.Path(dir_okay=False, path_type=Path),
              help="Task data file (overrides the config)")
@click.option("--strict/--lenient", default=None,
              help="Abort on corrupt records instead of skipping them")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--command", "-c", "commands", multiple=True,
              help="Run this line instead of reading stdin (repeatable)")
def main(config_path, data_file, strict, verbose, commands):
    """taskbot - a line-oriented task manager.

    \b
    Commands, one per line:
      todo <description>
      deadline <description> /by <dd/mm/yyyy>
      event <description> /at <dd/mm/yyyy HHmm>
      list | find <keyword>
      mark | unmark | delete <task number>
      update <task number> <new description>
      bye
    """
    try:
        config = Config.reload(config_path) if config_path else get_config()
        config.ensure_directories()
    except OSError as e:
        Console(stderr=True).print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)

    setup_logging(logging.DEBUG if verbose else config.log_level, config.get_log_path())
    console = Console(no_color=config.no_color, highlight=False)

    storage = FileStorage(
        data_file or config.get_data_path(),
        strict=config.strict_load if strict is None else strict,
    )
    try:
        session = Session(storage)
    except StorageCorruptError as e:
        logger.error(f"Could not load {storage.path}: {e.message}")
        print_result(console, ui.format_error(e), failed=True)
        sys.exit(1)

    if commands:
        lines = commands
    else:
        print_result(console, ui.GREETING)
        lines = click.get_text_stream("stdin")

    for line in lines:
        if not line.strip():
            continue
        result = session.handle(line)
        print_result(console, result, failed=session.last_failed)
        if not session.is_running:
            break


if __name__ == "__main__":
    main()
