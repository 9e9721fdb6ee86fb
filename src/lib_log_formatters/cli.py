"""Click command group exposing the formatters on the command line.

Purpose
-------
Render JSON Lines log records in any supported format, inspect the NetLogger
type-symbol table, and print package metadata.

Contents
--------
* :func:`cli` – root group with traceback, dotenv and log-level options.
* ``info`` / ``render`` / ``symbols`` subcommands.
* :func:`main` – test-friendly runner returning an exit code.

Input format
------------
One JSON object per line, either a flat ``{"NAME": value | [values]}``
mapping or ``{"properties": [[name, value], ...], "show_all": bool,
"nesting_level": int}``. Blank lines are skipped.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Sequence, TextIO

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as log_config
from .adapters.formatters.netlogger import TYPE_SYMBOLS
from .adapters.sinks import RichConsoleSink, StreamSink
from .application.ports.sink import OutputSink
from .domain.record import LogRecord
from .runtime import create_formatter_from_settings

logger = logging.getLogger(__name__)

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show full Python tracebacks instead of short error messages.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env file before reading settings (env: {log_config.DOTENV_ENV_VAR}).",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Emit diagnostics from the formatters on stderr at this level.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool | None, log_level: str | None) -> None:
    """Render structured log records as brief, indented, prepended or NetLogger text."""
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    if log_level:
        logging.basicConfig(level=log_level.upper(), stream=sys.stderr)
    if log_config.dotenv_requested(use_dotenv):
        log_config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""
    click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("symbols", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_symbols() -> None:
    """List the NetLogger type-symbol table."""
    for value_type, symbol in TYPE_SYMBOLS.items():
        click.echo(f"{value_type.value:<9}{symbol or '(none)'}")


def _iter_records(source: TextIO):
    for number, line in enumerate(source, start=1):
        if not line.strip():
            continue
        payload = json.loads(line)
        if not isinstance(payload, dict):
            raise ValueError(f"line {number}: expected a JSON object, got {type(payload).__name__}")
        yield LogRecord.from_dict(payload)


@cli.command("render", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--format",
    "-f",
    "format_name",
    type=click.Choice(log_config.FORMATTER_NAMES, case_sensitive=False),
    default=None,
    help="Output format (env: LOG_FORMAT, default brief).",
)
@click.option("--verbose/--brief", default=None, help="Print every property (brief family only).")
@click.option("--delimiter", default=None, help="NetLogger value delimiter.")
@click.option("--indent-unit", default=None, help="Indentation per nesting level.")
@click.option("--label-separator", default=None, help="Text between the label and the first line.")
@click.option("--rich/--plain", "use_rich", default=False, help="Write through a Rich console.")
def cli_render(
    source: TextIO,
    format_name: str | None,
    verbose: bool | None,
    delimiter: str | None,
    indent_unit: str | None,
    label_separator: str | None,
    use_rich: bool,
) -> None:
    """Render JSON Lines records from SOURCE (default: stdin)."""
    count = 0
    try:
        settings = log_config.load_settings(
            format_name=format_name,
            verbose=verbose,
            value_delimiter=delimiter,
            indent_unit=indent_unit,
            label_separator=label_separator,
        )
        formatter = create_formatter_from_settings(settings)
        sink: OutputSink = RichConsoleSink() if use_rich else StreamSink(sys.stdout)
        for record in _iter_records(source):
            formatter.render(sink, record)
            count += 1
    except (ValueError, TypeError) as exc:
        if lib_cli_exit_tools.config.traceback:
            raise
        raise click.ClickException(str(exc)) from exc
    logger.debug("rendered %d record(s) as %s", count, settings.format_name)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group in a test-friendly manner.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).

    Returns
    -------
    int
        Zero on success, the Click exit code on usage or rendering errors.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0...
    0
    """
    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main"]
