"""Composition helpers that turn names and settings into formatters.

Purpose
-------
Keep format selection in one place so the CLI, configuration files and host
applications agree on what ``"brief"`` or ``"netlogger"`` means.

Contents
--------
* :func:`create_formatter` – build a formatter by name.
* :func:`create_formatter_from_settings` – build one from
  :class:`~lib_log_formatters.config.FormatterSettings`.
"""

from __future__ import annotations

import logging

from .adapters.formatters import BriefFormatter, BriefStyle, NetLoggerFormatter
from .adapters.formatters.brief import DEFAULT_INDENT_UNIT, DEFAULT_LABEL_SEPARATOR
from .adapters.formatters.netlogger import DEFAULT_VALUE_DELIMITER
from .application.ports.formatter import FormatterPort
from .config import FORMATTER_NAMES, FormatterSettings, normalise_format_name

logger = logging.getLogger(__name__)

_BRIEF_STYLES = {
    "brief": BriefStyle.PLAIN,
    "indented": BriefStyle.INDENTED,
    "prepended": BriefStyle.PREPENDED,
}


def create_formatter(
    name: str,
    *,
    verbose: bool = False,
    value_delimiter: str = DEFAULT_VALUE_DELIMITER,
    indent_unit: str = DEFAULT_INDENT_UNIT,
    label_separator: str = DEFAULT_LABEL_SEPARATOR,
) -> FormatterPort:
    """Return the formatter registered under ``name`` (case-insensitive).

    ``verbose``, ``indent_unit`` and ``label_separator`` apply to the brief
    family; ``value_delimiter`` applies to NetLogger output.

    Examples
    --------
    >>> create_formatter("Indented", verbose=True)
    BriefFormatter(verbose=True, style=<BriefStyle.INDENTED: 'indented'>, indent_unit='  ', label_separator=': ')
    >>> create_formatter("netlogger", value_delimiter="=")
    NetLoggerFormatter(value_delimiter='=')
    """
    key = normalise_format_name(name)
    if key == "netlogger":
        formatter: FormatterPort = NetLoggerFormatter(value_delimiter)
    else:
        formatter = BriefFormatter(
            verbose=verbose,
            style=_BRIEF_STYLES[key],
            indent_unit=indent_unit,
            label_separator=label_separator,
        )
    logger.debug("created %s formatter: %r", key, formatter)
    return formatter


def create_formatter_from_settings(settings: FormatterSettings) -> FormatterPort:
    return create_formatter(
        settings.format_name,
        verbose=settings.verbose,
        value_delimiter=settings.value_delimiter,
        indent_unit=settings.indent_unit,
        label_separator=settings.label_separator,
    )


__all__ = ["FORMATTER_NAMES", "create_formatter", "create_formatter_from_settings"]
