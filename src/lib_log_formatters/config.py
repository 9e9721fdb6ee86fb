"""Environment-driven formatter configuration.

Purpose
-------
Let operators choose the output format and its knobs without code changes,
either through real environment variables or a ``.env`` file discovered
upward from the working directory.

Contents
--------
* :class:`FormatterSettings` – immutable settings consumed by
  :func:`lib_log_formatters.runtime.create_formatter_from_settings`.
* :func:`load_settings` – merge environment variables and explicit overrides.
* :func:`enable_dotenv` – opt-in ``.env`` loading via python-dotenv.

Environment variables
---------------------
``LOG_FORMAT``                 brief | indented | prepended | netlogger
``LOG_FORMAT_VERBOSE``         1/true/yes/on to print every property
``LOG_NETLOGGER_DELIMITER``    NetLogger value delimiter (default ``:``)
``LOG_INDENT_UNIT``            indentation per nesting level (default two spaces)
``LOG_LABEL_SEPARATOR``        text after the prepended label (default ``": "``)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Any, Mapping

from dotenv import find_dotenv, load_dotenv

from .adapters.formatters.brief import DEFAULT_INDENT_UNIT, DEFAULT_LABEL_SEPARATOR
from .adapters.formatters.netlogger import DEFAULT_VALUE_DELIMITER

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LIB_LOG_FORMATTERS_USE_DOTENV"

ENV_FORMAT = "LOG_FORMAT"
ENV_VERBOSE = "LOG_FORMAT_VERBOSE"
ENV_DELIMITER = "LOG_NETLOGGER_DELIMITER"
ENV_INDENT_UNIT = "LOG_INDENT_UNIT"
ENV_LABEL_SEPARATOR = "LOG_LABEL_SEPARATOR"

FORMATTER_NAMES = ("brief", "indented", "prepended", "netlogger")

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOCK = Lock()
_DOTENV_LOADED: set[Path] = set()


def normalise_format_name(name: str) -> str:
    """Return the canonical formatter name or raise ``ValueError``.

    Examples
    --------
    >>> normalise_format_name(" NetLogger ")
    'netlogger'
    >>> normalise_format_name("json")
    Traceback (most recent call last):
    ...
    ValueError: Unknown formatter: 'json'
    """
    normalized = name.strip().lower()
    if normalized not in FORMATTER_NAMES:
        raise ValueError(f"Unknown formatter: {name!r}")
    return normalized


@dataclass(slots=True, frozen=True)
class FormatterSettings:
    """Resolved formatter configuration."""

    format_name: str = "brief"
    verbose: bool = False
    value_delimiter: str = DEFAULT_VALUE_DELIMITER
    indent_unit: str = DEFAULT_INDENT_UNIT
    label_separator: str = DEFAULT_LABEL_SEPARATOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "format_name", normalise_format_name(self.format_name))


def env_bool(value: str | None, default: bool) -> bool:
    """Interpret ``1/true/yes/on`` style strings.

    Examples
    --------
    >>> env_bool("ON", False), env_bool("0", True), env_bool(None, True)
    (True, False, True)
    """
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def load_settings(environ: Mapping[str, str] | None = None, **overrides: Any) -> FormatterSettings:
    """Build :class:`FormatterSettings` from the environment.

    Parameters
    ----------
    environ:
        Mapping to read instead of :data:`os.environ`.
    overrides:
        Field values that win over the environment; ``None`` values are
        ignored so CLI options can be passed through unconditionally.

    Examples
    --------
    >>> load_settings({"LOG_FORMAT": "netlogger", "LOG_NETLOGGER_DELIMITER": "="}).value_delimiter
    '='
    >>> load_settings({"LOG_FORMAT": "netlogger"}, format_name="indented").format_name
    'indented'
    """
    env = os.environ if environ is None else environ
    defaults = FormatterSettings()
    values: dict[str, Any] = {
        "format_name": env.get(ENV_FORMAT) or defaults.format_name,
        "verbose": env_bool(env.get(ENV_VERBOSE), defaults.verbose),
        "value_delimiter": env.get(ENV_DELIMITER) or defaults.value_delimiter,
        "indent_unit": env.get(ENV_INDENT_UNIT, defaults.indent_unit),
        "label_separator": env.get(ENV_LABEL_SEPARATOR, defaults.label_separator),
    }
    values.update((key, value) for key, value in overrides.items() if value is not None)
    settings = FormatterSettings(**values)
    logger.debug("formatter settings resolved: %s", settings)
    return settings


def _find_dotenv_above(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate.resolve()
    return None


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file without overriding existing variables.

    Without ``search_from`` the file is located by python-dotenv's
    ``find_dotenv(usecwd=True)``, walking up from the working directory.
    ``search_from`` starts the same upward walk from an explicit directory
    instead. Returns the resolved path of the loaded file, or ``None`` when no
    file was found. Each file is loaded at most once per process.
    """
    if search_from is None:
        found = find_dotenv(usecwd=True)
        path = Path(found).resolve() if found else None
    else:
        path = _find_dotenv_above(search_from.resolve())
    if path is None:
        logger.debug("no .env file found above %s", search_from or Path.cwd())
        return None
    with _DOTENV_LOCK:
        if path not in _DOTENV_LOADED:
            load_dotenv(path, override=False)
            _DOTENV_LOADED.add(path)
            logger.debug("loaded environment from %s", path)
    return path


def dotenv_requested(flag: bool | None, environ: Mapping[str, str] | None = None) -> bool:
    """Decide whether to load ``.env``; an explicit ``flag`` wins over the environment."""
    if flag is not None:
        return flag
    env = os.environ if environ is None else environ
    return env_bool(env.get(DOTENV_ENV_VAR), False)


def _reset_dotenv_state_for_testing() -> None:
    with _DOTENV_LOCK:
        _DOTENV_LOADED.clear()


__all__ = [
    "DOTENV_ENV_VAR",
    "FORMATTER_NAMES",
    "FormatterSettings",
    "dotenv_requested",
    "enable_dotenv",
    "env_bool",
    "load_settings",
    "normalise_format_name",
]
