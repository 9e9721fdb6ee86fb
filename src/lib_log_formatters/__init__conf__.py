"""Static distribution metadata surfaced by the CLI ``info`` command.

Values mirror ``pyproject.toml``; keep them in sync when releasing.
"""

from __future__ import annotations

from typing import Callable

name = "lib_log_formatters"
title = "Formatters rendering structured log records as brief, indented, prepended or NetLogger text"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_formatters"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_formatters"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner through ``writer`` (defaults to ``print``).

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for lib_log_formatters:
    <BLANKLINE>
        name          = lib_log_formatters
    ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    text = "\n".join(lines) + "\n"
    if writer is None:
        print(text, end="")
    else:
        writer(text)


def summary_info() -> str:
    """Return the banner printed by :func:`print_info` as a string."""
    lines: list[str] = []
    print_info(writer=lines.append)
    return "".join(lines)
