"""Shared helpers: diagnostics, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys
from pathlib import Path

BUF_SIZE = 1024
"""Size of the buffer a single component value has to fit in, NUL included."""

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class StatusError(Exception):
    """A fatal error that ends the status program."""


def warn(message: str) -> None:
    """Print a diagnostic to stderr.

    A message ending in ':' is followed by a description of the exception
    currently being handled, if there is one.
    """
    exc = sys.exc_info()[1]
    if message.endswith(":") and exc is not None:
        if isinstance(exc, OSError) and exc.strerror:
            detail = exc.strerror
        else:
            detail = str(exc) or type(exc).__name__
        print(f"{message} {detail}", file=sys.stderr)
    else:
        print(message, file=sys.stderr)


def die(message: str) -> None:
    """Print a diagnostic and raise StatusError."""
    warn(message)
    raise StatusError(message)


def fmt_human(num: int | float, base: int) -> str:
    """Scale ``num`` by ``base`` and attach the matching SI or IEC prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_first_line(path: str | Path) -> str | None:
    """Return the first line of a file without its newline, or None.

    The line is cut to what fits in the component buffer. None is returned
    when the file cannot be opened or is empty.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline()
    except OSError:
        warn(f"fopen '{path}':")
        return None
    if not line:
        return None
    return line[: BUF_SIZE - 2].removesuffix("\n")


def read_int(path: str | Path) -> int | None:
    """Return the integer at the start of a file, or None if there is none."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        warn(f"fopen '{path}':")
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None