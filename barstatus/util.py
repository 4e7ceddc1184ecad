"""Shared helpers: diagnostics, human-readable sizes and small file readers."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_UINT = re.compile(r"\s*\+?(\d+)")


def _program_name() -> str:
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return ""


def _current_error() -> str:
    exc = sys.exc_info()[1]
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    if exc is not None:
        return str(exc)
    return "unknown error"


def warn(message: str) -> None:
    """Write a diagnostic to stderr.

    The program name is prepended unless the message is a usage line.  A
    message ending in ':' is followed by the description of the error being
    handled.
    """
    parts = []
    name = _program_name()
    if name and not message.startswith("usage"):
        parts.append(f"{name}: ")
    parts.append(message)
    if message.endswith(":"):
        parts.append(" " + _current_error())
    print("".join(parts), file=sys.stderr)


def die(message: str) -> None:
    """Report a fatal error and exit with status 1."""
    warn(message)
    raise SystemExit(1)


def fmt_human(num: float, base: int) -> str:
    """Scale ``num`` by ``base`` (1000 or 1024) and append the unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base}") from None
    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def _read_text(path) -> str | None:
    try:
        return Path(path).read_text(errors="replace")
    except OSError:
        warn(f"fopen '{path}':")
        return None


def read_first_token(path) -> str | None:
    """Return the first whitespace-separated word of a file, or None."""
    text = _read_text(path)
    if text is None:
        return None
    tokens = text.split()
    return tokens[0] if tokens else None


def read_uint(path) -> int | None:
    """Return the unsigned integer at the start of a file, or None."""
    text = _read_text(path)
    if text is None:
        return None
    match = _UINT.match(text)
    return int(match.group(1)) if match else None