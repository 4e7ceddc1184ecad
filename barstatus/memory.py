"""Physical memory and swap usage from a meminfo file."""

from __future__ import annotations

from pathlib import Path

from barstatus.util import fmt_human, warn

MEMINFO = "/proc/meminfo"


def read_meminfo(path=MEMINFO) -> dict[str, int] | None:
    """Parse a meminfo file into a mapping of field name to value in kB."""
    try:
        text = Path(path).read_text(errors="replace")
    except OSError:
        warn(f"fopen '{path}':")
        return None
    fields: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        words = rest.split()
        if not words:
            continue
        try:
            fields[name.strip()] = int(words[0])
        except ValueError:
            continue
    return fields


def _fields(path, *names) -> tuple[int, ...] | None:
    info = read_meminfo(path)
    if info is None:
        return None
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def _percent(part: int, total: int) -> int:
    """Integer percentage truncated toward zero."""
    value = abs(100 * part) // total
    return value if part >= 0 else -value


def ram_free(path=MEMINFO) -> str | None:
    """Return the memory available for new allocations."""
    values = _fields(path, "MemAvailable")
    if values is None:
        return None
    (available,) = values
    return fmt_human(available * 1024, 1024)


def ram_perc(path=MEMINFO) -> str | None:
    """Return the percentage of memory in use, not counting buffers and cache."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    return str(_percent((total - free) - (buffers + cached), total))


def ram_total(path=MEMINFO) -> str | None:
    """Return the total amount of memory."""
    values = _fields(path, "MemTotal")
    if values is None:
        return None
    (total,) = values
    return fmt_human(total * 1024, 1024)


def ram_used(path=MEMINFO) -> str | None:
    """Return the memory in use, not counting buffers and cache."""
    values = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(path=MEMINFO) -> str | None:
    """Return the unused swap space."""
    values = _fields(path, "SwapFree")
    if values is None:
        return None
    (free,) = values
    return fmt_human(free * 1024, 1024)


def swap_perc(path=MEMINFO) -> str | None:
    """Return the percentage of swap in use, not counting cached pages."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(_percent(total - free - cached, total))


def swap_total(path=MEMINFO) -> str | None:
    """Return the total swap space."""
    values = _fields(path, "SwapTotal")
    if values is None:
        return None
    (total,) = values
    return fmt_human(total * 1024, 1024)


def swap_used(path=MEMINFO) -> str | None:
    """Return the swap in use, not counting cached pages."""
    values = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)