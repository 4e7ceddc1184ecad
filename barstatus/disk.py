"""Disk space of the file system holding a path."""

from __future__ import annotations

import os

from barstatus.util import fmt_human, warn


def _statvfs(path):
    try:
        return os.statvfs(path)
    except OSError:
        warn(f"statvfs '{path}':")
        return None


def disk_free(path) -> str | None:
    """Return the space available to unprivileged users."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path) -> str | None:
    """Return the percentage of the file system in use."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1.0 - fs.f_bavail / fs.f_blocks)))


def disk_total(path) -> str | None:
    """Return the total size of the file system."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path) -> str | None:
    """Return the space in use."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)