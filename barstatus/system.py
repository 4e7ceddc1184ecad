"""Simple system facts: time, host, kernel, load, users and commands."""

from __future__ import annotations

import os
import pwd
import socket
import subprocess
import time

from barstatus.util import read_uint, warn

_BUFFER_SIZE = 1024


def datetime(fmt: str) -> str | None:
    """Format the current local time with ``fmt``."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= _BUFFER_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def entropy(path="/proc/sys/kernel/random/entropy_avail") -> str | None:
    """Return the kernel's available entropy."""
    value = read_uint(path)
    return None if value is None else str(value)


def hostname() -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostname:")
        return None


def kernel_release() -> str | None:
    """Return the kernel release, as ``uname -r`` shows it."""
    try:
        return os.uname().release
    except OSError:
        warn("uname:")
        return None


def load_avg() -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def num_files(path) -> str | None:
    """Return the number of entries in a directory."""
    try:
        count = len(os.listdir(path))
    except OSError:
        warn(f"opendir '{path}':")
        return None
    return str(count)


def run_command(cmd: str) -> str | None:
    """Run a shell command and return the first line of its output."""
    try:
        proc = subprocess.run(cmd, shell=True, stdout=subprocess.PIPE, check=False)
    except OSError:
        warn(f"popen '{cmd}':")
        return None
    text = proc.stdout.decode(errors="replace")[: _BUFFER_SIZE - 2]
    line = text.split("\n", 1)[0]
    return line or None


def separator(text) -> str | None:
    """Return the separator as text; a missing separator yields None."""
    if text is None:
        return None
    return str(text)


def temp(file) -> str | None:
    """Return the temperature in degrees Celsius from a millidegree sensor file."""
    value = read_uint(file)
    return None if value is None else str(value // 1000)


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    raise OSError("no uptime clock available")


def uptime() -> str | None:
    """Return the system uptime as hours and minutes."""
    try:
        clock = _uptime_clock()
        seconds = int(time.clock_gettime(clock))
    except OSError:
        warn("clock_gettime:")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid() -> str:
    """Return the real group id of the current user."""
    return str(os.getgid())


def uid() -> str:
    """Return the effective user id."""
    return str(os.geteuid())


def username() -> str | None:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}':")
        return None