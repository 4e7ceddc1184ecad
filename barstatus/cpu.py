"""CPU frequency and usage."""

from __future__ import annotations

from pathlib import Path

from barstatus.util import fmt_human, read_uint, warn

_FIELDS = 7


class CpuUsage:
    """Computes CPU usage from successive samples of a stat file."""

    def __init__(self, stat_path="/proc/stat"):
        self.stat_path = Path(stat_path)
        self._last = [0.0] * _FIELDS

    def _read(self) -> list[float] | None:
        try:
            text = self.stat_path.read_text(errors="replace")
        except OSError:
            warn(f"fopen '{self.stat_path}':")
            return None
        tokens = text.split()[1 : 1 + _FIELDS]
        if len(tokens) != _FIELDS:
            return None
        try:
            return [float(token) for token in tokens]
        except ValueError:
            return None

    def sample(self) -> str | None:
        """Take a sample and return usage since the previous one, in percent."""
        old = self._last
        new = self._read()
        if new is None:
            return None
        self._last = new
        if old[0] == 0:
            return None
        total = sum(old) - sum(new)
        if total == 0:
            return None
        busy = [0, 1, 2, 5, 6]
        used = sum(old[i] for i in busy) - sum(new[i] for i in busy)
        return str(int(100 * used / total))


_default_usage = CpuUsage()


def cpu_freq(path="/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq") -> str | None:
    """Return the current CPU frequency, read in kHz, in hertz units."""
    freq = read_uint(path)
    if freq is None:
        return None
    return fmt_human(freq * 1000, 1000)


def cpu_perc() -> str | None:
    """Return CPU usage in percent since the previous call."""
    return _default_usage.sample()