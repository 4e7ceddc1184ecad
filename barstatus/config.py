"""Status bar layout: the components shown and how they are formatted."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from barstatus import battery, cpu, disk, memory, network, system, volume

INTERVAL = network.DEFAULT_INTERVAL_MS
UNKNOWN_STR = "n/a"
MAXLEN = 2048

_CONVERSION = re.compile(r"%(.?)", re.DOTALL)

COMPONENTS: dict[str, Callable[..., Any]] = {
    "battery_perc": battery.battery_perc,
    "battery_state": battery.battery_state,
    "battery_remaining": battery.battery_remaining,
    "cpu_freq": cpu.cpu_freq,
    "cpu_perc": cpu.cpu_perc,
    "datetime": system.datetime,
    "disk_free": disk.disk_free,
    "disk_perc": disk.disk_perc,
    "disk_total": disk.disk_total,
    "disk_used": disk.disk_used,
    "entropy": system.entropy,
    "gid": system.gid,
    "hostname": system.hostname,
    "ipv4": network.ipv4,
    "ipv6": network.ipv6,
    "kernel_release": system.kernel_release,
    "load_avg": system.load_avg,
    "netspeed_rx": network.netspeed_rx,
    "netspeed_tx": network.netspeed_tx,
    "num_files": system.num_files,
    "ram_free": memory.ram_free,
    "ram_perc": memory.ram_perc,
    "ram_total": memory.ram_total,
    "ram_used": memory.ram_used,
    "run_command": system.run_command,
    "separator": system.separator,
    "swap_free": memory.swap_free,
    "swap_perc": memory.swap_perc,
    "swap_total": memory.swap_total,
    "swap_used": memory.swap_used,
    "temp": system.temp,
    "uid": system.uid,
    "uptime": system.uptime,
    "username": system.username,
    "vol_perc": volume.vol_perc,
    "wifi_perc": network.wifi_perc,
    "wifi_essid": network.wifi_essid,
}


@dataclass(frozen=True)
class Arg:
    """One status component: a function, a format with '%s', and its argument."""

    func: Callable[..., Any]
    fmt: str
    argument: Any = None

    def render(self, unknown=UNKNOWN_STR) -> str:
        """Call the component and substitute its value, or ``unknown``, into the format."""
        value = self.func() if self.argument is None else self.func(self.argument)
        text = unknown if value is None else str(value)

        def substitute(match: re.Match) -> str:
            spec = match.group(1)
            if spec == "s":
                return text
            if spec == "%":
                return "%"
            raise ValueError(f"unsupported conversion '%{spec}' in {self.fmt!r}")

        return _CONVERSION.sub(substitute, self.fmt)


ARGS = (
    Arg(network.netspeed_rx, "%s B/s", "wlp3s0"),
    Arg(system.separator, "%s", " | "),
    Arg(system.run_command, " %s", "pamixer --get-volume"),
    Arg(system.separator, "%s", " | "),
    Arg(system.run_command, "󰃟 %s", "brillo -G"),
    Arg(system.separator, "%s", " | "),
    Arg(battery.battery_state, "  %s:", "BAT0"),
    Arg(battery.battery_perc, "%s%%", "BAT0"),
    Arg(system.separator, "%s", " | "),
    Arg(cpu.cpu_perc, "CPU  %s%%"),
    Arg(system.separator, "%s", " | "),
    Arg(memory.ram_perc, "RAM 󰍛 %s%%"),
    Arg(system.separator, "%s", " | "),
    Arg(system.datetime, "%s", "%a %b-%d %I:%M %p "),
)