# barstatus

`barstatus` is a set of small readers for system information: network
throughput, battery, CPU, memory and swap, disk space, volume, load, uptime,
users, and the date and time. Each reader returns a short string suited to
the status bar of a tiling window manager, or `None` when the value cannot
be read.

## Installation

```
pip install .
```

## Readers

```python
from barstatus.util import fmt_human
from barstatus.system import datetime, load_avg, uptime, hostname
from barstatus.disk import disk_perc, disk_free
from barstatus.memory import ram_perc, swap_used
from barstatus.battery import battery_perc, battery_state

print(datetime("%a %b-%d %I:%M %p"))
print(load_avg(), uptime(), hostname())
print(disk_perc("/"), disk_free("/"))
print(ram_perc("/proc/meminfo"), swap_used("/proc/meminfo"))
print(battery_state("BAT0"), battery_perc("BAT0"))
print(fmt_human(1536, 1024))   # "1.5 Ki"
```

The modules:

- `barstatus.system`: `datetime`, `entropy`, `hostname`, `kernel_release`,
  `load_avg`, `num_files`, `run_command` (first line of a shell command's
  output), `separator`, `temp`, `uptime`, `gid`, `uid`, `username`.
- `barstatus.disk`: `disk_free`, `disk_perc`, `disk_total`, `disk_used`.
- `barstatus.battery`: `battery_perc`, `battery_state` (`+` charging,
  `-` discharging, `o` full, `?` otherwise), `battery_remaining`; each takes
  the battery name and an optional sysfs root.
- `barstatus.cpu`: `cpu_freq`, `cpu_perc`, and `CpuUsage`, whose `sample()`
  returns usage since the previous sample (the first sample gives `None`).
- `barstatus.memory`: `read_meminfo`, `ram_free`, `ram_perc`, `ram_total`,
  `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used`.
- `barstatus.volume`: `vol_perc` for an OSS mixer device such as `/dev/mixer`.
- `barstatus.network`: `ipv4`, `ipv6`, `netspeed_rx`, `netspeed_tx`,
  `wifi_perc`, `wifi_essid`, and `ByteCounter`, which turns successive
  readings of an interface byte counter into a rate.

Readers that report a rate or a change (`cpu_perc`, `netspeed_rx`,
`netspeed_tx`) keep the previous reading and return `None` on their first
call. Problems are reported on standard error through `barstatus.util.warn`.

## Describing a status line

`barstatus.config` holds the layout of a line: `ARGS` is a sequence of
`Arg` entries, each a reader, a format containing `%s` (and `%%` for a
literal percent sign), and the reader's argument. `COMPONENTS` maps reader
names to functions, and `UNKNOWN_STR`, `MAXLEN` and `INTERVAL` hold the
placeholder text, the line length limit and the refresh interval in
milliseconds.

```python
from barstatus.config import ARGS, UNKNOWN_STR

line = "".join(arg.render(UNKNOWN_STR) for arg in ARGS)
print(line)
```

`Arg.render` calls its reader and puts the value, or the placeholder when
the reader returns `None`, into the format; any conversion other than `%s`
or `%%` raises `ValueError`. The default `ARGS` runs the shell commands
`pamixer --get-volume` and `brillo -G`.

## What it does not do

The package has no command-line program and no refresh loop: it does not
rebuild the line every `INTERVAL`, handle signals, or write the line to
standard output or the window manager's root window. The caller composes
and displays the line, as in the example above.

## Development

```
pip install -e .[test]
pytest
```