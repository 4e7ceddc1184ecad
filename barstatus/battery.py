"""Battery charge, state and remaining time from sysfs."""

from __future__ import annotations

import os
from pathlib import Path

from barstatus.util import read_first_token, read_uint

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {"Charging": "+", "Discharging": "-", "Full": "o"}


def _read_state(bat, root) -> str | None:
    word = read_first_token(Path(root) / bat / "status")
    return None if word is None else word[:12]


def _pick(bat, root, *names) -> Path | None:
    for name in names:
        path = Path(root) / bat / name
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat, root=POWER_SUPPLY) -> str | None:
    """Return the battery capacity in percent."""
    value = read_uint(Path(root) / bat / "capacity")
    return None if value is None else str(value)


def battery_state(bat, root=POWER_SUPPLY) -> str | None:
    """Return '+' when charging, '-' when discharging, 'o' when full, else '?'."""
    state = _read_state(bat, root)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat, root=POWER_SUPPLY) -> str | None:
    """Return the time left while discharging, or an empty string otherwise."""
    state = _read_state(bat, root)
    if state is None:
        return None
    charge_path = _pick(bat, root, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_uint(charge_path)
    if charge_now is None:
        return None
    if state != "Discharging":
        return ""
    current_path = _pick(bat, root, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_uint(current_path)
    if not current_now:
        return None
    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"