"""Master volume from an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct

from barstatus.util import warn

_INT = struct.Struct("i")
_IOC_READ = 2
_MIXER_TYPE = ord("M")
_VOLUME_DEVICE = 0  # index of "vol" in the mixer's device names


def _ior(number: int) -> int:
    return (_IOC_READ << 30) | (_INT.size << 16) | (_MIXER_TYPE << 8) | number


_READ_DEVMASK = _ior(0xFE)


def _read_int(fd: int, request: int) -> int:
    return _INT.unpack(fcntl.ioctl(fd, request, bytes(_INT.size)))[0]


def vol_perc(card) -> str | None:
    """Return the master volume of a mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError:
        warn(f"open '{card}':")
        return None
    try:
        try:
            devmask = _read_int(fd, _READ_DEVMASK)
        except OSError:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':")
            return None
        if not devmask & (1 << _VOLUME_DEVICE):
            return None
        try:
            level = _read_int(fd, _ior(_VOLUME_DEVICE))
        except OSError:
            warn(f"ioctl 'MIXER_READ({_VOLUME_DEVICE})':")
            return None
    finally:
        os.close(fd)
    return str(level & 0xFF)