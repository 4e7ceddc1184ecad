"""Network facts: interface addresses, throughput and wireless link."""

from __future__ import annotations

import array
import fcntl
import ipaddress
import re
import socket
import struct
from pathlib import Path

from barstatus.util import fmt_human, read_uint, warn

NET_CLASS = "/sys/class/net"
WIRELESS = "/proc/net/wireless"
IF_INET6 = "/proc/net/if_inet6"
DEFAULT_INTERVAL_MS = 1500

_IFNAMSIZ = 16
_SIOCGIFADDR = 0x8915
_SIOCGIWESSID = 0x8B1B
_IW_ESSID_MAX_SIZE = 32
_IWREQ_SIZE = 32
_LINK_LOCAL_SCOPE = 0x20
_COUNTER_MODULUS = 2**64
_LINK_QUALITY = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")


class ByteCounter:
    """Turns successive readings of an interface byte counter into a rate."""

    def __init__(self, direction="rx", interval=DEFAULT_INTERVAL_MS, root=NET_CLASS):
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = Path(root)
        self._bytes = 0

    def sample(self, interface) -> str | None:
        """Read the counter and return bytes per second since the last reading."""
        old = self._bytes
        path = self.root / interface / "statistics" / f"{self.direction}_bytes"
        value = read_uint(path)
        if value is None:
            return None
        self._bytes = value
        if old == 0:
            return None
        delta = (value - old) % _COUNTER_MODULUS
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx_counter = ByteCounter("rx")
_tx_counter = ByteCounter("tx")


def ipv4(interface) -> str | None:
    """Return the IPv4 address of an interface."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        return None
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        try:
            reply = fcntl.ioctl(sock.fileno(), _SIOCGIFADDR, struct.pack("256s", name))
        except OSError:
            return None
    return socket.inet_ntoa(reply[20:24])


def _find_ipv6(text: str, interface: str) -> str | None:
    """Find the first address of ``interface`` in if_inet6-formatted text."""
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 6 or fields[5] != interface:
            continue
        try:
            address = ipaddress.IPv6Address(bytes.fromhex(fields[0])).compressed
            scope = int(fields[3], 16)
        except ValueError:
            continue
        if scope == _LINK_LOCAL_SCOPE:
            address = f"{address}%{interface}"
        return address
    return None


def ipv6(interface) -> str | None:
    """Return the IPv6 address of an interface."""
    try:
        text = Path(IF_INET6).read_text()
    except OSError:
        warn("getifaddrs:")
        return None
    return _find_ipv6(text, interface)


def netspeed_rx(interface) -> str | None:
    """Return the receive rate of an interface."""
    return _rx_counter.sample(interface)


def netspeed_tx(interface) -> str | None:
    """Return the transmit rate of an interface."""
    return _tx_counter.sample(interface)


def wifi_perc(interface, root=NET_CLASS, wireless_path=WIRELESS) -> str | None:
    """Return the wireless link quality of an interface in percent."""
    operstate = Path(root) / interface / "operstate"
    try:
        with open(operstate, errors="replace") as fp:
            status = fp.readline(4)
    except OSError:
        warn(f"fopen '{operstate}':")
        return None
    if status != "up\n":
        return None
    try:
        with open(wireless_path, errors="replace") as fp:
            lines = [fp.readline(1023) for _ in range(3)]
    except OSError:
        warn(f"fopen '{wireless_path}':")
        return None
    if not all(lines):
        return None
    line = lines[2]
    start = line.find(interface)
    if start < 0:
        return None
    match = _LINK_QUALITY.match(line, start + len(interface) + 2)
    if match is None:
        return None
    current = int(match.group(1))
    return str(int(current / 70 * 100))


def wifi_essid(interface) -> str | None:
    """Return the ESSID the interface is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None
    essid = array.array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    address, length = essid.buffer_info()
    request = bytearray(
        struct.pack("16sPHH", name, address, length, 0).ljust(_IWREQ_SIZE, b"\0")
    )
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError:
        warn("socket 'AF_INET':")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request, True)
        except OSError:
            warn("ioctl 'SIOCGIWESSID':")
            return None
    value = essid.tobytes().split(b"\0", 1)[0].decode(errors="replace")
    return value or None