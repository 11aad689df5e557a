"""Network components: transfer speeds, addresses and wireless link details."""

from __future__ import annotations

import array
import fcntl
import ipaddress
import re
import socket
import struct
import sys
from pathlib import Path

from .util import fmt_human, read_int, warn

NET_DIR = Path("/sys/class/net")
WIRELESS = Path("/proc/net/wireless")
IF_INET6 = Path("/proc/net/if_inet6")

INTERVAL = 1000
"""Milliseconds between status updates, used to turn byte counts into rates."""

IFNAMSIZ = 16
IW_ESSID_MAX_SIZE = 32
SIOCGIFADDR = 0x8915
SIOCGIWESSID = 0x8B1B

_UINTMAX = 2**64
_LINK_QUALITY = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")
_LINK_LOCAL_SCOPE = 0x20


class NetSpeed:
    """Turns successive interface byte counters into a transfer rate."""

    def __init__(self, direction: str, interval: int = INTERVAL) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self._bytes = 0

    def sample(self, interface: str) -> str | None:
        """Read the counter; return the rate since the last reading, or None."""
        previous = self._bytes
        path = NET_DIR / interface / "statistics" / f"{self.direction}_bytes"
        current = read_int(path)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        delta = (current - previous) % _UINTMAX
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeed("rx")
_tx = NetSpeed("tx")


def netspeed_rx(interface: str) -> str | None:
    """Receive speed of an interface."""
    return _rx.sample(interface)


def netspeed_tx(interface: str) -> str | None:
    """Transmit speed of an interface."""
    return _tx.sample(interface)


def _interface_name(interface: str) -> bytes | None:
    name = interface.encode()
    if len(name) >= IFNAMSIZ:
        return None
    return name


def ipv4(interface: str) -> str | None:
    """The IPv4 address of an interface."""
    if not sys.platform.startswith("linux"):
        return None
    name = _interface_name(interface)
    if not name:
        return None
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            result = fcntl.ioctl(
                sock.fileno(), SIOCGIFADDR, struct.pack("256s", name)
            )
    except OSError:
        return None
    return socket.inet_ntoa(result[20:24])


def ipv6(interface: str) -> str | None:
    """The first IPv6 address of an interface."""
    try:
        text = IF_INET6.read_text(encoding="utf-8", errors="replace")
    except OSError:
        warn(f"fopen '{IF_INET6}':")
        return None
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 6 or fields[5] != interface:
            continue
        try:
            address = ipaddress.IPv6Address(bytes.fromhex(fields[0]))
            scope = int(fields[3], 16)
        except ValueError:
            continue
        if scope == _LINK_LOCAL_SCOPE or address.is_link_local:
            return f"{address}%{interface}"
        return str(address)
    return None


def parse_wireless_link(text: str, interface: str) -> int | None:
    """Link quality of ``interface`` from the third line of /proc/net/wireless."""
    lines = text.splitlines(keepends=True)
    if len(lines) < 3:
        return None
    line = lines[2]
    start = line.find(interface)
    if start < 0:
        return None
    match = _LINK_QUALITY.match(line, start + len(interface) + 2)
    return int(match.group(1)) if match else None


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm onto 0 to 100."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def wifi_perc(interface: str) -> str | None:
    """Wireless link quality of an interface in percent."""
    operstate = NET_DIR / interface / "operstate"
    try:
        with open(operstate, encoding="utf-8", errors="replace") as handle:
            status = handle.readline(4)
    except OSError:
        warn(f"fopen '{operstate}':")
        return None
    if status != "up\n":
        return None

    try:
        text = WIRELESS.read_text(encoding="utf-8", errors="replace")
    except OSError:
        warn(f"fopen '{WIRELESS}':")
        return None
    quality = parse_wireless_link(text, interface)
    if quality is None:
        return None
    # 70 is the maximum link quality reported by /proc/net/wireless.
    return str(int(quality / 70 * 100))


def wifi_essid(interface: str) -> str | None:
    """ESSID of the network a wireless interface is connected to."""
    if not sys.platform.startswith("linux"):
        return None
    name = _interface_name(interface)
    if name is None:
        return None
    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = bytearray(
        struct.pack("16sPHH", name, address, IW_ESSID_MAX_SIZE + 1, 0).ljust(32, b"\0")
    )
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError:
        warn("socket 'AF_INET':")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request, True)
        except OSError:
            warn("ioctl 'SIOCGIWESSID':")
            return None
    value = essid.tobytes().split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return value or None