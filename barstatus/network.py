"""Interface addresses and wireless link information."""

from __future__ import annotations

import array
import errno
import fcntl
import ipaddress
import os
import re
import socket
import struct
from typing import Optional

from .util import warn

NET_ROOT = "/sys/class/net"
PROC_WIRELESS = "/proc/net/wireless"
IF_INET6 = "/proc/net/if_inet6"

IFNAMSIZ = 16
IW_ESSID_MAX_SIZE = 32
SIOCGIFADDR = 0x8915
SIOCGIWESSID = 0x8B1B

# the link quality column of /proc/net/wireless tops out at 70
_MAX_QUALITY = 70
_QUALITY = re.compile(r"\s*[+-]?\d+\s+([+-]?\d+)")
_QUIET_ERRNOS = {errno.ENODEV, errno.EADDRNOTAVAIL, errno.ENXIO}


def _ifname(interface: str) -> Optional[bytes]:
    """Encode an interface name, or return None if it does not fit."""
    name = interface.encode()
    if len(name) >= IFNAMSIZ:
        warn("snprintf: Output truncated")
        return None
    return name


def ipv4(interface: str) -> Optional[str]:
    """Return the IPv4 address of an interface."""
    name = _ifname(interface)
    if name is None:
        return None

    request = bytearray(40)
    struct.pack_into(f"{IFNAMSIZ}s", request, 0, name)
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            fcntl.ioctl(sock.fileno(), SIOCGIFADDR, request, True)
    except OSError as exc:
        if exc.errno not in _QUIET_ERRNOS:
            warn(f"ioctl 'SIOCGIFADDR': {exc.strerror}")
        return None

    # struct sockaddr_in: family (2), port (2), address (4)
    return socket.inet_ntoa(bytes(request[IFNAMSIZ + 4 : IFNAMSIZ + 8]))


def ipv6(interface: str) -> Optional[str]:
    """Return the first IPv6 address of an interface.

    Link-local addresses carry the interface as their scope, ``fe80::1%eth0``.
    """
    try:
        with open(IF_INET6, encoding="ascii", errors="replace") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        warn(f"fopen '{IF_INET6}': {exc.strerror}")
        return None

    for line in lines:
        fields = line.split()
        if len(fields) < 6 or fields[5] != interface:
            continue
        try:
            address = ipaddress.IPv6Address(bytes.fromhex(fields[0]))
        except ValueError:
            warn(f"getnameinfo: bad address {fields[0]!r}")
            return None
        if address.is_link_local:
            return f"{address}%{interface}"
        return str(address)
    return None


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm onto 0..100 percent."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def wifi_perc(interface: str) -> Optional[str]:
    """Return the link quality of a wireless interface in percent."""
    operstate = os.path.join(NET_ROOT, interface, "operstate")
    try:
        with open(operstate, encoding="ascii", errors="replace") as handle:
            status = handle.readline(4)
    except OSError as exc:
        warn(f"fopen '{operstate}': {exc.strerror}")
        return None
    if status != "up\n":
        return None

    try:
        with open(PROC_WIRELESS, encoding="ascii", errors="replace") as handle:
            lines = [handle.readline() for _ in range(3)]
    except OSError as exc:
        warn(f"fopen '{PROC_WIRELESS}': {exc.strerror}")
        return None
    if not all(lines):
        return None

    line = lines[2]
    start = line.find(interface)
    if start < 0:
        return None
    match = _QUALITY.match(line[start + len(interface) + 2 :])
    if match is None:
        return None
    return str(int(int(match.group(1)) / _MAX_QUALITY * 100))


def wifi_essid(interface: str) -> Optional[str]:
    """Return the ESSID a wireless interface is associated with."""
    name = _ifname(interface)
    if name is None:
        return None

    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = bytearray(32)
    struct.pack_into(
        f"{IFNAMSIZ}sPHH", request, 0, name, address, IW_ESSID_MAX_SIZE + 1, 0
    )

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn(f"socket 'AF_INET': {exc.strerror}")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request, True)
        except OSError as exc:
            warn(f"ioctl 'SIOCGIWESSID': {exc.strerror}")
            return None

    raw = essid.tobytes().split(b"\0", 1)[0]
    return raw.decode("utf-8", errors="replace") or None