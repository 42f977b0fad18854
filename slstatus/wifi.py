"""WiFi signal and ESSID components."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct

from .util import ComponentError, warn

__all__ = ["rssi_to_perc", "parse_wireless", "wifi_perc", "wifi_essid"]

NET_ROOT = "/sys/class/net"
WIRELESS_PATH = "/proc/net/wireless"

# The link quality reported in /proc/net/wireless peaks at 70.
_MAX_QUALITY = 70
_IFNAMSIZ = 16
_IW_ESSID_MAX_SIZE = 32
_SIOCGIWESSID = 0x8B1B
_IWREQ_SIZE = 32

_QUALITY_RE = re.compile(r"\s*[+-]?\d+\s+([+-]?\d+)")


def rssi_to_perc(rssi: int) -> int:
    """Map an RSSI in dBm onto a percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def parse_wireless(text: str, interface: str) -> str:
    """Return the link quality of ``interface`` in percent from wireless stats."""
    lines = text.splitlines(keepends=True)
    if len(lines) < 3:
        raise ComponentError("no interface data in wireless statistics")
    line = lines[2]
    start = line.find(interface)
    if start < 0:
        raise ComponentError(f"'{interface}' not in wireless statistics")
    match = _QUALITY_RE.match(line, start + len(interface) + 2)
    if match is None:
        raise ComponentError(f"malformed wireless statistics for '{interface}'")
    quality = int(match.group(1))
    return str(int(quality / _MAX_QUALITY * 100))


def _open_text(path: str, *, first_line: int | None = None) -> str:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            if first_line is not None:
                return handle.readline(first_line)
            return handle.read()
    except OSError as exc:
        message = f"fopen '{path}': {exc.strerror or exc}"
        warn(message)
        raise ComponentError(message) from exc


def wifi_perc(
    interface: str,
    root: str | os.PathLike[str] = NET_ROOT,
    wireless_path: str | os.PathLike[str] = WIRELESS_PATH,
) -> str:
    """Return the WiFi link quality of an interface that is up, in percent."""
    operstate = os.path.join(os.fspath(root), interface, "operstate")
    if _open_text(operstate, first_line=4) != "up\n":
        raise ComponentError(f"interface '{interface}' is not up")
    return parse_wireless(_open_text(os.fspath(wireless_path)), interface)


def wifi_essid(interface: str) -> str:
    """Return the ESSID an interface is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        raise ComponentError(f"interface name '{interface}' too long")

    essid = array.array("b", bytes(_IW_ESSID_MAX_SIZE + 1))
    address, length = essid.buffer_info()
    request = struct.pack("16sPHH", name, address, length, 0).ljust(_IWREQ_SIZE, b"\0")

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        message = f"socket 'AF_INET': {exc.strerror or exc}"
        warn(message)
        raise ComponentError(message) from exc
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request)
        except OSError as exc:
            message = f"ioctl 'SIOCGIWESSID': {exc.strerror or exc}"
            warn(message)
            raise ComponentError(message) from exc

    result = essid.tobytes().split(b"\0", 1)[0]
    if not result:
        raise ComponentError(f"interface '{interface}' has no ESSID")
    return result.decode("utf-8", errors="replace")