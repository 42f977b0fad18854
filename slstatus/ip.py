"""Components reporting interface IP addresses."""

from __future__ import annotations

import fcntl
import ipaddress
import os
import socket
import struct
import sys

from .util import ComponentError, warn

__all__ = ["parse_if_inet6", "ipv4", "ipv6"]

IF_INET6_PATH = "/proc/net/if_inet6"

_IFNAMSIZ = 16
_SIOCGIFADDR = 0x8915 if sys.platform.startswith("linux") else 0xC0206921


def parse_if_inet6(text: str, interface: str) -> str:
    """Return the first IPv6 address of ``interface`` in if_inet6 format text."""
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 6 or fields[5] != interface:
            continue
        try:
            address = ipaddress.IPv6Address(int(fields[0], 16))
        except ValueError:
            continue
        if address.is_link_local:
            return f"{address}%{interface}"
        return str(address)
    raise ComponentError(f"no IPv6 address on '{interface}'")


def ipv4(interface: str) -> str:
    """Return the IPv4 address of an interface."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        raise ComponentError(f"interface name '{interface}' too long")
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            reply = fcntl.ioctl(
                sock.fileno(), _SIOCGIFADDR, struct.pack("256s", name)
            )
    except OSError as exc:
        raise ComponentError(f"no IPv4 address on '{interface}'") from exc
    return socket.inet_ntoa(reply[20:24])


def ipv6(interface: str, path: str | os.PathLike[str] = IF_INET6_PATH) -> str:
    """Return the IPv6 address of an interface."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        message = f"getifaddrs: {exc.strerror or exc}"
        warn(message)
        raise ComponentError(message) from exc
    return parse_if_inet6(text, interface)