"""Network throughput components reading interface statistics in sysfs."""

from __future__ import annotations

import os

from .util import ComponentError, fmt_human, read_int

__all__ = ["NetSpeed", "netspeed_rx", "netspeed_tx"]

NET_ROOT = "/sys/class/net"
DEFAULT_INTERVAL = 1000

_UINTMAX = (1 << 64) - 1


class NetSpeed:
    """Tracks a byte counter and reports its rate between successive updates."""

    def __init__(
        self,
        direction: str,
        interval: int = DEFAULT_INTERVAL,
        root: str | os.PathLike[str] = NET_ROOT,
    ) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = root
        self._bytes = 0

    def update(self, interface: str) -> str:
        """Read the counter and return bytes per second since the last update."""
        path = os.path.join(
            os.fspath(self.root), interface, "statistics", f"{self.direction}_bytes"
        )
        previous = self._bytes
        self._bytes = read_int(path) & _UINTMAX
        if previous == 0:
            raise ComponentError(f"no previous {self.direction} sample")
        delta = ((self._bytes - previous) & _UINTMAX) * 1000 & _UINTMAX
        return fmt_human(delta // self.interval, 1024)


_rx = NetSpeed("rx")
_tx = NetSpeed("tx")


def netspeed_rx(interface: str) -> str:
    """Return the receive rate of an interface."""
    return _rx.update(interface)


def netspeed_tx(interface: str) -> str:
    """Return the transmit rate of an interface."""
    return _tx.update(interface)