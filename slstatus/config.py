"""Status configuration: components, their formats and defaults."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from . import battery, cpu, ip, netspeeds, ram, swap, system, temperature, volume, wifi
from .util import ComponentError

__all__ = [
    "Arg",
    "resolve",
    "INTERVAL",
    "UNKNOWN_STR",
    "MAXLEN",
    "ARGS",
    "DESKTOP_ARGS",
]

# interval between updates, in milliseconds
INTERVAL = 1000

# text shown if no value can be retrieved
UNKNOWN_STR = "n/a"

# maximum output string length
MAXLEN = 2048

_COMPONENTS: dict[str, Callable[..., str]] = {
    "battery_perc": battery.battery_perc,
    "battery_state": battery.battery_state,
    "battery_remaining": battery.battery_remaining,
    "cpu_perc": cpu.cpu_perc,
    "cpu_freq": cpu.cpu_freq,
    "datetime": system.datetime,
    "disk_free": system.disk_free,
    "disk_perc": system.disk_perc,
    "disk_total": system.disk_total,
    "disk_used": system.disk_used,
    "entropy": system.entropy,
    "gid": system.gid,
    "hostname": system.hostname,
    "ipv4": ip.ipv4,
    "ipv6": ip.ipv6,
    "kernel_release": system.kernel_release,
    "load_avg": system.load_avg,
    "netspeed_rx": netspeeds.netspeed_rx,
    "netspeed_tx": netspeeds.netspeed_tx,
    "num_files": system.num_files,
    "ram_free": ram.ram_free,
    "ram_perc": ram.ram_perc,
    "ram_total": ram.ram_total,
    "ram_used": ram.ram_used,
    "run_command": system.run_command,
    "swap_free": swap.swap_free,
    "swap_perc": swap.swap_perc,
    "swap_total": swap.swap_total,
    "swap_used": swap.swap_used,
    "temp": temperature.temp,
    "uid": system.uid,
    "uptime": system.uptime,
    "username": system.username,
    "vol_perc": volume.vol_perc,
    "wifi_perc": wifi.wifi_perc,
    "wifi_essid": wifi.wifi_essid,
}

_SPEC_RE = re.compile(
    r"%(?P<flags>[-+ #0]*)(?P<width>\d*)(?:\.(?P<prec>\d*))?(?P<conv>[%a-zA-Z])"
)


def resolve(name: str) -> Callable[..., str]:
    """Return the component function registered under ``name``."""
    try:
        return _COMPONENTS[name]
    except KeyError:
        raise ValueError(f"unknown component {name!r}") from None


def _format(fmt: str, value: str) -> str:
    """Apply a printf-style format holding at most one string conversion."""
    used = False

    def substitute(match: re.Match[str]) -> str:
        nonlocal used
        conv = match.group("conv")
        if conv == "%":
            return "%"
        if conv != "s":
            raise ValueError(f"unsupported conversion '%{conv}' in {fmt!r}")
        if used:
            raise ValueError(f"more than one conversion in {fmt!r}")
        used = True
        text = value
        prec = match.group("prec")
        if prec is not None:
            text = text[: int(prec or 0)]
        width = int(match.group("width") or 0)
        if "-" in match.group("flags"):
            return text.ljust(width)
        return text.rjust(width)

    return _SPEC_RE.sub(substitute, fmt)


@dataclass(frozen=True)
class Arg:
    """One status entry: a component, its format and its argument."""

    func: Callable[..., str]
    fmt: str
    args: Optional[str] = None

    def render(self, unknown: str = UNKNOWN_STR) -> str:
        """Call the component and format its result, or ``unknown`` on failure."""
        try:
            result = self.func() if self.args is None else self.func(self.args)
        except ComponentError:
            result = unknown
        return _format(self.fmt, result)


ARGS: tuple[Arg, ...] = (
    Arg(system.datetime, "%s", "%F %T"),
)

DESKTOP_ARGS: tuple[Arg, ...] = (
    Arg(
        system.run_command,
        ": %4s | ",
        "amixer sget Master | awk -F\"[][]\" '/%/ { print $2 }' | head -n1",
    ),
    Arg(cpu.cpu_perc, "[CPU  %s%%]   "),
    Arg(ram.ram_perc, "[RAM  %s%%]   "),
    Arg(system.datetime, "%s", "%a %b %d %r"),
)