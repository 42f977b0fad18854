"""CPU frequency and utilisation components."""

from __future__ import annotations

import os

from .util import ComponentError, fmt_human, read_int, warn

__all__ = ["CpuMeter", "cpu_freq", "cpu_perc"]

CPU_FREQ_PATH = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT_PATH = "/proc/stat"

# user nice system idle iowait irq softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


def cpu_freq(path: str | os.PathLike[str] = CPU_FREQ_PATH) -> str:
    """Return the current frequency of the first CPU (the file holds kHz)."""
    return fmt_human(read_int(path) * 1000, 1000)


class CpuMeter:
    """Computes CPU usage from the change in /proc/stat between two calls."""

    def __init__(self, stat_path: str | os.PathLike[str] = PROC_STAT_PATH) -> None:
        self.stat_path = stat_path
        self._previous: tuple[float, ...] | None = None

    def _sample(self) -> tuple[float, ...]:
        try:
            with open(self.stat_path, encoding="utf-8") as handle:
                tokens = handle.read().split()
        except OSError as exc:
            message = f"fopen '{os.fspath(self.stat_path)}': {exc.strerror or exc}"
            warn(message)
            raise ComponentError(message) from exc
        try:
            values = tuple(float(token) for token in tokens[1 : 1 + _FIELDS])
        except ValueError:
            values = ()
        if len(values) != _FIELDS:
            raise ComponentError(f"malformed '{os.fspath(self.stat_path)}'")
        return values

    def perc(self) -> str:
        """Return the share of busy time since the previous call, in percent."""
        current = self._sample()
        previous, self._previous = self._previous, current
        if previous is None or previous[0] == 0:
            raise ComponentError("no previous CPU sample")

        total = sum(current) - sum(previous)
        if total == 0:
            raise ComponentError("no CPU time elapsed")
        busy = sum(current[i] for i in _BUSY) - sum(previous[i] for i in _BUSY)
        return str(int(100 * busy / total))


_default_meter = CpuMeter()


def cpu_perc() -> str:
    """Return CPU usage in percent since the previous call."""
    return _default_meter.perc()