"""Memory components reading /proc/meminfo."""

from __future__ import annotations

import os

from .util import ComponentError, fmt_human, warn

__all__ = ["read_meminfo", "ram_free", "ram_perc", "ram_total", "ram_used"]

MEMINFO_PATH = "/proc/meminfo"


def read_meminfo(path: str | os.PathLike[str] = MEMINFO_PATH) -> dict[str, int]:
    """Parse a meminfo file into a mapping of field name to value in kB."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError as exc:
        message = f"fopen '{os.fspath(path)}': {exc.strerror or exc}"
        warn(message)
        raise ComponentError(message) from exc

    fields: dict[str, int] = {}
    for line in lines:
        name, sep, rest = line.partition(":")
        parts = rest.split()
        if not sep or not parts:
            continue
        try:
            fields[name.strip()] = int(parts[0])
        except ValueError:
            continue
    return fields


def _fields(path: str | os.PathLike[str], *names: str) -> tuple[int, ...]:
    info = read_meminfo(path)
    try:
        return tuple(info[name] for name in names)
    except KeyError as exc:
        raise ComponentError(f"'{os.fspath(path)}' lacks {exc.args[0]}") from None


def ram_free(path: str | os.PathLike[str] = MEMINFO_PATH) -> str:
    """Return the available memory."""
    (available,) = _fields(path, "MemAvailable")
    return fmt_human(available * 1024, 1024)


def ram_perc(path: str | os.PathLike[str] = MEMINFO_PATH) -> str:
    """Return the used memory, excluding buffers and cache, in percent."""
    total, free, buffers, cached = _fields(
        path, "MemTotal", "MemFree", "Buffers", "Cached"
    )
    if total == 0:
        raise ComponentError("total memory is zero")
    return str(100 * ((total - free) - (buffers + cached)) // total)


def ram_total(path: str | os.PathLike[str] = MEMINFO_PATH) -> str:
    """Return the total memory."""
    (total,) = _fields(path, "MemTotal")
    return fmt_human(total * 1024, 1024)


def ram_used(path: str | os.PathLike[str] = MEMINFO_PATH) -> str:
    """Return the used memory, excluding buffers and cache."""
    total, free, buffers, cached = _fields(
        path, "MemTotal", "MemFree", "Buffers", "Cached"
    )
    return fmt_human((total - free - buffers - cached) * 1024, 1024)