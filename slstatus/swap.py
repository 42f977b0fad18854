"""Swap components reading /proc/meminfo."""

from __future__ import annotations

import os
import re

from .util import ComponentError, fmt_human, warn

__all__ = ["read_swap_info", "swap_free", "swap_perc", "swap_total", "swap_used"]

MEMINFO_PATH = "/proc/meminfo"

_SWAP_FIELDS = ("SwapTotal", "SwapFree", "SwapCached")
_VALUE_RE = re.compile(r"\s*([+-]?\d+)")


def read_swap_info(path: str | os.PathLike[str] = MEMINFO_PATH) -> dict[str, int]:
    """Return the swap fields of a meminfo file, in kB, keyed by field name."""
    found: dict[str, int] = {}
    try:
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                name = next(
                    (field for field in _SWAP_FIELDS
                     if field not in found and line.startswith(field)),
                    None,
                )
                if name is None:
                    continue
                match = _VALUE_RE.match(line, len(name) + 1)
                if match is not None:
                    found[name] = int(match.group(1))
                if len(found) == len(_SWAP_FIELDS):
                    break
    except OSError as exc:
        message = f"fopen '{os.fspath(path)}': {exc.strerror or exc}"
        warn(message)
        raise ComponentError(message) from exc
    return found


def _fields(path: str | os.PathLike[str], *names: str) -> tuple[int, ...]:
    info = read_swap_info(path)
    missing = [name for name in names if name not in info]
    if missing:
        raise ComponentError(f"'{os.fspath(path)}' lacks {', '.join(missing)}")
    return tuple(info[name] for name in names)


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def swap_free(path: str | os.PathLike[str] = MEMINFO_PATH) -> str:
    """Return the free swap space."""
    (free,) = _fields(path, "SwapFree")
    return fmt_human(free * 1024, 1024)


def swap_perc(path: str | os.PathLike[str] = MEMINFO_PATH) -> str:
    """Return the used swap, excluding cached pages, in percent."""
    total, free, cached = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if total == 0:
        raise ComponentError("total swap is zero")
    return str(_trunc_div(100 * (total - free - cached), total))


def swap_total(path: str | os.PathLike[str] = MEMINFO_PATH) -> str:
    """Return the total swap space."""
    (total,) = _fields(path, "SwapTotal")
    return fmt_human(total * 1024, 1024)


def swap_used(path: str | os.PathLike[str] = MEMINFO_PATH) -> str:
    """Return the used swap space, excluding cached pages."""
    total, free, cached = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    return fmt_human((total - free - cached) * 1024, 1024)