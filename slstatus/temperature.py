"""Temperature component reading a thermal sensor file."""

from __future__ import annotations

import os

from .util import read_int

__all__ = ["temp"]


def temp(file: str | os.PathLike[str]) -> str:
    """Return the temperature in whole degrees Celsius from a millidegree file."""
    return str(int(read_int(file) / 1000))