"""Shared helpers: human-readable sizes, small file readers and diagnostics."""

from __future__ import annotations

import os
import re
import sys

__all__ = ["ComponentError", "fmt_human", "read_int", "read_word", "warn", "die"]

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_WORD_RE = re.compile(r"\s*(\S+)")


class ComponentError(Exception):
    """Raised when a status component cannot produce a value."""


def _program_name() -> str | None:
    if sys.argv and sys.argv[0]:
        return sys.argv[0]
    return None


def warn(message: str) -> None:
    """Write a diagnostic line to standard error, prefixed with the program name."""
    prog = _program_name()
    prefix = f"{prog}: " if prog and not message.startswith("usage") else ""
    sys.stderr.write(f"{prefix}{message}\n")
    sys.stderr.flush()


def die(message: str) -> None:
    """Report a fatal error and exit with status 1."""
    warn(message)
    raise SystemExit(1)


def fmt_human(num: float, base: int) -> str:
    """Scale ``num`` by ``base`` and format it with one decimal and a unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def _read_text(path: str | os.PathLike[str]) -> str:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        message = f"fopen '{os.fspath(path)}': {exc.strerror or exc}"
        warn(message)
        raise ComponentError(message) from exc


def read_int(path: str | os.PathLike[str]) -> int:
    """Read the leading integer of a file."""
    match = _INT_RE.match(_read_text(path))
    if match is None:
        raise ComponentError(f"no integer in '{os.fspath(path)}'")
    return int(match.group(1))


def read_word(path: str | os.PathLike[str]) -> str:
    """Read the first whitespace-delimited word of a file."""
    match = _WORD_RE.match(_read_text(path))
    if match is None:
        raise ComponentError(f"no word in '{os.fspath(path)}'")
    return match.group(1)