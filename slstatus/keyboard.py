"""Keyboard indicator and layout formatting."""

from __future__ import annotations

import re

from .util import ComponentError

__all__ = ["format_indicators", "layout_from_symbols"]

# Only this many characters of an indicator format are considered.
_MAX_FORMAT = 4

# Symbols from the xkb rules configuration that name no layout.
_INVALID_SYMBOLS = ("evdev", "inet", "pc", "base")

_TOKEN_SPLIT = re.compile(r"[+:]")


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps lock and num lock state according to ``fmt``.

    ``fmt`` holds 'c' (caps lock) and/or 'n' (num lock) in either case, each
    optionally followed by '?'. A letter followed by '?' appears, with its case
    kept, only while its indicator is on. Any other letter always appears,
    lowercase when off and uppercase when on.
    """
    fmt = fmt[:_MAX_FORMAT]
    out = []
    for position, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        following = fmt[position + 1 : position + 2]
        togglecase = following != "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if togglecase:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)


def _valid_layout_or_variant(symbol: str) -> bool:
    return not symbol.startswith(_INVALID_SYMBOLS)


def layout_from_symbols(symbols: str, group: int) -> str:
    """Pick the layout of keyboard group ``group`` from an xkb symbols name."""
    layout = None
    current = 0
    for token in filter(None, _TOKEN_SPLIT.split(symbols)):
        if current > group:
            break
        if not _valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token.isdigit():
            # :2, :3, :4 denote additional layout groups
            continue
        layout = token
        current += 1
    if layout is None:
        raise ComponentError(f"no layout in symbols '{symbols}'")
    return layout