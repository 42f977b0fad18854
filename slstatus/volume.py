"""Volume component reading an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct
import sys

from .util import ComponentError, warn

__all__ = ["vol_perc"]

# _IOR('M', nr, int)
_MIXER_READ_BASE = 0x80044D00 if sys.platform.startswith("linux") else 0x40044D00
_SOUND_MIXER_VOLUME = 0
_SOUND_MIXER_DEVMASK = 0xFE


def _mixer_read(nr: int) -> int:
    return _MIXER_READ_BASE | nr


def _ioctl_int(fd: int, request: int, label: str) -> int:
    try:
        reply = fcntl.ioctl(fd, request, struct.pack("i", 0))
    except OSError as exc:
        message = f"ioctl '{label}': {exc.strerror or exc}"
        warn(message)
        raise ComponentError(message) from exc
    return struct.unpack("i", reply)[0]


def vol_perc(card: str | os.PathLike[str]) -> str:
    """Return the master volume of a mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        message = f"open '{os.fspath(card)}': {exc.strerror or exc}"
        warn(message)
        raise ComponentError(message) from exc
    try:
        devmask = _ioctl_int(
            fd, _mixer_read(_SOUND_MIXER_DEVMASK), "SOUND_MIXER_READ_DEVMASK"
        )
        if not devmask & (1 << _SOUND_MIXER_VOLUME):
            raise ComponentError(f"mixer '{os.fspath(card)}' has no volume control")
        level = _ioctl_int(
            fd, _mixer_read(_SOUND_MIXER_VOLUME), f"MIXER_READ({_SOUND_MIXER_VOLUME})"
        )
    finally:
        os.close(fd)
    return str(level & 0xFF)