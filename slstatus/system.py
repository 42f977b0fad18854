"""Components reading general system information."""

from __future__ import annotations

import os
import pwd
import socket
import subprocess
import sys
import time

from .util import ComponentError, fmt_human, read_int, warn

__all__ = [
    "datetime",
    "hostname",
    "kernel_release",
    "load_avg",
    "uptime",
    "gid",
    "uid",
    "username",
    "entropy",
    "num_files",
    "run_command",
    "disk_free",
    "disk_perc",
    "disk_total",
    "disk_used",
]

_BUFSIZE = 1024
_ENTROPY_PATH = "/proc/sys/kernel/random/entropy_avail"


def _fail(message: str, exc: BaseException | None = None) -> ComponentError:
    warn(message)
    error = ComponentError(message)
    if exc is not None:
        error.__cause__ = exc
    return error


def datetime(fmt: str) -> str:
    """Format the current local time with a strftime format."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result.encode("utf-8")) >= _BUFSIZE:
        raise _fail("strftime: Result string exceeds buffer size")
    return result


def hostname() -> str:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        raise _fail(f"gethostname: {exc}", exc) from exc


def kernel_release() -> str:
    """Return the kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError as exc:
        raise _fail(f"uname: {exc}", exc) from exc


def load_avg() -> str:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError as exc:
        raise _fail("getloadavg: Failed to obtain load average", exc) from exc
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    raise _fail("clock_gettime: no suitable clock")


def uptime() -> str:
    """Return the system uptime as hours and minutes."""
    clock = _uptime_clock()
    try:
        seconds = int(time.clock_gettime(clock))
    except OSError as exc:
        raise _fail(f"clock_gettime {clock}", exc) from exc
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid() -> str:
    """Return the real group id of the current process."""
    return str(os.getgid())


def uid() -> str:
    """Return the effective user id of the current process."""
    return str(os.geteuid())


def username() -> str:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError as exc:
        raise _fail(f"getpwuid '{euid}': no such user", exc) from exc


def entropy(path: str = _ENTROPY_PATH) -> str:
    """Return the available entropy of the kernel pool."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return "\u221e"
    return str(read_int(path))


def num_files(path: str) -> str:
    """Return the number of entries in a directory."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError as exc:
        raise _fail(f"opendir '{path}': {exc.strerror or exc}", exc) from exc
    return str(count)


def run_command(cmd: str) -> str:
    """Run a shell command and return the first line of its output."""
    try:
        completed = subprocess.run(
            cmd, shell=True, stdout=subprocess.PIPE, check=False
        )
    except OSError as exc:
        raise _fail(f"popen '{cmd}': {exc}", exc) from exc

    output = completed.stdout
    if not output:
        raise ComponentError(f"no output from '{cmd}'")
    newline = output.find(b"\n")
    line = output if newline < 0 else output[: newline + 1]
    line = line[: _BUFSIZE - 2]
    if line.endswith(b"\n"):
        line = line[:-1]
    if not line:
        raise ComponentError(f"empty output from '{cmd}'")
    return line.decode("utf-8", errors="replace")


def _statvfs(path: str) -> os.statvfs_result:
    try:
        return os.statvfs(path)
    except OSError as exc:
        raise _fail(f"statvfs '{path}': {exc.strerror or exc}", exc) from exc


def disk_free(path: str) -> str:
    """Return the space available to unprivileged users on a filesystem."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str) -> str:
    """Return the used share of a filesystem in percent."""
    fs = _statvfs(path)
    if fs.f_blocks == 0:
        raise ComponentError(f"filesystem at '{path}' reports no blocks")
    return str(int(100 * (1.0 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str) -> str:
    """Return the total size of a filesystem."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str) -> str:
    """Return the used space of a filesystem."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)