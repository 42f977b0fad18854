"""The status loop and its command line."""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import sys
import threading
import time
from typing import Callable, Iterable, Optional, Sequence

from . import config
from .config import Arg
from .util import die, warn

__all__ = ["Monitor", "parse_args", "set_root_name", "main"]


class Monitor:
    """Renders the configured components and hands the result to a sink."""

    def __init__(
        self,
        args: Iterable[Arg] = config.ARGS,
        interval: int = config.INTERVAL,
        unknown: str = config.UNKNOWN_STR,
        maxlen: int = config.MAXLEN,
    ) -> None:
        if maxlen < 1:
            raise ValueError("maxlen must be positive")
        self.args = tuple(args)
        self.interval = interval
        self.unknown = unknown
        self.maxlen = maxlen
        self._done = threading.Event()

    def render(self) -> str:
        """Return one status line, truncated to fit ``maxlen``."""
        status = b""
        for arg in self.args:
            piece = arg.render(self.unknown).encode("utf-8")
            if len(status) + len(piece) >= self.maxlen:
                warn("vsnprintf: Output truncated")
                status += piece[: self.maxlen - 1 - len(status)]
                break
            status += piece
        return status.decode("utf-8", errors="ignore")

    def run(self, sink: Callable[[str], object]) -> None:
        """Render and emit a status every interval until stopped."""
        while not self._done.is_set():
            start = time.monotonic()
            sink(self.render())
            if self._done.is_set():
                break
            wait = self.interval / 1000 - (time.monotonic() - start)
            if wait >= 0:
                self._done.wait(wait)

    def stop(self) -> None:
        """Ask the loop to finish after the current iteration."""
        self._done.set()


def _usage() -> None:
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "slstatus"
    die(f"usage: {prog} [-s]")


def parse_args(argv: Sequence[str]) -> bool:
    """Parse the options; return whether ``-s`` (write to stdout) was given."""
    sflag = False
    remaining = list(argv)
    while remaining and remaining[0].startswith("-") and len(remaining[0]) > 1:
        option = remaining.pop(0)
        if option == "--":
            break
        for char in option[1:]:
            if char == "s":
                sflag = True
            else:
                _usage()
    if remaining:
        _usage()
    return sflag


def set_root_name(text: Optional[str]) -> None:
    """Set the name of the X root window, which status bars display."""
    try:
        subprocess.run(["xsetroot", "-name", text or ""], check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        die(f"XStoreName: {exc}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the status monitor."""
    if argv is None:
        argv = sys.argv[1:]
    sflag = parse_args(argv)

    monitor = Monitor()

    def terminate(_signo: int, _frame: object) -> None:
        monitor.stop()

    signal.signal(signal.SIGINT, terminate)
    signal.signal(signal.SIGTERM, terminate)

    if not sflag and (not os.environ.get("DISPLAY") or shutil.which("xsetroot") is None):
        die("XOpenDisplay: Failed to open display")

    def to_stdout(status: str) -> None:
        try:
            print(status, flush=True)
        except OSError as exc:
            die(f"puts: {exc.strerror or exc}")

    monitor.run(to_stdout if sflag else set_root_name)

    if not sflag:
        set_root_name(None)
    return 0