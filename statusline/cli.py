"""Command line entry point: renders the status line and shows it periodically."""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import sys
import threading
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .config import INTERVAL, MAXLEN, UNKNOWN_STR, Arg, default_args
from .util import StatusError, die, warn


class UsageError(StatusError):
    """The command line could not be understood."""


@dataclass(frozen=True)
class Options:
    """What the command line asked for."""

    single: bool = False
    """Print the status to stdout instead of setting the root window name."""
    once: bool = False
    """Render the status a single time and exit."""


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the arguments that follow the program name."""
    single = once = False
    rest = list(argv)
    while rest and rest[0].startswith("-") and len(rest[0]) > 1:
        arg = rest.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "1":
                once = single = True
            elif flag == "s":
                single = True
            else:
                raise UsageError(f"unknown option -{flag}")
    if rest:
        raise UsageError("unexpected arguments: " + " ".join(rest))
    return Options(single=single, once=once)


def render_status(args: Iterable[Arg], unknown: str, maxlen: int) -> str:
    """Join the rendered segments into at most ``maxlen - 1`` bytes.

    A segment that does not fit is cut short, and no later segment is rendered.
    """
    status = bytearray()
    for arg in args:
        piece = arg.render(unknown).encode("utf-8")
        room = maxlen - len(status)
        if len(piece) >= room:
            status += piece[: max(room - 1, 0)]
            warn("vsnprintf: Output truncated")
            break
        status += piece
    return status.decode("utf-8", errors="ignore")


class _RootWindow:
    """Sets the name of the X root window, which status bars display."""

    def __init__(self) -> None:
        self._setter = shutil.which("xsetroot")
        if self._setter is None or not os.environ.get("DISPLAY"):
            die("XOpenDisplay: Failed to open display")

    def _run(self, name: str) -> bool:
        try:
            completed = subprocess.run(
                [self._setter, "-name", name],
                stdout=subprocess.DEVNULL,
                check=False,
            )
        except OSError:
            return False
        return completed.returncode == 0

    def store(self, name: str) -> None:
        if not self._run(name):
            die("XStoreName: Allocation failed")

    def clear(self) -> None:
        self._run("")


@dataclass
class _LoopState:
    done: bool = False
    wake: threading.Event = field(default_factory=threading.Event)


def _install_handlers(state: _LoopState) -> dict[int, object]:
    if threading.current_thread() is not threading.main_thread():
        return {}

    def handler(signo: int, _frame: object) -> None:
        if signo != signal.SIGUSR1:
            state.done = True
        state.wake.set()

    previous = {}
    for signo in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1):
        previous[signo] = signal.signal(signo, handler)
    return previous


def _restore_handlers(previous: dict[int, object]) -> None:
    for signo, handler in previous.items():
        signal.signal(signo, handler)


def _emit(status: str) -> None:
    try:
        sys.stdout.write(status + "\n")
        sys.stdout.flush()
    except OSError:
        die("puts:")


def _run(options: Options, args: Sequence[Arg]) -> None:
    root = None if options.single else _RootWindow()
    state = _LoopState(done=options.once)
    previous = _install_handlers(state)
    try:
        while True:
            start = time.monotonic()
            status = render_status(args, UNKNOWN_STR, MAXLEN)
            if root is None:
                _emit(status)
            else:
                root.store(status)

            if not state.done:
                remaining = INTERVAL / 1000 - (time.monotonic() - start)
                if remaining >= 0:
                    state.wake.wait(remaining)
                state.wake.clear()
            if state.done:
                break
    finally:
        _restore_handlers(previous)
        if root is not None:
            root.clear()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the status program; return the exit status."""
    program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "statusline"
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except UsageError:
        print(f"usage: {program} [-s] [-1]", file=sys.stderr)
        return 1
    try:
        _run(options, default_args())
    except StatusError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())