"""Simple status components: files, clock, disks, host and user details."""

from __future__ import annotations

import os
import pwd
import socket
import subprocess
import sys
import time
from pathlib import Path

from .util import BUF_SIZE, fmt_human, read_first_line, read_int, warn

ENTROPY_AVAIL = Path("/proc/sys/kernel/random/entropy_avail")
BACKLIGHT_DIR = Path("/sys/class/backlight")


def cat(path: str) -> str | None:
    """Return the first line of a file, or None if it is missing or blank."""
    return read_first_line(path) or None


def datetime(fmt: str) -> str | None:
    """Format the current local time with a strftime format."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result.encode("utf-8")) >= BUF_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def _statvfs(path: str) -> os.statvfs_result | None:
    try:
        return os.statvfs(path)
    except OSError:
        warn(f"statvfs '{path}':")
        return None


def disk_free(path: str) -> str | None:
    """Space available to unprivileged users on the filesystem at ``path``."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str) -> str | None:
    """Percentage of the filesystem at ``path`` that is in use."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str) -> str | None:
    """Total size of the filesystem at ``path``."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str) -> str | None:
    """Used space on the filesystem at ``path``."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)


def entropy(unused: str | None = None) -> str | None:
    """Available kernel entropy; infinite on systems without a pool counter."""
    if not sys.platform.startswith("linux"):
        return "\u221e"
    value = read_int(ENTROPY_AVAIL)
    return None if value is None else str(value)


def hostname(unused: str | None = None) -> str | None:
    """The host name of this machine."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostbyname:")
        return None


def kernel_release(unused: str | None = None) -> str | None:
    """The running kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError:
        warn("uname:")
        return None


def load_avg(unused: str | None = None) -> str | None:
    """The 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def num_files(path: str) -> str | None:
    """Number of entries in a directory."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError:
        warn(f"opendir '{path}':")
        return None
    return str(count)


def run_command(cmd: str) -> str | None:
    """Run a shell command and return the first line of its output."""
    try:
        completed = subprocess.run(
            cmd, shell=True, stdout=subprocess.PIPE, check=False
        )
    except OSError:
        warn(f"popen '{cmd}':")
        return None
    output = completed.stdout.decode("utf-8", errors="replace")
    if not output:
        return None
    first, _, _ = output.partition("\n")
    return first[: BUF_SIZE - 2] or None


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME"):
        if hasattr(time, name):
            return getattr(time, name)
    return time.CLOCK_MONOTONIC


def format_uptime(seconds: int) -> str:
    """Render a number of seconds as hours and minutes."""
    hours, rest = divmod(int(seconds), 3600)
    return f"{hours}h {rest // 60}m"


def uptime(unused: str | None = None) -> str | None:
    """Time since boot in hours and minutes."""
    clock = _uptime_clock()
    try:
        seconds = time.clock_gettime(clock)
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    return format_uptime(int(seconds))


def gid(unused: str | None = None) -> str:
    """Real group id of the current process."""
    return str(os.getgid())


def uid(unused: str | None = None) -> str:
    """Effective user id of the current process."""
    return str(os.geteuid())


def username(unused: str | None = None) -> str | None:
    """Login name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}':")
        return None


def temp(file: str) -> str | None:
    """Temperature in degrees Celsius from a millidegree sensor file."""
    value = read_int(file)
    if value is None:
        return None
    degrees = value // 1000 if value >= 0 else -(-value // 1000)
    return str(degrees)


def backlight_perc(card: str) -> str | None:
    """Brightness of a backlight device as a percentage of its maximum."""
    device = BACKLIGHT_DIR / card
    maximum = read_int(device / "max_brightness")
    if maximum is None:
        return None
    current = read_int(device / "brightness")
    if current is None or maximum == 0:
        return None
    return f"{current * 100 // maximum}%"