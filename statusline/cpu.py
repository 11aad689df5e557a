"""CPU frequency and usage."""

from __future__ import annotations

from pathlib import Path

from .util import fmt_human, read_int, warn

CPU_FREQ = Path("/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq")
PROC_STAT = Path("/proc/stat")

_FIELDS = 7
_IDLE, _IOWAIT = 3, 4


def parse_cpu_times(text: str) -> tuple[float, ...]:
    """Read user, nice, system, idle, iowait, irq and softirq from /proc/stat text."""
    tokens = text.split()
    if len(tokens) < _FIELDS + 1:
        raise ValueError("too few CPU time fields")
    return tuple(float(token) for token in tokens[1 : _FIELDS + 1])


class CpuUsage:
    """Tracks CPU times between samples to report usage in percent."""

    def __init__(self, path: str | Path = PROC_STAT) -> None:
        self.path = Path(path)
        self._previous: tuple[float, ...] = (0.0,) * _FIELDS

    def sample(self) -> str | None:
        """Take a new reading; return usage since the last one, or None."""
        previous = self._previous
        try:
            text = self.path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            warn(f"fopen '{self.path}':")
            return None
        try:
            current = parse_cpu_times(text)
        except ValueError:
            return None
        self._previous = current

        if previous[0] == 0:
            return None
        total = sum(current) - sum(previous)
        if total == 0:
            return None
        idle = (current[_IDLE] - previous[_IDLE]) + (
            current[_IOWAIT] - previous[_IOWAIT]
        )
        return str(int(100 * (total - idle) / total))


_usage = CpuUsage()


def cpu_freq(unused: str | None = None) -> str | None:
    """Current frequency of the first CPU."""
    khz = read_int(CPU_FREQ)
    if khz is None:
        return None
    return fmt_human(khz * 1000, 1000)


def cpu_perc(unused: str | None = None) -> str | None:
    """CPU usage in percent since the previous call."""
    return _usage.sample()