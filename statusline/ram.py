"""Memory usage from /proc/meminfo."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from .util import fmt_human, warn

MEMINFO = Path("/proc/meminfo")

_FIELDS = (
    ("total", "MemTotal"),
    ("free", "MemFree"),
    ("available", "MemAvailable"),
    ("buffers", "Buffers"),
    ("cached", "Cached"),
)

_PATTERNS = tuple(
    (attr, re.compile(rf"{name}:\s*(\d+)\s*kB\s*")) for attr, name in _FIELDS
)


@dataclass(frozen=True)
class MemInfo:
    """The leading /proc/meminfo fields, in kibibytes; None where absent."""

    total: int | None = None
    free: int | None = None
    available: int | None = None
    buffers: int | None = None
    cached: int | None = None

    @property
    def complete(self) -> bool:
        """Whether every field was read."""
        return None not in (
            self.total,
            self.free,
            self.available,
            self.buffers,
            self.cached,
        )

    def _require(self) -> None:
        if not self.complete:
            raise ValueError("meminfo is missing fields")

    def used_kib(self) -> int:
        """Memory in use, not counting buffers and page cache."""
        self._require()
        return self.total - self.free - self.buffers - self.cached

    def percent(self) -> int | None:
        """Memory in use as a percentage of the total, or None if it is zero."""
        self._require()
        if self.total == 0:
            return None
        return 100 * self.used_kib() // self.total


def parse_meminfo(text: str) -> MemInfo:
    """Read the leading fields of /proc/meminfo, stopping at the first mismatch."""
    values: dict[str, int] = {}
    pos = 0
    for attr, pattern in _PATTERNS:
        match = pattern.match(text, pos)
        if match is None:
            break
        values[attr] = int(match.group(1))
        pos = match.end()
    return MemInfo(**values)


def _read_meminfo() -> MemInfo | None:
    try:
        text = MEMINFO.read_text(encoding="utf-8", errors="replace")
    except OSError:
        warn(f"fopen '{MEMINFO}':")
        return None
    return parse_meminfo(text)


def ram_free(unused: str | None = None) -> str | None:
    """Memory available for new allocations."""
    info = _read_meminfo()
    if info is None or info.available is None:
        return None
    return fmt_human(info.available * 1024, 1024)


def ram_perc(unused: str | None = None) -> str | None:
    """Memory in use as a percentage."""
    info = _read_meminfo()
    if info is None or not info.complete:
        return None
    percent = info.percent()
    return None if percent is None else str(percent)


def ram_total(unused: str | None = None) -> str | None:
    """Total memory."""
    info = _read_meminfo()
    if info is None or info.total is None:
        return None
    return fmt_human(info.total * 1024, 1024)


def ram_used(unused: str | None = None) -> str | None:
    """Memory in use, not counting buffers and page cache."""
    info = _read_meminfo()
    if info is None or not info.complete:
        return None
    return fmt_human(info.used_kib() * 1024, 1024)