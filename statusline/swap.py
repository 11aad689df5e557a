"""Swap usage from /proc/meminfo."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .util import fmt_human, warn

MEMINFO = Path("/proc/meminfo")

_FIELDS = (
    ("total", "SwapTotal"),
    ("free", "SwapFree"),
    ("cached", "SwapCached"),
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass(frozen=True)
class SwapInfo:
    """Swap totals in kibibytes; None where the field was not found."""

    total: int | None = None
    free: int | None = None
    cached: int | None = None

    @property
    def complete(self) -> bool:
        """Whether every field was read."""
        return None not in (self.total, self.free, self.cached)

    def used_kib(self) -> int:
        """Swap in use, not counting swap that is also cached in memory."""
        if not self.complete:
            raise ValueError("swap information is missing fields")
        return self.total - self.free - self.cached

    def percent(self) -> int | None:
        """Swap in use as a percentage of the total, or None if it is zero."""
        used = self.used_kib()
        if self.total == 0:
            return None
        return _trunc_div(100 * used, self.total)


def parse_swap_info(lines: Iterable[str]) -> SwapInfo:
    """Pick the swap fields out of /proc/meminfo lines."""
    values: dict[str, int] = {}
    left = len(_FIELDS)
    for line in lines:
        if left <= 0:
            break
        for attr, name in _FIELDS:
            if line.startswith(name):
                match = _LEADING_INT.match(line, len(name) + 1)
                if match:
                    values[attr] = int(match.group(1))
                left -= 1
                break
    return SwapInfo(**values)


def _read_swap_info() -> SwapInfo | None:
    try:
        with open(MEMINFO, encoding="utf-8", errors="replace") as handle:
            return parse_swap_info(handle)
    except OSError:
        warn(f"fopen '{MEMINFO}':")
        return None


def swap_free(unused: str | None = None) -> str | None:
    """Free swap space."""
    info = _read_swap_info()
    if info is None or info.free is None:
        return None
    return fmt_human(info.free * 1024, 1024)


def swap_perc(unused: str | None = None) -> str | None:
    """Swap in use as a percentage."""
    info = _read_swap_info()
    if info is None or not info.complete:
        return None
    percent = info.percent()
    return None if percent is None else str(percent)


def swap_total(unused: str | None = None) -> str | None:
    """Total swap space."""
    info = _read_swap_info()
    if info is None or info.total is None:
        return None
    return fmt_human(info.total * 1024, 1024)


def swap_used(unused: str | None = None) -> str | None:
    """Swap space in use."""
    info = _read_swap_info()
    if info is None or not info.complete:
        return None
    return fmt_human(info.used_kib() * 1024, 1024)