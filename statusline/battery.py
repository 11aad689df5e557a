"""Battery charge, charging state and time remaining from the power supply class."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .util import read_int, warn

POWER_SUPPLY_DIR = Path("/sys/class/power_supply")

_STATE_SYMBOLS = {
    "Charging": "charging!",
    "Discharging": "discharging!",
    "Full": "full!",
    "Not charging": "not!",
}

_STATE_PATTERN = re.compile(r"[a-zA-Z ]{1,12}")


def state_symbol(state: str) -> str:
    """Map a power supply status word to its display symbol, or '?'."""
    return _STATE_SYMBOLS.get(state, "?")


def format_remaining(charge_now: int, current_now: int) -> str:
    """Render the time left from the present charge and drain rate."""
    if current_now == 0:
        raise ValueError("current_now must not be zero")
    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"


def _device(bat: str) -> Path:
    return POWER_SUPPLY_DIR / bat


def _read_state(bat: str) -> str | None:
    path = _device(bat) / "status"
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        warn(f"fopen '{path}':")
        return None
    match = _STATE_PATTERN.match(text)
    return match.group(0) if match else None


def _pick(bat: str, first: str, second: str) -> Path | None:
    for name in (first, second):
        path = _device(bat) / name
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str) -> str | None:
    """Battery capacity in percent."""
    capacity = read_int(_device(bat) / "capacity")
    return None if capacity is None else str(capacity)


def battery_state(bat: str) -> str | None:
    """Display symbol for the battery's charging state."""
    state = _read_state(bat)
    return None if state is None else state_symbol(state)


def battery_remaining(bat: str) -> str | None:
    """Time left while discharging; empty while not discharging."""
    state = _read_state(bat)
    if state is None:
        return None

    charge_path = _pick(bat, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_int(current_path)
    if current_now is None or current_now == 0:
        return None
    return format_remaining(charge_now, current_now)