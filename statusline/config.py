"""Status line configuration: update interval, placeholder text and the components shown."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from . import basic, battery, cpu, network, ram, swap, volume

INTERVAL = 1000
"""Milliseconds between status updates."""

UNKNOWN_STR = "!"
"""Text shown in place of a value that could not be retrieved."""

MAXLEN = 2048
"""Size of the status buffer in bytes, terminating NUL included."""

Component = Callable[[str | None], str | None]

COMPONENTS: dict[str, Component] = {
    "backlight_perc": basic.backlight_perc,
    "battery_perc": battery.battery_perc,
    "battery_remaining": battery.battery_remaining,
    "battery_state": battery.battery_state,
    "cat": basic.cat,
    "cpu_freq": cpu.cpu_freq,
    "cpu_perc": cpu.cpu_perc,
    "datetime": basic.datetime,
    "disk_free": basic.disk_free,
    "disk_perc": basic.disk_perc,
    "disk_total": basic.disk_total,
    "disk_used": basic.disk_used,
    "entropy": basic.entropy,
    "hostname": basic.hostname,
    "ipv4": network.ipv4,
    "ipv6": network.ipv6,
    "kernel_release": basic.kernel_release,
    "load_avg": basic.load_avg,
    "netspeed_rx": network.netspeed_rx,
    "netspeed_tx": network.netspeed_tx,
    "num_files": basic.num_files,
    "ram_free": ram.ram_free,
    "ram_perc": ram.ram_perc,
    "ram_total": ram.ram_total,
    "ram_used": ram.ram_used,
    "run_command": basic.run_command,
    "swap_free": swap.swap_free,
    "swap_perc": swap.swap_perc,
    "swap_total": swap.swap_total,
    "swap_used": swap.swap_used,
    "temp": basic.temp,
    "uptime": basic.uptime,
    "gid": basic.gid,
    "uid": basic.uid,
    "username": basic.username,
    "vol_perc": volume.vol_perc,
    "wifi_essid": network.wifi_essid,
    "wifi_perc": network.wifi_perc,
}
"""Every available component, by name."""

_CONVERSION = re.compile(r"%[%s]")


@dataclass(frozen=True)
class Arg:
    """One status segment: a component, the format it is shown in and its argument."""

    func: Component
    fmt: str
    argument: str | None = None

    def render(self, unknown: str) -> str:
        """Run the component and place its value, or ``unknown``, into the format.

        ``%s`` stands for the value and ``%%`` for a literal percent sign; any
        other percent sign is kept as it is.
        """
        value = self.func(self.argument)
        if value is None:
            value = unknown
        return _CONVERSION.sub(
            lambda match: "%" if match.group(0) == "%%" else value, self.fmt
        )


def default_args() -> tuple[Arg, ...]:
    """The segments shown by default, in order."""
    return (
        Arg(cpu.cpu_perc, "   󰻠 %s% :: "),
        Arg(ram.ram_used, "󰍛 %s/"),
        Arg(ram.ram_total, "%s :: "),
        Arg(network.wifi_essid, "󰖩 %s", "wlan0"),
        Arg(network.wifi_perc, "(%s%) :: ", "wlan0"),
        Arg(network.ipv4, "󰣸 %s", "enp0s20f0u6"),
        Arg(network.netspeed_rx, " (%s ", "wlan0"),
        Arg(network.netspeed_tx, "%s) :: ", "wlan0"),
        Arg(battery.battery_perc, "  %s%(", "CMB0"),
        Arg(battery.battery_state, "%s) :: ", "CMB0"),
        Arg(basic.backlight_perc, " 󰃟 %s :: ", "intel_backlight"),
        Arg(basic.run_command, "  %s% :: ", "pamixer --get-volume"),
        Arg(basic.datetime, "  %s", "%d %b-%Y(%A) :: 󱦟 %I:%M %p"),
    )