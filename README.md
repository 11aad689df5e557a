# statusline

`statusline` collects small pieces of system information (CPU and memory
usage, battery level, network speed, Wi-Fi signal, date and time and more)
and joins them into one line of text, refreshed once per second. The line
is either printed to standard output or set as the name of the X root
window, where status bars such as those of tiling window managers show it.

Most components read Linux interfaces: `/proc`, `/sys/class/...` and a few
`ioctl` calls. There are no third-party dependencies.

## Installation

```
pip install .
```

## Usage

```
statusline [-s] [-1]
```

- `statusline` sets the root window name once per second. It does this by
  running the `xsetroot` program, so `xsetroot` has to be on the `PATH` and
  `DISPLAY` has to be set; otherwise it prints
  `XOpenDisplay: Failed to open display` and exits with status 1. When the
  loop ends the root window name is cleared.
- `statusline -s` prints the status line to standard output once per second.
- `statusline -1` prints the status line to standard output a single time
  and exits.

Options may be combined (`-s1`), and `--` ends the options. Any other option,
or any positional argument, prints `usage: statusline [-s] [-1]` to standard
error and exits with status 1.

`SIGINT` and `SIGTERM` stop the loop after the current line; `SIGUSR1`
triggers an immediate refresh.

## Components

A component takes one argument (a path, an interface name, a format, or
nothing at all) and returns its value as a string, or `None` when the value
cannot be read. The components live in these modules:

- `statusline.basic`: `cat`, `datetime`, `disk_free`, `disk_perc`,
  `disk_total`, `disk_used`, `entropy`, `hostname`, `kernel_release`,
  `load_avg`, `num_files`, `run_command`, `uptime`, `gid`, `uid`,
  `username`, `temp`, `backlight_perc`
- `statusline.battery`: `battery_perc`, `battery_state`, `battery_remaining`
- `statusline.cpu`: `cpu_freq`, `cpu_perc`
- `statusline.ram`: `ram_free`, `ram_perc`, `ram_total`, `ram_used`
- `statusline.swap`: `swap_free`, `swap_perc`, `swap_total`, `swap_used`
- `statusline.network`: `netspeed_rx`, `netspeed_tx`, `ipv4`, `ipv6`,
  `wifi_perc`, `wifi_essid`
- `statusline.volume`: `vol_perc` (reads an OSS mixer device such as
  `/dev/mixer`)

`statusline.config.COMPONENTS` maps each of these names to its function.

`cpu_perc`, `netspeed_rx` and `netspeed_tx` report the change since their
previous call, so the first call returns `None`. The rates are computed from
`statusline.cpu.CpuUsage` and `statusline.network.NetSpeed`, which can also
be used on their own.

Sizes are shown with binary prefixes (`Ki`, `Mi`, `Gi`, ...) and one
decimal, for example `3.2 Gi`; the CPU frequency uses decimal prefixes
(`1.8 G`). `statusline.util.fmt_human(num, base)` does this formatting for
a base of 1000 or 1024.

Some of the parsing is exposed for reuse: `statusline.ram.parse_meminfo`
and `MemInfo`, `statusline.swap.parse_swap_info` and `SwapInfo`,
`statusline.cpu.parse_cpu_times`, `statusline.network.parse_wireless_link`
and `rssi_to_perc`, `statusline.battery.state_symbol` and
`format_remaining`, `statusline.basic.format_uptime` and
`statusline.volume.mixer_level`.

## Layout

The command always shows the segments returned by
`statusline.config.default_args()`: CPU usage, used and total memory, Wi-Fi
name and signal on `wlan0`, the IPv4 address of `enp0s20f0u6`, network
speeds on `wlan0`, charge and state of battery `CMB0`, the `intel_backlight`
brightness, the output of `pamixer --get-volume`, and the date and time.

Each segment is an `Arg(func, fmt, argument)`. In `fmt`, `%s` stands for the
component's value and `%%` for a literal percent sign; any other `%` is kept
as it is. A value of `None` is shown as `!` (`statusline.config.UNKNOWN_STR`).
The whole line is limited to 2047 bytes (`MAXLEN` is 2048); a segment that
does not fit is cut short, a warning is printed, and the segments after it
are dropped.

To render a layout of your own from Python:

```python
from statusline.cli import render_status
from statusline.config import Arg
from statusline.basic import datetime, load_avg

args = [
    Arg(load_avg, "load %s :: ", None),
    Arg(datetime, "%s", "%F %T"),
]
print(render_status(args, "!", 2048))
```

## What it does not do

- There is no configuration file and no command-line option to choose the
  segments, the interval or the placeholder text; the command uses
  `default_args()`, a one-second interval and `!`. Other layouts are only
  possible from Python, as above.
- There are no components for the Caps Lock and Num Lock indicators or for
  the current keyboard layout.
- The root window name is set through `xsetroot`; the package does not talk
  to the X server itself.