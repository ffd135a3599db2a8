# barstatus

`barstatus` builds a one-line status text out of small system readings
(battery, CPU load, memory, disk, network, date and time, and so on) and
refreshes it at a fixed interval. It reads Linux interfaces such as
`/proc` and `/sys`.

## Installation

```
pip install .
```

## Usage

```
barstatus [-v] [-s] [-1]
```

- `-s` writes each status line to standard output.
- `-1` writes the status line once and exits (implies `-s`).
- `-v` writes the program name and version to standard error and exits
  with status 1.
- Flags may be combined (`-s1`) and `--` ends the options. Any other flag
  or argument prints a usage line and exits with status 1.

Without `-s`, the line is set as the root window name by running
`xsetroot -name`; this needs `DISPLAY` to be set and `xsetroot` to be on
the `PATH`. On exit the root window name is cleared.

The line is refreshed every 1000 ms. `SIGINT` and `SIGTERM` end the loop
after the current update; `SIGUSR1` forces an immediate update.

The command uses the built-in entry list from
`barstatus.config.default_entries`, which shows the date and time as
`%F %T`. To show other components, build your own entry list and drive it
from Python (see below).

## Components

Each component takes one argument (a path, an interface name, a format
string, or nothing) and returns a string, or `None` when the value cannot
be read; `None` is shown as `n/a` in the status line.

| Module                  | Functions                                                            |
|-------------------------|----------------------------------------------------------------------|
| `barstatus.battery`     | `battery_perc`, `battery_state`, `battery_remaining`                 |
| `barstatus.basic`       | `cat`, `datetime`, `disk_free`, `disk_perc`, `disk_total`, `disk_used`, `entropy`, `hostname`, `kernel_release`, `load_avg`, `num_files`, `run_command`, `uptime`, `gid`, `uid`, `username` |
| `barstatus.cpu`         | `cpu_freq`, `CpuPercent`                                             |
| `barstatus.memory`      | `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used` |
| `barstatus.netspeeds`   | `NetSpeed`                                                           |
| `barstatus.temperature` | `temp`                                                               |
| `barstatus.network`     | `ipv4`, `ipv6`, `rssi_to_perc`, `wifi_perc`, `wifi_essid`            |
| `barstatus.volume`      | `vol_perc` (OSS mixer device, e.g. `/dev/mixer`)                     |

Components that keep state between readings are callable objects: the
first call returns `None` and later calls report the change since the
previous call.

- `CpuPercent()` reports processor use in percent from `/proc/stat`.
- `NetSpeed("rx", interval)` / `NetSpeed("tx", interval)` report bytes per
  second received or sent on an interface; `interval` is the update
  interval in milliseconds.

`barstatus.keyboard` holds text helpers for keyboard state:
`valid_layout_or_variant`, `get_layout(syms, group)` (picks a layout from
an xkb symbols string such as `pc+us+de:2+inet(evdev)`) and
`format_indicators(fmt, led_mask)` (renders caps and num lock state from a
format such as `c?n?`).

`barstatus.util` provides `fmt_human(num, base)` (e.g. `1536` with base
`1024` gives `"1.5 Ki"`), `cformat`, `read_first_line`, `read_uint` and
`warn`.

## Using it as a library

```python
from barstatus.config import Entry
from barstatus.cli import render_status, run
from barstatus.basic import datetime, hostname
from barstatus.cpu import CpuPercent

entries = [
    Entry(hostname, "%s | ", None),
    Entry(CpuPercent(), "cpu %s%% | ", None),
    Entry(datetime, "%s", "%F %T"),
]
print(render_status(entries, "n/a", 2048))

run(entries, 1000, once=False, output=print)
```

`render_status(entries, unknown, maxlen)` joins the formatted pieces and
stops at the first piece with a bad format or one that would not fit into
`maxlen` bytes. `run(entries, interval, once, output)` drives the refresh
loop, passing each line to `output`. `default_entries(interval)` returns
the built-in entry list.

## What it does not do

- It does not read the keyboard layout or lock-key indicators from the X
  server; `barstatus.keyboard` only formats values you supply.
- It has no configuration file; the command always uses the built-in
  entry list.
- Volume is read from OSS mixer devices only.