# slstatus

A small status monitor for Linux. On a fixed interval it gathers pieces of
system information (date and time, CPU and memory usage, battery, network
speeds, and more), formats them into one line, and either prints that line to
standard output or sets it as the name of the X root window, which is where
status bars such as dwm's read their text from.

## Installation

```
pip install .
```

## Usage

Print the status line to standard output once per interval:

```
slstatus -s
```

Without `-s` the line is set as the root window's name by running
`xsetroot -name`. That needs `DISPLAY` to be set and `xsetroot` to be on the
`PATH`; otherwise the command reports `XOpenDisplay: Failed to open display`
and exits with status 1. When the monitor stops, the root window's name is
cleared.

Stop the monitor with `SIGINT` or `SIGTERM`; it finishes the current update
and exits. Any option other than `-s`, or any extra argument, prints a usage
line (`usage: <program> [-s]`) and exits with status 1.

The command shows the entries in `slstatus.config.ARGS`, which by default is
the date and time in `%F %T` format, updated every 1000 ms
(`slstatus.config.INTERVAL`). A second ready-made set, `DESKTOP_ARGS`, shows
the mixer volume (through `amixer`), CPU and RAM usage, and the date.

## Components

Every component is a function returning a short string. When a value cannot
be read it raises `slstatus.util.ComponentError` (and, for most I/O failures,
writes a diagnostic line to standard error). In the status line a failed
component shows up as the unknown text (`n/a` by default,
`slstatus.config.UNKNOWN_STR`).

| Module | Functions | Argument |
|--------|-----------|----------|
| `slstatus.battery` | `battery_perc`, `battery_state` (`+`, `-` or `?`), `battery_remaining` (`Xh Ym` while discharging, else empty) | battery name (`BAT0`) |
| `slstatus.cpu` | `cpu_perc`, `cpu_freq` | none |
| `slstatus.system` | `datetime` | `strftime` format (`%F %T`) |
| `slstatus.system` | `disk_free`, `disk_perc`, `disk_total`, `disk_used` | mount point (`/`) |
| `slstatus.system` | `entropy`, `hostname`, `kernel_release`, `load_avg`, `uptime` | none |
| `slstatus.system` | `gid`, `uid`, `username` | none |
| `slstatus.system` | `num_files` | directory path |
| `slstatus.system` | `run_command` (first line of a shell command's output) | command |
| `slstatus.ip` | `ipv4`, `ipv6` | interface name (`eth0`) |
| `slstatus.netspeeds` | `netspeed_rx`, `netspeed_tx` | interface name (`wlan0`) |
| `slstatus.ram` | `ram_free`, `ram_perc`, `ram_total`, `ram_used` | none |
| `slstatus.swap` | `swap_free`, `swap_perc`, `swap_total`, `swap_used` | none |
| `slstatus.temperature` | `temp` | sensor file (`/sys/class/thermal/...`) |
| `slstatus.volume` | `vol_perc` | OSS mixer device (`/dev/mixer`) |
| `slstatus.wifi` | `wifi_perc`, `wifi_essid` | interface name (`wlan0`) |

Most file-based components take an optional path or root directory so they
can read somewhere other than `/proc` and `/sys`, for example
`ram_perc("/path/to/meminfo")` or `battery_perc("BAT0", root="/tmp/ps")`.
`read_meminfo(path)` and `read_swap_info(path)` return the parsed fields as a
dict of kB values.

`cpu_perc` and the network speeds compare against the previous call, so the
first call raises `ComponentError`. `CpuMeter(stat_path)` and
`NetSpeed(direction, interval, root)` hold that state for separate counters.

Sizes are scaled to human units with `slstatus.util.fmt_human`:
`fmt_human(2048, 1024)` gives `"2.0 Ki"`, `fmt_human(1500, 1000)` gives
`"1.5 k"`. Any base other than 1000 or 1024 raises `ValueError`.

Helpers for parsing raw data are public too: `wifi.rssi_to_perc`,
`wifi.parse_wireless`, `ip.parse_if_inet6`, `keyboard.format_indicators`
(caps/num lock letters from a format such as `c?n?` and an LED mask) and
`keyboard.layout_from_symbols` (a layout name from an xkb symbols string and a
group number).

## Using it from Python

```python
from slstatus import cpu, system
from slstatus.config import Arg
from slstatus.status import Monitor

monitor = Monitor(
    [Arg(cpu.cpu_perc, "[CPU %s%%] "), Arg(system.datetime, "%s", "%F %T")],
    interval=1000,
    unknown="n/a",
    maxlen=2048,
)
print(monitor.render())
```

An `Arg` holds a component function, a printf-style format with one `%s`
(flags, width and precision allowed; `%%` for a literal percent sign) and an
optional argument. `Arg.render(unknown)` calls the component and formats the
result. `Monitor.render()` joins all entries, truncating to `maxlen - 1`
bytes with a warning if the line is too long. `Monitor.run(sink)` calls
`sink` with each rendered line until `Monitor.stop()` is called.
`slstatus.config.resolve(name)` returns the component function registered
under a name such as `"ram_perc"`, or raises `ValueError`.

## What it does not do

- It does not query the X server for the keyboard: there are no live
  caps/num lock or keyboard layout components, only the formatting helpers in
  `slstatus.keyboard`.
- There is no configuration file and no option to choose components on the
  command line; the `slstatus` command always shows `slstatus.config.ARGS`.
  Other setups are built in Python with `Monitor`.
- Battery, CPU, memory, swap, network and WiFi components read Linux `/proc`
  and `/sys` files and ioctls; they are not implemented for other systems.

## Tests

```
pip install .[test]
pytest
```