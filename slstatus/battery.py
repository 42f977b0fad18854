"""Battery components backed by the power-supply class in sysfs."""

from __future__ import annotations

import os

from .util import ComponentError, read_int, read_word

__all__ = ["battery_perc", "battery_state", "battery_remaining"]

POWER_SUPPLY_ROOT = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
}

# The status word is read into a 12 character field.
_STATE_WIDTH = 12


def _battery_dir(bat: str, root: str | os.PathLike[str]) -> str:
    return os.path.join(os.fspath(root), bat)


def _read_state(bat: str, root: str | os.PathLike[str]) -> str:
    return read_word(os.path.join(_battery_dir(bat, root), "status"))[:_STATE_WIDTH]


def _pick(bat: str, root: str | os.PathLike[str], *names: str) -> str:
    """Return the first readable file among ``names`` in the battery directory."""
    base = _battery_dir(bat, root)
    for name in names:
        path = os.path.join(base, name)
        if os.access(path, os.R_OK):
            return path
    raise ComponentError(f"none of {', '.join(names)} readable for battery '{bat}'")


def battery_perc(bat: str, root: str | os.PathLike[str] = POWER_SUPPLY_ROOT) -> str:
    """Return the battery charge in percent."""
    return str(read_int(os.path.join(_battery_dir(bat, root), "capacity")))


def battery_state(bat: str, root: str | os.PathLike[str] = POWER_SUPPLY_ROOT) -> str:
    """Return '+' when charging, '-' when discharging and '?' otherwise."""
    return _STATE_SYMBOLS.get(_read_state(bat, root), "?")


def battery_remaining(
    bat: str, root: str | os.PathLike[str] = POWER_SUPPLY_ROOT
) -> str:
    """Return the remaining time while discharging, or an empty string."""
    state = _read_state(bat, root)
    charge_now = read_int(_pick(bat, root, "charge_now", "energy_now"))

    if state != "Discharging":
        return ""

    current_now = read_int(_pick(bat, root, "current_now", "power_now"))
    if current_now == 0:
        raise ComponentError(f"battery '{bat}' reports no discharge current")

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"