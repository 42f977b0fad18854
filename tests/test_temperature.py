import pytest

from slstatus.temperature import temp
from slstatus.util import ComponentError


def test_whole_degrees(tmp_path):
    sensor = tmp_path / "temp"
    sensor.write_text("45000\n")
    assert temp(sensor) == "45"


def test_fraction_is_truncated(tmp_path):
    low = tmp_path / "low"
    high = tmp_path / "high"
    low.write_text("45000\n")
    high.write_text("45999\n")
    assert temp(low) == temp(high)


def test_missing_sensor(tmp_path):
    with pytest.raises(ComponentError):
        temp(tmp_path / "absent")


def test_non_numeric_sensor(tmp_path):
    sensor = tmp_path / "temp"
    sensor.write_text("hot\n")
    with pytest.raises(ComponentError):
        temp(sensor)