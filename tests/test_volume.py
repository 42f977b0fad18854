import pytest

from slstatus.util import ComponentError
from slstatus.volume import vol_perc


def test_missing_device(tmp_path):
    with pytest.raises(ComponentError):
        vol_perc(tmp_path / "mixer")


def test_regular_file_is_not_a_mixer(tmp_path):
    path = tmp_path / "mixer"
    path.write_bytes(b"\0" * 16)
    with pytest.raises(ComponentError):
        vol_perc(path)


def test_directory_is_not_a_mixer(tmp_path):
    with pytest.raises(ComponentError):
        vol_perc(tmp_path)


def test_accepts_string_path(tmp_path):
    path = tmp_path / "mixer"
    path.write_text("")
    with pytest.raises(ComponentError):
        vol_perc(str(path))