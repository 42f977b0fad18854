import pytest

from slstatus.ram import ram_free, ram_perc, ram_total, ram_used, read_meminfo
from slstatus.util import ComponentError


def _meminfo(path, total, free, available, buffers, cached):
    path.write_text(
        f"MemTotal:       {total} kB\n"
        f"MemFree:        {free} kB\n"
        f"MemAvailable:   {available} kB\n"
        f"Buffers:        {buffers} kB\n"
        f"Cached:         {cached} kB\n"
        "SwapCached:          0 kB\n"
        "HugePages_Total:       0\n"
    )
    return path


def test_read_meminfo_fields(tmp_path):
    path = _meminfo(tmp_path / "meminfo", 1000, 200, 500, 100, 200)
    info = read_meminfo(path)
    assert info["MemTotal"] == 1000
    assert info["MemAvailable"] == 500
    assert info["Cached"] == 200
    assert info["HugePages_Total"] == 0


def test_ram_perc(tmp_path):
    path = _meminfo(tmp_path / "meminfo", 1000, 200, 500, 100, 200)
    assert ram_perc(path) == "50"


def test_ram_total_gibibyte(tmp_path):
    path = _meminfo(tmp_path / "meminfo", 1048576, 0, 0, 0, 0)
    assert ram_total(path) == "1.0 Gi"


def test_free_equals_total_when_all_available(tmp_path):
    path = _meminfo(tmp_path / "meminfo", 4096, 1000, 4096, 10, 20)
    assert ram_free(path) == ram_total(path)


def test_used_matches_free_when_equal_amounts(tmp_path):
    path = _meminfo(tmp_path / "meminfo", 1000, 200, 500, 100, 200)
    assert ram_used(path) == ram_free(path)


def test_zero_total_fails(tmp_path):
    path = _meminfo(tmp_path / "meminfo", 0, 0, 0, 0, 0)
    with pytest.raises(ComponentError):
        ram_perc(path)


def test_missing_fields_fail(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 1000 kB\n")
    with pytest.raises(ComponentError):
        ram_used(path)
    with pytest.raises(ComponentError):
        ram_free(path)


def test_missing_file_fails(tmp_path):
    with pytest.raises(ComponentError):
        read_meminfo(tmp_path / "absent")