import pytest

from slstatus.util import ComponentError, die, fmt_human, read_int, read_word, warn


def test_fmt_human_zero_has_empty_prefix():
    assert fmt_human(0, 1024) == "0.0 "


def test_fmt_human_one_kibi():
    assert fmt_human(1024, 1024) == "1.0 Ki"


def test_fmt_human_one_kilo():
    assert fmt_human(1000, 1000) == "1.0 k"


@pytest.mark.parametrize("base", [1000, 1024])
@pytest.mark.parametrize("num", [1, 999, 1023, 5000, 123456789, 2**40 + 17])
def test_fmt_human_scaled_value_below_base(num, base):
    value, prefix = fmt_human(num, base).split(" ")
    assert 0 <= float(value) < base + 0.05
    if base == 1024:
        assert prefix in ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi")
    else:
        assert prefix in ("", "k", "M", "G", "T", "P", "E", "Z", "Y")


@pytest.mark.parametrize("num", [1, 1500, 1048576 * 3, 10**12])
def test_fmt_human_roundtrip_approximate(num):
    prefixes = ["", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"]
    value, prefix = fmt_human(num, 1024).split(" ")
    scale = 1024 ** prefixes.index(prefix)
    assert abs(float(value) * scale - num) <= 0.05 * scale


def test_fmt_human_clamps_to_largest_prefix():
    assert fmt_human(1024**10, 1024).endswith(" Yi")


@pytest.mark.parametrize("base", [0, 10, 1023])
def test_fmt_human_invalid_base(base):
    with pytest.raises(ValueError):
        fmt_human(1, base)


def test_read_int(tmp_path):
    path = tmp_path / "value"
    path.write_text("  42\n")
    assert read_int(path) == 42


def test_read_int_ignores_trailing_text(tmp_path):
    path = tmp_path / "value"
    path.write_text("17 kB\n")
    assert read_int(path) == 17


def test_read_int_missing_file(tmp_path):
    with pytest.raises(ComponentError):
        read_int(tmp_path / "absent")


def test_read_int_not_a_number(tmp_path):
    path = tmp_path / "value"
    path.write_text("hello\n")
    with pytest.raises(ComponentError):
        read_int(path)


def test_read_word(tmp_path):
    path = tmp_path / "status"
    path.write_text("Charging\n")
    assert read_word(path) == "Charging"


def test_read_word_empty(tmp_path):
    path = tmp_path / "status"
    path.write_text("   \n")
    with pytest.raises(ComponentError):
        read_word(path)


def test_warn_writes_line(capsys, monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog"])
    warn("something failed")
    assert capsys.readouterr().err == "prog: something failed\n"


def test_warn_usage_has_no_prefix(capsys, monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog"])
    warn("usage: prog [-s]")
    assert capsys.readouterr().err == "usage: prog [-s]\n"


def test_die_exits_with_one(capsys):
    with pytest.raises(SystemExit) as info:
        die("fatal")
    assert info.value.code == 1
    assert "fatal" in capsys.readouterr().err