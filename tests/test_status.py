import subprocess
from unittest import mock

import pytest

from slstatus.config import Arg
from slstatus.status import Monitor, main, parse_args, set_root_name
from slstatus.util import ComponentError


def _failing():
    raise ComponentError("nothing")


def test_parse_args_none():
    assert parse_args([]) is False


def test_parse_args_s():
    assert parse_args(["-s"]) is True


def test_parse_args_repeated_flag():
    assert parse_args(["-ss"]) is True


def test_parse_args_double_dash_ends_options():
    assert parse_args(["--"]) is False
    assert parse_args(["-s", "--"]) is True


@pytest.mark.parametrize(
    "argv", [["-x"], ["-sx"], ["extra"], ["-s", "extra"], ["--", "extra"], ["-"]]
)
def test_parse_args_usage(argv):
    with pytest.raises(SystemExit) as info:
        parse_args(argv)
    assert info.value.code == 1


def test_main_rejects_bad_arguments():
    with pytest.raises(SystemExit) as info:
        main(["unexpected"])
    assert info.value.code == 1


def test_render_concatenates():
    monitor = Monitor([Arg(lambda: "a", "<%s>"), Arg(lambda: "b", "[%s]")])
    assert monitor.render() == "<a>" + "[b]"


def test_render_uses_unknown():
    monitor = Monitor([Arg(_failing, "%s|"), Arg(lambda: "ok", "%s")], unknown="?")
    assert monitor.render() == "?|ok"


def test_render_truncates_to_maxlen():
    monitor = Monitor([Arg(lambda: "abc", "%s"), Arg(lambda: "def", "%s")], maxlen=5)
    result = monitor.render()
    assert result == ("abc" + "def")[:4]
    assert len(result) == monitor.maxlen - 1


def test_render_stops_after_truncation():
    calls = []

    def tracked():
        calls.append(1)
        return "z"

    monitor = Monitor([Arg(lambda: "abcdef", "%s"), Arg(tracked, "%s")], maxlen=4)
    assert monitor.render() == "abc"
    assert calls == []


def test_render_exact_fit():
    monitor = Monitor([Arg(lambda: "abcd", "%s")], maxlen=5)
    assert monitor.render() == "abcd"


def test_monitor_rejects_bad_maxlen():
    with pytest.raises(ValueError):
        Monitor([], maxlen=0)


def test_run_emits_until_stopped():
    counter = iter(range(100))
    monitor = Monitor([Arg(lambda: str(next(counter)), "%s")], interval=1)
    seen = []

    def sink(status):
        seen.append(status)
        if len(seen) == 3:
            monitor.stop()

    monitor.run(sink)
    assert seen == ["0", "1", "2"]
    assert monitor.render() == "3"


def test_run_after_stop_emits_nothing():
    monitor = Monitor([Arg(lambda: "x", "%s")], interval=1)
    monitor.stop()
    seen = []
    monitor.run(seen.append)
    assert seen == []


def test_set_root_name_calls_xsetroot():
    with mock.patch("slstatus.status.subprocess.run") as run:
        result = set_root_name("status")
    assert result is None
    assert run.call_args_list == [
        mock.call(["xsetroot", "-name", "status"], check=True)
    ]


def test_set_root_name_clears_with_none():
    with mock.patch("slstatus.status.subprocess.run") as run:
        result = set_root_name(None)
    assert result is None
    assert run.call_args_list == [mock.call(["xsetroot", "-name", ""], check=True)]


def test_set_root_name_failure_dies():
    error = subprocess.CalledProcessError(1, ["xsetroot"])
    with mock.patch("slstatus.status.subprocess.run", side_effect=error):
        with pytest.raises(SystemExit) as info:
            set_root_name("status")
    assert info.value.code == 1