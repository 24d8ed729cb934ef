# tests/test_cli.py

import pytest

from riseandset.cli import main


def test_times_command(capsys):
    rc = main(["times", "--jdn", "2451545", "--lon", "0", "--lat", "51.5"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Sunrise: JD 2451544." in out
    assert "Sunset : JD 2451545." in out
    assert "UTC 08:0" in out
    assert "UTC 16:0" in out


def test_times_command_polar_night(capsys):
    rc = main(["times", "--jdn", "2451900", "--lat", "80"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "--:--:--" in out
    assert "does not rise or set" in out


def test_trace_command(capsys):
    rc = main(["trace", "--jdn", "2451545", "--twilight", "civil"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Ecliptic longitude" in out
    assert "h0  = -6 deg (civil)" in out


def test_unknown_twilight_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["times", "--twilight", "golden"])
    assert exc.value.code == 2
