# tests/test_diagnostics.py

import sys

import numpy as np
import pytest

from riseandset.core.errors import OptionalDependencyError
from riseandset.diagnostics.day_length import day_length_table, parse_latitudes
from riseandset.diagnostics.day_length import main as day_length_main
from riseandset.equation import H0_DEG
from riseandset.ephemeris import require_ephemeris


def test_parse_latitudes():
    assert parse_latitudes("0, 45,-33.9,") == [0.0, 45.0, -33.9]


def test_day_length_table():
    jdns, hours = day_length_table(2451545, 366, [0.0, 51.5, 80.0])
    assert jdns[0] == 2451545
    assert hours.shape == (366, 3)

    # equator ~12h all year
    assert np.all(np.abs(hours[:, 0] - 12.0) < 0.25)

    # London: ~7.9h in midwinter, ~16.5h in midsummer
    assert np.nanmin(hours[:, 1]) == pytest.approx(7.9, abs=0.3)
    assert np.nanmax(hours[:, 1]) == pytest.approx(16.6, abs=0.3)

    # 80N has both polar night and midnight sun during the year
    assert np.count_nonzero(np.isnan(hours[:, 2])) > 100


def test_require_ephemeris_missing(monkeypatch):
    monkeypatch.setitem(sys.modules, "skyfield", None)
    with pytest.raises(OptionalDependencyError, match="riseandset\\[ephemeris\\]"):
        require_ephemeris()


def test_day_length_table_default_horizon():
    _, default = day_length_table(2451545, 10, [51.5])
    _, explicit = day_length_table(2451545, 10, [51.5], h0_deg=H0_DEG)
    np.testing.assert_array_equal(default, explicit)


def test_day_length_unknown_twilight_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        day_length_main(["--twilight", "golden"])
    assert exc.value.code == 2
