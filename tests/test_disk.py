from types import SimpleNamespace
from unittest import mock

import pytest

from barstatus.disk import disk_free, disk_perc, disk_total, disk_used
from barstatus.util import fmt_human

UNITS = {"", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"}

FAKE = SimpleNamespace(f_frsize=1024, f_bavail=1024, f_blocks=4096, f_bfree=2048)


@pytest.mark.parametrize("func", [disk_free, disk_total, disk_used])
def test_sizes_are_human(func, tmp_path):
    number, sep, unit = func(tmp_path).partition(" ")
    assert sep == " "
    assert unit in UNITS
    whole, _, fraction = number.partition(".")
    assert whole.isdigit()
    assert len(fraction) == 1
    assert float(number) >= 0


def test_perc_in_range(tmp_path):
    assert 0 <= int(disk_perc(tmp_path)) <= 100


@pytest.mark.parametrize("func", [disk_free, disk_perc, disk_total, disk_used])
def test_missing_path(func, tmp_path):
    assert func(tmp_path / "missing") is None


def test_values_from_statvfs():
    with mock.patch("os.statvfs", return_value=FAKE):
        assert disk_perc("/") == "75"
        assert disk_used("/") == "2.0 Mi"
        assert disk_free("/") == fmt_human(1024 * 1024, 1024)
        assert disk_total("/") == fmt_human(1024 * 4096, 1024)


def test_perc_empty_filesystem():
    empty = SimpleNamespace(f_frsize=1024, f_bavail=0, f_blocks=0, f_bfree=0)
    with mock.patch("os.statvfs", return_value=empty):
        assert disk_perc("/") is None