import pytest

from barstatus import memory
from barstatus.util import fmt_human

MEMINFO = """MemTotal:           1000 kB
MemFree:             200 kB
MemAvailable:        500 kB
Buffers:             100 kB
Cached:              200 kB
SwapCached:          100 kB
SwapTotal:          1000 kB
SwapFree:            600 kB
"""


@pytest.fixture
def meminfo(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO)
    return path


def test_read_meminfo_parses_fields(meminfo):
    info = memory.read_meminfo(meminfo)
    assert info["MemTotal"] == 1000
    assert info["SwapFree"] == 600
    assert info["Cached"] == 200


def test_read_meminfo_missing_file(tmp_path):
    assert memory.read_meminfo(tmp_path / "absent") is None


def test_ram_total(meminfo):
    assert memory.ram_total(meminfo) == fmt_human(1000 * 1024, 1024)


def test_ram_free_uses_available(meminfo):
    assert memory.ram_free(meminfo) == fmt_human(500 * 1024, 1024)


def test_ram_used(meminfo):
    assert memory.ram_used(meminfo) == fmt_human((1000 - 200 - 100 - 200) * 1024, 1024)


def test_ram_perc(meminfo):
    assert memory.ram_perc(meminfo) == "50"


def test_ram_perc_zero_total(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 0 kB\nMemFree: 0 kB\nBuffers: 0 kB\nCached: 0 kB\n")
    assert memory.ram_perc(path) is None


def test_swap_total_and_free(meminfo):
    assert memory.swap_total(meminfo) == fmt_human(1000 * 1024, 1024)
    assert memory.swap_free(meminfo) == fmt_human(600 * 1024, 1024)


def test_swap_used(meminfo):
    assert memory.swap_used(meminfo) == fmt_human((1000 - 600 - 100) * 1024, 1024)


def test_swap_perc(meminfo):
    assert memory.swap_perc(meminfo) == "30"


def test_swap_perc_zero_total(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("SwapCached: 0 kB\nSwapTotal: 0 kB\nSwapFree: 0 kB\n")
    assert memory.swap_perc(path) is None


@pytest.mark.parametrize(
    "func",
    [
        memory.ram_free,
        memory.ram_perc,
        memory.ram_total,
        memory.ram_used,
        memory.swap_free,
        memory.swap_perc,
        memory.swap_total,
        memory.swap_used,
    ],
)
def test_missing_file_gives_none(func, tmp_path):
    assert func(tmp_path / "absent") is None


@pytest.mark.parametrize(
    "func", [memory.ram_perc, memory.ram_used, memory.swap_perc, memory.swap_used]
)
def test_missing_fields_give_none(func, tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 1000 kB\n")
    assert func(path) is None