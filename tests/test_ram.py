import pytest

from statusline import ram
from statusline.util import fmt_human

FULL = (
    "MemTotal:        1000 kB\n"
    "MemFree:          200 kB\n"
    "MemAvailable:     500 kB\n"
    "Buffers:          100 kB\n"
    "Cached:           100 kB\n"
    "SwapCached:         0 kB\n"
)


@pytest.fixture
def meminfo(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    monkeypatch.setattr(ram, "MEMINFO", path)
    return path


def test_parse_full():
    info = ram.parse_meminfo(FULL)
    assert info == ram.MemInfo(
        total=1000, free=200, available=500, buffers=100, cached=100
    )
    assert info.complete


def test_parse_partial_stops_at_mismatch():
    info = ram.parse_meminfo("MemTotal: 4096 kB\nSomething: 1 kB\n")
    assert info.total == 4096
    assert info.free is None
    assert not info.complete


def test_parse_unrelated_text():
    assert ram.parse_meminfo("hello\n") == ram.MemInfo()


def test_used_and_percent():
    info = ram.parse_meminfo(FULL)
    assert info.used_kib() == 600
    assert info.percent() == 60


def test_percent_zero_total():
    info = ram.MemInfo(total=0, free=0, available=0, buffers=0, cached=0)
    assert info.percent() is None


def test_incomplete_info_raises():
    with pytest.raises(ValueError):
        ram.MemInfo(total=10).used_kib()
    with pytest.raises(ValueError):
        ram.MemInfo(total=10).percent()


def test_ram_total(meminfo):
    meminfo.write_text(FULL)
    assert ram.ram_total() == fmt_human(1000 * 1024, 1024)


def test_ram_free_uses_available(meminfo):
    meminfo.write_text(FULL)
    assert ram.ram_free() == fmt_human(500 * 1024, 1024)


def test_ram_used_and_perc(meminfo):
    meminfo.write_text(FULL)
    info = ram.parse_meminfo(FULL)
    assert ram.ram_used() == fmt_human(info.used_kib() * 1024, 1024)
    assert ram.ram_perc() == str(info.percent())


def test_ram_total_only_first_line_needed(meminfo):
    meminfo.write_text("MemTotal: 2048 kB\n")
    assert ram.ram_total() == fmt_human(2048 * 1024, 1024)
    assert ram.ram_used() is None
    assert ram.ram_free() is None


def test_missing_meminfo(meminfo):
    assert ram.ram_total() is None
    assert ram.ram_perc() is None