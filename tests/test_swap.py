import pytest

from statusline import swap
from statusline.util import fmt_human

SAMPLE = [
    "MemTotal:       16000000 kB\n",
    "MemFree:         8000000 kB\n",
    "SwapCached:          250 kB\n",
    "Active:          4000000 kB\n",
    "SwapTotal:          1000 kB\n",
    "SwapFree:            500 kB\n",
]


@pytest.fixture
def meminfo(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    path.write_text("".join(SAMPLE))
    monkeypatch.setattr(swap, "MEMINFO", path)
    return path


def test_parse_swap_info_reads_fields():
    info = swap.parse_swap_info(SAMPLE)
    assert (info.total, info.free, info.cached) == (1000, 500, 250)
    assert info.complete


def test_parse_swap_info_missing_field():
    info = swap.parse_swap_info(["SwapTotal:  1000 kB\n"])
    assert info.total == 1000
    assert info.free is None
    assert not info.complete
    with pytest.raises(ValueError):
        info.used_kib()


def test_used_and_percent():
    info = swap.parse_swap_info(SAMPLE)
    assert info.used_kib() == info.total - info.free - info.cached
    assert info.percent() == 25


def test_percent_zero_total():
    info = swap.SwapInfo(total=0, free=0, cached=0)
    assert info.percent() is None


def test_swap_total_and_free(meminfo):
    assert swap.swap_total() == fmt_human(1000 * 1024, 1024)
    assert swap.swap_free() == fmt_human(500 * 1024, 1024)


def test_swap_used_and_perc(meminfo):
    assert swap.swap_used() == fmt_human(250 * 1024, 1024)
    assert swap.swap_perc() == "25"


def test_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(swap, "MEMINFO", tmp_path / "absent")
    assert swap.swap_total() is None
    assert swap.swap_perc() is None


def test_perc_zero_total(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    path.write_text("SwapCached: 0 kB\nSwapTotal: 0 kB\nSwapFree: 0 kB\n")
    monkeypatch.setattr(swap, "MEMINFO", path)
    assert swap.swap_perc() is None
    assert swap.swap_total() == fmt_human(0, 1024)