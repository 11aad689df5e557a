import pytest

from statusline.cli import Options, UsageError, main, parse_args, render_status
from statusline.config import Arg
from statusline.util import StatusError


def _const(value):
    return lambda _argument: value


def test_parse_no_arguments():
    assert parse_args([]) == Options(single=False, once=False)


def test_parse_single():
    assert parse_args(["-s"]) == Options(single=True, once=False)


def test_parse_once_implies_single():
    assert parse_args(["-1"]) == Options(single=True, once=True)


def test_parse_combined_flags():
    assert parse_args(["-s1"]) == Options(single=True, once=True)
    assert parse_args(["-s", "-1"]) == Options(single=True, once=True)


def test_parse_double_dash_ends_options():
    assert parse_args(["-s", "--"]) == Options(single=True, once=False)


@pytest.mark.parametrize(
    "argv",
    [["-x"], ["foo"], ["-"], ["--", "extra"], ["-s", "extra"], ["-sx"]],
)
def test_parse_rejects_bad_arguments(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def test_usage_error_is_status_error():
    with pytest.raises(StatusError):
        parse_args(["-q"])


def test_render_status_concatenates_segments():
    args = [Arg(_const("a"), "[%s]"), Arg(_const("b"), "(%s)")]
    assert render_status(args, "!", 2048) == "[a](b)"


def test_render_status_uses_unknown():
    args = [Arg(_const(None), "x=%s "), Arg(_const("1"), "y=%s")]
    assert render_status(args, "!", 2048) == "x=! y=1"


def test_render_status_truncates_and_stops():
    calls = []

    def later(argument):
        calls.append(argument)
        return "later"

    args = [Arg(_const("z" * 50), "%s"), Arg(later, "%s", "arg")]
    result = render_status(args, "!", 20)
    assert result == "z" * 19
    assert calls == []


def test_render_status_stays_below_limit():
    args = [Arg(_const("abc"), "%s") for _ in range(10)]
    result = render_status(args, "!", 10)
    assert len(result.encode("utf-8")) <= 9
    assert result.startswith("abcabc")


def test_render_status_keeps_utf8_valid():
    args = [Arg(_const("é" * 10), "%s")]
    result = render_status(args, "!", 6)
    assert set(result) <= {"é"}
    assert len(result.encode("utf-8")) <= 5


def test_render_status_empty_args():
    assert render_status([], "!", 2048) == ""


def test_main_rejects_unknown_option(capsys):
    assert main(["-z"]) == 1
    assert "usage:" in capsys.readouterr().err


def test_main_rejects_operands(capsys):
    assert main(["status"]) == 1
    assert "[-s] [-1]" in capsys.readouterr().err


def test_main_once_prints_single_line(capsys):
    assert main(["-1"]) == 0
    out = capsys.readouterr().out
    assert out.endswith("\n")
    assert out.count("\n") == 1
    assert "󱦟" in out