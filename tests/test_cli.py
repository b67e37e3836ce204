import functools
import io
import math

import pytest

from polarcog.cli import InputError, input_items, main


def _reader(tokens):
    return functools.partial(next, iter(tokens), None)


def test_input_items_parses_and_converts_degrees():
    prompts = []
    items, max_radius = input_items(2, _reader(["1", "2", "90", "3", "5", "180"]), prompts.append)
    assert [item.weight for item in items] == [1.0, 3.0]
    assert items[0].location.r == 2.0
    assert items[0].location.theta == pytest.approx(math.pi / 2)
    assert items[1].location.theta == pytest.approx(math.pi)
    assert max_radius == 5.0
    assert "\n--- Item 2 ---\n" in prompts


def test_input_items_max_radius_never_below_zero():
    _, max_radius = input_items(1, _reader(["1", "-3", "0"]), lambda text: None)
    assert max_radius == 0.0


@pytest.mark.parametrize(
    "tokens, what",
    [(["abc"], "weight"), (["1", "x"], "radius"), (["1", "2", "?"], "angle")],
)
def test_input_items_rejects_bad_tokens(tokens, what):
    with pytest.raises(InputError, match=what):
        input_items(1, _reader(tokens), lambda text: None)


def test_input_items_rejects_missing_input():
    with pytest.raises(InputError, match="weight"):
        input_items(2, _reader(["1", "2", "3"]), lambda text: None)


def test_main_prints_result_and_plot(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2 3 90\ny\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "--- Polar Plot ---" in out
    assert "  Radius (R): 3.00\n" in out
    assert "(90.00 degrees)" in out


def test_main_skips_plot(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2 3 90\nn\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Plotting skipped as per user's request." in out
    assert "--- Polar Plot ---" not in out


@pytest.mark.parametrize("text", ["0\n", "-2\n", "abc\n", ""])
def test_main_rejects_bad_count(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 1
    assert "positive integer" in capsys.readouterr().err


def test_main_reports_bad_item(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nheavy\n"))
    assert main([]) == 1
    assert "Invalid input for weight" in capsys.readouterr().err