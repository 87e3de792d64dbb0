import io

import pytest

from contestkit.lessons import main, minutes_saved


def test_first_lesson_has_no_break_before_it():
    assert minutes_saved(1) == 0


@pytest.mark.parametrize("k", range(1, 7))
def test_each_break_saves_five_minutes(k):
    assert minutes_saved(k + 1) - minutes_saved(k) == 5


def test_last_lesson():
    assert minutes_saved(7) == 6 * 5


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main() == 0
    assert capsys.readouterr().out == f"{minutes_saved(3)}\n"