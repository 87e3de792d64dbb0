import io

from contestkit.chocolate import can_split, main

EXAMPLE = [[1, 1, 2], [3, 3, 2]]


def test_worked_example():
    assert can_split(EXAMPLE) is True


def test_transposed_example_also_splits():
    transposed = [list(col) for col in zip(*EXAMPLE)]
    assert can_split(transposed) is True


def test_single_piece_cannot_split():
    assert can_split([[1, 1]]) is False
    assert can_split([[1], [1]]) is False


def test_two_vertical_pieces_side_by_side():
    assert can_split([[1, 2], [1, 2]]) is True


def test_main_prints_yes(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 3\n1 1 2\n3 3 2\n"))
    assert main() == 0
    assert capsys.readouterr().out == "YES\n"


def test_main_prints_no(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2\n1 1\n"))
    assert main() == 0
    assert capsys.readouterr().out == "NO\n"