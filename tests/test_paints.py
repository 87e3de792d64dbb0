import io

import pytest

from contestkit.paints import choose_paints, color_distance, main


def test_color_distance_extremes():
    assert color_distance((255, 255, 255), (0, 0, 0)) == 255


def test_color_distance_identical_is_zero():
    assert color_distance((12, 34, 56), (12, 34, 56)) == 0


@pytest.mark.parametrize(
    "a, b",
    [((1, 2, 3), (9, 0, 4)), ((255, 0, 255), (0, 255, 0)), ((7, 7, 7), (8, 6, 70))],
)
def test_color_distance_symmetric(a, b):
    assert color_distance(a, b) == color_distance(b, a)


def test_first_example_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 2\n255 255 255\n0 0 0\n"))
    assert main() == 0
    assert capsys.readouterr().out.split() == ["2", "1"]


def test_second_example_returns_two_distinct_tubes():
    colors = [(255, 255, 0), (255, 0, 255), (0, 255, 255), (255, 255, 255)]
    chosen = choose_paints(colors, 2)
    assert len(chosen) == 2
    assert len(set(chosen)) == 2
    assert all(0 <= index < len(colors) for index in chosen)


def test_closest_pair_is_chosen():
    colors = [(0, 0, 0), (100, 100, 100), (101, 100, 100)]
    assert set(choose_paints(colors, 2)) == {1, 2}


def test_all_tubes_when_k_equals_n():
    colors = [(10, 20, 30), (200, 100, 0), (5, 5, 5), (90, 90, 90), (250, 1, 128)]
    assert sorted(choose_paints(colors, len(colors))) == list(range(len(colors)))


def test_result_never_exceeds_k():
    colors = [(i * 10, i * 3, 255 - i * 7) for i in range(12)]
    for k in range(1, len(colors) + 1):
        chosen = choose_paints(colors, k)
        assert len(chosen) == k
        assert len(set(chosen)) == k