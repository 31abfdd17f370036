import pytest

from eightpuzzle.heuristics.manhattan import manhattan
from eightpuzzle.search.frontier import Frontier, SeenSet
from eightpuzzle.search.state import State


def make(tiles, g, h):
    return State(tiles, tiles.index(0), g, h, None, manhattan)


A = make((0, 1, 2, 3, 4, 5, 6, 7, 8), g=2, h=1)   # f=3
B = make((1, 0, 2, 3, 4, 5, 6, 7, 8), g=0, h=3)   # f=3
C = make((1, 2, 0, 3, 4, 5, 6, 7, 8), g=1, h=1)   # f=2


def drain(fr):
    out = []
    while not fr.is_empty():
        out.append(fr.pop_min())
    return out


@pytest.mark.parametrize("tie_break, expected", [
    ("h", [C, A, B]),
    ("g", [C, A, B]),
    ("fifo", [C, A, B]),
    ("lifo", [C, B, A]),
])
def test_order_and_tie_break(tie_break, expected):
    fr = Frontier(tie_break)
    for s in (A, B, C):
        fr.push(s)
    assert [s.tiles for s in drain(fr)] == [s.tiles for s in expected]


def test_h_tie_break_prefers_closer_state():
    fr = Frontier("h")
    fr.push(B)
    fr.push(A)
    assert fr.pop_min().tiles == A.tiles


def test_duplicates_coexist():
    fr = Frontier()
    fr.push(A)
    fr.push(make(A.tiles, g=5, h=1))
    assert len(fr) == 2
    assert [s.g for s in drain(fr)] == [2, 5]


def test_pop_empty_raises():
    fr = Frontier()
    assert fr.is_empty()
    with pytest.raises(IndexError):
        fr.pop_min()


def test_clear():
    fr = Frontier()
    fr.push(A); fr.push(B)
    fr.clear()
    assert fr.is_empty() and len(fr) == 0


def test_unknown_tie_break():
    with pytest.raises(ValueError):
        Frontier("random")


def test_seen_set():
    seen = SeenSet()
    assert not seen.contains(A.tiles)
    seen.insert(A.tiles)
    seen.insert(A.tiles)
    assert seen.contains(A.tiles)
    assert A.tiles in seen
    assert B.tiles not in seen
    assert len(seen) == 1
    seen.clear()
    assert len(seen) == 0
