import pytest

from sxsv.menu import CyclicSelection


def test_next_wraps_to_first():
    selection = CyclicSelection(5, 4)
    assert selection.select_next() == 0
    assert selection.selected == 0


def test_previous_wraps_to_last():
    selection = CyclicSelection(5, 0)
    assert selection.select_previous() == 4


@pytest.mark.parametrize("size", [1, 3, 5])
def test_next_visits_every_index_in_order(size):
    selection = CyclicSelection(size, None)
    visited = [selection.select_next() for _ in range(size)]
    assert visited == list(range(size))
    assert selection.select_next() == 0


@pytest.mark.parametrize("size", [1, 3, 5])
def test_previous_visits_every_index_in_reverse(size):
    selection = CyclicSelection(size, 0)
    visited = [selection.select_previous() for _ in range(size)]
    assert visited == [(-k) % size for k in range(1, size + 1)]


@pytest.mark.parametrize("start", [0, 1, 2])
def test_next_then_previous_is_identity(start):
    selection = CyclicSelection(3, start)
    selection.select_next()
    assert selection.select_previous() == start


def test_previous_with_nothing_selected_picks_first():
    selection = CyclicSelection(3, None)
    assert selection.select_previous() == 0


def test_default_selection_is_first():
    assert CyclicSelection(4).selected == 0


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        CyclicSelection(size)


@pytest.mark.parametrize("selected", [-1, 3])
def test_out_of_range_selection_rejected(selected):
    with pytest.raises(ValueError):
        CyclicSelection(3, selected)