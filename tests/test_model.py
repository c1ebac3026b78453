import pytest

from model import Board, Circle


def test_center_is_inside():
    circle = Circle(x=12.5, y=-3.0, radius=1, color="#000000")
    assert circle.contains(12.5, -3.0)


def test_boundary_is_inclusive():
    # 3-4-5 triangle: (3, 4) is exactly one radius away.
    circle = Circle(x=0, y=0, radius=5, color="#000000")
    assert circle.contains(3, 4)
    assert circle.contains(5, 0)
    assert not circle.contains(5, 1)


def test_find_returns_topmost_overlap():
    board = Board()
    board.add_circle(Circle(x=50, y=50, radius=20, color="#111111"))
    board.add_circle(Circle(x=60, y=50, radius=20, color="#222222"))

    assert board.find_circle_index(55, 50) == 1
    assert board.find_circle_index(35, 50) == 0
    assert board.find_circle_index(200, 200) is None


def test_find_on_empty_board():
    assert Board().find_circle_index(0, 0) is None


def test_state_follows_selection_and_dragging():
    board = Board()
    assert board.state == "idle"

    board.select(board.add_circle(Circle(x=0, y=0, radius=10, color="#000000")))
    assert board.state == "selected"

    board.dragging = True
    assert board.state == "dragging"

    board.select(None)
    assert board.state == "idle"
    assert board.dragging is False


def test_select_rejects_invalid_index():
    board = Board()
    board.add_circle(Circle(x=0, y=0, radius=10, color="#000000"))
    with pytest.raises(IndexError):
        board.select(1)


def test_remove_selected_without_selection_is_noop():
    board = Board()
    board.add_circle(Circle(x=0, y=0, radius=10, color="#000000"))

    assert board.remove_selected() is None
    assert len(board.circles) == 1


def test_clear_resets_everything():
    board = Board()
    board.select(board.add_circle(Circle(x=0, y=0, radius=10, color="#000000")))
    board.dragging = True

    board.clear()

    assert board.circles == []
    assert board.selected_index is None
    assert board.dragging is False
