import pytest

from bfsgrid.grid import GridError, OutOfBounds
from bfsgrid.session import EditOutcome, EditSession


def test_clicks_place_start_then_end_then_walls():
    session = EditSession(3, 3)
    assert session.click(0, 0) is EditOutcome.START_SET
    assert session.click(2, 2) is EditOutcome.END_SET
    assert session.ready
    assert session.click(1, 1) is EditOutcome.WALL_ADDED
    assert session.grid.walls() == [(1, 1)]
    assert session.click(1, 1) is EditOutcome.WALL_REMOVED
    assert session.grid.walls() == []


def test_end_cannot_share_the_start_cell():
    session = EditSession(2, 2)
    session.click(0, 0)
    assert session.click(0, 0) is EditOutcome.REJECTED
    assert session.end is None


def test_walls_never_land_on_markers():
    session = EditSession(2, 2)
    session.click(0, 0)
    session.click(1, 1)
    assert session.click(0, 0) is EditOutcome.REJECTED
    assert session.click(1, 1) is EditOutcome.REJECTED
    assert session.drag(0, 0) is EditOutcome.REJECTED
    assert session.grid.walls() == []


def test_drag_paints_only_once_markers_are_placed():
    session = EditSession(3, 3)
    assert session.drag(1, 1) is EditOutcome.REJECTED
    session.click(0, 0)
    session.click(2, 2)
    assert session.drag(1, 1) is EditOutcome.WALL_ADDED
    assert session.drag(1, 2) is EditOutcome.WALL_ADDED
    assert sorted(session.grid.walls()) == [(1, 1), (1, 2)]


def test_locked_session_ignores_edits():
    session = EditSession(2, 2)
    session.click(0, 0)
    session.click(1, 1)
    session.locked = True
    assert session.click(0, 1) is EditOutcome.REJECTED
    assert session.drag(0, 1) is EditOutcome.REJECTED
    assert session.grid.walls() == []


def test_solve_requires_both_markers():
    session = EditSession(2, 2)
    session.click(0, 0)
    with pytest.raises(GridError):
        session.solve()


def test_solve_reports_unreachable_end():
    session = EditSession(2, 2)
    session.click(0, 0)
    session.click(1, 1)
    session.click(0, 1)
    session.click(1, 0)
    result = session.solve()
    assert not result.end_reached
    assert [c.pos for c in result.visited_order] == [(0, 0)]


def test_solve_twice_without_reset():
    session = EditSession(3, 3)
    session.click(0, 0)
    session.click(2, 2)
    first = session.solve()
    second = session.solve()
    assert [c.pos for c in first.path] == [c.pos for c in second.path]
    assert len(first.path) == 5


def test_reset_clears_everything():
    session = EditSession(3, 3)
    session.click(0, 0)
    session.click(2, 2)
    session.click(1, 1)
    session.locked = True
    session.reset()
    assert session.start is None and session.end is None
    assert not session.locked
    assert session.grid.walls() == []


def test_out_of_bounds_click():
    session = EditSession(2, 2)
    with pytest.raises(OutOfBounds):
        session.click(2, 0)
    with pytest.raises(OutOfBounds):
        session.drag(0, 5)
