from bfsgrid.grid import create_grid, toggle_wall
from bfsgrid.planning import search
from bfsgrid.playback import PlaybackConfig, RevealKind, reveal_schedule


def test_visited_then_path_timeline():
    result = search(create_grid(1, 3), (0, 0), (0, 2))
    events = reveal_schedule(result)

    assert [(e.at_ms, e.kind, e.pos, e.marker) for e in events] == [
        (0, RevealKind.VISITED, (0, 0), True),
        (35, RevealKind.VISITED, (0, 1), False),
        (70, RevealKind.VISITED, (0, 2), True),
        (105, RevealKind.PATH, (0, 0), True),
        (155, RevealKind.PATH, (0, 1), False),
        (205, RevealKind.PATH, (0, 2), True),
    ]


def test_unreachable_notice_follows_visited_cells():
    grid = create_grid(2, 2)
    toggle_wall(grid, 0, 1)
    toggle_wall(grid, 1, 0)
    events = reveal_schedule(search(grid, (0, 0), (1, 1)))

    assert [e.kind for e in events] == [RevealKind.VISITED, RevealKind.UNREACHABLE]
    assert events[-1].at_ms == 35 + 50
    assert events[-1].pos is None


def test_custom_delays_and_ordering():
    result = search(create_grid(3, 3), (0, 0), (2, 2))
    cfg = PlaybackConfig(visited_delay_ms=10, path_delay_ms=0)
    events = reveal_schedule(result, cfg)

    times = [e.at_ms for e in events]
    assert times == sorted(times)
    path_events = [e for e in events if e.kind is RevealKind.PATH]
    assert len(path_events) == 5
    assert {e.at_ms for e in path_events} == {90}
    assert [e.pos for e in path_events][-1] == (2, 2)
