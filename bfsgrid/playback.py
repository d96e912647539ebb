from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .grid import Position
from .planning import SearchResult


class RevealKind(Enum):
    VISITED = "visited"
    PATH = "path"
    UNREACHABLE = "unreachable"


@dataclass
class PlaybackConfig:
    height: int = 12
    width: int = 20
    visited_delay_ms: int = 35
    path_delay_ms: int = 50
    unreachable_delay_ms: int = 50


@dataclass
class RevealEvent:
    at_ms: int
    kind: RevealKind
    pos: Optional[Position] = None
    marker: bool = False  # start or end cell, renderers keep their own colour


def reveal_schedule(result: SearchResult, config: Optional[PlaybackConfig] = None) -> List[RevealEvent]:
    """Timeline for progressively drawing a search: visited cells first, then the path."""
    cfg = config or PlaybackConfig()
    markers = {result.start, result.end}
    events: List[RevealEvent] = []

    for i, cell in enumerate(result.visited_order):
        events.append(
            RevealEvent(at_ms=i * cfg.visited_delay_ms, kind=RevealKind.VISITED, pos=cell.pos, marker=cell.pos in markers)
        )

    visited_done = len(result.visited_order) * cfg.visited_delay_ms
    if not result.end_reached:
        events.append(RevealEvent(at_ms=visited_done + cfg.unreachable_delay_ms, kind=RevealKind.UNREACHABLE))
        return events

    for j, cell in enumerate(result.path):
        events.append(
            RevealEvent(
                at_ms=visited_done + j * cfg.path_delay_ms,
                kind=RevealKind.PATH,
                pos=cell.pos,
                marker=cell.pos in markers,
            )
        )
    # stable sort keeps visited ahead of path on equal times
    events.sort(key=lambda e: e.at_ms)
    return events
