# src/mazecarve/mapgen/carve.py
# Shared pre-carving checks. Masking can split the grid into islands a carver
# would never reach, so the unmasked set is flood-filled before any wall opens.

from collections import deque
from typing import List, Set

from ..errors import DisconnectedMaskError, EmptyMaskError
from ..grid import DIRECTIONS, Maze, Pos


def flood_unmasked(maze: Maze, seed: Pos) -> Set[Pos]:
    """Every unmasked cell reachable from seed by `step`, ignoring walls."""
    seen = {seed}
    todo = deque([seed])
    while todo:
        cur = todo.popleft()
        for direction in DIRECTIONS:
            nxt = maze.step(cur, direction)
            if nxt is not None and nxt not in seen:
                seen.add(nxt)
                todo.append(nxt)
    return seen


def unmasked_islands(maze: Maze) -> List[Set[Pos]]:
    islands: List[Set[Pos]] = []
    claimed: Set[Pos] = set()
    for pos in maze.unmasked_pos():
        if pos in claimed:
            continue
        island = flood_unmasked(maze, pos)
        claimed |= island
        islands.append(island)
    return islands


def check_connected(maze: Maze) -> None:
    """
    Raise a ValidationError unless the unmasked cells form one non-empty
    4-connected region. Every carver relies on this to terminate.
    """
    islands = unmasked_islands(maze)
    if not islands:
        raise EmptyMaskError("every cell is masked; nothing to carve")
    if len(islands) > 1:
        raise DisconnectedMaskError(len(islands))
