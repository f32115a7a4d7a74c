# src/mazecarve/mapgen/walker.py
# Loop-erased random walk (Wilson's algorithm). Unbiased, and the only carver
# that is correct on arbitrary masked shapes.

import logging
from typing import List, Set

from ..errors import GenerationError
from ..grid import DIRECTIONS, Maze, Pos
from ..rng import PMRandom

logger = logging.getLogger(__name__)


def _walk(maze: Maze, rng: PMRandom, start: Pos, known: Set[Pos]) -> List[Pos]:
    """Loop-erased walk from start until it touches `known`; returns the path."""
    path = [start]
    current = start
    while True:
        moves = [d for d in DIRECTIONS if maze.step(current, d) is not None]
        if not moves:
            raise GenerationError(f"walker stuck at {current}: no unmasked neighbour")
        nxt = maze.step(current, rng.choice(moves))
        if nxt in path:
            # erase the loop; nxt is re-appended below
            del path[path.index(nxt):]
        path.append(nxt)
        if nxt in known:
            return path
        current = nxt


def carve_walker(maze: Maze, rng: PMRandom) -> None:
    known: Set[Pos] = {p for p in maze.all_pos() if maze.at_pos(p).masked}
    known.add(rng.choice(maze.unmasked_pos()))

    walks = 0
    for start in maze.all_pos():
        if start in known:
            continue
        path = _walk(maze, rng, start, known)
        for a, b in zip(path, path[1:]):
            maze.link_cells(a, b)
        known.update(path)
        walks += 1
        logger.debug("walk %d from %s carved %d cells", walks, start, len(path) - 1)
