# src/mazecarve/mapgen/hunt_kill.py
import logging
from typing import List, Optional, Set

from ..errors import GenerationError
from ..grid import DIRECTIONS, Maze, Pos
from ..rng import PMRandom

logger = logging.getLogger(__name__)


def _unvisited_steps(maze: Maze, pos: Pos, visited: Set[Pos]) -> List[Pos]:
    out = []
    for direction in DIRECTIONS:
        nxt = maze.step(pos, direction)
        if nxt is not None and nxt not in visited:
            out.append(nxt)
    return out


def _hunt(maze: Maze, rng: PMRandom, visited: Set[Pos]) -> Optional[Pos]:
    """
    First unvisited unmasked cell (row-major) touching the visited region;
    links it to one of its visited neighbours and returns it.
    """
    for pos in maze.all_pos():
        if pos in visited:
            continue
        anchors = []
        for direction in DIRECTIONS:
            nxt = maze.step(pos, direction)
            if nxt is not None and nxt in visited:
                anchors.append(nxt)
        if anchors:
            maze.link_cells(pos, rng.choice(anchors))
            visited.add(pos)
            return pos
    return None


def carve_hunt_and_kill(maze: Maze, rng: PMRandom) -> None:
    # Masked cells count as visited so neither phase ever enters them.
    visited: Set[Pos] = {p for p in maze.all_pos() if maze.at_pos(p).masked}
    remaining = maze.size * maze.size - len(visited)

    current: Optional[Pos] = rng.choice(maze.unmasked_pos())
    visited.add(current)
    remaining -= 1

    hunts = 0
    while remaining:
        # kill: random walk into fresh cells until boxed in
        options = _unvisited_steps(maze, current, visited)
        while options:
            nxt = rng.choice(options)
            maze.link_cells(current, nxt)
            visited.add(nxt)
            remaining -= 1
            current = nxt
            options = _unvisited_steps(maze, current, visited)
        if not remaining:
            break
        # hunt
        current = _hunt(maze, rng, visited)
        if current is None:
            raise GenerationError(f"hunt found no frontier with {remaining} cells unvisited")
        remaining -= 1
        hunts += 1
    logger.debug("hunt-and-kill finished after %d hunts", hunts)
