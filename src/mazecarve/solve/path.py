# src/mazecarve/solve/path.py
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import InconsistentDistanceError
from ..grid import Direction, Maze, Pos

logger = logging.getLogger(__name__)

# Neighbour order tried while backtracking.
BACKTRACK_ORDER = (Direction.WEST, Direction.EAST, Direction.SOUTH, Direction.NORTH)


@dataclass
class PathResult:
    cells: List[Pos] = field(default_factory=list)  # start -> end
    ok: bool = True
    reason: Optional[str] = None

    @property
    def steps(self) -> int:
        return max(len(self.cells) - 1, 0)

    def raise_for_status(self) -> "PathResult":
        if not self.ok:
            raise InconsistentDistanceError(self.reason)
        return self


def _fail(cells: List[Pos], reason: str) -> PathResult:
    logger.warning("shortest path aborted: %s", reason)
    cells.reverse()
    return PathResult(cells=cells, ok=False, reason=reason)


def shortest_path(maze: Maze) -> PathResult:
    """
    Backtrack from maze.end to maze.start by following dist - 1 through open
    walls, marking each cell's path flag. Distances must already be seeded at
    maze.start (calc_longest leaves them that way).

    Never raises on bad state: a failed walk keeps its partial path.
    """
    for cell in maze.all_cells():
        cell.path = False

    cur = maze.end
    cells: List[Pos] = []
    bound = maze.size * maze.size
    while True:
        cell = maze.at_pos(cur)
        cell.path = True
        cells.append(cur)
        if cur == maze.start:
            break
        if cell.dist is None:
            return _fail(cells, f"{cur} has no distance; was calc_dist run from start?")
        if len(cells) > bound:
            return _fail(cells, f"walk exceeded {bound} steps")
        want = cell.dist - 1
        nxt = None
        for direction in BACKTRACK_ORDER:
            if not maze.can_go(cur, direction):
                continue
            cand = cur.shift(direction)
            if maze.at_pos(cand).dist == want:
                nxt = cand
                break
        if nxt is None:
            return _fail(cells, f"no neighbour of {cur} at distance {want}")
        cur = nxt

    cells.reverse()
    return PathResult(cells=cells)


# Name kept for callers that know the operation by its original spelling.
shortist_path = shortest_path
