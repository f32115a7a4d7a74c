# src/mazecarve/solve/distance.py
from collections import deque

from ..errors import MaskedCellError
from ..grid import Maze, Pos


def calc_dist(maze: Maze, seed: Pos) -> int:
    """
    Breadth-first hop counts from seed along open walls. Unreachable and
    masked cells keep dist=None. Returns how many cells were reached.
    """
    if maze.at_pos(seed).masked:
        raise MaskedCellError(f"cannot measure distances from masked cell {seed}")
    for cell in maze.all_cells():
        cell.dist = None

    maze.at_pos(seed).dist = 0
    reached = 1
    todo = deque([seed])
    while todo:
        cur = todo.popleft()
        d = maze.at_pos(cur).dist + 1
        for nxt in maze.neighbours(cur):
            cell = maze.at_pos(nxt)
            if cell.dist is None:
                cell.dist = d
                reached += 1
                todo.append(nxt)
    return reached


def farthest(maze: Maze) -> Pos:
    """Cell with the largest dist; ties go to the first one in row-major order."""
    best = None
    best_dist = -1
    for pos in maze.all_pos():
        d = maze.at_pos(pos).dist
        if d is not None and d > best_dist:
            best, best_dist = pos, d
    if best is None:
        raise ValueError("no distances computed; call calc_dist first")
    return best
