# src/mazecarve/solve/analysis.py
# Read-only structural checks used by tests and the CLI summary.

from collections import deque
from typing import Set

from ..grid import DIRECTIONS, Maze, Pos


def open_edge_count(maze: Maze) -> int:
    n = 0
    for cell in maze.all_cells():
        n += cell.north + cell.east
    return n


def unmasked_count(maze: Maze) -> int:
    return sum(1 for c in maze.all_cells() if not c.masked)


def reachable_from(maze: Maze, seed: Pos) -> Set[Pos]:
    seen = {seed}
    todo = deque([seed])
    while todo:
        cur = todo.popleft()
        for nxt in maze.neighbours(cur):
            if nxt not in seen:
                seen.add(nxt)
                todo.append(nxt)
    return seen


def masked_cells_sealed(maze: Maze) -> bool:
    for pos in maze.all_pos():
        if maze.at_pos(pos).masked and any(maze.can_go(pos, d) for d in DIRECTIONS):
            return False
    return True


def is_spanning_tree(maze: Maze) -> bool:
    """
    True when the open walls connect every unmasked cell with no cycle and
    no masked cell has an open wall.
    """
    open_cells = maze.unmasked_pos()
    if not open_cells or not masked_cells_sealed(maze):
        return False
    if open_edge_count(maze) != len(open_cells) - 1:
        return False
    return len(reachable_from(maze, open_cells[0])) == len(open_cells)


def dead_end_count(maze: Maze) -> int:
    n = 0
    for pos in maze.unmasked_pos():
        if sum(1 for _ in maze.neighbours(pos)) == 1:
            n += 1
    return n
