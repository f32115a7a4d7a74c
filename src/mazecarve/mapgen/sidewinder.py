# src/mazecarve/mapgen/sidewinder.py
from typing import List

from ..grid import Direction, Maze, Pos
from ..rng import PMRandom


def carve_sidewinder(maze: Maze, rng: PMRandom) -> None:
    """
    Row by row (bottom first) grow a run of east-linked cells; closing a run
    opens north from one cell picked uniformly out of it.

    RNG order per cell: top row never draws; the right column draws once
    (run pick); other cells draw a coin and, when it says "close", a run pick.
    """
    top = right = maze.size - 1
    for y in range(maze.size):
        run: List[Pos] = []
        for x in range(maze.size):
            pos = Pos(x, y)
            run.append(pos)
            if x == right and y == top:
                continue
            if y == top or (x != right and rng.coin()):
                maze.link(pos, Direction.EAST)
                continue
            maze.link(rng.choice(run), Direction.NORTH)
            run = []
