# src/mazecarve/solve/longest.py
import logging
from typing import Tuple

from ..errors import EmptyMaskError
from ..grid import Maze, Pos
from .distance import calc_dist, farthest

logger = logging.getLogger(__name__)


def calc_longest(maze: Maze) -> Tuple[Pos, Pos]:
    """
    Pick the two ends of the tree's diameter and store them as start/end.

    In a tree the farthest cell from any cell is a diameter endpoint, so:
      pass 1: any cell -> A (farthest)
      pass 2: A        -> B, which becomes start
      pass 3: B        -> end
    The last pass leaves the distance field seeded at start, which is what
    shortest_path() expects.
    """
    open_cells = maze.unmasked_pos()
    if not open_cells:
        raise EmptyMaskError("every cell is masked; there is no diameter")

    first = farthest_from(maze, open_cells[0])
    maze.start = farthest_from(maze, first)
    maze.end = farthest_from(maze, maze.start)
    logger.info("diameter %s -> %s, length %d",
                maze.start, maze.end, maze.at_pos(maze.end).dist)
    return maze.start, maze.end


def farthest_from(maze: Maze, seed: Pos) -> Pos:
    calc_dist(maze, seed)
    return farthest(maze)
