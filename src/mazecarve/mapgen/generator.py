# src/mazecarve/mapgen/generator.py
# Algorithm registry plus the canonical build: blank -> mask -> carve -> longest.

import logging
from typing import Callable, Dict, Optional, Sequence

from ..errors import UnknownAlgorithmError, UnsupportedMaskError
from ..grid import Maze
from ..mask import apply_mask
from ..rng import PMRandom
from ..solve.longest import calc_longest
from .binary_tree import carve_binary_tree
from .carve import check_connected
from .hunt_kill import carve_hunt_and_kill
from .sidewinder import carve_sidewinder
from .walker import carve_walker

logger = logging.getLogger(__name__)

Carver = Callable[[Maze, PMRandom], None]

ALGORITHMS: Dict[str, Carver] = {
    "binary_tree": carve_binary_tree,
    "sidewinder": carve_sidewinder,
    "hunt_and_kill": carve_hunt_and_kill,
    "walker": carve_walker,
}

# Row/column-biased carvers assume every cell is open.
NEEDS_FULL_GRID = frozenset({"binary_tree", "sidewinder"})


def _settle_endpoints(maze: Maze) -> None:
    open_cells = maze.unmasked_pos()
    if maze.at_pos(maze.start).masked:
        maze.start = open_cells[0]
    if maze.at_pos(maze.end).masked:
        maze.end = open_cells[-1]


def generate(maze: Maze, algorithm: str, rng: PMRandom) -> Maze:
    """
    Carve a spanning tree over the unmasked cells in place and return the maze.
    Walls and scratch state are reset first; masks are kept.
    """
    carve = ALGORITHMS.get(algorithm)
    if carve is None:
        raise UnknownAlgorithmError(
            f"unknown algorithm {algorithm!r}; expected one of {', '.join(ALGORITHMS)}"
        )
    if algorithm in NEEDS_FULL_GRID and maze.has_mask():
        raise UnsupportedMaskError(f"{algorithm} cannot carve a masked grid; use 'walker'")
    check_connected(maze)

    maze.clear()
    _settle_endpoints(maze)
    carve(maze, rng)
    maze.carved = True
    logger.info("carved %dx%d maze with %s (%d open cells)",
                maze.size, maze.size, algorithm, len(maze.unmasked_pos()))
    return maze


def generate_maze(
    size: int,
    algorithm: str,
    seed: int,
    mask: Optional[Sequence[Sequence[bool]]] = None,
    longest: bool = True,
) -> Maze:
    maze = Maze.blank(size)
    if mask is not None:
        apply_mask(maze, mask)
    generate(maze, algorithm, PMRandom.from_seed(seed))
    if longest:
        calc_longest(maze)
    return maze
