# src/mazecarve/mapgen/binary_tree.py
from ..grid import Direction, Maze
from ..rng import PMRandom


def carve_binary_tree(maze: Maze, rng: PMRandom) -> None:
    """
    Each cell opens north or east on a coin flip. The top row can only go
    east, the right column only north, and the top-right corner opens nothing.
    Needs a fully unmasked grid.
    """
    top = right = maze.size - 1
    for pos in maze.all_pos():
        if pos.x == right and pos.y == top:
            continue
        if pos.y == top:
            maze.link(pos, Direction.EAST)
        elif pos.x == right:
            maze.link(pos, Direction.NORTH)
        elif rng.coin():
            maze.link(pos, Direction.NORTH)
        else:
            maze.link(pos, Direction.EAST)
