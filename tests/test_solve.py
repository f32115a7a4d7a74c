import pytest

from mazecarve.errors import InconsistentDistanceError, MaskedCellError
from mazecarve.grid import Direction, Maze, Pos
from mazecarve.mapgen.generator import ALGORITHMS, generate
from mazecarve.rng import PMRandom
from mazecarve.solve.distance import calc_dist, farthest
from mazecarve.solve.longest import calc_longest
from mazecarve.solve.path import shortest_path, shortist_path

def dists(maze):
    return [[c.dist for c in row] for row in maze.cells]

def snake(size):
    """One path through every cell: open rows joined at alternating ends."""
    maze = Maze.blank(size)
    for y in range(size):
        for x in range(size - 1):
            maze.link(Pos(x, y), Direction.EAST)
        if y < size - 1:
            maze.link(Pos(size - 1 if y % 2 == 0 else 0, y), Direction.NORTH)
    return maze

def test_calc_dist_on_snake():
    maze = snake(3)
    assert calc_dist(maze, Pos(0, 0)) == 9
    assert dists(maze) == [[0, 1, 2], [5, 4, 3], [6, 7, 8]]
    assert farthest(maze) == Pos(2, 2)

def test_calc_dist_idempotent():
    maze = generate(Maze.blank(9), "walker", PMRandom.from_seed(4))
    calc_dist(maze, Pos(4, 4))
    first = dists(maze)
    calc_dist(maze, Pos(4, 4))
    assert dists(maze) == first

def test_calc_dist_leaves_unreachable_and_masked_unset():
    maze = Maze.blank(3)
    maze.set_masked(2, 2)
    maze.link(Pos(0, 0), Direction.EAST)
    assert calc_dist(maze, Pos(0, 0)) == 2
    assert maze.at(1, 0).dist == 1
    assert maze.at(2, 0).dist is None
    assert maze.at(2, 2).dist is None
    with pytest.raises(MaskedCellError):
        calc_dist(maze, Pos(2, 2))

def test_calc_dist_matches_tree_depth():
    maze = generate(Maze.blank(10), "hunt_and_kill", PMRandom.from_seed(8))
    calc_dist(maze, Pos(0, 0))
    for pos in maze.all_pos():
        d = maze.at_pos(pos).dist
        if d == 0:
            continue
        # exactly one neighbour one step closer in a tree
        closer = [n for n in maze.neighbours(pos) if maze.at_pos(n).dist == d - 1]
        assert len(closer) == 1

def test_farthest_tie_breaks_row_major():
    maze = Maze.blank(3)
    maze.link(Pos(1, 1), Direction.SOUTH)
    maze.link(Pos(1, 1), Direction.NORTH)
    calc_dist(maze, Pos(1, 1))
    assert farthest(maze) == Pos(1, 0)

def test_farthest_needs_distances():
    with pytest.raises(ValueError):
        farthest(Maze.blank(2))

def test_calc_longest_on_snake():
    maze = snake(3)
    start, end = calc_longest(maze)
    assert {start, end} == {Pos(0, 0), Pos(2, 2)}
    assert maze.at_pos(start).dist == 0
    assert maze.at_pos(end).dist == 8

def test_calc_longest_independent_of_first_seed():
    maze = snake(4)
    expected = calc_longest(maze)
    # any seed's farthest cell is a diameter end; the second pass agrees
    for seed in maze.all_pos():
        calc_dist(maze, seed)
        a = farthest(maze)
        calc_dist(maze, a)
        b = farthest(maze)
        assert {a, b} == set(expected)

@pytest.mark.parametrize("algo", sorted(ALGORITHMS))
def test_longest_then_path_is_contiguous(algo):
    maze = generate(Maze.blank(10), algo, PMRandom.from_seed(21))
    calc_longest(maze)
    result = shortest_path(maze).raise_for_status()
    assert result.cells[0] == maze.start and result.cells[-1] == maze.end
    assert result.steps == len(result.cells) - 1 == maze.at_pos(maze.end).dist
    for a, b in zip(result.cells, result.cells[1:]):
        assert b in set(maze.neighbours(a))
    marked = {p for p in maze.all_pos() if maze.at_pos(p).path}
    assert marked == set(result.cells)

def test_path_on_masked_walker_maze():
    maze = Maze.blank(7)
    for y in range(1, 6):
        maze.set_masked(3, y)
    generate(maze, "walker", PMRandom.from_seed(2))
    calc_longest(maze)
    result = shortest_path(maze)
    assert result.ok
    assert not any(maze.at_pos(p).masked for p in result.cells)

def test_one_by_one():
    maze = generate(Maze.blank(1), "walker", PMRandom.from_seed(1))
    assert calc_longest(maze) == (Pos(0, 0), Pos(0, 0))
    assert maze.at(0, 0).dist == 0
    result = shortest_path(maze)
    assert result.ok and result.cells == [Pos(0, 0)] and result.steps == 0
    assert maze.at(0, 0).path

def test_wrong_seed_reports_partial_path():
    maze = snake(3)
    maze.start, maze.end = Pos(0, 0), Pos(2, 2)
    calc_dist(maze, Pos(1, 1))  # seeded at the wrong cell
    result = shortist_path(maze)
    assert not result.ok
    assert result.cells[-1] == Pos(2, 2)
    assert "no neighbour" in result.reason
    with pytest.raises(InconsistentDistanceError):
        result.raise_for_status()

def test_missing_distances_reported():
    maze = snake(2)
    result = shortest_path(maze)
    assert not result.ok and result.cells == [Pos(1, 1)]

def test_path_clears_previous_marks():
    maze = snake(3)
    maze.at(0, 2).path = True
    maze.start, maze.end = Pos(0, 0), Pos(1, 1)
    calc_dist(maze, Pos(0, 0))
    result = shortest_path(maze)
    assert result.ok
    assert not maze.at(0, 2).path
    assert maze.at(2, 0).path
