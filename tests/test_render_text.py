from mazecarve.grid import Direction, Maze, Pos
from mazecarve.mapgen.generator import generate
from mazecarve.render.text import render_lines, render_text
from mazecarve.rng import PMRandom
from mazecarve.solve.distance import calc_dist
from mazecarve.solve.path import shortest_path

def small():
    m = Maze.blank(2)
    m.link(Pos(0, 0), Direction.NORTH)
    m.link(Pos(0, 0), Direction.EAST)
    m.link(Pos(1, 0), Direction.NORTH)
    return m

def test_one_by_one():
    assert render_text(Maze.blank(1)) == "╔═══╗\n║END║\n╚═══╝\n"

def test_two_by_two_walls():
    assert render_lines(small()) == [
        "╔═══╤═══╗",
        "║   │END║",
        "║   │   ║",
        "║STA    ║",
        "╚═══════╝",
    ]

def test_distances_shown():
    m = small()
    calc_dist(m, m.start)
    lines = render_lines(m)
    assert lines[1] == "║ 1 │END║"
    assert lines[3] == "║STA  1 ║"

def test_path_hides_off_path_distances():
    m = small()
    calc_dist(m, m.start)
    assert shortest_path(m).ok
    lines = render_lines(m)
    assert lines[1] == "║   │END║"
    assert lines[3] == "║STA  1 ║"

def test_masked_cells_merge():
    m = Maze.blank(3)
    m.set_masked(0, 2)
    m.set_masked(1, 2)
    generate(m, "walker", PMRandom.from_seed(3))
    lines = render_lines(m)
    assert len(lines) == 2 * 3 + 1
    assert all(len(ln) == 1 + 4 * 3 for ln in lines)
    assert lines[1].startswith("║    ")

def test_rows_are_north_up():
    m = Maze.blank(3)
    m.start, m.end = Pos(0, 2), Pos(2, 0)
    lines = render_lines(m)
    assert "STA" in lines[1]
    assert "END" in lines[5]

def test_masked_bottom_pair_has_no_junction():
    m = Maze.blank(3)
    m.set_masked(0, 0)
    m.set_masked(1, 0)
    generate(m, "walker", PMRandom.from_seed(3))
    assert render_lines(m)[-1] == "╚═══════╧═══╝"

def test_masked_west_column_has_plain_rim():
    m = Maze.blank(3)
    m.set_masked(0, 0)
    m.set_masked(0, 1)
    generate(m, "walker", PMRandom.from_seed(3))
    lines = render_lines(m)
    assert lines[4].startswith("║")     # wall line above row 0
    assert lines[2].startswith("╟")     # (0, 1) / (0, 2) is a real wall
