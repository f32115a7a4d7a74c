import dataclasses

from PIL import Image

from mazecarve.config import RENDER
from mazecarve.grid import Direction, Maze, Pos
from mazecarve.mapgen.generator import generate
from mazecarve.render.image import image_size, render_image, save_image
from mazecarve.rng import PMRandom

def small():
    m = Maze.blank(2)
    m.link(Pos(0, 0), Direction.NORTH)
    m.link(Pos(0, 0), Direction.EAST)
    m.link(Pos(1, 0), Direction.NORTH)
    return m

def test_size_and_endpoint_colours():
    img = render_image(small())
    assert img.size == (image_size(2), image_size(2)) == (105, 105)
    assert img.getpixel((25, 75)) == RENDER.start   # (0,0), bottom-left
    assert img.getpixel((75, 25)) == RENDER.end     # (1,1), top-right

def test_walls_and_openings():
    img = render_image(small())
    # open east wall of (0,0)
    assert img.getpixel((52, 75)) == RENDER.background
    # closed east wall of (0,1)
    assert img.getpixel((52, 25)) == RENDER.wall
    # outer border
    assert img.getpixel((0, 50)) == RENDER.wall
    assert img.getpixel((50, 104)) == RENDER.wall
    assert img.getpixel((104, 50)) == RENDER.wall
    assert img.getpixel((50, 0)) == RENDER.wall

def test_masked_neighbours_merge():
    m = Maze.blank(2)
    m.set_masked(0, 0)
    m.set_masked(1, 0)
    generate(m, "walker", PMRandom.from_seed(1))
    img = render_image(m)
    assert img.getpixel((25, 75)) == RENDER.masked
    assert img.getpixel((52, 75)) == RENDER.masked   # no wall between the pair
    assert img.getpixel((25, 52)) == RENDER.wall     # masked vs open stays walled

    # a 2x2 masked block has no hole where its four gutters cross
    m = Maze.blank(4)
    for x, y in ((0, 3), (1, 3), (0, 2), (1, 2)):
        m.set_masked(x, y)
    generate(m, "walker", PMRandom.from_seed(3))
    img = render_image(m)
    assert img.getpixel((52, 52)) == RENDER.masked
    assert img.getpixel((52, 25)) == RENDER.masked
    assert img.getpixel((25, 52)) == RENDER.masked

def test_path_fill_and_settings(tmp_path):
    m = small()
    m.at(1, 0).path = True
    assert render_image(m).getpixel((75, 75)) == RENDER.path
    plain = dataclasses.replace(RENDER, show_path=False, scale=20, border=2)
    img = render_image(m, plain)
    assert img.size == (42, 42)
    assert img.getpixel((30, 30)) == RENDER.background
    out = tmp_path / "maze.png"
    save_image(m, str(out), plain)
    with Image.open(out) as back:
        assert back.size == (42, 42)
