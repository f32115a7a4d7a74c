# src/mazecarve/render/image.py
# Pillow renderer. Walls are drawn as `border`-thick bars in the gutters
# between cells; north is up.

from typing import Optional, Tuple

from PIL import Image, ImageDraw

from ..config import RENDER, RenderSettings
from ..grid import Maze

Box = Tuple[int, int, int, int]


def image_size(size: int, settings: RenderSettings = RENDER) -> int:
    return size * settings.scale + settings.border


def _cell_box(maze: Maze, x: int, y: int, s: RenderSettings) -> Box:
    row = maze.size - 1 - y
    x0 = x * s.scale + s.border
    y0 = row * s.scale + s.border
    return (x0, y0, x0 + s.scale - s.border - 1, y0 + s.scale - s.border - 1)


def _east_gutter(maze: Maze, x: int, y: int, s: RenderSettings) -> Box:
    row = maze.size - 1 - y
    gx = (x + 1) * s.scale
    return (gx, row * s.scale, gx + s.border - 1, (row + 1) * s.scale + s.border - 1)


def _north_gutter(maze: Maze, x: int, y: int, s: RenderSettings) -> Box:
    gy = (maze.size - 1 - y) * s.scale
    return (x * s.scale, gy, (x + 1) * s.scale + s.border - 1, gy + s.border - 1)


def _inner_east(maze: Maze, x: int, y: int, s: RenderSettings) -> Box:
    # gutter strip strictly between two horizontally adjacent cells
    _, y0, _, y1 = _cell_box(maze, x, y, s)
    gx = (x + 1) * s.scale
    return (gx, y0, gx + s.border - 1, y1)


def _inner_north(maze: Maze, x: int, y: int, s: RenderSettings) -> Box:
    x0, _, x1, _ = _cell_box(maze, x, y, s)
    gy = (maze.size - 1 - y) * s.scale
    return (x0, gy, x1, gy + s.border - 1)


def _inner_corner(maze: Maze, x: int, y: int, s: RenderSettings) -> Box:
    # gutter crossing at the north-east corner of (x, y)
    gx = (x + 1) * s.scale
    gy = (maze.size - 1 - y) * s.scale
    return (gx, gy, gx + s.border - 1, gy + s.border - 1)


def render_image(maze: Maze, settings: Optional[RenderSettings] = None) -> Image.Image:
    s = settings or RENDER
    side = image_size(maze.size, s)
    img = Image.new("RGBA", (side, side), s.background)
    draw = ImageDraw.Draw(img)
    top = right = maze.size - 1

    # fills first, so walls land on top
    for pos in maze.all_pos():
        cell = maze.at_pos(pos)
        fill = None
        if cell.masked:
            fill = s.masked
        elif pos == maze.start:
            fill = s.start
        elif pos == maze.end:
            fill = s.end
        elif s.show_path and cell.path:
            fill = s.path
        if fill is not None:
            draw.rectangle(_cell_box(maze, pos.x, pos.y, s), fill=fill)
        # merge neighbouring masked cells into one region
        if cell.masked and pos.x < right and maze.at(pos.x + 1, pos.y).masked:
            draw.rectangle(_inner_east(maze, pos.x, pos.y, s), fill=s.masked)
        if cell.masked and pos.y < top and maze.at(pos.x, pos.y + 1).masked:
            draw.rectangle(_inner_north(maze, pos.x, pos.y, s), fill=s.masked)
        if (cell.masked and pos.x < right and pos.y < top
                and maze.at(pos.x + 1, pos.y).masked
                and maze.at(pos.x, pos.y + 1).masked
                and maze.at(pos.x + 1, pos.y + 1).masked):
            draw.rectangle(_inner_corner(maze, pos.x, pos.y, s), fill=s.masked)

    for pos in maze.all_pos():
        cell = maze.at_pos(pos)
        if pos.x == right or not (cell.east or (cell.masked and maze.at(pos.x + 1, pos.y).masked)):
            draw.rectangle(_east_gutter(maze, pos.x, pos.y, s), fill=s.wall)
        if pos.y == top or not (cell.north or (cell.masked and maze.at(pos.x, pos.y + 1).masked)):
            draw.rectangle(_north_gutter(maze, pos.x, pos.y, s), fill=s.wall)

    # outer west and south edges
    draw.rectangle((0, 0, s.border - 1, side - 1), fill=s.wall)
    draw.rectangle((0, side - s.border, side - 1, side - 1), fill=s.wall)
    return img


def save_image(maze: Maze, path: str, settings: Optional[RenderSettings] = None) -> None:
    render_image(maze, settings).save(path)
