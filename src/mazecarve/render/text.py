# src/mazecarve/render/text.py
# Box-drawing renderer. Each cell is 4 characters wide: 3 for the body or the
# wall above it, 1 for the wall (or junction) on its east side.

from typing import List

from ..grid import Direction, Maze, Pos

# Junction glyph keyed by which arms are OPEN: (west, south, east, north).
# An arm is open when the wall segment leaving the junction that way is absent.
JUNCTIONS = {
    (False, False, False, False): "┼",
    (False, False, False, True): "┬",
    (False, False, True, False): "┤",
    (False, False, True, True): "╮",
    (False, True, False, False): "┴",
    (False, True, False, True): "─",
    (False, True, True, False): "╯",
    (False, True, True, True): " ",
    (True, False, False, False): "├",
    (True, False, False, True): "╭",
    (True, False, True, False): "│",
    (True, False, True, True): "│",
    (True, True, False, False): "╰",
    (True, True, False, True): "─",
    (True, True, True, False): "│",
    (True, True, True, True): " ",
}


def _wall_line(maze: Maze, y: int) -> str:
    """The line drawn above row y: north walls of the row plus junctions."""
    top = maze.size - 1
    if y == top:
        out = ["╔"]
    elif maze.at(0, y).north or (maze.at(0, y).masked and maze.at(0, y + 1).masked):
        out = ["║"]
    else:
        out = ["╟"]
    for x in range(maze.size):
        sw = maze.at(x, y).masked
        se = maze.peek(x + 1, y).masked
        ne = maze.peek(x + 1, y + 1).masked
        nw = maze.peek(x, y + 1).masked
        # arms around the junction at this cell's north-east corner
        west = maze.at(x, y).north or (nw and sw)
        south = maze.at(x, y).east or (se and sw)
        east = maze.peek(x + 1, y).north or (se and ne)
        north = maze.peek(x, y + 1).east or (nw and ne)
        if y == top and x == top:
            out.append("═══╗")
        elif y == top:
            out.append("════" if south else "═══╤")
        elif x == top:
            out.append("   ║" if west else "───╢")
        else:
            out.append(("   " if west else "───") + JUNCTIONS[(west, south, east, north)])
    return "".join(out)


def _label(maze: Maze, x: int, y: int, has_path: bool) -> str:
    cell = maze.at(x, y)
    if cell.masked:
        return "  "
    if has_path and not cell.path:
        return "  "
    if cell.dist is not None:
        return f"{cell.dist:>2}"
    return "<>" if has_path else "  "


def _cell_line(maze: Maze, y: int, has_path: bool) -> str:
    right = maze.size - 1
    out = ["║"]
    for x in range(maze.size):
        pos = Pos(x, y)
        cell = maze.at(x, y)
        if cell.masked and maze.peek(x + 1, y).masked:
            out.append("    ")
            continue
        if pos == maze.end:
            body = "END"
        elif pos == maze.start:
            body = "STA"
        else:
            body = _label(maze, x, y, has_path) + " "
        if maze.can_go(pos, Direction.EAST):
            out.append(body + " ")
        elif x == right:
            out.append(body + "║")
        else:
            out.append(body + "│")
    return "".join(out)


def _bottom_line(maze: Maze) -> str:
    right = maze.size - 1
    out = ["╚"]
    for x in range(maze.size):
        if x == right:
            out.append("═══╝")
        elif maze.at(x, 0).east or (maze.at(x, 0).masked and maze.at(x + 1, 0).masked):
            out.append("════")
        else:
            out.append("═══╧")
    return "".join(out)


def render_lines(maze: Maze) -> List[str]:
    has_path = any(c.path for c in maze.all_cells())
    lines = []
    for y in reversed(range(maze.size)):
        lines.append(_wall_line(maze, y))
        lines.append(_cell_line(maze, y, has_path))
    lines.append(_bottom_line(maze))
    return lines


def render_text(maze: Maze) -> str:
    return "\n".join(render_lines(maze)) + "\n"
