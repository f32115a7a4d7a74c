# src/mazecarve/grid.py
# Square grid of cells. y grows north: row 0 is the bottom of the picture.
# Each cell stores only its north/east wall; south/west are read from the
# neighbour so an undirected passage is never stored twice.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from .errors import InvalidSizeError, MazeStateError, OutOfBoundsError


class Direction(Enum):
    NORTH = (0, 1)
    EAST = (1, 0)
    SOUTH = (0, -1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

# Fixed probing order used wherever a generator collects candidate moves.
DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


@dataclass(frozen=True)
class Pos:
    x: int
    y: int

    def shift(self, direction: Direction, size: Optional[int] = None) -> Optional["Pos"]:
        nx, ny = self.x + direction.dx, self.y + direction.dy
        if nx < 0 or ny < 0:
            return None
        if size is not None and (nx >= size or ny >= size):
            return None
        return Pos(nx, ny)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass
class Cell:
    north: bool = False
    east: bool = False
    dist: Optional[int] = None
    path: bool = False
    masked: bool = False

    def clear_walls(self) -> None:
        self.north = False
        self.east = False

    def clear_scratch(self) -> None:
        self.dist = None
        self.path = False


@dataclass
class Maze:
    size: int
    cells: List[List[Cell]]
    start: Pos
    end: Pos
    carved: bool = field(default=False)

    @classmethod
    def blank(cls, size: int) -> "Maze":
        if size < 1:
            raise InvalidSizeError(f"maze size must be >= 1, got {size}")
        cells = [[Cell() for _ in range(size)] for _ in range(size)]
        return cls(size=size, cells=cells, start=Pos(0, 0), end=Pos(size - 1, size - 1))

    # ---------- indexing ----------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def at(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.size)
        return self.cells[y][x]

    def at_pos(self, pos: Pos) -> Cell:
        return self.at(pos.x, pos.y)

    def peek(self, x: int, y: int) -> Cell:
        """Like at(), but off-grid coordinates read as a closed, unmasked cell."""
        if not self.in_bounds(x, y):
            return Cell()
        return self.cells[y][x]

    def all_pos(self) -> Iterator[Pos]:
        """Row-major: y = 0 first, west to east within a row."""
        for y in range(self.size):
            for x in range(self.size):
                yield Pos(x, y)

    def all_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def unmasked_pos(self) -> List[Pos]:
        return [p for p in self.all_pos() if not self.at_pos(p).masked]

    def has_mask(self) -> bool:
        return any(c.masked for c in self.all_cells())

    # ---------- masking ----------
    def set_masked(self, x: int, y: int, masked: bool = True) -> None:
        if self.carved:
            raise MazeStateError("masks must be applied before the maze is carved")
        self.at(x, y).masked = masked

    # ---------- connectivity ----------
    def can_go(self, pos: Pos, direction: Direction) -> bool:
        cell = self.at_pos(pos)
        if direction is Direction.NORTH:
            return pos.y < self.size - 1 and cell.north
        if direction is Direction.EAST:
            return pos.x < self.size - 1 and cell.east
        if direction is Direction.SOUTH:
            return pos.y > 0 and self.cells[pos.y - 1][pos.x].north
        return pos.x > 0 and self.cells[pos.y][pos.x - 1].east

    def step(self, pos: Pos, direction: Direction) -> Optional[Pos]:
        """Neighbour in `direction` if it is on the grid and unmasked; walls are ignored."""
        nxt = pos.shift(direction, self.size)
        if nxt is None or self.cells[nxt.y][nxt.x].masked:
            return None
        return nxt

    def neighbours(self, pos: Pos) -> Iterator[Pos]:
        """Cells reachable from pos through an open wall."""
        for direction in DIRECTIONS:
            if self.can_go(pos, direction):
                yield pos.shift(direction)

    def link(self, pos: Pos, direction: Direction) -> Pos:
        """Open the wall between pos and its neighbour; returns the neighbour."""
        nxt = pos.shift(direction, self.size)
        if nxt is None:
            raise OutOfBoundsError(pos.x + direction.dx, pos.y + direction.dy, self.size)
        if self.at_pos(pos).masked or self.at_pos(nxt).masked:
            raise MazeStateError(f"cannot open a wall between {pos} and masked neighbour {nxt}")
        if direction is Direction.NORTH:
            self.cells[pos.y][pos.x].north = True
        elif direction is Direction.EAST:
            self.cells[pos.y][pos.x].east = True
        elif direction is Direction.SOUTH:
            self.cells[nxt.y][nxt.x].north = True
        else:
            self.cells[nxt.y][nxt.x].east = True
        return nxt

    def link_cells(self, a: Pos, b: Pos) -> None:
        for direction in DIRECTIONS:
            if a.shift(direction) == b:
                self.link(a, direction)
                return
        raise MazeStateError(f"{a} and {b} are not adjacent")

    # ---------- reset ----------
    def clear_path(self) -> None:
        for cell in self.all_cells():
            cell.clear_scratch()

    def clear_walls(self) -> None:
        for cell in self.all_cells():
            cell.clear_walls()
            cell.clear_scratch()
        self.carved = False

    def clear(self) -> None:
        """Back to blank walls and endpoints. Masks survive."""
        self.clear_walls()
        self.start = Pos(0, 0)
        self.end = Pos(self.size - 1, self.size - 1)

    def wall_rows(self) -> List[str]:
        """Compact wall dump, one string per row (y = 0 first): N, E, B(oth) or '.'."""
        rows = []
        for row in self.cells:
            rows.append("".join(
                "B" if c.north and c.east else "N" if c.north else "E" if c.east else "."
                for c in row
            ))
        return rows
