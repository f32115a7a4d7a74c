# src/mazecarve/mask.py
# Masks are y-indexed like the maze (mask[0] is the bottom row). Both file
# formats are drawn top row first, so loaders flip them.

from typing import Iterable, List, Sequence

from PIL import Image

from .errors import MaskShapeError
from .grid import Maze

Mask = List[List[bool]]

MASKED_CHARS = "#X"
OPEN_CHARS = ".o "


def parse_mask_text(lines: Iterable[str], size: int) -> Mask:
    """
    Text mask: one line per row, top row first; '#'/'X' masked, '.'/'o'/' '
    open. Empty trailing lines are ignored.
    """
    rows = [ln.rstrip("\r\n") for ln in lines]
    while rows and not rows[-1]:
        rows.pop()
    if len(rows) != size:
        raise MaskShapeError(f"mask has {len(rows)} rows, expected {size}")
    mask: Mask = []
    for i, row in enumerate(rows):
        row = row.ljust(size)
        if len(row) != size:
            raise MaskShapeError(f"mask row {i} has {len(row)} columns, expected {size}")
        bits = []
        for ch in row:
            if ch in MASKED_CHARS:
                bits.append(True)
            elif ch in OPEN_CHARS:
                bits.append(False)
            else:
                raise MaskShapeError(f"unexpected mask character {ch!r} in row {i}")
        mask.append(bits)
    mask.reverse()
    return mask


def read_mask_text(path: str, size: int) -> Mask:
    with open(path, encoding="utf-8") as f:
        return parse_mask_text(f, size)


def load_mask(path: str, size: int, threshold: int = 128) -> Mask:
    """Bitmap mask: scaled to size x size; dark pixels (< threshold) are masked."""
    with Image.open(path) as img:
        grey = img.convert("L").resize((size, size), Image.NEAREST)
    mask: Mask = []
    for y in range(size):
        row_from_top = size - 1 - y
        mask.append([grey.getpixel((x, row_from_top)) < threshold for x in range(size)])
    return mask


def apply_mask(maze: Maze, mask: Sequence[Sequence[bool]]) -> None:
    if len(mask) != maze.size or any(len(row) != maze.size for row in mask):
        raise MaskShapeError(f"mask shape does not match a {maze.size}x{maze.size} maze")
    for y, row in enumerate(mask):
        for x, blocked in enumerate(row):
            maze.set_masked(x, y, bool(blocked))
