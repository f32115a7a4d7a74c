#!/usr/bin/env python3
# src/mazecarve/cli.py
import argparse
import dataclasses
import logging
import sys

from .config import DEFAULTS, RENDER
from .errors import MazeError
from .grid import Maze
from .mapgen.generator import ALGORITHMS, generate
from .mask import apply_mask, load_mask, read_mask_text
from .render.image import save_image
from .render.text import render_text
from .rng import PMRandom
from .solve.analysis import dead_end_count, open_edge_count, unmasked_count
from .solve.distance import calc_dist
from .solve.longest import calc_longest
from .solve.path import shortest_path

logger = logging.getLogger("mazecarve")


def build_maze(args) -> Maze:
    maze = Maze.blank(args.size)
    if args.mask:
        apply_mask(maze, load_mask(args.mask, args.size, args.threshold))
    elif args.mask_text:
        apply_mask(maze, read_mask_text(args.mask_text, args.size))

    rng = PMRandom.from_seed(args.seed)
    generate(maze, args.algo, rng)
    if args.longest:
        calc_longest(maze)
    else:
        calc_dist(maze, maze.start)
    if args.path:
        result = shortest_path(maze)
        if not result.ok:
            logger.warning("path incomplete: %s", result.reason)
    if not (args.dist or args.path):
        maze.clear_path()
    return maze


def summary(maze: Maze) -> str:
    return (f"{maze.size}x{maze.size}  cells={unmasked_count(maze)}  "
            f"edges={open_edge_count(maze)}  dead_ends={dead_end_count(maze)}  "
            f"start={maze.start} end={maze.end}")


def cmd_text(args):
    maze = build_maze(args)
    sys.stdout.write(render_text(maze))
    print(summary(maze))


def cmd_png(args):
    maze = build_maze(args)
    settings = dataclasses.replace(RENDER, scale=args.scale, border=args.border,
                                   show_path=args.path)
    save_image(maze, args.out, settings)
    print(f"Wrote {args.out}  ({summary(maze)})")


def cmd_algos(args):
    for name in ALGORITHMS:
        print(name)


def _common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--size", type=int, default=DEFAULTS.size, help="Grid side length")
    p.add_argument("--algo", choices=sorted(ALGORITHMS), default=DEFAULTS.algorithm)
    p.add_argument("--seed", type=int, default=DEFAULTS.seed)
    masks = p.add_mutually_exclusive_group()
    masks.add_argument("--mask", type=str, help="Bitmap mask; dark pixels are blocked")
    masks.add_argument("--mask-text", type=str, help="Text mask; '#' is blocked, '.' open")
    p.add_argument("--threshold", type=int, default=DEFAULTS.threshold,
                   help="Luminance cut-off for --mask (0..255)")
    p.add_argument("--no-longest", dest="longest", action="store_false",
                   help="Keep start/end at the corners instead of the diameter")
    p.add_argument("--path", action="store_true", help="Mark the start->end path")
    p.add_argument("--dist", action="store_true", help="Show distances from start")


def make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mazecarve")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    p1 = sub.add_parser("text", help="Print the maze with box-drawing characters")
    _common(p1)
    p1.set_defaults(func=cmd_text)

    p2 = sub.add_parser("png", help="Render the maze to an image")
    _common(p2)
    p2.add_argument("--out", type=str, required=True)
    p2.add_argument("--scale", type=int, default=RENDER.scale, help="Pixels per cell")
    p2.add_argument("--border", type=int, default=RENDER.border, help="Wall thickness")
    p2.set_defaults(func=cmd_png)

    p3 = sub.add_parser("algos", help="List generation algorithms")
    p3.set_defaults(func=cmd_algos)
    return p


def main(argv=None) -> int:
    args = make_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except (MazeError, OSError) as e:
        logger.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
