#!/usr/bin/env python3
# Minimal pygame viewer for generated mazes (display only, no editing).
# - G: cycle generation algorithm
# - R: reseed (seed + 1)
# - P: toggle the start->end path
# - Esc: quit

import argparse
import dataclasses
import logging

import pygame

from mazecarve.config import DEFAULTS, RENDER
from mazecarve.errors import MazeError
from mazecarve.mapgen.generator import ALGORITHMS, generate_maze
from mazecarve.mask import load_mask, read_mask_text
from mazecarve.render.surface import maze_surface
from mazecarve.solve.path import shortest_path

logger = logging.getLogger("mazecarve.viewer")


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--size", type=int, default=DEFAULTS.size)
    ap.add_argument("--algo", choices=sorted(ALGORITHMS), default=DEFAULTS.algorithm)
    ap.add_argument("--seed", type=int, default=DEFAULTS.seed)
    ap.add_argument("--mask", type=str, help="Bitmap mask; dark pixels are blocked")
    ap.add_argument("--mask-text", type=str, help="Text mask; '#' is blocked")
    ap.add_argument("--scale", type=int, default=RENDER.scale, help="Pixels per cell")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    mask = None
    if args.mask:
        mask = load_mask(args.mask, args.size, DEFAULTS.threshold)
    elif args.mask_text:
        mask = read_mask_text(args.mask_text, args.size)

    algos = list(ALGORITHMS)
    algo, seed, show_path = args.algo, args.seed, True
    settings = dataclasses.replace(RENDER, scale=args.scale)

    def build():
        try:
            maze = generate_maze(args.size, algo, seed, mask=mask)
        except MazeError as e:
            logger.error("%s: %s", algo, e)
            return None
        if show_path:
            shortest_path(maze)
        return maze_surface(maze, settings)

    pygame.init()
    clock = pygame.time.Clock()
    image = build()
    side = args.size * settings.scale + settings.border
    screen = pygame.display.set_mode((side, side))

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_g:
                    algo = algos[(algos.index(algo) + 1) % len(algos)]
                    image = build()
                elif ev.key == pygame.K_r:
                    seed += 1
                    image = build()
                elif ev.key == pygame.K_p:
                    show_path = not show_path
                    image = build()

        screen.fill((40, 40, 40))
        if image is not None:
            screen.blit(image, (0, 0))
        pygame.display.set_caption(f"mazecarve: {algo}  seed {seed}  path:{show_path}")
        pygame.display.flip()
        clock.tick(30)

    pygame.quit()

if __name__ == "__main__":
    main()
