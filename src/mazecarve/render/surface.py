# src/mazecarve/render/surface.py
from __future__ import annotations

from typing import Optional

import pygame
from PIL import Image

from ..config import RenderSettings
from ..grid import Maze
from .image import render_image


def to_surface(img: Image.Image) -> pygame.Surface:
    """Pillow image -> pygame Surface (works without a display)."""
    rgba = img.convert("RGBA")
    return pygame.image.frombytes(rgba.tobytes(), rgba.size, "RGBA")


def maze_surface(maze: Maze, settings: Optional[RenderSettings] = None) -> pygame.Surface:
    return to_surface(render_image(maze, settings))
