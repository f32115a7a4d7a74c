from dataclasses import dataclass
from typing import Tuple

RGBA = Tuple[int, int, int, int]

@dataclass(frozen=True)
class GenerateSettings:
    size: int = 10
    algorithm: str = "walker"
    seed: int = 1
    # Mask pixels darker than this (0..255 luminance) are blocked.
    threshold: int = 128

@dataclass(frozen=True)
class RenderSettings:
    scale: int = 50     # pixels per cell including one wall bar
    border: int = 5     # wall thickness
    show_path: bool = True
    background: RGBA = (255, 255, 255, 255)
    wall: RGBA = (0, 0, 0, 255)
    start: RGBA = (0, 255, 0, 255)
    end: RGBA = (255, 0, 0, 255)
    path: RGBA = (160, 200, 255, 255)
    masked: RGBA = (128, 128, 128, 255)

# Shared defaults (callers derive overrides with dataclasses.replace)
DEFAULTS = GenerateSettings()
RENDER = RenderSettings()
