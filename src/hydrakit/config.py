"""
Default settings shared across hydrakit.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class SeedConfig:
    """Constants of the persistent random hash."""
    # sin(seed) * hash_scale, fractional part kept
    hash_scale: float = 10000.0

    # Added to the seed for the green and blue channels of random_color
    color_offsets: Tuple[float, float] = (666.0, 1337.0)


@dataclass
class CanvasConfig:
    """Output canvas dimensions in pixels."""
    width: int = 1920
    height: int = 1080


DEFAULT_SEED_CONFIG = SeedConfig()
DEFAULT_CANVAS = CanvasConfig()
