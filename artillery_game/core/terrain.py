"""Procedural height-field terrain for the artillery duel."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass
class TerrainSettings:
    """Configuration options for terrain generation."""

    width: float = 1920.0
    height: float = 1080.0
    segments: int = 800
    base_level: float = 0.7
    min_level: float = 0.3
    max_level: float = 0.85
    smoothing_passes: int = 2
    bump_chance: int = 50  # one bump per this many interior samples on average
    seed: Optional[int] = None

    @property
    def min_height(self) -> float:
        return self.height * self.min_level

    @property
    def max_height(self) -> float:
        return self.height * self.max_level


class Terrain:
    """Ground surface stored as evenly spaced height samples.

    Heights are screen-space y coordinates: a larger value means the ground
    sits lower in the world. Anything at or below ``height_at(x)`` is solid.
    """

    def __init__(self, settings: Optional[TerrainSettings] = None) -> None:
        self.settings = settings or TerrainSettings()
        self.width = self.settings.width
        self.height = self.settings.height
        self.segments = self.settings.segments
        self.heights: List[float] = [self.height] * self.segments
        self.generate(self.settings.seed)

    def generate(self, seed: Optional[int] = None) -> None:
        """Rebuild every sample from layered waves, noise and random bumps."""

        rng = random.Random(seed)
        base = self.height * self.settings.base_level
        for i in range(self.segments):
            x = self.x_at(i)
            value = base
            value += math.sin(x * 0.002) * 120
            value += math.sin(x * 0.01) * 50
            value += math.cos(x * 0.005) * 40
            value += math.sin(x * 0.03) * 20 * (math.cos(x * 0.001) + 1)
            value += math.sin(x * 0.2) * 5
            value += rng.randint(-5, 4) * (math.sin(x * 0.01) + 1)
            self.heights[i] = value
        self._clamp()
        for _ in range(self.settings.smoothing_passes):
            self._smooth()
        self._add_bumps(rng)
        self._clamp()

    def _clamp(self) -> None:
        low = self.settings.min_height
        high = self.settings.max_height
        self.heights = [max(low, min(high, value)) for value in self.heights]

    def _smooth(self) -> None:
        source = list(self.heights)
        for i in range(1, self.segments - 1):
            self.heights[i] = (source[i - 1] + source[i] + source[i + 1]) / 3.0

    def _add_bumps(self, rng: random.Random) -> None:
        for i in range(1, self.segments - 1):
            if rng.randrange(self.settings.bump_chance) != 0:
                continue
            half_width = rng.randint(5, 14)
            bump_height = rng.randint(5, 14)
            for j in range(-half_width, half_width + 1):
                index = i + j
                if 0 <= index < self.segments:
                    factor = math.cos(j / half_width * math.pi) * 0.5 + 0.5
                    self.heights[index] += bump_height * factor

    # ------------------------------------------------------------------
    def x_at(self, index: int) -> float:
        return index / self.segments * self.width

    def index_at(self, world_x: float) -> int:
        index = int(world_x / self.width * self.segments)
        return max(0, min(self.segments - 1, index))

    def is_inside(self, x: float, y: float) -> bool:
        return 0 <= x <= self.width and y <= self.height

    def height_at(self, world_x: float) -> float:
        """Return the ground level below ``world_x``.

        Positions off either side of the world report the world height, so
        callers treat them as solid ground at the bottom edge.
        """

        if world_x < 0 or world_x >= self.width:
            return self.height
        return self.heights[self.index_at(world_x)]

    def deform(self, center_x: float, radius: float, depth: float) -> None:
        """Push the surface down in a semicircular profile around ``center_x``."""

        if radius <= 0:
            return
        start = self.index_at(center_x - radius)
        end = self.index_at(center_x + radius)
        for i in range(start, end + 1):
            dx = self.x_at(i) - center_x
            if abs(dx) < radius:
                self.heights[i] += math.sqrt(radius * radius - dx * dx) / radius * depth

    def samples(self) -> Sequence[float]:
        return tuple(self.heights)
