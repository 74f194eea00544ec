"""Per-turn wind draws."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindModel:
    """Signed lateral wind drawn from ``[min_magnitude, max_magnitude]``.

    Magnitudes are quantised to ``resolution`` steps; the sign is a coin flip.
    """

    min_magnitude: float = 0.02
    max_magnitude: float = 0.05
    resolution: float = 0.001

    def __post_init__(self) -> None:
        if self.min_magnitude <= 0:
            raise ValueError("wind minimum magnitude must be positive")
        if self.max_magnitude < self.min_magnitude:
            raise ValueError("wind maximum magnitude must not be below the minimum")
        if self.resolution <= 0:
            raise ValueError("wind resolution must be positive")

    def draw(self, rng: random.Random) -> float:
        steps = int(round((self.max_magnitude - self.min_magnitude) / self.resolution))
        magnitude = self.min_magnitude + rng.randint(0, steps) * self.resolution
        magnitude = min(magnitude, self.max_magnitude)
        direction = rng.choice((-1, 1))
        wind = magnitude * direction
        if abs(wind) < self.min_magnitude:
            wind = self.min_magnitude if wind >= 0 else -self.min_magnitude
        logger.debug("New wind: %.3f", wind)
        return wind


__all__ = ["WindModel"]
