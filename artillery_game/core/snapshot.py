"""Read-only views of the simulation handed to rendering code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from artillery_game.core.commands import MatchPhase
from artillery_game.core.weapons import WeaponKind


@dataclass(frozen=True)
class TankView:
    name: str
    x: float
    y: float
    health: int
    max_health: int
    score: int
    angle: int
    power: int
    weapon_name: str
    moves_left: int
    width: float
    height: float
    barrel_tip: Tuple[float, float]

    @property
    def health_ratio(self) -> float:
        if self.max_health <= 0:
            return 0.0
        return self.health / self.max_health


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float
    dx: float
    dy: float
    weapon: WeaponKind
    weapon_name: str


@dataclass(frozen=True)
class ExplosionView:
    x: float
    y: float
    radius: float
    max_radius: float


@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    size: float
    fade: float


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a renderer needs for one frame."""

    world_width: float
    world_height: float
    terrain: Tuple[float, ...]
    tanks: Tuple[TankView, ...]
    projectiles: Tuple[ProjectileView, ...]
    explosions: Tuple[ExplosionView, ...]
    particles: Tuple[ParticleView, ...]
    wind: float
    phase: MatchPhase
    paused: bool
    frame: int
    current_player: int
    winner: Optional[int]
    message: str

    @property
    def current_tank(self) -> TankView:
        return self.tanks[self.current_player]


__all__ = [
    "ExplosionView",
    "GameSnapshot",
    "ParticleView",
    "ProjectileView",
    "TankView",
]
