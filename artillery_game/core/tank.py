"""Tank entity definitions and actions."""

from __future__ import annotations

import math
from dataclasses import dataclass

from artillery_game.core.terrain import Terrain
from artillery_game.core.weapons import DEFAULT_WEAPON, WeaponKind, weapon_properties


@dataclass
class Tank:
    """A player-controlled tank."""

    name: str
    x: float
    y: float = 0.0
    health: int = 100
    score: int = 0
    angle: int = 45
    power: int = 50
    weapon: WeaponKind = DEFAULT_WEAPON
    moves_left: int = 3
    max_health: int = 100
    min_power: int = 1
    max_power: int = 100
    width: float = 20.0
    height: float = 10.0

    def aim(self, amount: int) -> None:
        self.angle = (self.angle + amount) % 360

    def change_power(self, amount: int) -> None:
        self.power = max(self.min_power, min(self.max_power, self.power + amount))

    def cycle_weapon(self, step: int) -> None:
        self.weapon = self.weapon.cycle(step)

    @property
    def weapon_name(self) -> str:
        return weapon_properties(self.weapon).name

    def settle(self, terrain: Terrain) -> None:
        """Re-seat the tank on the ground below its hull."""

        self.y = terrain.height_at(int(self.x)) - self.height / 2

    def move(self, terrain: Terrain, direction: int, distance: float) -> bool:
        if self.moves_left <= 0:
            return False
        margin = self.width / 2
        target_x = self.x + direction * distance
        self.x = max(margin, min(terrain.width - margin, target_x))
        self.settle(terrain)
        self.moves_left -= 1
        return True

    def barrel_tip(self, length: float) -> tuple[float, float]:
        radians = math.radians(self.angle)
        return (
            self.x + math.cos(radians) * length,
            self.y - math.sin(radians) * length,
        )

    def take_damage(self, amount: int) -> None:
        self.health = max(0, self.health - amount)

    @property
    def alive(self) -> bool:
        return self.health > 0


__all__ = ["Tank"]
