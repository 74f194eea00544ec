"""Fixed weapon catalog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class WeaponKind(IntEnum):
    SMALL_MISSILE = 0
    BIG_MISSILE = 1
    DRILL = 2
    CLUSTER = 3
    NUKE = 4

    def cycle(self, step: int) -> "WeaponKind":
        """Return the weapon ``step`` places away, wrapping around the catalog."""

        return WeaponKind((int(self) + step) % len(WeaponKind))


@dataclass(frozen=True)
class WeaponProperty:
    """Static description of a weapon."""

    name: str
    damage: int
    explosion_radius: float
    terrain_deformation: int
    sub_projectiles: int = 0
    drill_capability: float = 0.0

    def __post_init__(self) -> None:
        if self.explosion_radius <= 0:
            raise ValueError(f"{self.name}: explosion radius must be positive")
        if self.sub_projectiles < 0:
            raise ValueError(f"{self.name}: sub-projectile count cannot be negative")

    @property
    def drills(self) -> bool:
        return self.drill_capability > 0


WEAPON_CATALOG: Mapping[WeaponKind, WeaponProperty] = MappingProxyType(
    {
        WeaponKind.SMALL_MISSILE: WeaponProperty("Small Missile", 25, 20.0, 10),
        WeaponKind.BIG_MISSILE: WeaponProperty("Big Missile", 40, 40.0, 25),
        WeaponKind.DRILL: WeaponProperty("Drill", 35, 15.0, 30, drill_capability=1.0),
        WeaponKind.CLUSTER: WeaponProperty("Cluster Bomb", 15, 10.0, 5, sub_projectiles=5),
        WeaponKind.NUKE: WeaponProperty("Nuke", 75, 80.0, 70),
    }
)

DEFAULT_WEAPON = WeaponKind.SMALL_MISSILE


def weapon_properties(kind: WeaponKind) -> WeaponProperty:
    return WEAPON_CATALOG[kind]


__all__ = [
    "DEFAULT_WEAPON",
    "WEAPON_CATALOG",
    "WeaponKind",
    "WeaponProperty",
    "weapon_properties",
]
