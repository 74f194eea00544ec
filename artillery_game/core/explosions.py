"""Explosion spawning, damage falloff and secondary effects."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, List, Optional, Tuple

from artillery_game.core.settings import PhysicsSettings
from artillery_game.core.weapons import WeaponKind

if TYPE_CHECKING:
    from artillery_game.core.game import Game

logger = logging.getLogger(__name__)


def damage_falloff(
    distance: float,
    max_radius: float,
    damage: int,
    settings: Optional[PhysicsSettings] = None,
) -> int:
    """Damage dealt to a tank ``distance`` away from a blast.

    The blast reaches ``damage_reach`` times its visual radius. Inside that
    reach damage falls off linearly to ``damage_floor`` and is then scaled by
    ``damage_multiplier``, rounding halves up.
    """

    settings = settings or PhysicsSettings()
    reach = max_radius * settings.damage_reach
    if reach <= 0 or distance > reach:
        return 0
    factor = max(1.0 - distance / reach, settings.damage_floor)
    return int(math.floor(damage * factor * settings.damage_multiplier + 0.5))


class ExplosionResolver:
    """Apply the consequences of a detonation to a :class:`Game`."""

    def __init__(self, game: "Game") -> None:
        self.game = game

    @property
    def settings(self) -> PhysicsSettings:
        return self.game.physics

    def create_explosion(
        self,
        x: float,
        y: float,
        max_radius: float,
        damage: int,
        deformation: float,
    ) -> List[Tuple[int, int]]:
        """Start a blast at ``(x, y)`` and return ``(tank index, damage)`` pairs.

        Without a free explosion slot the whole blast is dropped: no particles,
        no damage and no crater.
        """

        game = self.game
        handle = game.explosions.acquire()
        if handle is None:
            return []
        explosion = game.explosions[handle]
        explosion.x = x
        explosion.y = y
        explosion.radius = 0.0
        explosion.max_radius = max_radius
        explosion.growth_rate = max_radius / self.settings.explosion_growth_ticks
        explosion.damage = damage
        explosion.terrain_deformation = deformation

        self.create_particles(x, y, self.settings.particles_per_explosion, max_radius)
        hits = self.apply_damage(x, y, max_radius, damage)
        game.terrain.deform(x, max_radius, deformation)
        game.settle_tanks()
        logger.debug(
            "Explosion at (%.1f, %.1f) r=%.1f dmg=%d hits=%s", x, y, max_radius, damage, hits
        )
        return hits

    def apply_damage(self, x: float, y: float, max_radius: float, damage: int) -> List[Tuple[int, int]]:
        hits: List[Tuple[int, int]] = []
        for index, tank in enumerate(self.game.tanks):
            distance = math.hypot(tank.x - x, tank.y - y)
            amount = damage_falloff(distance, max_radius, damage, self.settings)
            if amount <= 0:
                continue
            tank.take_damage(amount)
            hits.append((index, amount))
        return hits

    def create_particles(self, x: float, y: float, count: int, power: float) -> int:
        """Spawn up to ``count`` particles flying out of ``(x, y)``."""

        game = self.game
        rng = game.rng
        spread = max(int(power * 0.5), 1)
        spawned = 0
        for _ in range(count):
            handle = game.particles.acquire()
            if handle is None:
                continue
            particle = game.particles[handle]
            angle = math.radians(rng.randrange(360))
            speed = rng.randrange(spread) + power * 0.2
            particle.x = x
            particle.y = y
            particle.dx = math.cos(angle) * speed
            particle.dy = math.sin(angle) * speed
            particle.lifetime = float(rng.randint(20, 49))
            particle.max_lifetime = particle.lifetime
            particle.size = float(rng.randint(2, 4))
            spawned += 1
        return spawned

    def spawn_cluster_bombs(self, x: float, y: float) -> int:
        """Scatter small missiles from ``(x, y)``; they never split again."""

        game = self.game
        rng = game.rng
        spawned = 0
        for _ in range(self.settings.cluster_count):
            handle = game.projectiles.acquire()
            if handle is None:
                continue
            projectile = game.projectiles[handle]
            angle = math.radians(rng.randrange(360))
            power = rng.randint(3, 7)
            projectile.weapon = WeaponKind.SMALL_MISSILE
            projectile.x = x + rng.randint(-5, 5)
            projectile.y = y + rng.randint(-5, 5)
            projectile.dx = math.cos(angle) * power
            projectile.dy = -math.sin(angle) * power
            projectile.travel_distance = 0.0
            projectile.sub_projectiles = 0
            spawned += 1
        return spawned


__all__ = ["ExplosionResolver", "damage_falloff"]
