"""World aggregate: terrain, tanks, entity pools and the physics passes."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from artillery_game.core.ballistics import (
    ProjectileOutcome,
    advance_particle,
    advance_projectile,
    launch_velocity,
)
from artillery_game.core.entities import EntityPool, Explosion, Particle, Projectile
from artillery_game.core.explosions import ExplosionResolver
from artillery_game.core.settings import PhysicsSettings
from artillery_game.core.tank import Tank
from artillery_game.core.terrain import Terrain, TerrainSettings
from artillery_game.core.weapons import weapon_properties
from artillery_game.core.wind import WindModel

logger = logging.getLogger(__name__)


@dataclass
class Detonation:
    """A projectile that struck the ground during a projectile pass."""

    x: float
    y: float
    weapon_name: str
    hits: List[tuple[int, int]]


class Game:
    """Everything that exists on the battlefield for one match."""

    def __init__(
        self,
        player_one: str = "Player 1",
        player_two: str = "Player 2",
        settings: Optional[TerrainSettings] = None,
        seed: Optional[int] = None,
        physics: Optional[PhysicsSettings] = None,
        wind_model: Optional[WindModel] = None,
    ) -> None:
        self.player_names = (player_one, player_two)
        self.physics = physics or PhysicsSettings()
        self.wind_model = wind_model or WindModel()
        self.rng = random.Random(seed)
        terrain_settings = settings or TerrainSettings(seed=self._next_seed())
        self.terrain = Terrain(terrain_settings)

        self.projectiles: EntityPool[Projectile] = EntityPool(
            Projectile, self.physics.projectile_capacity, "projectiles"
        )
        self.explosions: EntityPool[Explosion] = EntityPool(
            Explosion, self.physics.explosion_capacity, "explosions"
        )
        self.particles: EntityPool[Particle] = EntityPool(
            Particle, self.physics.particle_capacity, "particles"
        )
        self.resolver = ExplosionResolver(self)

        self.tanks: List[Tank] = self._spawn_tanks()
        self.wind = self.wind_model.draw(self.rng)

    def _next_seed(self) -> int:
        return self.rng.randrange(2**32)

    def _spawn_tanks(self, scores: Sequence[int] = (0, 0)) -> List[Tank]:
        physics = self.physics
        width = self.terrain.width
        tanks = [
            Tank(self.player_names[0], x=width * 0.25, angle=45, score=scores[0]),
            Tank(self.player_names[1], x=width * 0.75, angle=135, score=scores[1]),
        ]
        for tank in tanks:
            tank.health = physics.max_health
            tank.max_health = physics.max_health
            tank.max_power = physics.max_power
            tank.moves_left = physics.moves_per_turn
            tank.width = physics.tank_width
            tank.height = physics.tank_height
            tank.settle(self.terrain)
        return tanks

    def reset(self) -> None:
        """Start a fresh match on new terrain, carrying the scores over."""

        scores = [tank.score for tank in self.tanks]
        self.terrain.generate(self._next_seed())
        self.projectiles.clear()
        self.explosions.clear()
        self.particles.clear()
        self.tanks = self._spawn_tanks(scores)
        self.redraw_wind()

    def redraw_wind(self) -> float:
        self.wind = self.wind_model.draw(self.rng)
        return self.wind

    # Actions -------------------------------------------------------------------
    def fire(self, shooter: Tank) -> Optional[int]:
        """Launch ``shooter``'s selected weapon; ``None`` if no slot is free."""

        handle = self.projectiles.acquire()
        if handle is None:
            return None
        projectile = self.projectiles[handle]
        projectile.weapon = shooter.weapon
        projectile.x, projectile.y = shooter.barrel_tip(self.physics.barrel_length)
        projectile.dx, projectile.dy = launch_velocity(shooter.angle, shooter.power, self.physics)
        projectile.travel_distance = 0.0
        projectile.sub_projectiles = weapon_properties(shooter.weapon).sub_projectiles
        logger.debug(
            "%s fires %s (angle=%d, power=%d)",
            shooter.name,
            shooter.weapon_name,
            shooter.angle,
            shooter.power,
        )
        return handle

    def create_explosion(
        self, x: float, y: float, max_radius: float, damage: int, deformation: float
    ) -> List[tuple[int, int]]:
        return self.resolver.create_explosion(x, y, max_radius, damage, deformation)

    def spawn_cluster_bombs(self, x: float, y: float) -> int:
        return self.resolver.spawn_cluster_bombs(x, y)

    # Simulation ----------------------------------------------------------------
    def update_projectiles(self) -> List[Detonation]:
        """Advance every projectile that was airborne when the pass began."""

        detonations: List[Detonation] = []
        for handle in self.projectiles.active_handles():
            projectile = self.projectiles[handle]
            weapon = weapon_properties(projectile.weapon)
            outcome = advance_projectile(
                projectile, weapon, self.terrain, self.wind, self.physics
            )
            if outcome is ProjectileOutcome.LOST:
                self.projectiles.release(handle)
            elif outcome is ProjectileOutcome.DETONATED:
                self.projectiles.release(handle)
                x, y = projectile.x, projectile.y
                hits = self.create_explosion(
                    x, y, weapon.explosion_radius, weapon.damage, weapon.terrain_deformation
                )
                if projectile.sub_projectiles > 0:
                    self.spawn_cluster_bombs(x, y)
                detonations.append(Detonation(x, y, weapon.name, hits))
        return detonations

    def update_explosions(self) -> None:
        for handle, explosion in self.explosions.iter_active():
            explosion.radius += explosion.growth_rate
            # tolerance keeps float accumulation from adding an extra tick
            if explosion.radius >= explosion.max_radius - 1e-9:
                explosion.radius = explosion.max_radius
                self.explosions.release(handle)

    def update_particles(self) -> None:
        for handle, particle in self.particles.iter_active():
            if not advance_particle(particle, self.terrain, self.physics):
                self.particles.release(handle)

    def settle_tanks(self) -> None:
        for tank in self.tanks:
            tank.settle(self.terrain)

    @property
    def shots_in_flight(self) -> bool:
        return self.projectiles.any_active

    @property
    def explosions_resolving(self) -> bool:
        return self.explosions.any_active


__all__ = ["Detonation", "Game"]
