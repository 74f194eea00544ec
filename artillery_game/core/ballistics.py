"""Per-tick integration of projectiles and particles against the terrain."""

from __future__ import annotations

import math
from enum import Enum

from artillery_game.core.entities import Particle, Projectile
from artillery_game.core.settings import PhysicsSettings
from artillery_game.core.terrain import Terrain
from artillery_game.core.weapons import WeaponProperty


class ProjectileOutcome(Enum):
    FLYING = "flying"
    DRILLING = "drilling"
    DETONATED = "detonated"
    LOST = "lost"


def launch_velocity(angle: int, power: int, settings: PhysicsSettings) -> tuple[float, float]:
    """Initial velocity for a shot fired at ``angle`` degrees with ``power``."""

    radians = math.radians(angle)
    factor = power / settings.max_power * 10.0
    return math.cos(radians) * factor, -math.sin(radians) * factor


def integrate_projectile(projectile: Projectile, wind: float, settings: PhysicsSettings) -> None:
    projectile.dx += wind * settings.wind_coupling
    projectile.dy += settings.gravity
    projectile.x += projectile.dx
    projectile.y += projectile.dy
    projectile.travel_distance += math.hypot(projectile.dx, projectile.dy)


def advance_projectile(
    projectile: Projectile,
    weapon: WeaponProperty,
    terrain: Terrain,
    wind: float,
    settings: PhysicsSettings,
) -> ProjectileOutcome:
    """Move ``projectile`` one tick and report what happened to it.

    The projectile is left active; the caller releases it for ``DETONATED``
    and ``LOST`` outcomes.
    """

    integrate_projectile(projectile, wind, settings)
    if projectile.y >= terrain.height_at(projectile.x):
        if weapon.drills and projectile.travel_distance < settings.drill_distance:
            projectile.dx *= settings.drill_drag
            projectile.dy *= settings.drill_drag
        else:
            return ProjectileOutcome.DETONATED
    if not terrain.is_inside(projectile.x, projectile.y):
        return ProjectileOutcome.LOST
    if projectile.y >= terrain.height_at(projectile.x):
        return ProjectileOutcome.DRILLING
    return ProjectileOutcome.FLYING


def advance_particle(particle: Particle, terrain: Terrain, settings: PhysicsSettings) -> bool:
    """Move ``particle`` one tick; return ``False`` once it should be released."""

    particle.dy += settings.gravity * settings.particle_gravity_scale
    particle.x += particle.dx
    particle.y += particle.dy
    ground = terrain.height_at(int(particle.x))
    if particle.y >= ground:
        particle.dy *= settings.particle_bounce
        particle.dx *= settings.particle_friction
        particle.y = ground - 1
    particle.lifetime -= 1
    if particle.lifetime <= 0:
        return False
    return terrain.is_inside(particle.x, particle.y)


__all__ = [
    "ProjectileOutcome",
    "advance_particle",
    "advance_projectile",
    "integrate_projectile",
    "launch_velocity",
]
