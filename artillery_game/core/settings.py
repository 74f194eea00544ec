"""Tuning constants for the simulation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicsSettings:
    """Physics, damage and pool sizing used by :class:`Game`."""

    gravity: float = 0.1
    wind_coupling: float = 0.25
    particle_gravity_scale: float = 0.1
    drill_distance: float = 100.0
    drill_drag: float = 0.8
    particle_bounce: float = -0.5
    particle_friction: float = 0.8

    tank_width: float = 20.0
    tank_height: float = 10.0
    barrel_length: float = 20.0
    max_power: int = 100
    move_step: float = 22.0
    moves_per_turn: int = 3
    max_health: int = 100

    projectile_capacity: int = 20
    explosion_capacity: int = 10
    particle_capacity: int = 200
    particles_per_explosion: int = 30
    cluster_count: int = 5

    explosion_growth_ticks: int = 10
    damage_reach: float = 1.5
    damage_floor: float = 0.3
    damage_multiplier: float = 1.5


__all__ = ["PhysicsSettings"]
