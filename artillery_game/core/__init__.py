"""Core simulation for the artillery duel, independent of rendering."""

from artillery_game.core.commands import Command, MatchPhase
from artillery_game.core.entities import EntityPool, Explosion, Particle, Projectile
from artillery_game.core.explosions import ExplosionResolver, damage_falloff
from artillery_game.core.game import Detonation, Game
from artillery_game.core.session import GameSession
from artillery_game.core.settings import PhysicsSettings
from artillery_game.core.snapshot import GameSnapshot
from artillery_game.core.tank import Tank
from artillery_game.core.terrain import Terrain, TerrainSettings
from artillery_game.core.weapons import WEAPON_CATALOG, WeaponKind, WeaponProperty
from artillery_game.core.wind import WindModel

__all__ = [
    "Command",
    "Detonation",
    "EntityPool",
    "Explosion",
    "ExplosionResolver",
    "Game",
    "GameSession",
    "GameSnapshot",
    "MatchPhase",
    "Particle",
    "PhysicsSettings",
    "Projectile",
    "Tank",
    "Terrain",
    "TerrainSettings",
    "WEAPON_CATALOG",
    "WeaponKind",
    "WeaponProperty",
    "WindModel",
    "damage_falloff",
]
