import math

import pytest

from artillery_game.core.explosions import damage_falloff
from artillery_game.core.weapons import WeaponKind


@pytest.mark.parametrize(
    "damage, radius, distance, expected",
    [
        (25, 20.0, 0.0, 38),
        (25, 20.0, 30.0, 11),
        (40, 40.0, 30.0, 30),
        (75, 80.0, 0.0, 113),
        (25, 20.0, 30.5, 0),
    ],
)
def test_damage_falloff(damage, radius, distance, expected):
    assert damage_falloff(distance, radius, damage) == expected


def test_damage_at_edge_of_reach_is_the_floor():
    reach = 20.0 * 1.5
    assert damage_falloff(reach, 20.0, 25) == int(math.floor(25 * 0.3 * 1.5 + 0.5))


def test_explosion_damages_tanks_in_reach(flat_game):
    shooter, target = flat_game.tanks
    hits = flat_game.create_explosion(target.x, target.y, 20.0, 25, 10)

    assert hits == [(1, 38)]
    assert target.health == 62
    assert shooter.health == 100


def test_explosion_health_clamps_at_zero(flat_game):
    target = flat_game.tanks[1]
    target.health = 20
    flat_game.create_explosion(target.x, target.y, 80.0, 75, 70)
    assert target.health == 0


def test_explosion_spawns_particles_and_deforms_terrain(flat_game):
    x = 960.0
    before = flat_game.terrain.height_at(x)
    flat_game.create_explosion(x, before, 20.0, 25, 10)

    assert flat_game.explosions.active_count == 1
    assert flat_game.particles.active_count == 30
    assert flat_game.terrain.height_at(x) > before


def test_explosion_grows_to_full_size_in_ten_ticks(flat_game):
    flat_game.create_explosion(960.0, 800.0, 20.0, 25, 10)
    explosion = flat_game.explosions[0]
    assert explosion.radius == 0.0
    for _ in range(9):
        flat_game.update_explosions()
        assert explosion.active
    flat_game.update_explosions()
    assert not explosion.active
    assert explosion.radius == 20.0


def test_full_explosion_pool_drops_the_whole_blast(flat_game):
    for _ in range(flat_game.explosions.capacity):
        flat_game.explosions.acquire()
    target = flat_game.tanks[1]
    terrain_before = list(flat_game.terrain.heights)

    hits = flat_game.create_explosion(target.x, target.y, 20.0, 25, 10)

    assert hits == []
    assert target.health == 100
    assert flat_game.terrain.heights == terrain_before
    assert flat_game.explosions.dropped == 1
    assert not flat_game.particles.any_active


def test_full_particle_pool_still_resolves_the_blast(flat_game):
    for _ in range(flat_game.particles.capacity):
        flat_game.particles.acquire()
    target = flat_game.tanks[1]

    flat_game.create_explosion(target.x, target.y, 20.0, 25, 10)

    assert target.health == 62
    assert flat_game.explosions.active_count == 1
    assert flat_game.particles.dropped == 30


def test_cluster_bombs_are_small_missiles_without_children(flat_game):
    spawned = flat_game.spawn_cluster_bombs(960.0, 700.0)
    assert spawned == 5
    bombs = [projectile for _, projectile in flat_game.projectiles.iter_active()]
    assert len(bombs) == 5
    for bomb in bombs:
        assert bomb.weapon is WeaponKind.SMALL_MISSILE
        assert bomb.sub_projectiles == 0
        assert abs(bomb.x - 960.0) <= 5
        assert abs(bomb.y - 700.0) <= 5
        assert 3 - 1e-9 <= math.hypot(bomb.dx, bomb.dy) <= 7 + 1e-9


def test_cluster_spawn_respects_projectile_capacity(flat_game):
    for _ in range(flat_game.projectiles.capacity - 2):
        flat_game.projectiles.acquire()
    assert flat_game.spawn_cluster_bombs(960.0, 700.0) == 2
    assert flat_game.projectiles.exhausted
