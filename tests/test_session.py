import pytest

from artillery_game.core.commands import Command, MatchPhase
from artillery_game.core.session import GameSession
from artillery_game.core.weapons import WeaponKind


def _run_until_aiming(session: GameSession, limit: int = 5000) -> int:
    for ticks in range(1, limit + 1):
        session.tick()
        if session.phase is not MatchPhase.FIRING and session.phase is not MatchPhase.EXPLOSION:
            return ticks
    raise AssertionError("round did not resolve")


def test_new_session_starts_aiming(session):
    assert session.phase is MatchPhase.AIMING
    assert session.current_player == 0
    assert [tank.health for tank in session.tanks] == [100, 100]
    assert [tank.moves_left for tank in session.tanks] == [3, 3]
    assert 0.02 <= abs(session.wind) <= 0.05


def test_aim_left_from_zero_wraps(session):
    session.current_tank.angle = 0
    assert session.handle(Command.AIM_LEFT)
    assert session.current_tank.angle == 359


def test_aiming_commands_mutate_current_tank(session):
    tank = session.current_tank
    session.handle(Command.AIM_RIGHT)
    session.handle(Command.POWER_UP)
    session.handle(Command.NEXT_WEAPON)
    assert (tank.angle, tank.power, tank.weapon_name) == (46, 51, "Big Missile")
    session.handle(Command.PREV_WEAPON)
    session.handle(Command.PREV_WEAPON)
    assert tank.weapon_name == "Nuke"
    session.handle(Command.POWER_DOWN)
    assert tank.power == 50


def test_moves_are_limited_per_turn(session):
    tank = session.current_tank
    start = tank.x
    for _ in range(3):
        assert session.handle(Command.MOVE_RIGHT)
    assert session.handle(Command.MOVE_RIGHT) is False
    assert tank.x == pytest.approx(start + 66.0)
    assert tank.moves_left == 0
    assert tank.y == session.game.terrain.height_at(int(tank.x)) - tank.height / 2


def test_fire_moves_to_firing(session):
    assert session.handle(Command.FIRE)
    assert session.phase is MatchPhase.FIRING
    assert session.game.projectiles.active_count == 1


def test_fire_without_free_slot_stays_aiming(session):
    pool = session.game.projectiles
    for _ in range(pool.capacity):
        pool.acquire()
    assert session.handle(Command.FIRE) is False
    assert session.phase is MatchPhase.AIMING


def test_commands_ignored_outside_aiming(session):
    session.handle(Command.FIRE)
    tank = session.current_tank
    angle = tank.angle
    assert session.handle(Command.AIM_LEFT) is False
    assert session.handle(Command.FIRE) is False
    assert tank.angle == angle
    assert session.handle(Command.TOGGLE_PAUSE) is True
    assert session.paused


def test_round_resolves_to_next_player(session):
    session.handle(Command.MOVE_LEFT)
    session.handle(Command.FIRE)
    _run_until_aiming(session)

    assert session.phase is MatchPhase.AIMING
    assert session.current_player == 1
    assert session.current_tank.moves_left == 3
    assert not session.game.projectiles.any_active
    assert not session.game.explosions.any_active
    assert 0.02 <= abs(session.wind) <= 0.05


def test_wind_redraw_never_drops_below_minimum(session):
    for _ in range(200):
        session.phase = MatchPhase.FIRING
        session.tick()
        assert session.phase is MatchPhase.AIMING
        assert abs(session.wind) >= 0.02


def test_pause_freezes_ticks(session):
    session.handle(Command.FIRE)
    session.handle(Command.TOGGLE_PAUSE)
    projectile = next(p for _, p in session.game.projectiles.iter_active())
    position = (projectile.x, projectile.y)

    for _ in range(20):
        session.tick()

    assert (projectile.x, projectile.y) == position
    assert session.frame_count == 0
    assert session.phase is MatchPhase.FIRING

    session.handle(Command.TOGGLE_PAUSE)
    session.tick()
    assert session.frame_count == 1
    assert (projectile.x, projectile.y) != position


def test_aiming_still_applies_while_paused(session):
    session.handle(Command.TOGGLE_PAUSE)
    assert session.handle(Command.AIM_RIGHT)
    assert session.current_tank.angle == 46


def test_kill_ends_match_and_scores_survivor(session):
    session.phase = MatchPhase.EXPLOSION
    session.tanks[1].health = 0
    session.tick()

    assert session.phase is MatchPhase.GAME_OVER
    assert session.winner == 0
    assert [tank.score for tank in session.tanks] == [1, 0]
    assert session.handle(Command.FIRE) is False


def test_double_kill_awards_player_two(session):
    session.phase = MatchPhase.EXPLOSION
    for tank in session.tanks:
        tank.health = 0
    session.tick()

    assert session.phase is MatchPhase.GAME_OVER
    assert session.winner == 1
    assert [tank.score for tank in session.tanks] == [0, 1]


def test_round_end_waits_for_explosions(flat_game):
    session = GameSession(flat_game)
    session.phase = MatchPhase.EXPLOSION
    flat_game.create_explosion(960.0, 800.0, 20.0, 25, 10)
    for _ in range(9):
        session.tick()
        assert session.phase is MatchPhase.EXPLOSION
    session.tick()
    assert session.phase is MatchPhase.AIMING
    assert session.current_player == 1


def test_reset_after_game_over_keeps_scores(session):
    session.tanks[0].score = 4
    session.tanks[1].score = 2
    session.phase = MatchPhase.EXPLOSION
    session.tanks[0].health = 0
    session.tick()
    assert session.phase is MatchPhase.GAME_OVER
    old_terrain = list(session.game.terrain.heights)

    assert session.handle(Command.RESET)

    assert session.phase is MatchPhase.AIMING
    assert session.current_player == 0
    assert [tank.health for tank in session.tanks] == [100, 100]
    assert [tank.score for tank in session.tanks] == [4, 3]
    assert [tank.moves_left for tank in session.tanks] == [3, 3]
    assert session.tanks[0].weapon_name == "Small Missile"
    assert session.game.terrain.heights != old_terrain
    assert not session.game.particles.any_active
    assert session.frame_count == 0
    assert session.winner is None


def test_snapshot_reflects_state(session):
    session.handle(Command.FIRE)
    session.tick()
    snapshot = session.snapshot()

    assert snapshot.phase is session.phase
    assert snapshot.frame == 1
    assert len(snapshot.terrain) == 800
    assert len(snapshot.projectiles) == session.game.projectiles.active_count
    assert snapshot.current_tank.name == "Player 1"
    assert snapshot.tanks[0].health_ratio == 1.0
    with pytest.raises(AttributeError):
        snapshot.wind = 1.0  # type: ignore[misc]


def test_snapshot_carries_status_message_and_barrel_tip(session):
    session.handle(Command.NEXT_WEAPON)
    snapshot = session.snapshot()
    tank = session.current_tank

    assert snapshot.message == "Player 1 selects Big Missile"
    assert snapshot.current_tank.barrel_tip == tank.barrel_tip(session.game.physics.barrel_length)

    session.handle(Command.FIRE)
    snapshot = session.snapshot()
    assert snapshot.message == "Player 1 fires Big Missile!"
    assert [view.weapon for view in snapshot.projectiles] == [WeaponKind.BIG_MISSILE]
    assert snapshot.projectiles[0].weapon_name == "Big Missile"


def test_status_message_follows_the_match(session):
    for _ in range(3):
        session.handle(Command.MOVE_LEFT)
    session.handle(Command.MOVE_LEFT)
    assert session.snapshot().message == "Player 1 has no moves left"

    session.phase = MatchPhase.EXPLOSION
    session.tanks[1].health = 0
    session.tick()
    assert session.snapshot().message == "Player 1 wins! Player 2 is destroyed."
