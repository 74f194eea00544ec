"""Match session: turn order, phase transitions and command dispatch."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from artillery_game.core.commands import ALWAYS_ACCEPTED, Command, MatchPhase
from artillery_game.core.game import Detonation, Game
from artillery_game.core.snapshot import (
    ExplosionView,
    GameSnapshot,
    ParticleView,
    ProjectileView,
    TankView,
)
from artillery_game.core.tank import Tank
from artillery_game.core.weapons import weapon_properties

logger = logging.getLogger(__name__)


class GameSession:
    """Own the mutable state of an active match.

    The session is the single writer of the simulation: :meth:`tick` advances
    it by one frame and :meth:`handle` applies one input command.
    """

    def __init__(self, game: Optional[Game] = None, *, seed: Optional[int] = None) -> None:
        self.game = game or Game(seed=seed)
        self.current_player = 0
        self.phase = MatchPhase.AIMING
        self.paused = False
        self.frame_count = 0
        self.winner: Optional[int] = None
        self.message = f"{self.current_tank.name}'s turn"

    # ------------------------------------------------------------------
    # Properties
    @property
    def tanks(self) -> Sequence[Tank]:
        return self.game.tanks

    @property
    def current_tank(self) -> Tank:
        return self.game.tanks[self.current_player]

    @property
    def wind(self) -> float:
        return self.game.wind

    # ------------------------------------------------------------------
    # Commands
    def handle(self, command: Command) -> bool:
        """Apply ``command``; return ``False`` when it was ignored."""

        if command not in ALWAYS_ACCEPTED and self.phase is not MatchPhase.AIMING:
            return False

        tank = self.current_tank
        if command is Command.RESET:
            self.reset()
        elif command is Command.TOGGLE_PAUSE:
            self.paused = not self.paused
            self.message = "Paused" if self.paused else f"{tank.name}'s turn"
        elif command is Command.AIM_LEFT:
            tank.aim(-1)
        elif command is Command.AIM_RIGHT:
            tank.aim(1)
        elif command is Command.POWER_UP:
            tank.change_power(1)
        elif command is Command.POWER_DOWN:
            tank.change_power(-1)
        elif command is Command.NEXT_WEAPON:
            tank.cycle_weapon(1)
            self.message = f"{tank.name} selects {tank.weapon_name}"
        elif command is Command.PREV_WEAPON:
            tank.cycle_weapon(-1)
            self.message = f"{tank.name} selects {tank.weapon_name}"
        elif command is Command.MOVE_LEFT:
            return self.attempt_move(-1)
        elif command is Command.MOVE_RIGHT:
            return self.attempt_move(1)
        elif command is Command.FIRE:
            return self.fire()
        return True

    def attempt_move(self, direction: int) -> bool:
        tank = self.current_tank
        if tank.move(self.game.terrain, direction, self.game.physics.move_step):
            self.message = f"{tank.name} moved, {tank.moves_left} moves left"
            return True
        self.message = f"{tank.name} has no moves left"
        return False

    def fire(self) -> bool:
        if self.phase is not MatchPhase.AIMING:
            return False
        tank = self.current_tank
        if self.game.fire(tank) is None:
            return False
        self.phase = MatchPhase.FIRING
        self.message = f"{tank.name} fires {tank.weapon_name}!"
        return True

    def reset(self) -> None:
        """Start a new match on fresh terrain; scores carry over."""

        self.game.reset()
        self.current_player = 0
        self.phase = MatchPhase.AIMING
        self.paused = False
        self.frame_count = 0
        self.winner = None
        self.message = f"{self.current_tank.name}'s turn"
        logger.info(
            "Match reset; scores %d-%d", self.tanks[0].score, self.tanks[1].score
        )

    # ------------------------------------------------------------------
    # Simulation
    def tick(self) -> None:
        """Advance the simulation by one frame unless paused."""

        if self.paused:
            return
        self.frame_count += 1
        detonations = self.game.update_projectiles()
        if detonations:
            self._record_detonations(detonations)
        self.game.update_explosions()
        self.game.update_particles()
        self.check_round_end()
        self.game.settle_tanks()

    def _record_detonations(self, detonations: Sequence[Detonation]) -> None:
        if self.phase in (MatchPhase.FIRING, MatchPhase.EXPLOSION):
            self.phase = MatchPhase.EXPLOSION
        for detonation in detonations:
            for index, amount in detonation.hits:
                logger.info(
                    "%s hits %s for %d (health %d)",
                    detonation.weapon_name,
                    self.tanks[index].name,
                    amount,
                    self.tanks[index].health,
                )
        last = detonations[-1]
        if last.hits:
            hit_names = ", ".join(self.tanks[index].name for index, _ in last.hits)
            self.message = f"{last.weapon_name} hits {hit_names}!"
        else:
            self.message = f"{last.weapon_name} impacted the terrain."

    def check_round_end(self) -> None:
        if self.phase not in (MatchPhase.FIRING, MatchPhase.EXPLOSION):
            return
        if self.game.shots_in_flight or self.game.explosions_resolving:
            return
        first, second = self.tanks
        if first.health <= 0 or second.health <= 0:
            # player one's death is checked first, so a double kill goes to player two
            self.winner = 1 if first.health <= 0 else 0
            self.tanks[self.winner].score += 1
            self.phase = MatchPhase.GAME_OVER
            loser = self.tanks[1 - self.winner]
            self.message = f"{self.tanks[self.winner].name} wins! {loser.name} is destroyed."
            logger.info(
                "%s wins; scores %d-%d",
                self.tanks[self.winner].name,
                first.score,
                second.score,
            )
            return
        self.phase = MatchPhase.SWITCHING_PLAYER
        self.advance_turn()

    def advance_turn(self) -> None:
        self.current_player = 1 - self.current_player
        tank = self.current_tank
        tank.moves_left = self.game.physics.moves_per_turn
        self.game.redraw_wind()
        self.phase = MatchPhase.AIMING
        self.message = f"{tank.name}'s turn"
        logger.info("Turn passes to %s (wind %.3f)", tank.name, self.game.wind)

    # ------------------------------------------------------------------
    # Rendering boundary
    def snapshot(self) -> GameSnapshot:
        game = self.game
        return GameSnapshot(
            world_width=game.terrain.width,
            world_height=game.terrain.height,
            terrain=tuple(game.terrain.samples()),
            tanks=tuple(
                TankView(
                    name=tank.name,
                    x=tank.x,
                    y=tank.y,
                    health=tank.health,
                    max_health=tank.max_health,
                    score=tank.score,
                    angle=tank.angle,
                    power=tank.power,
                    weapon_name=tank.weapon_name,
                    moves_left=tank.moves_left,
                    width=tank.width,
                    height=tank.height,
                    barrel_tip=tank.barrel_tip(game.physics.barrel_length),
                )
                for tank in game.tanks
            ),
            projectiles=tuple(
                ProjectileView(p.x, p.y, p.dx, p.dy, p.weapon, weapon_properties(p.weapon).name)
                for _, p in game.projectiles.iter_active()
            ),
            explosions=tuple(
                ExplosionView(e.x, e.y, e.radius, e.max_radius)
                for _, e in game.explosions.iter_active()
            ),
            particles=tuple(
                ParticleView(p.x, p.y, p.size, p.fade)
                for _, p in game.particles.iter_active()
            ),
            wind=game.wind,
            phase=self.phase,
            paused=self.paused,
            frame=self.frame_count,
            current_player=self.current_player,
            winner=self.winner,
            message=self.message,
        )


__all__ = ["GameSession"]
