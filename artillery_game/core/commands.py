"""Abstract input commands and match phases."""

from __future__ import annotations

from enum import Enum


class Command(Enum):
    AIM_LEFT = "aim_left"
    AIM_RIGHT = "aim_right"
    POWER_UP = "power_up"
    POWER_DOWN = "power_down"
    NEXT_WEAPON = "next_weapon"
    PREV_WEAPON = "prev_weapon"
    FIRE = "fire"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_PAUSE = "toggle_pause"
    RESET = "reset"


# Accepted in every phase; everything else only while aiming.
ALWAYS_ACCEPTED = frozenset({Command.TOGGLE_PAUSE, Command.RESET})


class MatchPhase(Enum):
    AIMING = "aiming"
    FIRING = "firing"
    EXPLOSION = "explosion"
    SWITCHING_PLAYER = "switching_player"
    GAME_OVER = "game_over"


__all__ = ["ALWAYS_ACCEPTED", "Command", "MatchPhase"]
