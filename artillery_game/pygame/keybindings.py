"""Keybinding management for the pygame client."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, List, Optional

import pygame

from artillery_game.core.commands import Command


@dataclass
class KeyBindings:
    aim_left: int = pygame.K_LEFT
    aim_right: int = pygame.K_RIGHT
    power_up: int = pygame.K_UP
    power_down: int = pygame.K_DOWN
    next_weapon: int = pygame.K_w
    prev_weapon: int = pygame.K_s
    fire: int = pygame.K_SPACE
    move_left: int = pygame.K_a
    move_right: int = pygame.K_d
    toggle_pause: int = pygame.K_p
    reset: int = pygame.K_r


class KeybindingManager:
    """Translate key codes into commands; bindings are shared by both players."""

    def __init__(self) -> None:
        self.bindings = KeyBindings()
        self._lookup: Dict[int, Command] = {}
        self._rebuild()

    def _rebuild(self) -> None:
        self._lookup = {
            int(getattr(self.bindings, item.name)): Command(item.name)
            for item in fields(KeyBindings)
        }

    def command_for_key(self, key: int) -> Optional[Command]:
        return self._lookup.get(key)

    def bind(self, command: Command, key: int) -> None:
        setattr(self.bindings, command.value, int(key))
        self._rebuild()

    # ------------------------------------------------------------------
    def to_config(self) -> Dict[str, int]:
        """Return a serialisable snapshot of the current bindings."""
        return {item.name: int(getattr(self.bindings, item.name)) for item in fields(KeyBindings)}

    def load_from_config(self, data: Dict[str, object]) -> None:
        """Restore bindings from a persisted configuration."""
        if not isinstance(data, dict):
            return
        defaults = KeyBindings()
        values = {}
        for item in fields(KeyBindings):
            raw = data.get(item.name, getattr(defaults, item.name))
            try:
                values[item.name] = int(raw)  # type: ignore[arg-type]
            except (TypeError, ValueError):
                values[item.name] = getattr(defaults, item.name)
        self.bindings = KeyBindings(**values)
        self._rebuild()

    def help_lines(self) -> List[str]:
        """One ``KEY: action`` line per binding, shown on the pause screen."""
        return [
            f"{pygame.key.name(getattr(self.bindings, item.name)).upper()}: "
            f"{item.name.replace('_', ' ')}"
            for item in fields(KeyBindings)
        ]


__all__ = ["KeyBindings", "KeybindingManager"]
