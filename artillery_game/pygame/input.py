"""Input handling for the pygame client."""

from __future__ import annotations

import pygame


class InputHandler:
    """Translate pygame events into session commands."""

    def __init__(self, app) -> None:
        self.app = app

    # ------------------------------------------------------------------
    # Event entry point
    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.app.running = False
        elif event.type == pygame.KEYDOWN:
            self._handle_key(event.key)

    # ------------------------------------------------------------------
    # Internal helpers
    def _handle_key(self, key: int) -> None:
        app = self.app
        if key == pygame.K_ESCAPE:
            app.running = False
            return
        command = app.keybindings.command_for_key(key)
        if command is None:
            return
        app.session.handle(command)


__all__ = ["InputHandler"]
