"""Pygame-powered presentation layer for the artillery duel."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical version of the game."
    ) from exc

from artillery_game.core.game import Game
from artillery_game.core.session import GameSession
from artillery_game.core.terrain import TerrainSettings
from artillery_game.pygame.config import load_user_settings, save_user_settings
from artillery_game.pygame.input import InputHandler
from artillery_game.pygame.keybindings import KeybindingManager
from artillery_game.pygame.renderer import draw_scene

logger = logging.getLogger(__name__)


class PygameArtillery:
    """Graphical client built on top of the core simulation."""

    def __init__(
        self,
        player_one: str = "Player 1",
        player_two: str = "Player 2",
        terrain_settings: Optional[TerrainSettings] = None,
        seed: Optional[int] = None,
        window_size: Optional[Tuple[int, int]] = None,
        fps: int = 60,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.fps = fps
        self.running = True
        self.session = GameSession(Game(player_one, player_two, terrain_settings, seed=seed))

        self._user_settings = load_user_settings()
        self.keybindings = KeybindingManager()
        stored_keybindings = self._user_settings.get("keybindings")
        if isinstance(stored_keybindings, dict):
            self.keybindings.load_from_config(stored_keybindings)

        stored_size = self._user_settings.get("window_size")
        if window_size is None and isinstance(stored_size, list) and len(stored_size) == 2:
            window_size = (int(stored_size[0]), int(stored_size[1]))
        self.window_size = window_size or (1280, 720)

        terrain = self.session.game.terrain
        self.screen = pygame.display.set_mode(self.window_size)
        self.world_surface = pygame.Surface((int(terrain.width), int(terrain.height)), 0, 32)
        pygame.display.set_caption("Artillery Duel")

        self.font = pygame.font.SysFont(None, 32)
        self.font_large = pygame.font.SysFont(None, 72)
        self.clock = pygame.time.Clock()
        self.input = InputHandler(self)
        self._save_user_settings()
        logger.info("Client started at %dx%d", *self.window_size)

    def _save_user_settings(self) -> None:
        data = {
            "keybindings": self.keybindings.to_config(),
            "window_size": list(self.window_size),
        }
        save_user_settings(data)
        self._user_settings = data

    # ------------------------------------------------------------------
    def run(self) -> None:
        """Main pygame loop: one simulation tick per rendered frame."""

        while self.running:
            self.clock.tick(self.fps)
            self._handle_events()
            self.session.tick()
            self._draw()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            self.input.process_event(event)

    def _draw(self) -> None:
        draw_scene(
            self.world_surface,
            self.session.snapshot(),
            self.font,
            self.font_large,
            self.keybindings.help_lines(),
        )
        scaled = pygame.transform.smoothscale(self.world_surface, self.window_size)
        self.screen.blit(scaled, (0, 0))
        pygame.display.flip()


def run_pygame(**kwargs: object) -> None:
    """Convenience helper for launching the pygame client."""

    app = PygameArtillery(**kwargs)  # type: ignore[arg-type]
    app.run()


__all__ = ["PygameArtillery", "run_pygame"]
