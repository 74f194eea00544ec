"""Rendering helpers for the pygame front-end."""

from artillery_game.pygame.renderer.scene import (
    draw_background,
    draw_explosions,
    draw_hud,
    draw_overlay,
    draw_particles,
    draw_projectiles,
    draw_scene,
    draw_tanks,
    draw_terrain,
)

__all__ = [
    "draw_background",
    "draw_explosions",
    "draw_hud",
    "draw_overlay",
    "draw_particles",
    "draw_projectiles",
    "draw_scene",
    "draw_tanks",
    "draw_terrain",
]
