"""Rendering helpers for the pygame client.

Every function here reads a :class:`GameSnapshot` and draws onto a surface
laid out in world coordinates; nothing writes back into the simulation.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import pygame

from artillery_game.core.commands import MatchPhase
from artillery_game.core.snapshot import GameSnapshot, ProjectileView, TankView
from artillery_game.core.weapons import WeaponKind

SKY_TOP = pygame.Color(40, 90, 160)
SKY_BOTTOM = pygame.Color(150, 200, 235)
GROUND_TOP = pygame.Color(60, 130, 40)
GROUND_BOTTOM = pygame.Color(30, 90, 25)
TANK_COLORS = (pygame.Color(210, 60, 50), pygame.Color(60, 110, 220))
PROJECTILE_STYLES = {
    WeaponKind.SMALL_MISSILE: (pygame.Color(255, 230, 50), 3),
    WeaponKind.BIG_MISSILE: (pygame.Color(255, 128, 0), 5),
    WeaponKind.CLUSTER: (pygame.Color(255, 76, 255), 4),
}
DRILL_COLOR = pygame.Color(180, 180, 230)
NUKE_BLINK = (pygame.Color(204, 0, 0), pygame.Color(255, 255, 0))
TEXT_COLOR = pygame.Color(245, 245, 245)


def _blend_color(color: pygame.Color, other: pygame.Color, ratio: float) -> pygame.Color:
    clamped = max(0.0, min(1.0, ratio))
    inv = 1.0 - clamped
    return pygame.Color(
        int(color.r * inv + other.r * clamped),
        int(color.g * inv + other.g * clamped),
        int(color.b * inv + other.b * clamped),
    )


def draw_background(surface: pygame.Surface) -> None:
    height = surface.get_height()
    width = surface.get_width()
    for y in range(0, height, 4):
        color = _blend_color(SKY_TOP, SKY_BOTTOM, y / max(height - 1, 1))
        pygame.draw.rect(surface, color, (0, y, width, 4))


def draw_terrain(surface: pygame.Surface, snapshot: GameSnapshot) -> None:
    samples = snapshot.terrain
    count = len(samples)
    if count == 0:
        return
    step = snapshot.world_width / count
    points = [(0.0, snapshot.world_height)]
    points.extend((i * step, height) for i, height in enumerate(samples))
    points.append((snapshot.world_width, snapshot.world_height))
    pygame.draw.polygon(surface, GROUND_BOTTOM, points)
    pygame.draw.lines(surface, GROUND_TOP, False, points[1:-1], 3)
    _draw_grass(surface, samples, step)


def _draw_grass(surface: pygame.Surface, samples: Sequence[float], step: float) -> None:
    # position-hashed so the tufts stay put between frames
    for i in range(len(samples) - 1):
        if (i * 7919) % 17 >= 6:
            continue
        x = i * step
        y = samples[i]
        blade = 2 + (i * 3779) % 4
        lean = math.radians((i * 4463) % 40 - 20)
        color = pygame.Color(
            int(255 * (0.2 + ((i * 1597) % 20) / 100.0)),
            int(255 * (0.6 + ((i * 2389) % 30) / 100.0)),
            int(255 * (0.1 + ((i * 3571) % 15) / 100.0)),
        )
        pygame.draw.line(surface, color, (x, y), (x + math.cos(lean) * blade, y - blade))


def _draw_tank(surface: pygame.Surface, tank: TankView, color: pygame.Color) -> None:
    body = pygame.Rect(0, 0, int(tank.width), int(tank.height))
    body.center = (int(tank.x), int(tank.y))
    pygame.draw.rect(surface, color, body, border_radius=3)
    barrel_color = _blend_color(color, pygame.Color("black"), 0.3)
    pygame.draw.line(surface, barrel_color, (tank.x, tank.y), tank.barrel_tip, 3)

    bar = pygame.Rect(0, 0, int(tank.width) + 10, 4)
    bar.midbottom = (int(tank.x), int(tank.y - tank.height - 6))
    pygame.draw.rect(surface, pygame.Color(60, 20, 20), bar)
    filled = bar.copy()
    filled.width = int(bar.width * tank.health_ratio)
    health_color = _blend_color(pygame.Color(220, 40, 40), pygame.Color(60, 220, 60), tank.health_ratio)
    pygame.draw.rect(surface, health_color, filled)


def draw_tanks(surface: pygame.Surface, snapshot: GameSnapshot) -> None:
    for index, tank in enumerate(snapshot.tanks):
        color = TANK_COLORS[index % len(TANK_COLORS)]
        active = index == snapshot.current_player and snapshot.phase is MatchPhase.AIMING
        if active and snapshot.frame % 60 < 30:
            color = _blend_color(color, pygame.Color("white"), 0.3)
        _draw_tank(surface, tank, color)


def draw_projectiles(surface: pygame.Surface, snapshot: GameSnapshot) -> None:
    for projectile in snapshot.projectiles:
        position = (int(projectile.x), int(projectile.y))
        if projectile.weapon is WeaponKind.DRILL:
            _draw_drill(surface, projectile)
            continue
        if projectile.weapon is WeaponKind.NUKE:
            # blinks red and yellow every five frames
            color = NUKE_BLINK[0] if snapshot.frame % 10 < 5 else NUKE_BLINK[1]
            pygame.draw.circle(surface, color, position, 6)
            pygame.draw.circle(surface, pygame.Color("black"), position, 2)
            continue
        color, radius = PROJECTILE_STYLES[projectile.weapon]
        glow = pygame.Surface((radius * 4 + 2, radius * 4 + 2), pygame.SRCALPHA)
        pygame.draw.circle(glow, (color.r, color.g, color.b, 80), glow.get_rect().center, radius + 2)
        surface.blit(glow, glow.get_rect(center=position))
        pygame.draw.circle(surface, color, position, radius)


def _draw_drill(surface: pygame.Surface, projectile: ProjectileView) -> None:
    heading = math.atan2(projectile.dy, projectile.dx)
    cos_h, sin_h = math.cos(heading), math.sin(heading)
    points = []
    for along, across in ((0.0, 0.0), (-8.0, -3.0), (-8.0, 3.0)):
        points.append(
            (
                projectile.x + along * cos_h - across * sin_h,
                projectile.y + along * sin_h + across * cos_h,
            )
        )
    pygame.draw.polygon(surface, DRILL_COLOR, points)


def draw_explosions(surface: pygame.Surface, snapshot: GameSnapshot) -> None:
    for explosion in snapshot.explosions:
        if explosion.radius <= 0:
            continue
        progress = explosion.radius / explosion.max_radius if explosion.max_radius else 1.0
        outer = _blend_color(pygame.Color(255, 220, 90), pygame.Color(200, 60, 20), progress)
        center = (int(explosion.x), int(explosion.y))
        pygame.draw.circle(surface, outer, center, max(1, int(explosion.radius)))
        pygame.draw.circle(
            surface, pygame.Color(255, 250, 210), center, max(1, int(explosion.radius * 0.5))
        )


def draw_particles(surface: pygame.Surface, snapshot: GameSnapshot) -> None:
    for particle in snapshot.particles:
        color = _blend_color(pygame.Color(90, 70, 50), pygame.Color(255, 170, 60), particle.fade)
        radius = max(1, int(particle.size * (0.5 + 0.5 * particle.fade)))
        pygame.draw.circle(surface, color, (int(particle.x), int(particle.y)), radius)


def draw_hud(surface: pygame.Surface, snapshot: GameSnapshot, font: pygame.font.Font) -> None:
    tank = snapshot.current_tank
    lines = [
        f"{tank.name}'s turn",
        f"Angle: {tank.angle}  Power: {tank.power}  Weapon: {tank.weapon_name}",
        f"Moves left: {tank.moves_left}",
        " | ".join(f"{t.name}: {t.score}" for t in snapshot.tanks),
        snapshot.message,
    ]
    y = 10
    for line in lines:
        surface.blit(font.render(line, True, TEXT_COLOR), (10, y))
        y += font.get_linesize()

    center_x = int(snapshot.world_width / 2)
    surface.blit(font.render(f"Wind: {snapshot.wind:+.3f}", True, TEXT_COLOR), (center_x - 50, 10))
    arrow = int(snapshot.wind * 2000)
    start = (center_x, 10 + font.get_linesize() + 8)
    end = (center_x + arrow, start[1])
    pygame.draw.line(surface, TEXT_COLOR, start, end, 3)
    direction = 1 if arrow >= 0 else -1
    pygame.draw.polygon(
        surface,
        TEXT_COLOR,
        [end, (end[0] - 8 * direction, end[1] - 5), (end[0] - 8 * direction, end[1] + 5)],
    )


def draw_overlay(
    surface: pygame.Surface,
    snapshot: GameSnapshot,
    font: pygame.font.Font,
    help_lines: Sequence[str] = (),
    help_font: Optional[pygame.font.Font] = None,
) -> None:
    if snapshot.phase is MatchPhase.GAME_OVER and snapshot.winner is not None:
        text = f"{snapshot.tanks[snapshot.winner].name} wins! Press R to play again"
        help_lines = ()
    elif snapshot.paused:
        text = "PAUSED"
    else:
        return
    rendered = [font.render(text, True, TEXT_COLOR)]
    if help_font is not None:
        rendered.extend(help_font.render(line, True, TEXT_COLOR) for line in help_lines)

    block_width = max(image.get_width() for image in rendered)
    block_height = sum(image.get_height() for image in rendered)
    block = pygame.Rect(0, 0, block_width, block_height)
    block.center = (int(snapshot.world_width / 2), int(snapshot.world_height / 3))
    shade = pygame.Surface(block.inflate(40, 20).size, pygame.SRCALPHA)
    shade.fill((0, 0, 0, 150))
    surface.blit(shade, block.inflate(40, 20))
    y = block.top
    for image in rendered:
        surface.blit(image, image.get_rect(midtop=(block.centerx, y)))
        y += image.get_height()


def draw_scene(
    surface: pygame.Surface,
    snapshot: GameSnapshot,
    font: pygame.font.Font,
    large_font: pygame.font.Font,
    help_lines: Sequence[str] = (),
) -> None:
    draw_background(surface)
    draw_terrain(surface, snapshot)
    draw_tanks(surface, snapshot)
    draw_projectiles(surface, snapshot)
    draw_explosions(surface, snapshot)
    draw_particles(surface, snapshot)
    draw_hud(surface, snapshot, font)
    draw_overlay(surface, snapshot, large_font, help_lines, font)
