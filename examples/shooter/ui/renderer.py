"""Draws a FrameSnapshot with plain pygame rectangles."""
from __future__ import annotations

import pygame

from tick_shooter import FrameSnapshot

from ui.constants import (
    BG_COLOR,
    ENEMY_COLORS,
    OVERLAY_COLOR,
    PLAYER_COLOR,
    PROJECTILE_COLOR,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_frame(screen: pygame.Surface, snap: FrameSnapshot, font: pygame.font.Font) -> None:
    screen.fill(BG_COLOR)

    p = snap.player
    pygame.draw.rect(
        screen,
        PLAYER_COLOR,
        pygame.Rect(int(p.x - p.width / 2), int(p.y - p.height / 2), int(p.width), int(p.height)),
    )

    for b in snap.projectiles:
        pygame.draw.rect(
            screen,
            PROJECTILE_COLOR,
            pygame.Rect(int(b.x - b.width / 2), int(b.y - b.height / 2), int(b.width), int(b.height)),
        )

    for e in snap.enemies:
        pygame.draw.rect(
            screen,
            ENEMY_COLORS[e.kind.value],
            pygame.Rect(int(e.x), int(e.y), int(e.width), int(e.height)),
        )

    draw_hud(screen, snap, font)
    if snap.game_over:
        draw_game_over(screen, snap, font)


def draw_hud(screen: pygame.Surface, snap: FrameSnapshot, font: pygame.font.Font) -> None:
    lines = [
        (f"Score: {snap.score}", TEXT_COLOR),
        (f"High Score: {snap.high_score}", TEXT_COLOR),
        (f"Difficulty: {snap.difficulty:.1f}x", TEXT_DIM),
    ]
    y = 10
    for text, color in lines:
        screen.blit(font.render(text, True, color), (10, y))
        y += font.get_linesize()


def draw_game_over(screen: pygame.Surface, snap: FrameSnapshot, font: pygame.font.Font) -> None:
    w, h = screen.get_size()
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill(OVERLAY_COLOR)
    screen.blit(overlay, (0, 0))

    lines = ["GAME OVER", f"Final Score: {snap.score}"]
    if snap.new_high_score:
        lines.append("New High Score!")
    lines.append("Press R to restart")

    y = h // 2 - len(lines) * font.get_linesize() // 2
    for text in lines:
        surf = font.render(text, True, TEXT_COLOR)
        screen.blit(surf, (w // 2 - surf.get_width() // 2, y))
        y += font.get_linesize()
